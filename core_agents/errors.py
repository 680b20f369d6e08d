# Beginner summary: This file defines the exceptions raised when an agent is built or looked up incorrectly.
from __future__ import annotations


class AgentError(Exception):
    """Root of every error raised by core_agents itself."""


class EmptySequenceError(AgentError, ValueError):
    """A sequence-based agent was configured with no actions to emit."""

    def __init__(self, message: str = "choices must contain at least one action"):
        super().__init__(message)


class UnknownAgentError(AgentError, KeyError):
    """The registry has no agent under the requested name."""

    def __init__(self, name: str, available: list[str]):
        super().__init__(f"Unknown agent: {name!r}. Available: {available}")
        self.name = name
        self.available = available

    def __str__(self) -> str:
        # KeyError would otherwise wrap the message in quotes.
        return str(self.args[0])
