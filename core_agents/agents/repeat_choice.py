# Beginner summary: This file implements the simplest baseline agent, one that always returns the same action.
from __future__ import annotations

from typing import Any

from core_agents.agents.base_agent import ActT, Agent


class RepeatChoiceAgent(Agent[Any, ActT]):
    """Agent that repeats the same action forever, whatever it observes (and whatever its mode)."""

    def __init__(self, choice: ActT):
        super().__init__()
        self._choice = choice

    @property
    def choice(self) -> ActT:
        return self._choice

    def act(self, observation: Any) -> ActT:
        return self._choice

    def __repr__(self) -> str:
        return f"{type(self).__name__}(choice={self._choice!r}, mode={self.mode.value!r})"
