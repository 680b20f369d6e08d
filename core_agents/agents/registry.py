# Beginner summary: This file maps agent names to classes so a driver can pick agents by name, e.g. from a config file.
from __future__ import annotations

from typing import Any

from core_agents.agents.base_agent import Agent
from core_agents.agents.random_choice import RandomChoiceAgent
from core_agents.agents.repeat_choice import RepeatChoiceAgent
from core_agents.agents.repeated_sequence import RepeatedSequenceChoiceAgent
from core_agents.errors import UnknownAgentError

AGENT_REGISTRY: dict[str, type[Agent]] = {
    "repeat_choice": RepeatChoiceAgent,
    "repeated_sequence": RepeatedSequenceChoiceAgent,
    "random": RandomChoiceAgent,
}


def resolve_agent(name: str, params: dict[str, Any] | None = None) -> Agent:
    """
    Look up an agent class by name and instantiate it.

    Args:
        name: Agent name (key in AGENT_REGISTRY).
        params: Optional kwargs passed to the agent constructor,
            e.g. {"choices": ["rock", "paper"]} for "repeated_sequence".
            Plain values are enough for the fixed and sequence agents;
            "random" needs a live gymnasium Space under "action_space".

    Raises:
        UnknownAgentError: If name is not in the registry.
    """
    if name not in AGENT_REGISTRY:
        raise UnknownAgentError(name, sorted(AGENT_REGISTRY))
    cls = AGENT_REGISTRY[name]
    return cls(**(params or {}))
