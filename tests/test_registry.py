# Beginner summary: This file checks that agents can be built by name from the registry.
from gymnasium import spaces
import pytest

from core_agents.agents import AGENT_REGISTRY, Agent, resolve_agent
from core_agents.agents.random_choice import RandomChoiceAgent
from core_agents.agents.repeated_sequence import RepeatedSequenceChoiceAgent
from core_agents.errors import UnknownAgentError


def test_registry_entries_are_agents():
    for cls in AGENT_REGISTRY.values():
        assert issubclass(cls, Agent)


def test_resolve_agent_with_params():
    agent = resolve_agent("repeated_sequence", {"choices": ["rock", "paper"]})
    assert isinstance(agent, RepeatedSequenceChoiceAgent)
    assert [agent.act(None) for _ in range(3)] == ["rock", "paper", "rock"]

    assert resolve_agent("repeat_choice", {"choice": 2}).act(None) == 2

    random_agent = resolve_agent("random", {"action_space": spaces.Discrete(2), "seed": 0})
    assert isinstance(random_agent, RandomChoiceAgent)


def test_resolve_unknown_agent():
    with pytest.raises(UnknownAgentError, match="Unknown agent: 'dqn'") as excinfo:
        resolve_agent("dqn")
    assert excinfo.value.available == sorted(AGENT_REGISTRY)
    # Still a KeyError for callers doing dict-style lookups.
    assert isinstance(excinfo.value, KeyError)
