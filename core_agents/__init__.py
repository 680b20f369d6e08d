# Beginner summary: This file exposes the most important core_agents classes so they can be imported easily from one place.
"""Core agent abstractions: the Agent contract, adapters, and baseline agents."""

from core_agents.agents.adapter import AgentAdapter, make_adapter
from core_agents.agents.base_agent import Agent, AgentMode
from core_agents.agents.random_choice import RandomChoiceAgent
from core_agents.agents.recording import ExperienceRecorderAgent, RecorderConfig
from core_agents.agents.registry import AGENT_REGISTRY, resolve_agent
from core_agents.agents.repeat_choice import RepeatChoiceAgent
from core_agents.agents.repeated_sequence import RepeatedSequenceChoiceAgent
from core_agents.buffers.replay_buffer import ReplayBatch, ReplayBuffer
from core_agents.errors import AgentError, EmptySequenceError, UnknownAgentError

__all__ = [
    "Agent",
    "AgentMode",
    "AgentAdapter",
    "make_adapter",
    "RepeatChoiceAgent",
    "RepeatedSequenceChoiceAgent",
    "RandomChoiceAgent",
    "ExperienceRecorderAgent",
    "RecorderConfig",
    "AGENT_REGISTRY",
    "resolve_agent",
    "ReplayBatch",
    "ReplayBuffer",
    "AgentError",
    "EmptySequenceError",
    "UnknownAgentError",
]
