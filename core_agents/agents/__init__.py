# Beginner summary: This file collects agent-related classes and makes them easy to import from the agents package.
from core_agents.agents.adapter import AgentAdapter, make_adapter
from core_agents.agents.base_agent import Agent, AgentMode
from core_agents.agents.random_choice import RandomChoiceAgent
from core_agents.agents.recording import ExperienceRecorderAgent, RecorderConfig
from core_agents.agents.registry import AGENT_REGISTRY, resolve_agent
from core_agents.agents.repeat_choice import RepeatChoiceAgent
from core_agents.agents.repeated_sequence import RepeatedSequenceChoiceAgent

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
]
