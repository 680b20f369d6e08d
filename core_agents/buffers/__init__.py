# Beginner summary: This file exports buffer classes so other files can import experience storage from one place.
from core_agents.buffers.base_buffer import BaseBuffer
from core_agents.buffers.replay_buffer import ReplayBatch, ReplayBuffer, Transition

__all__ = [
    "BaseBuffer",
    "ReplayBatch",
    "ReplayBuffer",
    "Transition",
]
