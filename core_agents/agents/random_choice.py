# Beginner summary: This file implements a random baseline agent that samples actions from a Gymnasium action space.
from __future__ import annotations

from typing import Any

from gymnasium import spaces

from core_agents.agents.base_agent import Agent


class RandomChoiceAgent(Agent[Any, Any]):
    """
    Baseline that ignores the observation and samples a random valid action.

    With a seed, every episode replays the same action stream because reset()
    re-seeds the space. Without one, actions differ run to run.
    """

    def __init__(self, action_space: spaces.Space, seed: int | None = None):
        super().__init__()
        if not isinstance(action_space, spaces.Space):
            raise TypeError("action_space must be a gymnasium.spaces.Space")
        self.action_space = action_space
        self.seed = seed
        self.action_space.seed(seed)

    def act(self, observation: Any) -> Any:
        action = self.action_space.sample()
        # Discrete spaces hand back numpy ints; drivers index with a plain int.
        if isinstance(self.action_space, spaces.Discrete):
            return int(action)
        return action

    def reset(self) -> None:
        if self.seed is not None:
            self.action_space.seed(self.seed)
