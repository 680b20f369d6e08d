# Beginner summary: This file defines the contract every agent follows (act on an observation, record experience, switch mode).
from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
import logging
from typing import Generic, TypeVar

# Contravariant: an agent that handles a general observation type can stand in
# wherever an agent for a more specific observation type is expected.
ObsT_contra = TypeVar("ObsT_contra", contravariant=True)
ActT = TypeVar("ActT")

# Library module: no handlers here, the application decides where logs go.
logger = logging.getLogger(__name__)


class AgentMode(Enum):
    """
    Whether an agent is expected to learn from recorded experience.

    Some agents stay "frozen" even in TRAINING mode (e.g. fixed baselines),
    so the mode is a permission, not a promise.
    """

    TRAINING = "training"
    TEST = "test"


class Agent(ABC, Generic[ObsT_contra, ActT]):
    """
    Contract for anything that maps an observation to an action.

    Only act() is required. record() and reset() are no-ops by default,
    so overriding them is optional: learning agents override record(),
    agents with episode state override reset().
    """

    def __init__(self) -> None:
        # Every agent starts frozen; the driver opts in to training explicitly.
        self._mode = AgentMode.TEST

    @property
    def mode(self) -> AgentMode:
        """Current mode followed by this agent."""
        return self._mode

    @abstractmethod
    def act(self, observation: ObsT_contra) -> ActT:
        """Choose an action for the given observation (valid in either mode)."""
        raise NotImplementedError

    def record(self, state: ObsT_contra, action: ActT, reward: float, next_state: ObsT_contra) -> None:
        """
        Receive the environment response for one transition.

        state --action--> next_state, earning `reward`. Agents that learn use
        this in TRAINING mode and may ignore it in TEST mode. Default: no-op.
        """

    def reset(self) -> None:
        """Clear episode-scoped state. Must not change the mode. Default: no-op."""

    def training_mode(self) -> None:
        """Enter training mode (idempotent)."""
        self._set_mode(AgentMode.TRAINING)

    def test_mode(self) -> None:
        """Enter test mode (idempotent)."""
        self._set_mode(AgentMode.TEST)

    def _set_mode(self, mode: AgentMode) -> None:
        if self._mode is not mode:
            logger.debug("%s -> %s mode", type(self).__name__, mode.value)
        self._mode = mode

    def __repr__(self) -> str:
        return f"{type(self).__name__}(mode={self.mode.value!r})"

