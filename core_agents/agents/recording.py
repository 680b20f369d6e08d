# Beginner summary: This file wraps any agent and keeps a replay buffer of the transitions it records while training.
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from core_agents.agents.base_agent import ActT, Agent, AgentMode, ObsT_contra
from core_agents.buffers.replay_buffer import ReplayBuffer
from core_agents.utils.logger import get_logger


@dataclass(slots=True)
class RecorderConfig:
    """Knobs for what the recorder keeps (not what the inner agent learns)."""

    record_in_test_mode: bool = False  # Also store transitions recorded while frozen (e.g. for evaluation logs).
    clear_on_reset: bool = False  # Treat the buffer as episode-scoped and empty it on reset().


class ExperienceRecorderAgent(Agent[ObsT_contra, ActT]):
    """
    Transparent wrapper that stores recorded experience, then delegates.

    1) act() / reset() / mode switches go straight to the inner agent
    2) record() stores (state, action, reward, next_state) in the buffer
       while the inner agent is in TRAINING mode
    3) record() is always forwarded, so a learning inner agent still sees it

    Like AgentAdapter, the wrapper has no mode of its own.
    """

    def __init__(
        self,
        agent: Agent[ObsT_contra, ActT],
        buffer: ReplayBuffer,
        config: RecorderConfig | None = None,
        logger: Any | None = None,
    ):
        # No super().__init__(): the mode lives in the inner agent.
        self._agent = agent
        self.buffer = buffer
        self.config = config or RecorderConfig()
        self.logger = logger or get_logger("core_agents.recorder")

    @property
    def agent(self) -> Agent[ObsT_contra, ActT]:
        return self._agent

    @property
    def mode(self) -> AgentMode:
        return self._agent.mode

    def act(self, observation: ObsT_contra) -> ActT:
        return self._agent.act(observation)

    def record(self, state: ObsT_contra, action: ActT, reward: float, next_state: ObsT_contra) -> None:
        if self.mode is AgentMode.TRAINING or self.config.record_in_test_mode:
            self.buffer.add(state, action, reward, next_state)
        else:
            self.logger.debug("Skipping transition recorded in test mode (reward=%.3f)", reward)
        self._agent.record(state, action, reward, next_state)

    def reset(self) -> None:
        if self.config.clear_on_reset:
            self.logger.debug("Clearing %d recorded transitions on reset", len(self.buffer))
            self.buffer.clear()
        self._agent.reset()

    def training_mode(self) -> None:
        self._agent.training_mode()

    def test_mode(self) -> None:
        self._agent.test_mode()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(agent={self._agent!r}, recorded={len(self.buffer)})"
