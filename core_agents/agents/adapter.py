# Beginner summary: This file lets an agent built for one observation type run where only a richer state is available.
from __future__ import annotations

from typing import Callable, Generic, TypeVar

from core_agents.agents.base_agent import ActT, Agent, AgentMode

StateT = TypeVar("StateT")
ObsT = TypeVar("ObsT")


class AgentAdapter(Agent[StateT, ActT], Generic[StateT, ObsT, ActT]):
    """
    Transparent proxy: converts every incoming state, then delegates.

    Useful when an agent only has partial observability of the environment.
    Example: the driver hands out the full game state, but the agent was
    written for a single integer feature:

        adapter = AgentAdapter(agent, lambda state: state["raw"])
        adapter.act({"raw": 3, "board": ...})  # same as agent.act(3)

    The adapter owns no mode and no learning state; everything lives in the
    wrapped agent, so `mode` always reports the inner agent's mode.
    """

    def __init__(self, agent: Agent[ObsT, ActT], conversion: Callable[[StateT], ObsT]):
        # No super().__init__(): the adapter must not hold a mode of its own.
        self._agent = agent
        self._conversion = conversion

    @property
    def agent(self) -> Agent[ObsT, ActT]:
        """The wrapped agent."""
        return self._agent

    @property
    def conversion(self) -> Callable[[StateT], ObsT]:
        return self._conversion

    @property
    def mode(self) -> AgentMode:
        return self._agent.mode

    def act(self, observation: StateT) -> ActT:
        # Conversion errors propagate untouched to the caller.
        return self._agent.act(self._conversion(observation))

    def record(self, state: StateT, action: ActT, reward: float, next_state: StateT) -> None:
        # One conversion call per state; the conversion must be pure, so order doesn't matter.
        self._agent.record(self._conversion(state), action, reward, self._conversion(next_state))

    def reset(self) -> None:
        self._agent.reset()

    def training_mode(self) -> None:
        self._agent.training_mode()

    def test_mode(self) -> None:
        self._agent.test_mode()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(agent={self._agent!r})"


def make_adapter(
    agent: Agent[ObsT, ActT], conversion: Callable[[StateT], ObsT]
) -> Agent[StateT, ActT]:
    """Wrap `agent` so it accepts states and sees `conversion(state)`. Adapters can be chained."""
    return AgentAdapter(agent, conversion)
