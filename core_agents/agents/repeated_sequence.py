# Beginner summary: This file implements a baseline agent that cycles through a fixed list of actions (round-robin).
from __future__ import annotations

from collections import deque  # Cheap rotation from one end to the other.
from typing import Any, Iterable

from core_agents.agents.base_agent import ActT, Agent
from core_agents.errors import EmptySequenceError


class RepeatedSequenceChoiceAgent(Agent[Any, ActT]):
    """
    Agent that repeats a sequence of actions.

    Example:
        agent = RepeatedSequenceChoiceAgent([1, 2, 3])
        agent.act(state)  # 1
        agent.act(state)  # 2
        agent.act(state)  # 3
        agent.act(state)  # 1 again
        agent.reset()     # back to the start, next act() returns 1

    Precondition: `choices` must not be empty (EmptySequenceError otherwise).
    """

    def __init__(self, choices: Iterable[ActT]):
        super().__init__()
        # Materialise once so generators and other one-shot iterables work.
        self._choices: tuple[ActT, ...] = tuple(choices)
        if not self._choices:
            raise EmptySequenceError()
        # Working copy: always a rotation of self._choices (same length, same elements).
        self._pending: deque[ActT] = deque(self._choices)

    @property
    def choices(self) -> tuple[ActT, ...]:
        """The original sequence, in configured order."""
        return self._choices

    def act(self, observation: Any) -> ActT:
        result = self._pending[0]
        # rotate(-1) moves the head to the tail: [1, 2, 3] -> [2, 3, 1]
        self._pending.rotate(-1)
        return result

    def reset(self) -> None:
        self._pending = deque(self._choices)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(choices={list(self._choices)!r}, mode={self.mode.value!r})"
