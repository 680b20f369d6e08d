# Beginner summary: This file stores recorded transitions and samples random mini-batches from them.
from __future__ import annotations

from collections import deque  # Efficient append/pop from both ends.
from dataclasses import dataclass
import random
from typing import Any

import numpy as np

from core_agents.buffers.base_buffer import BaseBuffer

# (state, action, reward, next_state) exactly as passed to Agent.record().
Transition = tuple[Any, Any, float, Any]


@dataclass(slots=True)
class ReplayBatch:
    """
    Mini-batch sampled from replay memory.

    This dataclass just gives names to each array so downstream code is easier to read.
    """

    states: np.ndarray  # Shape: (batch_size, *obs_shape) when every state has the same shape, else (batch_size,) of objects.
    actions: np.ndarray  # Shape: (batch_size, *action_shape), same fallback as states.
    rewards: np.ndarray  # Shape: (batch_size,), float32.
    next_states: np.ndarray  # Same layout as states.


class ReplayBuffer(BaseBuffer):
    """
    Bounded replay memory of recorded transitions.

    - Oldest transitions are dropped once `capacity` is reached.
    - sample() draws uniformly without replacement, so correlated
      consecutive steps end up spread across batches.
    """

    def __init__(self, capacity: int, seed: int | None = None):
        if capacity <= 0:
            raise ValueError("capacity must be > 0")
        self.capacity = capacity
        self._buffer: deque[Transition] = deque(maxlen=capacity)
        # Private RNG so seeding one buffer doesn't touch the global `random` state.
        self._rng = random.Random(seed)

    def add(self, state: Any, action: Any, reward: float, next_state: Any) -> None:
        """
        Store one transition.

        Example (rock-paper-scissors opponent history):
        - state      = last opponent move, e.g. "rock"
        - action     = "paper"
        - reward     = 1.0
        - next_state = "scissors"
        """
        self._buffer.append((state, action, float(reward), next_state))

    def sample(self, batch_size: int) -> ReplayBatch:
        """Uniformly sample `batch_size` distinct transitions as numpy arrays."""
        if batch_size <= 0:
            raise ValueError("batch_size must be > 0")
        if len(self._buffer) < batch_size:
            raise ValueError("not enough samples in buffer")

        batch = self._rng.sample(self._buffer, batch_size)
        # zip(*batch) "unzips" [(s1,a1,r1,s1'), (s2,a2,r2,s2'), ...] into four columns.
        s, a, r, s_next = zip(*batch)
        return ReplayBatch(
            states=_stack(s),
            actions=_stack(a),
            rewards=np.asarray(r, dtype=np.float32),
            next_states=_stack(s_next),
        )

    def transitions(self) -> list[Transition]:
        """All stored transitions, oldest first."""
        return list(self._buffer)

    def clear(self) -> None:
        self._buffer.clear()

    def __len__(self) -> int:
        return len(self._buffer)


def _stack(column: tuple[Any, ...]) -> np.ndarray:
    """
    Turn one column of a batch into an array.

    Same-shaped entries stack into a dense array. Ragged entries (e.g. a move
    history that grows every step) can't, so they go into a 1-D object array
    with one slot per transition.
    """
    try:
        return np.asarray(column)
    except ValueError:
        ragged = np.empty(len(column), dtype=object)
        for idx, item in enumerate(column):
            ragged[idx] = item
        return ragged
