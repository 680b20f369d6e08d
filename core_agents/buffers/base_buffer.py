# Beginner summary: This file defines what any store of recorded agent transitions must support.
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class BaseBuffer(ABC):
    """
    Storage for the transitions an agent receives through record().

    Each transition is (state, action, reward, next_state), the same four
    values Agent.record() gets, so a wrapper can forward them unchanged.
    """

    @abstractmethod
    def add(self, state: Any, action: Any, reward: float, next_state: Any) -> None:
        raise NotImplementedError

    @abstractmethod
    def clear(self) -> None:
        """Forget every stored transition (e.g. at an episode boundary)."""
        raise NotImplementedError

    @abstractmethod
    def __len__(self) -> int:
        raise NotImplementedError
