# Beginner summary: This file puts the project root on Python's module path and shares small agent fixtures across tests.
from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from core_agents.agents.repeated_sequence import RepeatedSequenceChoiceAgent  # noqa: E402


@pytest.fixture
def abc_agent() -> RepeatedSequenceChoiceAgent:
    """Round-robin agent over ["A", "B", "C"], fresh for every test."""
    return RepeatedSequenceChoiceAgent(["A", "B", "C"])
