# Beginner summary: This file checks that replay buffer sampling returns arrays with the expected shapes and bounds.
import numpy as np
import pytest

from core_agents.buffers.replay_buffer import ReplayBuffer


def test_replay_buffer_sample_shapes():
    # Create a small replay buffer and insert synthetic 4-feature transitions.
    buffer = ReplayBuffer(capacity=10)
    for _ in range(8):
        buffer.add(np.zeros(4), 1, 1.0, np.ones(4))

    batch = buffer.sample(4)
    assert batch.states.shape == (4, 4)
    assert batch.actions.shape == (4,)
    assert batch.rewards.shape == (4,)
    assert batch.rewards.dtype == np.float32
    assert batch.next_states.shape == (4, 4)


def test_replay_buffer_drops_oldest_when_full():
    buffer = ReplayBuffer(capacity=3)
    for step in range(5):
        buffer.add(step, 0, float(step), step + 1)
    assert len(buffer) == 3
    assert [t[0] for t in buffer.transitions()] == [2, 3, 4]


def test_replay_buffer_seeded_sampling_is_reproducible():
    def fill(buffer):
        for step in range(20):
            buffer.add(step, step % 3, 0.0, step + 1)
        return buffer

    a = fill(ReplayBuffer(capacity=50, seed=7)).sample(5)
    b = fill(ReplayBuffer(capacity=50, seed=7)).sample(5)
    assert np.array_equal(a.states, b.states)


def test_replay_buffer_clear():
    buffer = ReplayBuffer(capacity=5)
    buffer.add("rock", "paper", 1.0, "scissors")
    buffer.clear()
    assert len(buffer) == 0
    assert buffer.transitions() == []


def test_replay_buffer_argument_validation():
    with pytest.raises(ValueError, match="capacity must be > 0"):
        ReplayBuffer(capacity=0)

    buffer = ReplayBuffer(capacity=5)
    buffer.add(0, 0, 0.0, 1)
    with pytest.raises(ValueError, match="batch_size must be > 0"):
        buffer.sample(0)
    with pytest.raises(ValueError, match="not enough samples"):
        buffer.sample(2)


def test_replay_buffer_samples_variable_length_observations():
    # A move history grows by one entry per step, so states have different lengths.
    buffer = ReplayBuffer(capacity=5, seed=0)
    buffer.add(("rock",), "paper", 1.0, ("rock", "paper"))
    buffer.add(("rock", "paper"), "scissors", -1.0, ("rock", "paper", "scissors"))

    batch = buffer.sample(2)
    assert batch.states.shape == (2,)
    assert batch.states.dtype == object
    assert batch.next_states.shape == (2,)
    assert sorted(batch.states, key=len) == [("rock",), ("rock", "paper")]
    assert sorted(batch.next_states, key=len) == [("rock", "paper"), ("rock", "paper", "scissors")]
    # Same-shaped columns still stack densely.
    assert batch.actions.shape == (2,)
