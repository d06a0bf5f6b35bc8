"""Unit tests for the backoff retry policy."""

import random

import pytest
from pydantic import ValidationError

from profilegen.core.retry import RetryPolicy


class TestRetryPolicy:
    """Tests for RetryPolicy."""

    def test_defaults(self):
        """Defaults should be 5 attempts, 1s base delay and up to 1s jitter."""
        policy = RetryPolicy()

        assert policy.max_attempts == 5
        assert policy.base_delay_s == 1.0
        assert policy.max_jitter_s == 1.0

    def test_delay_without_jitter(self):
        """Without jitter the delay should be exactly base * 2**attempt."""
        policy = RetryPolicy(base_delay_s=1.0, max_jitter_s=0.0)

        assert [policy.compute_delay(n) for n in range(5)] == [1.0, 2.0, 4.0, 8.0, 16.0]

    def test_jitter_within_bounds(self):
        """Jitter should add between 0 and max_jitter_s seconds."""
        policy = RetryPolicy()
        rng = random.Random(7)

        for attempt in range(4):
            for _ in range(50):
                delay = policy.compute_delay(attempt, rng)
                assert 2**attempt <= delay <= 2**attempt + 1.0

    def test_seeded_rng_is_deterministic(self):
        """The same seed should produce the same delays."""
        policy = RetryPolicy()

        first = [policy.compute_delay(n, random.Random(42)) for n in range(4)]
        second = [policy.compute_delay(n, random.Random(42)) for n in range(4)]

        assert first == second

    def test_has_attempt_after(self):
        """Only attempts before the last one are followed by another."""
        policy = RetryPolicy(max_attempts=3)

        assert policy.has_attempt_after(0)
        assert policy.has_attempt_after(1)
        assert not policy.has_attempt_after(2)

    def test_from_config(self, test_config):
        """Policy values should mirror the configuration."""
        test_config.max_attempts = 3
        test_config.backoff_base_seconds = 0.25
        test_config.backoff_max_jitter_seconds = 0.0

        policy = RetryPolicy.from_config(test_config)

        assert policy == RetryPolicy(max_attempts=3, base_delay_s=0.25, max_jitter_s=0.0)

    def test_policy_is_frozen(self):
        """Policies should be immutable."""
        policy = RetryPolicy()
        with pytest.raises(ValidationError):
            policy.max_attempts = 10

    def test_rejects_zero_attempts(self):
        """At least one attempt is required."""
        with pytest.raises(ValidationError):
            RetryPolicy(max_attempts=0)
