"""Bounded exponential backoff with additive jitter."""

from __future__ import annotations

import random

from pydantic import BaseModel, Field

from .config import ProfilegenConfig


class RetryPolicy(BaseModel):
    """Retry policy for the image generation call.

    The delay after the zero-based attempt ``n`` is
    ``base_delay_s * 2**n + uniform(0, max_jitter_s)``.

    Args:
        max_attempts: Maximum number of attempts (including the initial request)
        base_delay_s: Delay in seconds after the first failed attempt, before jitter
        max_jitter_s: Upper bound of the random delay added to every backoff
    """

    model_config = {"frozen": True}

    max_attempts: int = Field(default=5, ge=1)
    base_delay_s: float = Field(default=1.0, ge=0.0)
    max_jitter_s: float = Field(default=1.0, ge=0.0)

    @classmethod
    def from_config(cls, cfg: ProfilegenConfig) -> RetryPolicy:
        return cls(
            max_attempts=cfg.max_attempts,
            base_delay_s=cfg.backoff_base_seconds,
            max_jitter_s=cfg.backoff_max_jitter_seconds,
        )

    def compute_delay(self, attempt: int, rng: random.Random | None = None) -> float:
        """Compute the backoff delay before the next attempt.

        Args:
            attempt: Zero-based index of the attempt that just failed
            rng: Random source for the jitter (module-level ``random`` if None)

        Returns:
            Delay in seconds
        """
        source = rng if rng is not None else random
        jitter = source.uniform(0.0, self.max_jitter_s) if self.max_jitter_s > 0 else 0.0
        return self.base_delay_s * (2**attempt) + jitter

    def has_attempt_after(self, attempt: int) -> bool:
        """Whether another attempt follows the zero-based ``attempt``."""
        return attempt + 1 < self.max_attempts
