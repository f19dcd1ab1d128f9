"""Data models for the database retry layer."""

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from src.features.retry.constants import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_INITIAL_DELAY_MS,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MAX_RETRIES,
)


class RetryOptions(BaseModel):
    """Configuration for retrying a single operation.

    Uses deterministic exponential backoff without jitter:
    delay = min(initial_delay_ms * backoff_multiplier ^ attempt, max_delay_ms)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    max_retries: Annotated[int, Field(ge=0)] = DEFAULT_MAX_RETRIES
    initial_delay_ms: Annotated[int, Field(ge=0)] = DEFAULT_INITIAL_DELAY_MS
    max_delay_ms: Annotated[int, Field(ge=0)] = DEFAULT_MAX_DELAY_MS
    backoff_multiplier: Annotated[float, Field(gt=1.0)] = DEFAULT_BACKOFF_MULTIPLIER

    @property
    def total_attempts(self) -> int:
        """Number of attempts including the initial one."""
        return self.max_retries + 1

    def delay_ms_for(self, attempt: int) -> float:
        """Calculate the delay after a failed attempt.

        Args:
            attempt: Zero-based index of the attempt that just failed.

        Returns:
            Delay in milliseconds, never above max_delay_ms.
        """
        try:
            delay = self.initial_delay_ms * (self.backoff_multiplier**attempt)
        except OverflowError:
            return float(self.max_delay_ms)
        return float(min(delay, self.max_delay_ms))

    def schedule(self) -> list[float]:
        """Get every delay the engine would wait before giving up.

        Returns:
            Delays in milliseconds, one per retry.
        """
        return [self.delay_ms_for(attempt) for attempt in range(self.max_retries)]
