"""Unit tests for retry options and the backoff schedule."""

import pytest
from pydantic import ValidationError

from src.features.retry.models import RetryOptions


class TestRetryOptions:
    """Tests for RetryOptions model."""

    def test_default_values(self) -> None:
        """Test default retry options."""
        options = RetryOptions()

        assert options.max_retries == 3
        assert options.initial_delay_ms == 100
        assert options.max_delay_ms == 2000
        assert options.backoff_multiplier == 2.0
        assert options.total_attempts == 4

    def test_frozen(self) -> None:
        """Options cannot be changed after construction."""
        options = RetryOptions()

        with pytest.raises(ValidationError):
            options.max_retries = 5  # type: ignore[misc]

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_retries": -1},
            {"initial_delay_ms": -5},
            {"max_delay_ms": -1},
            {"backoff_multiplier": 1.0},
            {"backoff_multiplier": 0.5},
            {"unknown": 1},
        ],
    )
    def test_invalid_values_rejected(self, kwargs: dict[str, object]) -> None:
        """Out-of-range and unknown fields fail validation."""
        with pytest.raises(ValidationError):
            RetryOptions(**kwargs)


class TestDelaySchedule:
    """Tests for delay calculation."""

    def test_exponential_backoff(self) -> None:
        """Delays double with the default multiplier."""
        options = RetryOptions(initial_delay_ms=100, max_delay_ms=100000)

        assert options.delay_ms_for(0) == 100
        assert options.delay_ms_for(1) == 200
        assert options.delay_ms_for(2) == 400
        assert options.delay_ms_for(3) == 800

    def test_max_delay_cap(self) -> None:
        """Delays never exceed max_delay_ms."""
        options = RetryOptions(initial_delay_ms=100, max_delay_ms=300)

        assert options.delay_ms_for(1) == 200
        assert options.delay_ms_for(2) == 300
        assert options.delay_ms_for(50) == 300

    def test_huge_attempt_index_capped(self) -> None:
        """Overflowing growth still returns the cap."""
        options = RetryOptions(max_delay_ms=2000, backoff_multiplier=10.0)

        assert options.delay_ms_for(10_000) == 2000

    def test_custom_multiplier(self) -> None:
        """Non-integer multipliers are honored."""
        options = RetryOptions(initial_delay_ms=100, backoff_multiplier=1.5)

        assert options.delay_ms_for(2) == pytest.approx(225.0)

    def test_deterministic(self) -> None:
        """The same options always give the same schedule."""
        options = RetryOptions(max_retries=6)

        assert options.schedule() == options.schedule()

    def test_schedule(self) -> None:
        """schedule() lists one delay per retry."""
        options = RetryOptions(max_retries=4, initial_delay_ms=100, max_delay_ms=500)

        assert options.schedule() == [100, 200, 400, 500]

    def test_schedule_empty_without_retries(self) -> None:
        """No retries means no delays."""
        assert RetryOptions(max_retries=0).schedule() == []
