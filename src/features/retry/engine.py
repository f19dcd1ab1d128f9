"""Retry engine for fallible asynchronous operations."""

import asyncio
from collections.abc import Awaitable, Callable, Mapping
from typing import Any, TypeVar

from src.features.redaction.logger import SanitizingLogger
from src.features.redaction.sanitize import sanitize_message
from src.features.retry.constants import COMPONENT_DB_RETRY
from src.features.retry.failures import (
    ExceptionFailure,
    Failure,
    FailureKind,
    classify_failure,
    describe_failure,
)
from src.features.retry.models import RetryOptions


T = TypeVar("T")

SleepFunc = Callable[[float], Awaitable[Any]]


def _failure_context(failure: Failure) -> dict[str, Any]:
    """Build log metadata describing a failure."""
    context: dict[str, Any] = {
        "component": COMPONENT_DB_RETRY,
        "error": sanitize_message(failure.diagnostic_text()),
    }
    if isinstance(failure, ExceptionFailure):
        context["error_type"] = failure.type_name
    return context


class RetryEngine:
    """Retries an operation with exponential backoff on transient failures.

    The engine holds no state between calls: each run() computes and
    waits on its own schedule, so one engine may serve any number of
    concurrent callers. The only suspension point besides the operation
    itself is the backoff sleep.
    """

    def __init__(
        self,
        logger: SanitizingLogger,
        sleep: SleepFunc = asyncio.sleep,
        default_options: RetryOptions | None = None,
    ) -> None:
        """Initialize the engine.

        Args:
            logger: Sanitizing logger for retry and exhaustion events.
            sleep: Coroutine function taking a delay in seconds.
            default_options: Options used when run() gets none.
        """
        self._log = logger
        self._sleep = sleep
        self._default_options = default_options or RetryOptions()

    @property
    def default_options(self) -> RetryOptions:
        """Options applied when a call passes none."""
        return self._default_options

    def _resolve_options(
        self, options: RetryOptions | Mapping[str, Any] | None
    ) -> RetryOptions:
        if options is None:
            return self._default_options
        if isinstance(options, RetryOptions):
            return options
        return RetryOptions(**{**self._default_options.model_dump(), **options})

    async def run(
        self,
        operation: Callable[[], Awaitable[T]],
        options: RetryOptions | Mapping[str, Any] | None = None,
    ) -> T:
        """Run an operation, retrying transient failures.

        Args:
            operation: Zero-argument coroutine function. Called afresh on
                every attempt.
            options: RetryOptions, or a mapping of overrides merged with
                the engine defaults.

        Returns:
            The operation's result.

        Raises:
            Exception: The last failure, unchanged, when it is terminal or
                when all attempts are exhausted.
        """
        opts = self._resolve_options(options)
        total_attempts = opts.total_attempts
        attempt = 0

        while True:
            try:
                return await operation()
            except Exception as error:
                failure = describe_failure(error)
                if classify_failure(failure) is FailureKind.TERMINAL:
                    raise

                if attempt >= opts.max_retries:
                    self._log.error(
                        f"All {total_attempts} attempts failed. "
                        f"Last error: {failure.diagnostic_text()}",
                        {**_failure_context(failure), "attempts": total_attempts},
                    )
                    raise

                self._log.warn(
                    f"Retryable error on attempt {attempt + 1}/{total_attempts}: "
                    f"{failure.diagnostic_text()}",
                    {
                        **_failure_context(failure),
                        "attempt": attempt + 1,
                        "max_attempts": total_attempts,
                    },
                )

            delay_ms = opts.delay_ms_for(attempt)
            self._log.warn(
                f"Retrying in {delay_ms:g}ms",
                {
                    "component": COMPONENT_DB_RETRY,
                    "delay_ms": delay_ms,
                    "next_attempt": attempt + 2,
                },
            )
            await self._sleep(delay_ms / 1000.0)
            attempt += 1
