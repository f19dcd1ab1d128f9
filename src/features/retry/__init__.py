"""Database retry layer.

This module retries fallible asynchronous operations with:
- Transient/terminal classification from failure text
- Deterministic exponential backoff capped at a maximum delay
- Sanitized warning and error log entries
- A wrapper that routes every database call through the engine
"""

from src.features.retry.constants import (
    DEFAULT_BACKOFF_MULTIPLIER,
    DEFAULT_INITIAL_DELAY_MS,
    DEFAULT_MAX_DELAY_MS,
    DEFAULT_MAX_RETRIES,
    TRANSIENT_ERROR_PATTERNS,
)
from src.features.retry.database import DatabaseClient, RetryingDatabase
from src.features.retry.engine import RetryEngine
from src.features.retry.failures import (
    EmptyFailure,
    ExceptionFailure,
    Failure,
    FailureKind,
    OpaqueFailure,
    TextFailure,
    classify_failure,
    describe_failure,
    is_transient,
)
from src.features.retry.models import RetryOptions


__all__ = [
    # Engine
    "RetryEngine",
    "RetryingDatabase",
    "DatabaseClient",
    # Models
    "RetryOptions",
    # Failures
    "Failure",
    "FailureKind",
    "EmptyFailure",
    "ExceptionFailure",
    "TextFailure",
    "OpaqueFailure",
    "classify_failure",
    "describe_failure",
    "is_transient",
    # Constants
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_INITIAL_DELAY_MS",
    "DEFAULT_MAX_DELAY_MS",
    "DEFAULT_BACKOFF_MULTIPLIER",
    "TRANSIENT_ERROR_PATTERNS",
]
