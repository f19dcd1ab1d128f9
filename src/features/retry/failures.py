"""Failure descriptions and transient/terminal classification.

A failed operation can surface as an exception, a plain string, or an
arbitrary object. describe_failure() turns any of these into one variant
of the Failure union, each of which knows how to produce its diagnostic
text, and classify_failure() decides from that text whether a retry is
worthwhile.
"""

from dataclasses import dataclass
from enum import Enum

from src.features.retry.constants import TRANSIENT_ERROR_PATTERNS


class FailureKind(str, Enum):
    """Classification of a failure for retry decisions.

    - TRANSIENT: Likely to succeed on retry (timeouts, connection resets)
    - TERMINAL: Never retried
    """

    TRANSIENT = "TRANSIENT"
    TERMINAL = "TERMINAL"


@dataclass(frozen=True)
class EmptyFailure:
    """An absent or empty failure value."""

    def diagnostic_text(self) -> str:
        return ""

    def classification_text(self) -> str:
        return ""


@dataclass(frozen=True)
class ExceptionFailure:
    """A raised exception."""

    error: BaseException

    @property
    def type_name(self) -> str:
        return type(self.error).__name__

    def diagnostic_text(self) -> str:
        """Get the exception message.

        Prefers a string ``message`` attribute (as set by several database
        drivers) over str(error).
        """
        message = getattr(self.error, "message", None)
        if isinstance(message, str) and message:
            return message
        return str(self.error)

    def classification_text(self) -> str:
        # Include the class name so that e.g. TimeoutError() with no
        # message still classifies as transient.
        return f"{self.type_name}: {self.diagnostic_text()}"


@dataclass(frozen=True)
class TextFailure:
    """A failure reported as a plain string."""

    text: str

    def diagnostic_text(self) -> str:
        return self.text

    def classification_text(self) -> str:
        return self.text


@dataclass(frozen=True)
class OpaqueFailure:
    """Any other failure value, described by its string form."""

    value: object

    def diagnostic_text(self) -> str:
        return str(self.value)

    def classification_text(self) -> str:
        return self.diagnostic_text()


Failure = EmptyFailure | ExceptionFailure | TextFailure | OpaqueFailure


def describe_failure(value: object) -> Failure:
    """Wrap a failure value in the matching Failure variant.

    Args:
        value: Exception, string, None, or any other object.

    Returns:
        Failure variant for the value.
    """
    if value is None:
        return EmptyFailure()
    if isinstance(value, BaseException):
        return ExceptionFailure(value)
    if isinstance(value, str):
        return TextFailure(value) if value else EmptyFailure()
    try:
        text = str(value)
    except Exception:  # noqa: BLE001
        return EmptyFailure()
    return OpaqueFailure(value) if text else EmptyFailure()


def classify_failure(value: object) -> FailureKind:
    """Classify a failure as transient or terminal.

    Args:
        value: Failure value or an already built Failure.

    Returns:
        FailureKind.TRANSIENT if the lower-cased failure text contains
        one of TRANSIENT_ERROR_PATTERNS, FailureKind.TERMINAL otherwise.
    """
    failure = (
        value
        if isinstance(value, (EmptyFailure, ExceptionFailure, TextFailure, OpaqueFailure))
        else describe_failure(value)
    )
    if isinstance(failure, EmptyFailure):
        return FailureKind.TERMINAL

    text = failure.classification_text().lower()
    if any(pattern in text for pattern in TRANSIENT_ERROR_PATTERNS):
        return FailureKind.TRANSIENT
    return FailureKind.TERMINAL


def is_transient(value: object) -> bool:
    """Check if a failure value should be retried.

    Args:
        value: Failure value of any shape.

    Returns:
        True if the failure is transient.
    """
    return classify_failure(value) is FailureKind.TRANSIENT
