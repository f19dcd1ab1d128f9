"""Secret redaction for log messages and structured metadata."""

import dataclasses
import re
from collections.abc import Mapping
from enum import Enum
from types import ModuleType
from typing import Any, NamedTuple

from pydantic import BaseModel

from src.features.redaction.constants import (
    MAX_DEPTH,
    MAX_DEPTH_PLACEHOLDER,
    MAX_STRING_LENGTH,
    REDACTED_VALUE,
    SENSITIVE_FIELDS,
    TRUNCATION_MARKER,
)


# Applied in order. Each replacement is a fixed point of its own pattern,
# so sanitizing an already sanitized message changes nothing.
MESSAGE_PATTERNS: list[tuple[str, re.Pattern[str], str]] = [
    (
        "bearer_token",
        re.compile(r"\b(Bearer)\s+\S+", re.IGNORECASE),
        rf"\1 {REDACTED_VALUE}",
    ),
    (
        "token_value",
        re.compile(r"token\s*[=:]\s*['\"]?[^\s'\"]+['\"]?", re.IGNORECASE),
        f"token={REDACTED_VALUE}",
    ),
    # Passphrases may contain spaces: the value runs to a closing quote or
    # the end of the message.
    (
        "password_value",
        re.compile(
            r"password['\":\s]*[=:]\s*(?!\[REDACTED\])['\"]?[^'\"]+['\"]?",
            re.IGNORECASE,
        ),
        f"password={REDACTED_VALUE}",
    ),
]


class SanitizedLogData(NamedTuple):
    """A message and metadata pair that is safe to hand to a log sink."""

    message: str
    metadata: Any


def is_sensitive_key(key: object) -> bool:
    """Check if a metadata key names a sensitive field.

    The key is lower-cased and checked for any entry of
    SENSITIVE_FIELDS as a literal substring.

    Args:
        key: Mapping key (non-string keys are converted with str()).

    Returns:
        True if the value stored under this key must be redacted.
    """
    lower_key = str(key).lower()
    return any(field in lower_key for field in SENSITIVE_FIELDS)


def sanitize_message(message: str) -> str:
    """Redact bearer tokens, token and password assignments from a message.

    Args:
        message: Free-text log message.

    Returns:
        Message with secrets replaced by [REDACTED].
    """
    if not isinstance(message, str):
        return message

    result = message
    for _, pattern, replacement in MESSAGE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def truncate_string(value: str) -> str:
    """Truncate strings longer than MAX_STRING_LENGTH.

    Args:
        value: String to check.

    Returns:
        The original string, or its first MAX_STRING_LENGTH characters
        followed by TRUNCATION_MARKER.
    """
    if len(value) > MAX_STRING_LENGTH:
        return value[:MAX_STRING_LENGTH] + TRUNCATION_MARKER
    return value


def _exception_text(error: BaseException) -> str:
    try:
        text = str(error)
    except Exception:  # noqa: BLE001
        text = ""
    name = type(error).__name__
    return f"{name}: {sanitize_message(text)}" if text else name


def _record_fields(value: Any) -> dict[str, Any] | None:
    """Get the fields of a record-like object as a shallow dict.

    Dataclass instances, pydantic models and plain objects with a
    ``__dict__`` are records. Classes, modules, callables and enum
    members are not.

    Args:
        value: Metadata value.

    Returns:
        Field names mapped to their values, or None if the value is
        not a record.
    """
    if isinstance(value, BaseModel):
        return {name: getattr(value, name) for name in type(value).model_fields}
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: getattr(value, f.name)
            for f in dataclasses.fields(value)
            if hasattr(value, f.name)
        }
    if (
        isinstance(value, (type, Enum, ModuleType))
        or callable(value)
        or not hasattr(value, "__dict__")
    ):
        return None
    return dict(vars(value))


def sanitize_metadata(value: Any, depth: int = 0) -> Any:
    """Produce a redacted copy of arbitrary log metadata.

    Values stored under sensitive keys are replaced wholesale, long strings
    are truncated, and mappings and sequences are rebuilt recursively.
    Records (dataclasses, pydantic models, plain objects) are sanitized as
    dicts of their fields; exceptions become their sanitized message text.
    Recursion stops once the nesting depth exceeds MAX_DEPTH, which also
    breaks self-referential structures. The input is never mutated.

    Args:
        value: Metadata value of any shape.
        depth: Current nesting depth.

    Returns:
        Sanitized value.
    """
    if depth > MAX_DEPTH:
        return MAX_DEPTH_PLACEHOLDER

    if value is None or isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, str):
        return truncate_string(value)

    if isinstance(value, BaseException):
        return truncate_string(_exception_text(value))

    if isinstance(value, list):
        return [sanitize_metadata(item, depth + 1) for item in value]

    if isinstance(value, tuple):
        return tuple(sanitize_metadata(item, depth + 1) for item in value)

    fields = value if isinstance(value, Mapping) else _record_fields(value)
    if fields is not None:
        sanitized: dict[Any, Any] = {}
        for key, item in fields.items():
            if is_sensitive_key(key):
                sanitized[key] = REDACTED_VALUE
            else:
                sanitized[key] = sanitize_metadata(item, depth + 1)
        return sanitized

    return value


def sanitize_log_data(message: str, metadata: Any = None) -> SanitizedLogData:
    """Sanitize a log message and its metadata independently.

    Args:
        message: Free-text log message.
        metadata: Optional metadata of any shape.

    Returns:
        SanitizedLogData with the redacted message and metadata.
    """
    sanitized_metadata = None if metadata is None else sanitize_metadata(metadata)
    return SanitizedLogData(
        message=sanitize_message(message),
        metadata=sanitized_metadata,
    )
