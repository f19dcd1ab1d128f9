"""Log redaction module.

Sanitizes log messages and arbitrary nested metadata before they reach
any log sink:
- Bearer tokens, token and password assignments in messages
- Values stored under sensitive metadata keys
- Oversized strings
- Runaway nesting, including self-referential structures
"""

from src.features.redaction.constants import (
    MAX_DEPTH,
    MAX_DEPTH_PLACEHOLDER,
    MAX_STRING_LENGTH,
    REDACTED_VALUE,
    SENSITIVE_FIELDS,
    TRUNCATION_MARKER,
)
from src.features.redaction.logger import SanitizingLogger, create_sanitizing_logger
from src.features.redaction.sanitize import (
    SanitizedLogData,
    is_sensitive_key,
    sanitize_log_data,
    sanitize_message,
    sanitize_metadata,
)
from src.features.redaction.sinks import LogEntry, LogSink, RecordingSink, StructlogSink


__all__ = [
    # Logger
    "SanitizingLogger",
    "create_sanitizing_logger",
    # Sinks
    "LogSink",
    "LogEntry",
    "RecordingSink",
    "StructlogSink",
    # Sanitization
    "SanitizedLogData",
    "is_sensitive_key",
    "sanitize_log_data",
    "sanitize_message",
    "sanitize_metadata",
    # Constants
    "MAX_DEPTH",
    "MAX_DEPTH_PLACEHOLDER",
    "MAX_STRING_LENGTH",
    "REDACTED_VALUE",
    "SENSITIVE_FIELDS",
    "TRUNCATION_MARKER",
]
