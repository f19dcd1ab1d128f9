"""Log sinks that receive already sanitized entries."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

import structlog


@runtime_checkable
class LogSink(Protocol):
    """Protocol for log transports with one write method per severity.

    Each method receives the sanitized message and the sanitized metadata
    (None when the caller passed no metadata).
    """

    def error(self, message: str, metadata: Any = None) -> None:
        """Write an error entry."""
        ...

    def warn(self, message: str, metadata: Any = None) -> None:
        """Write a warning entry."""
        ...

    def info(self, message: str, metadata: Any = None) -> None:
        """Write an info entry."""
        ...

    def debug(self, message: str, metadata: Any = None) -> None:
        """Write a debug entry."""
        ...


def _event_fields(metadata: Any) -> dict[str, Any]:
    """Convert metadata into structlog event fields.

    Mappings become top-level event keys; anything else is stored under
    "meta". Keys that collide with structlog's positional event are
    moved under "meta" as well.
    """
    if metadata is None:
        return {}
    if not isinstance(metadata, Mapping):
        return {"meta": metadata}

    fields: dict[str, Any] = {}
    for key, value in metadata.items():
        name = str(key)
        if name == "event":
            fields.setdefault("meta", {})[name] = value
        else:
            fields[name] = value
    return fields


class StructlogSink:
    """Log sink backed by a structlog bound logger."""

    def __init__(self, logger: Any | None = None) -> None:
        """Initialize the sink.

        Args:
            logger: structlog logger to write to. Defaults to
                structlog.get_logger().
        """
        self._logger = logger if logger is not None else structlog.get_logger()

    def error(self, message: str, metadata: Any = None) -> None:
        self._logger.error(message, **_event_fields(metadata))

    def warn(self, message: str, metadata: Any = None) -> None:
        self._logger.warning(message, **_event_fields(metadata))

    def info(self, message: str, metadata: Any = None) -> None:
        self._logger.info(message, **_event_fields(metadata))

    def debug(self, message: str, metadata: Any = None) -> None:
        self._logger.debug(message, **_event_fields(metadata))


@dataclass(frozen=True)
class LogEntry:
    """A single entry captured by RecordingSink."""

    level: str
    message: str
    metadata: Any = None


@dataclass
class RecordingSink:
    """In-memory log sink.

    Keeps every entry it receives, in order. Useful for tests and for
    diagnostics commands that print what would have been logged.
    """

    entries: list[LogEntry] = field(default_factory=list)

    def error(self, message: str, metadata: Any = None) -> None:
        self.entries.append(LogEntry("error", message, metadata))

    def warn(self, message: str, metadata: Any = None) -> None:
        self.entries.append(LogEntry("warn", message, metadata))

    def info(self, message: str, metadata: Any = None) -> None:
        self.entries.append(LogEntry("info", message, metadata))

    def debug(self, message: str, metadata: Any = None) -> None:
        self.entries.append(LogEntry("debug", message, metadata))

    def at_level(self, level: str) -> list[LogEntry]:
        """Get entries recorded at a severity.

        Args:
            level: One of error, warn, info, debug.

        Returns:
            Matching entries in the order they were written.
        """
        return [entry for entry in self.entries if entry.level == level]

    def clear(self) -> None:
        """Drop all recorded entries."""
        self.entries.clear()
