"""Logger front end that sanitizes every entry before it reaches a sink."""

from typing import Any

from src.features.observability.logging import get_logger
from src.features.redaction.sanitize import sanitize_log_data
from src.features.redaction.sinks import LogSink, StructlogSink


class SanitizingLogger:
    """Severity-keyed logger that redacts secrets before writing.

    Constructed once at process start with the sink it writes to and
    passed explicitly to the components that log. Holds no mutable
    state of its own, so a single instance may be shared by concurrent
    requests as long as the sink tolerates concurrent writes.
    """

    def __init__(self, sink: LogSink) -> None:
        """Initialize the logger.

        Args:
            sink: Destination for sanitized entries.
        """
        self._sink = sink

    @property
    def sink(self) -> LogSink:
        """The sink this logger writes to."""
        return self._sink

    def error(self, message: str, metadata: Any = None) -> None:
        """Log at error severity."""
        data = sanitize_log_data(message, metadata)
        self._sink.error(data.message, data.metadata)

    def warn(self, message: str, metadata: Any = None) -> None:
        """Log at warning severity."""
        data = sanitize_log_data(message, metadata)
        self._sink.warn(data.message, data.metadata)

    def info(self, message: str, metadata: Any = None) -> None:
        """Log at info severity."""
        data = sanitize_log_data(message, metadata)
        self._sink.info(data.message, data.metadata)

    def debug(self, message: str, metadata: Any = None) -> None:
        """Log at debug severity."""
        data = sanitize_log_data(message, metadata)
        self._sink.debug(data.message, data.metadata)

    def log(self, message: str, metadata: Any = None) -> None:
        """Alias of info() for call sites written against console.log."""
        self.info(message, metadata)


def create_sanitizing_logger(name: str | None = None) -> SanitizingLogger:
    """Build a sanitizing logger writing to structlog.

    Args:
        name: Optional structlog logger name.

    Returns:
        SanitizingLogger backed by a StructlogSink.
    """
    return SanitizingLogger(StructlogSink(get_logger(name)))
