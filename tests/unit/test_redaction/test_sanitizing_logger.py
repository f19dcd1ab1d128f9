"""Unit tests for the sanitizing logger and its sinks."""

from unittest.mock import MagicMock

import pytest

from src.features.redaction.logger import SanitizingLogger
from src.features.redaction.sinks import LogEntry, LogSink, RecordingSink, StructlogSink


@pytest.fixture
def sink() -> RecordingSink:
    """Create an in-memory sink."""
    return RecordingSink()


@pytest.fixture
def log(sink: RecordingSink) -> SanitizingLogger:
    """Create a logger writing to the in-memory sink."""
    return SanitizingLogger(sink)


class TestSanitizingLogger:
    """Tests for severity dispatch and sanitization."""

    @pytest.mark.parametrize("level", ["error", "warn", "info", "debug"])
    def test_dispatches_to_matching_level(
        self, log: SanitizingLogger, sink: RecordingSink, level: str
    ) -> None:
        """Each method writes to the sink method of the same name."""
        getattr(log, level)("hello", {"k": "v"})

        assert sink.entries == [LogEntry(level, "hello", {"k": "v"})]

    def test_log_alias_targets_info(
        self, log: SanitizingLogger, sink: RecordingSink
    ) -> None:
        """log() always writes at info level."""
        log.log("compat message")

        assert sink.entries == [LogEntry("info", "compat message", None)]

    def test_sanitizes_message_and_metadata(
        self, log: SanitizingLogger, sink: RecordingSink
    ) -> None:
        """Secrets never reach the sink."""
        log.error(
            "Auth failed for Bearer abc.def.ghi",
            {"user": "bob", "accessToken": "tok", "nested": {"secret": "s"}},
        )

        entry = sink.entries[0]
        assert entry.message == "Auth failed for Bearer [REDACTED]"
        assert entry.metadata == {
            "user": "bob",
            "accessToken": "[REDACTED]",
            "nested": {"secret": "[REDACTED]"},
        }

    def test_metadata_not_mutated(self, log: SanitizingLogger) -> None:
        """The caller's metadata is left untouched."""
        metadata = {"password": "pw"}

        log.info("login", metadata)

        assert metadata == {"password": "pw"}

    def test_cyclic_metadata_does_not_raise(
        self, log: SanitizingLogger, sink: RecordingSink
    ) -> None:
        """Self-referential metadata is logged without errors."""
        metadata: dict[str, object] = {}
        metadata["loop"] = metadata

        log.warn("cycle", metadata)

        assert len(sink.entries) == 1

    def test_sink_property(self, log: SanitizingLogger, sink: RecordingSink) -> None:
        """The configured sink is exposed."""
        assert log.sink is sink


class TestRecordingSink:
    """Tests for RecordingSink."""

    def test_is_log_sink(self, sink: RecordingSink) -> None:
        """RecordingSink satisfies the LogSink protocol."""
        assert isinstance(sink, LogSink)

    def test_at_level_and_clear(self, sink: RecordingSink) -> None:
        """Entries can be filtered by level and cleared."""
        sink.warn("w1")
        sink.info("i1")
        sink.warn("w2")

        assert [e.message for e in sink.at_level("warn")] == ["w1", "w2"]

        sink.clear()

        assert sink.entries == []


class TestStructlogSink:
    """Tests for StructlogSink."""

    @pytest.fixture
    def logger(self) -> MagicMock:
        """Create a mock structlog logger."""
        return MagicMock()

    def test_is_log_sink(self, logger: MagicMock) -> None:
        """StructlogSink satisfies the LogSink protocol."""
        assert isinstance(StructlogSink(logger), LogSink)

    def test_mapping_metadata_becomes_fields(self, logger: MagicMock) -> None:
        """Mapping metadata is passed as event keys."""
        StructlogSink(logger).info("msg", {"user": "u", "count": 2})

        logger.info.assert_called_once_with("msg", user="u", count=2)

    def test_warn_maps_to_warning(self, logger: MagicMock) -> None:
        """warn() uses structlog's warning()."""
        StructlogSink(logger).warn("careful")

        logger.warning.assert_called_once_with("careful")

    def test_non_mapping_metadata_stored_under_meta(self, logger: MagicMock) -> None:
        """Scalar and sequence metadata go under the meta key."""
        StructlogSink(logger).error("failed", ["a", "b"])

        logger.error.assert_called_once_with("failed", meta=["a", "b"])

    def test_event_key_moved_under_meta(self, logger: MagicMock) -> None:
        """A metadata key named event does not clash with the message."""
        StructlogSink(logger).debug("msg", {"event": "e", "x": 1})

        logger.debug.assert_called_once_with("msg", meta={"event": "e"}, x=1)
