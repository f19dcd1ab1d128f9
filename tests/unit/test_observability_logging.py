"""Unit tests for structured logging configuration."""

import io
import json
import logging
from collections.abc import Iterator

import pytest
import structlog

from src.features.observability.logging import (
    configure_logging,
    default_log_level,
    get_logger,
)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


class TestDefaultLogLevel:
    """Tests for default_log_level."""

    def test_production(self) -> None:
        assert default_log_level("production") == logging.INFO

    @pytest.mark.parametrize("environment", ["development", "test", "staging"])
    def test_non_production(self, environment: str) -> None:
        assert default_log_level(environment) == logging.DEBUG


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output(self) -> None:
        """JSON mode writes one object per line."""
        buffer = io.StringIO()
        configure_logging(level=logging.INFO, output=buffer, json_format=True)

        get_logger("test").info("hello", component="db_retry")

        entry = json.loads(buffer.getvalue().strip())
        assert entry["event"] == "hello"
        assert entry["component"] == "db_retry"
        assert entry["level"] == "info"
        assert "timestamp" in entry

    def test_level_filters(self) -> None:
        """Entries below the configured level are dropped."""
        buffer = io.StringIO()
        configure_logging(level=logging.INFO, output=buffer, json_format=True)

        get_logger("test").debug("quiet")

        assert buffer.getvalue() == ""

    def test_console_output(self) -> None:
        """Console mode writes human-readable lines, not JSON."""
        buffer = io.StringIO()
        configure_logging(level=logging.DEBUG, output=buffer, json_format=False)

        get_logger("test").debug("starting up", port=4000)

        output = buffer.getvalue()
        assert "starting up" in output
        assert not output.lstrip().startswith("{")
