"""Observability module for structured logging."""

from src.features.observability.logging import (
    configure_logging,
    default_log_level,
    get_logger,
)


__all__ = [
    "configure_logging",
    "default_log_level",
    "get_logger",
]
