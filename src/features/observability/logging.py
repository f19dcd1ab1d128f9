"""Structured logging configuration."""

import logging
import sys
from typing import TextIO

import structlog


PRODUCTION_ENVIRONMENT = "production"


def default_log_level(environment: str) -> int:
    """Get the default log level for a deployment environment.

    Args:
        environment: Deployment environment name (NODE_ENV).

    Returns:
        INFO in production, DEBUG everywhere else.
    """
    if environment == PRODUCTION_ENVIRONMENT:
        return logging.INFO
    return logging.DEBUG


def configure_logging(
    level: int = logging.INFO,
    output: TextIO = sys.stderr,
    json_format: bool = True,
) -> None:
    """Configure structured logging for the service.

    Production renders one JSON object per line; development renders
    colored console lines. Both share one processor chain for
    bound context, level and ISO timestamp.

    Args:
        level: Logging level (default: INFO).
        output: Output stream (default: stderr).
        json_format: JSON lines when True, console lines when False.
    """
    processors: list[structlog.types.Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer(sort_keys=True))
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=output),
        cache_logger_on_first_use=True,
    )

    # Route uvicorn and other stdlib loggers to the same stream
    logging.basicConfig(
        format="%(message)s",
        stream=output,
        level=level,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a bound logger instance.

    Args:
        name: Optional logger name.

    Returns:
        Bound logger instance.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
