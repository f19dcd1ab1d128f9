"""CLI commands for the backend service."""

import json
import sys

import click
import structlog

from src.api.app import create_app, create_origin_guard
from src.features.observability.logging import configure_logging
from src.features.redaction.sanitize import sanitize_log_data
from src.settings.app import get_settings


logger = structlog.get_logger()


@click.group()
@click.version_option(version="0.1.0")
def cli() -> None:
    """ISMS backend service CLI."""


@cli.command()
@click.option("--host", default=None, help="Bind address (defaults to HOST).")
@click.option("--port", type=int, default=None, help="Bind port (defaults to PORT).")
def serve(host: str | None, port: int | None) -> None:
    """Run the API server."""
    import uvicorn

    settings = get_settings()
    configure_logging(
        level=settings.resolved_log_level(),
        json_format=settings.resolved_log_json(),
    )
    app = create_app(settings)

    logger.info(
        "server_starting",
        host=host or settings.host,
        port=port or settings.port,
        environment=settings.environment,
    )
    uvicorn.run(app, host=host or settings.host, port=port or settings.port)


@cli.command("check-origin")
@click.argument("origin")
def check_origin(origin: str) -> None:
    """Check ORIGIN against the configured trust-center origins.

    Exits with status 1 when the origin would be rejected.
    """
    settings = get_settings()
    guard = create_origin_guard(settings)

    if not guard.is_allowed(origin):
        click.echo(f"rejected: {origin}")
        sys.exit(1)

    pattern = guard.matching_pattern(origin)
    if pattern is not None:
        click.echo(f"allowed: {origin} (pattern {pattern.value})")
    else:
        click.echo(f"allowed: {origin}")


@cli.command()
@click.argument("message")
@click.option(
    "--metadata",
    default=None,
    help="JSON metadata to sanitize along with the message.",
)
def redact(message: str, metadata: str | None) -> None:
    """Print MESSAGE (and optional JSON metadata) as it would be logged."""
    parsed = None
    if metadata is not None:
        try:
            parsed = json.loads(metadata)
        except json.JSONDecodeError as e:
            click.echo(f"Error: invalid JSON metadata: {e}", err=True)
            sys.exit(2)

    data = sanitize_log_data(message, parsed)
    click.echo(data.message)
    if data.metadata is not None:
        click.echo(json.dumps(data.metadata, indent=2, sort_keys=True))


if __name__ == "__main__":
    cli()
