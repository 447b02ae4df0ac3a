"""Command-line interface for Vrishti.

This module provides the CLI commands for running and managing
the Vrishti backend.
"""

import asyncio

import click

from vrishti.core.config import get_settings
from vrishti.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="Vrishti")
def cli() -> None:
    """Vrishti Bandhan - agricultural waste exchange backend.

    Settings are read from VRISHTI_* environment variables and .env;
    mail credentials from EMAIL_USER and EMAIL_PASS.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the Vrishti server."""
    import uvicorn

    settings = get_settings()

    bind_host = host or settings.host
    bind_port = port or settings.port

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting Vrishti server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    # A single worker: the notification dispatcher lives in process memory
    uvicorn.run(
        "vrishti.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command()
def init_db() -> None:
    """Create all database tables."""
    from vrishti.infrastructure.persistence.database import DatabaseManager

    settings = get_settings()
    configure_logging(settings)

    async def initialize() -> None:
        db = DatabaseManager(settings)
        try:
            await db.init()
            click.echo("Database initialized successfully.")
        finally:
            await db.disconnect()

    try:
        asyncio.run(initialize())
    except RuntimeError as e:
        click.echo(f"ERROR: {e}", err=True)
        raise SystemExit(1)


@cli.command()
def check_mail() -> None:
    """Test the configured mail account."""
    from vrishti.infrastructure.services.email import build_email_provider

    settings = get_settings()
    configure_logging(settings)

    if not settings.mail_configured:
        click.echo("EMAIL_USER/EMAIL_PASS not set: notifications are only logged.")
        return

    provider = build_email_provider(settings)
    ok, error = asyncio.run(provider.test_connection())
    if ok:
        click.echo(f"Connected to {settings.smtp_host}:{settings.smtp_port} as {settings.email_user}.")
    else:
        click.echo(f"ERROR: {error}", err=True)
        raise SystemExit(1)


@cli.command()
def info() -> None:
    """Show the effective configuration (secrets omitted)."""
    settings = get_settings()

    click.echo(f"""
{settings.app_name} v{settings.app_version}

Environment:    {settings.environment}
Debug:          {settings.debug}
Listen:         {settings.host}:{settings.port}

Database:       {settings.database_url}

Mail:
  Configured:   {settings.mail_configured}
  Sender:       {settings.email_user or '-'}
  SMTP:         {settings.smtp_host}:{settings.smtp_port}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> None:
    """Main entry point for the CLI.

    Called by the ``vrishti`` console script and ``python -m vrishti``.
    """
    cli()


if __name__ == "__main__":
    main()
