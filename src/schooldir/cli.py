"""Command-line interface for SchoolDir.

This module provides the CLI commands for running the web front end and
querying the school directory from a terminal.
"""

import asyncio
from typing import NoReturn

import click

from schooldir.core.config import get_settings
from schooldir.core.logging import configure_logging, get_logger


@click.group()
@click.version_option(version="0.1.0", prog_name="SchoolDir")
def cli() -> None:
    """SchoolDir - register and browse schools.

    Settings are read from SCHOOLDIR_* environment variables and .env files.
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
    """Start the SchoolDir web server."""
    import uvicorn

    settings = get_settings()
    bind_host = host or settings.host
    bind_port = port or settings.port

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting SchoolDir server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
        directory_base_url=settings.directory_base_url,
    )

    uvicorn.run(
        "schooldir.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        workers=1 if reload else settings.workers,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


@cli.command("list-schools")
@click.option("--search", "-s", default="", help="Match name, city, state or address")
@click.option("--state", default="", help="Only schools in this exact state")
def list_schools(search: str, state: str) -> None:
    """Print schools from the directory, filtered like the directory page."""
    from schooldir.domain.services.directory_listing import DirectoryListing
    from schooldir.infrastructure.clients.school_directory_client import SchoolDirectoryClient

    settings = get_settings()
    configure_logging(settings)

    async def load() -> DirectoryListing:
        client = SchoolDirectoryClient.from_settings(settings)
        listing = DirectoryListing(search=search, state=state)
        try:
            await listing.load(client)
        finally:
            await client.aclose()
        return listing

    listing = asyncio.run(load())

    if listing.error:
        click.echo(f"Error: {listing.error}", err=True)
        raise SystemExit(1)

    for school in listing.filtered:
        school_id = school.id or "-"
        click.echo(
            f"{school_id:>5}  {school.name}  ({school.city}, {school.state})"
            f"  {school.contact}  {school.email_id}"
        )

    if listing.empty_reason == "no_matches":
        click.echo("No schools found. Try adjusting your search criteria.")
    elif listing.empty_reason == "no_schools":
        click.echo("No schools available.")
    click.echo(listing.summary)


@cli.command()
def info() -> None:
    """Display SchoolDir configuration."""
    settings = get_settings()

    click.echo(f"""
SchoolDir v{settings.app_version}
{'=' * 40}

Configuration:
  Environment:  {settings.environment}
  Debug:        {settings.debug}

School directory:
  Base URL:     {settings.directory_base_url}
  Schools:      {settings.schools_path}
  Upload:       {settings.upload_path} (field '{settings.upload_field_name}')
  Timeout:      {settings.request_timeout_seconds}s

Uploads:
  Max size:     {settings.max_image_size} bytes
  Types:        {', '.join(settings.allowed_image_types)}

Logging:
  Level:        {settings.log_level}
  Format:       {settings.log_format}
""")


def main() -> NoReturn:
    """Main entry point for the CLI.

    This function is called when the `schooldir` command is run
    or when using `python -m schooldir`.
    """
    cli()


if __name__ == "__main__":
    main()
