"""Command line entry point for Registrar.

Every command builds its registrar from registrar.yaml (auto-detected unless
--config is given) and REGISTRAR_* environment variables. With the default
in-memory database, state only lives for the duration of one command.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import uvicorn

from registrar.api.app import create_app
from registrar.bootstrap import Registrar, bootstrap
from registrar.config import ConfigError, Settings, find_config, load_settings
from registrar.logging import setup_logging
from registrar.seed import load_seed_file

logger = logging.getLogger(__name__)

config_option = click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    help="Path to registrar.yaml (auto-detected if not specified)",
)


def _load(config_path: Path | None) -> Settings:
    if config_path is None:
        config_path = find_config()
    settings = load_settings(config_path)
    setup_logging(settings)
    return settings


def _open_registrar(config_path: Path | None) -> Registrar:
    try:
        return bootstrap(_load(config_path))
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


@click.group()
@click.version_option(package_name="registrar")
def main() -> None:
    """Registrar - course catalog, registration and admissions."""
    pass


@main.command()
@config_option
@click.option("--host", default=None, help="Bind address (default: from config)")
@click.option("--port", type=int, default=None, help="Bind port (default: from config)")
def serve(config_path: Path | None, host: str | None, port: int | None) -> None:
    """Run the REST API server."""
    try:
        settings = _load(config_path)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    host = host or settings.api.host
    port = port or settings.api.port
    logger.info("Starting API on %s:%d", host, port)
    uvicorn.run(create_app(settings), host=host, port=port)


@main.command()
@config_option
@click.argument("seed_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def seed(config_path: Path | None, seed_file: Path) -> None:
    """Load courses, accounts and completions from a YAML seed file."""
    registrar = _open_registrar(config_path)
    try:
        summary = load_seed_file(seed_file, registrar)
    except ConfigError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    finally:
        registrar.close()

    click.echo(
        f"Seeded {summary.courses} courses, {summary.accounts} accounts, "
        f"{summary.completions} completions."
    )


@main.command()
@config_option
@click.argument("term", required=False)
def courses(config_path: Path | None, term: str | None) -> None:
    """List catalog courses, optionally filtered by TERM."""
    registrar = _open_registrar(config_path)
    try:
        found = registrar.catalog.search(term)
    finally:
        registrar.close()

    if not found:
        click.echo("No courses found.")
        return

    for course in found:
        click.echo(str(course))


@main.command()
@config_option
@click.argument("username")
@click.argument("code")
def register(config_path: Path | None, username: str, code: str) -> None:
    """Register USERNAME in course CODE."""
    registrar = _open_registrar(config_path)
    try:
        result = registrar.registration.register(username, code)
    finally:
        registrar.close()

    if not result.ok:
        click.echo(result.message, err=True)
        sys.exit(1)

    click.echo(result.message)


if __name__ == "__main__":
    main()
