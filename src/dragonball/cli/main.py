#!/usr/bin/env python3
"""DragonBall CLI main entry point.

Command-line access to the heroes service: log in, list heroes and list a
hero's transformations, plus configuration management.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

import click
from rich.console import Console
from rich.table import Table

from dragonball import __version__
from dragonball.client import DragonBallClient
from dragonball.config import ConfigManager, LoggingConfig
from dragonball.exceptions import DragonBallError, InvalidConfigurationError
from dragonball.logging import configure_logging, configure_logging_from_manager
from dragonball.models import Hero, Record, Transformation

from .error_handler import handle_cli_exceptions


SERVICE_NAME = "dragonball-cli"

# -v raises the level to INFO, -vv and beyond to DEBUG
VERBOSITY_LEVELS = {1: logging.INFO}


def setup_logging(config_manager: ConfigManager, verbose: int = 0) -> int:
    """Configure logging from the config file; ``-v``/``-vv`` override its level."""
    level = VERBOSITY_LEVELS.get(verbose, logging.DEBUG) if verbose else None
    logger = logging.getLogger("dragonball.cli")

    try:
        applied = configure_logging_from_manager(config_manager, SERVICE_NAME, __version__, level)
    except DragonBallError as e:
        applied = configure_logging(
            LoggingConfig(level="WARNING"), SERVICE_NAME, __version__, level
        )
        logger.warning(f"Invalid configuration, using default logging: {e.message}")

    logger.debug(f"DragonBall CLI {__version__} started (verbosity {verbose})")
    return applied


def _build_client(ctx: click.Context) -> DragonBallClient:
    config = ctx.obj['config_manager'].load_config()
    return DragonBallClient.from_config(config, transport=ctx.obj.get('transport'))


def _render_records(records: List[Record], title: str, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps([record.to_wire() for record in records], indent=2))
        return

    table = Table(title=f"{title} ({len(records)})")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    if records and isinstance(records[0], Hero):
        table.add_column("Favorite", justify="center")
    table.add_column("Description")

    for record in records:
        row = [record.id, record.name]
        if isinstance(record, Hero):
            row.append("★" if record.favorite else "")
        row.append(_truncate(record.description))
        table.add_row(*row)

    Console().print(table)


def _truncate(text: str, width: int = 60) -> str:
    return text if len(text) <= width else text[:width - 1] + "…"


@click.group()
@click.version_option(version=__version__, prog_name="dragonball")
@click.option(
    "--config", "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file path"
)
@click.option(
    "--verbose", "-v",
    count=True,
    help="Increase verbosity (-v for INFO, -vv for DEBUG)"
)
@click.pass_context
def cli(ctx: click.Context, config: Optional[Path], verbose: int) -> None:
    """DragonBall: client for the Dragon Ball heroes service.

    \b
    Examples:
        dragonball login --user goku@example.com
        dragonball heroes --token $TOKEN
        dragonball transformations --token $TOKEN --hero-id <HERO_ID>
    """
    ctx.ensure_object(dict)
    config_manager = ConfigManager(config)
    ctx.obj['config_manager'] = config_manager
    ctx.obj['verbose'] = verbose
    setup_logging(config_manager, verbose)


@cli.command()
@click.option("--user", "-u", required=True, help="Account username (email)")
@click.option("--password", "-p", prompt=True, hide_input=True, help="Account password")
@click.pass_context
@handle_cli_exceptions
def login(ctx: click.Context, user: str, password: str) -> None:
    """Log in and print the session token."""
    with _build_client(ctx) as client:
        token = client.login(user, password)
    click.echo(token)


@cli.command()
@click.option("--token", "-t", required=True, envvar="DRAGONBALL_TOKEN",
              help="Session token returned by 'login'")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
@click.pass_context
@handle_cli_exceptions
def heroes(ctx: click.Context, token: str, as_json: bool) -> None:
    """List every hero."""
    with _build_client(ctx) as client:
        records = client.heroes_list(token)
    _render_records(records, "Heroes", as_json)


@cli.command()
@click.option("--token", "-t", required=True, envvar="DRAGONBALL_TOKEN",
              help="Session token returned by 'login'")
@click.option("--hero-id", required=True, help="Identifier of the parent hero")
@click.option("--json", "as_json", is_flag=True, help="Print raw JSON")
@click.pass_context
@handle_cli_exceptions
def transformations(ctx: click.Context, token: str, hero_id: str, as_json: bool) -> None:
    """List the transformations of one hero."""
    with _build_client(ctx) as client:
        records: List[Transformation] = client.transformation_heroes_list(token, hero_id)
    _render_records(records, "Transformations", as_json)


@cli.command()
@click.option("--show", is_flag=True, help="Show current configuration")
@click.option("--set", "assignments", multiple=True, metavar="KEY=VALUE",
              help="Set a value, e.g. --set api.timeout=10")
@click.option("--reset", is_flag=True, help="Reset configuration to defaults")
@click.pass_context
@handle_cli_exceptions
def config(ctx: click.Context, show: bool, assignments: List[str], reset: bool) -> None:
    """Manage configuration."""
    manager: ConfigManager = ctx.obj['config_manager']

    if reset:
        manager.reset_config()
        click.echo(f"Configuration reset: {manager.config_file}")

    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep:
            raise InvalidConfigurationError(assignment, assignment, "KEY=VALUE")
        manager.set_value(key.strip(), value.strip())
        click.echo(f"Set {key.strip()} = {value.strip()}")

    if show or not (reset or assignments):
        _show_config(manager)


def _show_config(manager: ConfigManager) -> None:
    current = manager.load_config().model_dump(mode="json")

    table = Table(title=f"Configuration ({manager.config_file})")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for section, values in current.items():
        for key, value in values.items():
            table.add_row(f"{section}.{key}", str(value))

    Console().print(table)


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
