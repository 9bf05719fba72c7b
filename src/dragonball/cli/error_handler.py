"""
Centralized error handling for the DragonBall CLI.

Renders DragonBall errors with their help text and error ID, logs them, and
maps each error family to a process exit code.
"""

import functools
import logging
import sys
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from dragonball.exceptions import (
    AuthenticationError,
    ConfigurationError,
    DragonBallError,
    TransportError,
)


class ExitCodes:
    """Process exit codes used by the CLI."""

    ERROR = 1
    AUTHENTICATION = 2
    CONFIGURATION = 3
    CONNECTION = 4
    CANCELLED = 130


class CLIErrorHandler:
    """Centralized error handler for CLI operations."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console(stderr=True)
        self.logger = logging.getLogger("dragonball.cli")

    def handle(self, error: BaseException) -> int:
        """Report ``error`` and return the exit code to use."""
        if isinstance(error, KeyboardInterrupt):
            self.console.print("\n[yellow]Operation cancelled by user[/yellow]")
            return ExitCodes.CANCELLED
        if isinstance(error, AuthenticationError):
            return self._report("Authentication Failed", error, ExitCodes.AUTHENTICATION)
        if isinstance(error, ConfigurationError):
            return self._report("Configuration Error", error, ExitCodes.CONFIGURATION)
        if isinstance(error, TransportError):
            return self._report("Connection Error", error, ExitCodes.CONNECTION)
        if isinstance(error, DragonBallError):
            return self._report("Error", error, ExitCodes.ERROR)
        raise error

    def _report(self, title: str, error: DragonBallError, exit_code: int) -> int:
        self.console.print(f"[red]{title}: {escape(error.message)}[/red]")
        if error.help_text:
            self.console.print(f"[blue]Help: {escape(error.help_text)}[/blue]")
        if error.user_action:
            self.console.print(f"[green]Action: {escape(error.user_action)}[/green]")
        if error.technical_details:
            self.console.print(f"[dim]Details: {escape(error.technical_details)}[/dim]")
        self.console.print(f"[dim]Error ID: {error.correlation_id}[/dim]")

        self.logger.error(
            f"{title}: {error.message}",
            extra={"error_code": error.error_code, "correlation_id": error.correlation_id},
        )
        return exit_code


def handle_cli_exceptions(func: Callable) -> Callable:
    """Decorator that turns DragonBall errors into a clean exit."""

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (DragonBallError, KeyboardInterrupt) as e:
            sys.exit(CLIErrorHandler().handle(e))

    return wrapper
