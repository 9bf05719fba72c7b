"""
DragonBall logging.

- formatters: JSON and console formatters, rich handler
- manager: installs handlers from the ``[logging]`` configuration section
- context: start/success/failure records around a client operation
"""

from .context import LoggingContext
from .formatters import StructuredFormatter
from .manager import (
    LoggingManager,
    configure_logging,
    configure_logging_from_manager,
    logging_manager,
)

__all__ = [
    "LoggingContext",
    "StructuredFormatter",
    "LoggingManager",
    "configure_logging",
    "configure_logging_from_manager",
    "logging_manager",
]
