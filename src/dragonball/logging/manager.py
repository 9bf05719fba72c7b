"""
Installs DragonBall's log handlers.

The ``[logging]`` section of the configuration file picks the level, the
console format (plain, JSON or rich) and whether records also go to a
rotating file. Only the handlers installed here are ever removed; pytest's
capture handler or an embedding application's handlers stay in place.
"""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import TYPE_CHECKING, List, Optional

from dragonball.constants import LoggingConstants

from .formatters import StructuredFormatter, console_formatter, rich_handler

if TYPE_CHECKING:
    from dragonball.config import ConfigManager, LoggingConfig

PACKAGE_LOGGER = "dragonball"


class LoggingManager:
    """Tracks the handlers DragonBall added to the root logger; one per process."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.settings = None
            cls._instance.level = None
            cls._instance.handlers = []
        return cls._instance

    @property
    def configured(self) -> bool:
        return self.settings is not None

    def configure(self, settings: "LoggingConfig",
                  service_name: str = LoggingConstants.SERVICE_NAME,
                  version: str = "unknown",
                  level: Optional[int] = None) -> int:
        """Replace the installed handlers with the ones ``settings`` asks for.

        Args:
            settings: The ``[logging]`` configuration section
            service_name: Name written into JSON records
            version: Version written into JSON records
            level: Overrides ``settings.level`` (the CLI's ``-v`` flags)

        Returns:
            The level applied to the ``dragonball`` loggers
        """
        self.reset()
        effective = level if level is not None else getattr(logging, settings.level.value)

        handlers: List[logging.Handler] = []
        for output in settings.output:
            if output == "file":
                handlers.append(self._file_handler(settings, service_name, version))
            else:
                handlers.append(self._console_handler(settings.format, service_name, version))

        root = logging.getLogger()
        for handler in handlers:
            handler.setLevel(effective)
            root.addHandler(handler)

        # Records propagate to root handlers whatever root's own level is
        logging.getLogger(PACKAGE_LOGGER).setLevel(effective)

        self.handlers = handlers
        self.settings = settings
        self.level = effective
        return effective

    def reset(self) -> None:
        """Remove and close the handlers this manager installed."""
        root = logging.getLogger()
        for handler in self.handlers:
            root.removeHandler(handler)
            handler.close()
        self.handlers = []
        self.settings = None
        self.level = None

    @staticmethod
    def _console_handler(format_type: str, service_name: str, version: str) -> logging.Handler:
        if format_type == "rich":
            return rich_handler()

        handler = logging.StreamHandler(sys.stderr)
        if format_type == "json":
            handler.setFormatter(StructuredFormatter(service_name, version))
        else:
            handler.setFormatter(console_formatter())
        return handler

    @staticmethod
    def _file_handler(settings: "LoggingConfig", service_name: str,
                      version: str) -> logging.Handler:
        path = Path(settings.file_path or LoggingConstants.DEFAULT_LOG_FILE)
        path.parent.mkdir(parents=True, exist_ok=True)

        handler = logging.handlers.RotatingFileHandler(
            path,
            maxBytes=settings.max_file_size,
            backupCount=settings.backup_count,
            encoding="utf-8",
        )
        # Rich styling is for terminals; files get plain lines unless JSON was asked for
        if settings.format == "json":
            handler.setFormatter(StructuredFormatter(service_name, version))
        else:
            handler.setFormatter(console_formatter())
        return handler


logging_manager = LoggingManager()


def configure_logging(settings: "LoggingConfig",
                      service_name: str = LoggingConstants.SERVICE_NAME,
                      version: str = "unknown",
                      level: Optional[int] = None) -> int:
    """Configure the process-wide handlers from a ``[logging]`` section."""
    return logging_manager.configure(settings, service_name, version, level)


def configure_logging_from_manager(config_manager: "ConfigManager",
                                   service_name: str = LoggingConstants.SERVICE_NAME,
                                   version: str = "unknown",
                                   level: Optional[int] = None) -> int:
    """Load the configuration file and configure logging from it.

    Raises:
        ConfigurationError: the configuration file cannot be loaded
    """
    settings = config_manager.load_config().logging
    return configure_logging(settings, service_name, version, level)
