"""
Configuration manager for DragonBall.

The TOML file is the base layer and ``DRAGONBALL_*`` environment variables
override it; the merged result is validated into ``DragonBallConfig``. The
CLI's ``config`` command writes changes back through ``set_value`` and
``reset_config``.
"""

import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomli_w
from pydantic import ValidationError

from dragonball.exceptions.config import (
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .models import DragonBallConfig, DragonBallSettings

DEFAULT_CONFIG_FILE = Path.home() / ".config" / "dragonball" / "config.toml"

# Settings attribute -> (section, key) it overrides
ENV_OVERRIDES = {
    "dragonball_base_url": ("api", "base_url"),
    "dragonball_timeout": ("api", "timeout"),
    "dragonball_logging_level": ("logging", "level"),
    "dragonball_logging_format": ("logging", "format"),
    "dragonball_logging_output": ("logging", "output"),
    "dragonball_logging_file_path": ("logging", "file_path"),
}

UNKNOWN_KEY = "a known configuration key"


class ConfigManager:
    """Loads, validates and persists the DragonBall configuration file.

    Args:
        config_file: TOML file to use; ``~/.config/dragonball/config.toml`` by default
    """

    def __init__(self, config_file: Optional[Path] = None):
        self.config_file = Path(config_file) if config_file else DEFAULT_CONFIG_FILE
        self._config: Optional[DragonBallConfig] = None

    def load_config(self) -> DragonBallConfig:
        """Return the merged configuration, reading the file on first use only.

        Raises:
            InvalidConfigurationError: the file is not valid TOML
            ConfigurationValidationError: a value is out of range or unknown
        """
        if self._config is None:
            data = self._read_file() if self.config_file.exists() else {}
            self._config = self._validate(self._with_env_overrides(data))
        return self._config

    def save_config(self, config: Optional[DragonBallConfig] = None) -> None:
        """Write ``config`` (the loaded one by default) to the TOML file."""
        config = config or self.load_config()

        self.config_file.parent.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "wb") as f:
            tomli_w.dump(_without_none(config.model_dump(mode="json")), f)
        self._config = config

    def reset_config(self) -> DragonBallConfig:
        """Overwrite the file with the default configuration."""
        config = DragonBallConfig()
        self.save_config(config)
        return config

    def set_value(self, key: str, value: Any) -> DragonBallConfig:
        """Set a single value by dotted path, e.g. ``api.timeout``.

        A string given for a list-valued key is split on commas, so
        ``logging.output=console,file`` works from the command line.
        """
        section_name, _, field = key.partition(".")
        data = self.load_config().model_dump(mode="json")
        section = data.get(section_name)

        if not isinstance(section, dict) or field not in section or isinstance(section[field], dict):
            raise InvalidConfigurationError(key, value, UNKNOWN_KEY)
        if isinstance(section[field], list) and isinstance(value, str):
            value = _split_list(value)
        section[field] = value

        config = self._validate(data)
        self.save_config(config)
        return config

    def _read_file(self) -> Dict[str, Any]:
        try:
            with open(self.config_file, "rb") as f:
                return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise InvalidConfigurationError(
                str(self.config_file), f"Invalid TOML syntax: {e}", "valid TOML format"
            ) from e

    @staticmethod
    def _with_env_overrides(data: Dict[str, Any]) -> Dict[str, Any]:
        settings = DragonBallSettings()
        for attribute, (section, field) in ENV_OVERRIDES.items():
            value = getattr(settings, attribute)
            if value is None or value == "":
                continue
            if field == "output":
                value = _split_list(value)
            data.setdefault(section, {})[field] = value
        return data

    @staticmethod
    def _validate(data: Dict[str, Any]) -> DragonBallConfig:
        try:
            return DragonBallConfig(**data)
        except ValidationError as e:
            raise ConfigurationValidationError([
                f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
                for error in e.errors()
            ]) from e


def _split_list(value: str) -> List[str]:
    """Turn ``"console, file"`` into ``["console", "file"]``."""
    return [item.strip() for item in value.split(",") if item.strip()]


def _without_none(data: Any) -> Any:
    """Drop ``None`` values recursively; TOML has no null."""
    if isinstance(data, dict):
        return {k: _without_none(v) for k, v in data.items() if v is not None}
    if isinstance(data, list):
        return [_without_none(item) for item in data if item is not None]
    return data
