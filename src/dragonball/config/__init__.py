"""
Configuration for DragonBall.

- models: Pydantic configuration models and environment settings
- manager: TOML loading, environment overrides and persistence
"""

from .manager import ConfigManager
from .models import (
    ApiConfig,
    DragonBallConfig,
    DragonBallSettings,
    LoggingConfig,
    LogLevel,
)

__all__ = [
    "ConfigManager",
    "ApiConfig",
    "DragonBallConfig",
    "DragonBallSettings",
    "LoggingConfig",
    "LogLevel",
]
