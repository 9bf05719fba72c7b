"""
Configuration models for DragonBall.

Pydantic models validate the TOML configuration file; ``DragonBallSettings``
collects the environment variable overrides.
"""

from enum import Enum
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dragonball.constants import ApiConstants, LoggingConstants, NetworkConstants


class LogLevel(str, Enum):
    """Levels accepted in the ``[logging]`` section, matched case-insensitively."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class ApiConfig(BaseModel):
    """Heroes service connection settings."""

    base_url: str = Field(ApiConstants.BASE_URL, description="Service root URL")
    timeout: int = Field(
        NetworkConstants.DEFAULT_REQUEST_TIMEOUT,
        ge=NetworkConstants.MIN_REQUEST_TIMEOUT,
        le=NetworkConstants.MAX_REQUEST_TIMEOUT,
        description="Request timeout in seconds",
    )

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("base_url must start with http:// or https://")
        return v.rstrip("/")


class LoggingConfig(BaseModel):
    """Where log records go and how they are rendered.

    ``output`` lists the sinks: ``console`` writes to stderr in ``format``,
    ``file`` writes a rotating file at ``file_path``.
    """

    level: LogLevel = LogLevel.INFO
    format: Literal["console", "json", "rich"] = "console"
    output: List[Literal["console", "file"]] = Field(default_factory=lambda: ["console"])
    file_path: Optional[Path] = None
    max_file_size: int = Field(
        LoggingConstants.DEFAULT_LOG_FILE_SIZE_BYTES,
        ge=LoggingConstants.MIN_LOG_FILE_SIZE_BYTES,
    )
    backup_count: int = Field(LoggingConstants.DEFAULT_LOG_BACKUP_COUNT, ge=1, le=20)

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v):
        return v.upper() if isinstance(v, str) else v


class DragonBallConfig(BaseModel):
    """Main DragonBall configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    model_config = {
        "extra": "forbid",
        "validate_assignment": True,
        "str_strip_whitespace": True,
    }


class DragonBallSettings(BaseSettings):
    """Settings that can be overridden by environment variables."""

    dragonball_base_url: Optional[str] = Field(None, alias="DRAGONBALL_BASE_URL")
    dragonball_timeout: Optional[int] = Field(None, alias="DRAGONBALL_TIMEOUT")

    dragonball_logging_level: Optional[str] = Field(None, alias="DRAGONBALL_LOGGING_LEVEL")
    dragonball_logging_format: Optional[str] = Field(None, alias="DRAGONBALL_LOGGING_FORMAT")
    dragonball_logging_output: Optional[str] = Field(None, alias="DRAGONBALL_LOGGING_OUTPUT")
    dragonball_logging_file_path: Optional[str] = Field(
        None, alias="DRAGONBALL_LOGGING_FILE_PATH"
    )

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )
