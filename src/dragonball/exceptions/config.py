"""
Configuration-related exceptions.

Raised while reading, validating or updating the TOML configuration file.
"""

from typing import Any, List

from .base import DragonBallError
from .templates import ErrorCodes, ErrorMessageTemplates


class ConfigurationError(DragonBallError):
    """Base class for configuration-related errors."""


class InvalidConfigurationError(ConfigurationError):
    """Raised when a single configuration value or the file itself is unusable."""

    def __init__(self, field: str, value: Any, expected: str):
        super().__init__(
            ErrorMessageTemplates.CONFIG_INVALID.format(
                field=field, value=repr(value), expected=expected
            ),
            help_text=f"Check the configuration for '{field}' and ensure it matches: {expected}",
            error_code=ErrorCodes.CONFIG_INVALID,
            user_action="Run 'dragonball config --show' to inspect the current values",
        )
        self.field = field
        self.value = value
        self.expected = expected


class ConfigurationValidationError(ConfigurationError):
    """Raised when the merged configuration fails validation.

    ``errors`` holds one ``section.key: reason`` line per problem.
    """

    def __init__(self, errors: List[str]):
        lines = [ErrorMessageTemplates.CONFIG_VALIDATION]
        lines.extend(f"  - {error}" for error in errors)
        super().__init__(
            "\n".join(lines),
            help_text="Fix the values listed above in your configuration file",
            error_code=ErrorCodes.CONFIG_VALIDATION_ERROR,
            user_action="Run 'dragonball config --reset' to restore the defaults",
        )
        self.errors = errors
