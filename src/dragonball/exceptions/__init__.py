"""
DragonBall Exception Hierarchy

Exception Hierarchy:
    DragonBallError (base)
    ├── ConfigurationError
    │   ├── InvalidConfigurationError
    │   └── ConfigurationValidationError
    └── NetworkError
        ├── TransportError
        ├── DecodingError
        └── UnexpectedStatusError
            └── AuthenticationError

Test-harness misconfiguration (a fake transport with neither handler nor
error) is reported with AssertionError and is not part of this tree.
"""

from .base import DragonBallError

from .config import (
    ConfigurationError,
    ConfigurationValidationError,
    InvalidConfigurationError,
)

from .network import (
    AuthenticationError,
    DecodingError,
    NetworkError,
    TransportError,
    UnexpectedStatusError,
)

__all__ = [
    # Base
    "DragonBallError",
    # Configuration
    "ConfigurationError",
    "InvalidConfigurationError",
    "ConfigurationValidationError",
    # Network
    "NetworkError",
    "TransportError",
    "DecodingError",
    "UnexpectedStatusError",
    "AuthenticationError",
]
