"""
DragonBall: network client for the Dragon Ball heroes service.

A small Python library that logs in against the KeepCoding Dragon Ball API and
fetches heroes and their transformations.

Architecture Overview:
- Models: Hero and Transformation records decoded from the API
- Client: request building and response decoding (sync client, async manager)
- HTTP: session wrapper, authentication handlers and swappable transports
- Config / Logging / Exceptions: cross-cutting concerns
- CLI: command-line interface over the client
"""

__version__ = "0.1.0"

from .client import DragonBallClient, NetworkManager
from .exceptions import DragonBallError
from .http import FakeResponse, FakeTransport
from .models import Credentials, Hero, Transformation

__all__ = [
    "DragonBallClient",
    "NetworkManager",
    "DragonBallError",
    "FakeResponse",
    "FakeTransport",
    "Credentials",
    "Hero",
    "Transformation",
]
