"""Client for the Dragon Ball heroes service."""

from .api import DragonBallClient
from .decoding import decode_records, decode_token
from .manager import Completion, NetworkManager

__all__ = [
    "DragonBallClient",
    "NetworkManager",
    "Completion",
    "decode_records",
    "decode_token",
]
