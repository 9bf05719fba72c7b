"""HTTP layer: session client, authentication handlers and transports."""

from .auth import BasicAuth, BearerAuth, basic_auth_value, mask_credential
from .client import HttpClient
from .fake import FakeResponse, FakeTransport

__all__ = [
    "HttpClient",
    "BasicAuth",
    "BearerAuth",
    "basic_auth_value",
    "mask_credential",
    "FakeResponse",
    "FakeTransport",
]
