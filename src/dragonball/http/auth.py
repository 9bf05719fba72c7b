"""
Authentication handlers for the heroes service.

Login uses HTTP basic auth built from the user's credentials; every other
request carries the session token as a bearer credential.
"""

import base64
from typing import Optional

import requests
from requests.auth import AuthBase

AUTHORIZATION_HEADER = 'Authorization'


def mask_credential(credential: Optional[str], visible_chars: int = 4) -> str:
    """
    Mask credential for display/logging purposes.

    Args:
        credential: Credential to mask
        visible_chars: Number of characters to show at the end

    Returns:
        Masked credential string
    """
    if not credential:
        return "[empty]"

    if len(credential) <= visible_chars:
        return "*" * len(credential)

    return "*" * (len(credential) - visible_chars) + credential[-visible_chars:]


def basic_auth_value(username: str, password: str) -> str:
    """Return ``Basic base64(username:password)`` with UTF-8 encoded credentials."""
    login = f"{username}:{password}".encode('utf-8')
    return "Basic " + base64.b64encode(login).decode('ascii')


class BasicAuth(AuthBase):
    """Attaches HTTP basic authentication to a request.

    ``requests.auth.HTTPBasicAuth`` encodes ``str`` credentials as latin-1;
    this handler always uses UTF-8.
    """

    def __init__(self, username: str, password: str):
        self.username = username
        self.password = password

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        request.headers[AUTHORIZATION_HEADER] = basic_auth_value(self.username, self.password)
        return request

    def __repr__(self) -> str:
        return f"BasicAuth(username={mask_credential(self.username)!r})"


class BearerAuth(AuthBase):
    """Attaches ``Authorization: Bearer <token>`` to a request.

    The token is sent exactly as given. An empty or missing token produces
    ``"Bearer "``; no stored or default token is ever substituted.
    """

    def __init__(self, token: Optional[str]):
        self.token = token or ''

    def __call__(self, request: requests.PreparedRequest) -> requests.PreparedRequest:
        request.headers[AUTHORIZATION_HEADER] = f"Bearer {self.token}"
        return request

    def __repr__(self) -> str:
        return f"BearerAuth(token={mask_credential(self.token)!r})"
