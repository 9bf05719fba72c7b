"""
Session wrapper that routes every request through one transport adapter.

``HttpClient`` mounts the adapter it is given on both URL schemes, so the
adapter sees each request the session sends. Production code gets a plain
``HTTPAdapter`` with retries disabled; tests pass a ``FakeTransport``.
"""

import logging
from typing import Dict, Optional
from urllib.parse import urljoin

import requests
from requests.adapters import BaseAdapter, HTTPAdapter
from requests.auth import AuthBase

from dragonball.constants import NetworkConstants


class HttpClient:
    """POST-only HTTP client bound to a service root.

    Args:
        base_url: Service root; a trailing slash is ignored
        transport: Adapter carrying every request
        session: Session to mount the transport on; a new one by default
        timeout: Seconds to wait for each response
    """

    SCHEMES = ("http://", "https://")

    def __init__(self, base_url: str, transport: Optional[BaseAdapter] = None,
                 session: Optional[requests.Session] = None,
                 timeout: int = NetworkConstants.DEFAULT_REQUEST_TIMEOUT):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.logger = logging.getLogger(__name__)

        self.transport = transport or HTTPAdapter(max_retries=0)
        self.session = session or requests.Session()
        for scheme in self.SCHEMES:
            self.session.mount(scheme, self.transport)

    def post(self, endpoint: str, data: Optional[Dict[str, str]] = None,
             headers: Optional[Dict[str, str]] = None, auth: Optional[AuthBase] = None,
             **kwargs) -> requests.Response:
        """Send a POST to ``endpoint`` and return the response, whatever its status.

        ``data`` is sent form-encoded; ``auth`` decorates the prepared request.
        Extra keyword arguments go to ``requests.Session.post``.
        """
        url = self._build_url(endpoint)
        kwargs.setdefault("timeout", self.timeout)

        response = self.session.post(url, data=data, headers=headers, auth=auth, **kwargs)
        self.logger.debug(
            f"POST {url} -> {response.status_code} ({len(response.content)} bytes)"
        )
        return response

    def _build_url(self, endpoint: str) -> str:
        """Resolve ``endpoint`` against the service root; ``""`` is the root itself."""
        if endpoint.startswith(self.SCHEMES):
            return endpoint
        return urljoin(f"{self.base_url}/", endpoint.lstrip("/"))

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()
