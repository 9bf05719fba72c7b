"""
In-process transport that fakes HTTP exchanges for tests.

``FakeTransport`` is a ``requests`` transport adapter. Mounted on a session it
intercepts every request, hands it to a handler function supplied by the test
and turns the handler's canned answer into a real ``requests.Response``, so
the client under test cannot tell it apart from the network.

Each test builds its own instance and passes it to the client::

    transport = FakeTransport(handler=lambda request: (FakeResponse(200), b"token"))
    client = DragonBallClient(transport=transport)
"""

import io
import logging
from dataclasses import dataclass, field
from http import HTTPStatus
from typing import Callable, Dict, List, Optional, Tuple

import requests
from requests.adapters import BaseAdapter
from requests.structures import CaseInsensitiveDict
from requests.utils import get_encoding_from_headers

logger = logging.getLogger(__name__)


@dataclass
class FakeResponse:
    """Response metadata returned by a handler alongside the body bytes."""

    status_code: int = 200
    headers: Dict[str, str] = field(
        default_factory=lambda: {'Content-Type': 'application/json'}
    )
    url: Optional[str] = None
    reason: Optional[str] = None


Handler = Callable[[requests.PreparedRequest], Tuple[FakeResponse, bytes]]


class FakeTransport(BaseAdapter):
    """Transport adapter that answers requests from a handler function.

    Attributes:
        handler: Called with each prepared request; returns the response
            metadata and body, or raises to simulate a failure
        error: When set, every request fails with it and the handler is
            never called
        requests: Every request seen, in order
        responses: Every response delivered, in order
    """

    NO_HANDLER_MESSAGE = "Received unexpected request with no handler"

    def __init__(self, handler: Optional[Handler] = None,
                 error: Optional[Exception] = None):
        super().__init__()
        self.handler = handler
        self.error = error
        self.requests: List[requests.PreparedRequest] = []
        self.responses: List[requests.Response] = []

    def send(self, request, stream=False, timeout=None, verify=True, cert=None,
             proxies=None) -> requests.Response:
        self.requests.append(request)
        logger.debug(f"Intercepted {request.method} {request.url}")

        if self.error is not None:
            self._fail(request, self.error)

        if self.handler is None:
            # Setup defect in the test, not a request failure
            raise AssertionError(self.NO_HANDLER_MESSAGE)

        try:
            metadata, body = self.handler(request)
        except AssertionError:
            raise
        except Exception as exc:
            self._fail(request, exc)

        response = self._receive_response(request, metadata)
        self._load(response, body)
        self._finish_loading(response)
        return response

    def close(self) -> None:
        """Nothing to release; present to satisfy the adapter interface."""

    def reset(self) -> None:
        """Forget recorded requests and responses."""
        self.requests.clear()
        self.responses.clear()

    @property
    def last_request(self) -> Optional[requests.PreparedRequest]:
        return self.requests[-1] if self.requests else None

    def _fail(self, request: requests.PreparedRequest, error: Exception) -> None:
        logger.debug(f"Failing {request.method} {request.url}: {error!r}")
        if isinstance(error, requests.RequestException):
            raise error
        raise requests.ConnectionError(error, request=request) from error

    def _receive_response(self, request: requests.PreparedRequest,
                          metadata: FakeResponse) -> requests.Response:
        """Build the response object from the handler's metadata."""
        response = requests.Response()
        response.status_code = metadata.status_code
        response.headers = CaseInsensitiveDict(metadata.headers or {})
        response.encoding = get_encoding_from_headers(response.headers)
        response.reason = metadata.reason or self._reason(metadata.status_code)
        response.url = metadata.url or request.url
        response.request = request
        response.connection = self
        return response

    def _load(self, response: requests.Response, body: bytes) -> None:
        """Attach the body bytes as the response's raw stream."""
        response.raw = io.BytesIO(body or b'')

    def _finish_loading(self, response: requests.Response) -> None:
        self.responses.append(response)
        logger.debug(f"Delivered {response.status_code} for {response.url}")

    @staticmethod
    def _reason(status_code: int) -> str:
        try:
            return HTTPStatus(status_code).phrase
        except ValueError:
            return ''
