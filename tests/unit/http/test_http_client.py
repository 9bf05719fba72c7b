"""
Unit tests for HttpClient.
"""

from unittest.mock import Mock, patch

import pytest
import requests
from requests.adapters import HTTPAdapter

from dragonball.http import BearerAuth, FakeResponse, FakeTransport, HttpClient

SERVICE_ROOT = "https://dragonball.keepcoding.education"


@pytest.mark.unit
class TestHttpClient:
    """Test transport mounting, URL resolution and request sending."""

    @pytest.fixture
    def transport(self):
        return FakeTransport(handler=lambda request: (FakeResponse(), b'{"ok": true}'))

    @pytest.fixture
    def http_client(self, transport):
        return HttpClient(SERVICE_ROOT, transport=transport)

    def test_trailing_slash_and_timeout(self):
        client = HttpClient(f"{SERVICE_ROOT}/", timeout=60)

        assert client.base_url == SERVICE_ROOT
        assert client.timeout == 60

    def test_default_transport_does_not_retry(self):
        """Test the default transport is an HTTPAdapter with retries disabled."""
        client = HttpClient(SERVICE_ROOT)

        assert isinstance(client.transport, HTTPAdapter)
        assert client.transport.max_retries.total == 0

    def test_transport_mounted_on_given_session(self, transport):
        """Test both schemes of a caller's session route through the transport."""
        session = requests.Session()
        client = HttpClient(SERVICE_ROOT, transport=transport, session=session)

        assert client.session is session
        assert session.get_adapter(f"{SERVICE_ROOT}/api/heros/all") is transport
        assert session.get_adapter("http://localhost:8080/") is transport

    @pytest.mark.parametrize("endpoint,expected", [
        ("/api/heros/all", f"{SERVICE_ROOT}/api/heros/all"),
        ("api/heros/all", f"{SERVICE_ROOT}/api/heros/all"),
        ("", f"{SERVICE_ROOT}/"),
        ("http://localhost:8080/api/heros/all", "http://localhost:8080/api/heros/all"),
    ])
    def test_url_resolution(self, http_client, endpoint, expected):
        assert http_client._build_url(endpoint) == expected

    def test_post_form_data(self, http_client, transport):
        """Test a form body reaches the transport as one POST."""
        response = http_client.post("/api/heros/tranformations", data={"id": "D13A40E5"})

        assert response.json() == {"ok": True}
        request = transport.last_request
        assert request.method == "POST"
        assert request.url == f"{SERVICE_ROOT}/api/heros/tranformations"
        assert request.body == "id=D13A40E5"

    def test_post_applies_auth(self, http_client, transport):
        http_client.post("/api/heros/all", auth=BearerAuth("SomeToken"))

        assert transport.last_request.headers["Authorization"] == "Bearer SomeToken"

    @pytest.mark.parametrize("kwargs,timeout", [({}, 30), ({"timeout": 5}, 5)])
    def test_timeout_passed_to_requests(self, http_client, kwargs, timeout):
        """Test the client timeout applies unless the caller passes one."""
        with patch("requests.Session.post") as mock_post:
            mock_post.return_value = Mock(status_code=200, content=b"")

            http_client.post("/api/heros/all", **kwargs)

        assert mock_post.call_args.kwargs["timeout"] == timeout

    def test_context_manager_closes(self, transport):
        """Test leaving the with-block closes the session."""
        with HttpClient(SERVICE_ROOT, transport=transport) as client:
            client.session = Mock()

        client.session.close.assert_called_once()
