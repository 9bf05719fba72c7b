"""
Unit tests for network exceptions.
"""

import pytest
import requests

from dragonball.exceptions import (
    AuthenticationError,
    DecodingError,
    DragonBallError,
    NetworkError,
    TransportError,
    UnexpectedStatusError,
)


@pytest.mark.unit
class TestTransportError:

    def test_wraps_cause(self):
        cause = requests.ConnectionError("network is unreachable")
        error = TransportError("heroes_list", cause, url="https://example.com/api/heros/all")

        assert isinstance(error, NetworkError)
        assert isinstance(error, DragonBallError)
        assert error.cause is cause
        assert error.operation == "heroes_list"
        assert error.url == "https://example.com/api/heros/all"
        assert error.error_code == "NETWORK_001"
        assert "network is unreachable" in error.message
        assert error.technical_details == "ConnectionError: network is unreachable"

    def test_url_optional(self):
        error = TransportError("login", OSError("reset"))

        assert error.url is None


@pytest.mark.unit
class TestDecodingError:

    def test_details_in_message(self):
        error = DecodingError("heroes_list", "invalid JSON")

        assert error.details == "invalid JSON"
        assert error.error_code == "NETWORK_002"
        assert "heroes_list" in error.message
        assert "invalid JSON" in error.message


@pytest.mark.unit
class TestUnexpectedStatusError:

    def test_status_recorded(self):
        error = UnexpectedStatusError("heroes_list", 500, body="Internal error")

        assert error.status_code == 500
        assert error.error_code == "NETWORK_003"
        assert "500" in error.message
        assert error.technical_details == "Internal error"
        assert "server error" in error.help_text

    def test_body_truncated(self):
        error = UnexpectedStatusError("heroes_list", 502, body="x" * 500)

        assert len(error.technical_details) == 200

    def test_client_error_help(self):
        error = UnexpectedStatusError("heroes_list", 404)

        assert error.technical_details is None
        assert "token" in error.help_text


@pytest.mark.unit
class TestAuthenticationError:

    @pytest.mark.parametrize("status_code,details", [
        (401, "HTTP 401 Unauthorized - Invalid credentials"),
        (403, "HTTP 403 Forbidden - Access denied"),
    ])
    def test_rejected_credentials(self, status_code, details):
        error = AuthenticationError("login", status_code)

        assert isinstance(error, UnexpectedStatusError)
        assert error.status_code == status_code
        assert error.error_code == "NETWORK_004"
        assert error.technical_details == details
        assert "authentication rejected" in error.message
        assert "dragonball login" in error.user_action
