"""
Synchronous client for the Dragon Ball heroes service.

Each operation builds one POST request, sends it through the injected
transport, checks for HTTP 200 and decodes the body. Failures are raised as
``NetworkError`` subclasses; nothing is retried.
"""

import logging
from typing import TYPE_CHECKING, Dict, List, Optional

import requests
from requests.adapters import BaseAdapter

from dragonball.constants import ApiConstants, NetworkConstants
from dragonball.exceptions import (
    AuthenticationError,
    TransportError,
    UnexpectedStatusError,
)
from dragonball.http import BasicAuth, BearerAuth, HttpClient, mask_credential
from dragonball.logging import LoggingContext
from dragonball.models import Hero, Transformation

from .decoding import decode_records, decode_token

if TYPE_CHECKING:
    from dragonball.config import DragonBallConfig


class DragonBallClient(HttpClient):
    """HTTP client for login, heroes and transformations."""

    LOGIN_ENDPOINT = ApiConstants.LOGIN_ENDPOINT
    HEROES_ENDPOINT = ApiConstants.HEROES_ENDPOINT
    TRANSFORMATIONS_ENDPOINT = ApiConstants.TRANSFORMATIONS_ENDPOINT

    def __init__(
        self,
        base_url: str = ApiConstants.BASE_URL,
        transport: Optional[BaseAdapter] = None,
        session: Optional[requests.Session] = None,
        timeout: int = NetworkConstants.DEFAULT_REQUEST_TIMEOUT,
    ):
        super().__init__(base_url, transport=transport, session=session, timeout=timeout)
        self.logger = logging.getLogger(__name__)

    @classmethod
    def from_config(cls, config: "DragonBallConfig",
                    transport: Optional[BaseAdapter] = None) -> "DragonBallClient":
        """Build a client from the ``[api]`` section of the configuration."""
        return cls(
            base_url=config.api.base_url,
            transport=transport,
            timeout=config.api.timeout,
        )

    def login(self, user: str, password: str) -> str:
        """Authenticate with basic auth and return the session token.

        Raises:
            AuthenticationError: the service rejected the credentials (401/403)
            UnexpectedStatusError: any other non-200 status
            DecodingError: the body is empty or not UTF-8 text
            TransportError: the request could not be completed
        """
        with LoggingContext(self.logger, "login", f"Logging in as {mask_credential(user)} ...",
                            success_msg="Logged in.", failure_msg="Login failed"):
            response = self._send("login", self.LOGIN_ENDPOINT, auth=BasicAuth(user, password))
            return decode_token(response.content, "login", response.url)

    def heroes_list(self, token: Optional[str]) -> List[Hero]:
        """Fetch every hero visible to ``token``."""
        with LoggingContext(self.logger, "heroes_list", "Fetching heroes ...",
                            failure_msg="Fetching heroes failed"):
            response = self._send("heroes_list", self.HEROES_ENDPOINT, auth=BearerAuth(token))
            heroes = decode_records(response.content, Hero, "heroes_list", response.url)
            self.logger.debug(f"Decoded {len(heroes)} heroes")
            return heroes

    def transformation_heroes_list(self, token: Optional[str],
                                   parent_hero_id: str) -> List[Transformation]:
        """Fetch the transformations of the hero identified by ``parent_hero_id``."""
        with LoggingContext(self.logger, "transformation_heroes_list",
                            f"Fetching transformations for hero {parent_hero_id} ...",
                            failure_msg="Fetching transformations failed"):
            response = self._send(
                "transformation_heroes_list",
                self.TRANSFORMATIONS_ENDPOINT,
                auth=BearerAuth(token),
                data=self._build_transformations_payload(parent_hero_id),
            )
            transformations = decode_records(
                response.content, Transformation, "transformation_heroes_list", response.url
            )
            self.logger.debug(f"Decoded {len(transformations)} transformations")
            return transformations

    def _build_transformations_payload(self, parent_hero_id: str) -> Dict[str, str]:
        return {ApiConstants.PARENT_HERO_FIELD: parent_hero_id}

    def _send(self, operation: str, endpoint: str, auth: requests.auth.AuthBase,
              data: Optional[Dict[str, str]] = None) -> requests.Response:
        """Send one POST and return the response if its status is 200."""
        url = self._build_url(endpoint)
        try:
            response = self.post(endpoint, data=data, auth=auth)
        except requests.RequestException as e:
            raise TransportError(operation, e, url) from e

        if response.status_code != NetworkConstants.HTTP_OK:
            raise self._status_error(operation, response)
        return response

    def _status_error(self, operation: str,
                      response: requests.Response) -> UnexpectedStatusError:
        body = response.text if response.content else None
        if operation == "login" and response.status_code in (
            NetworkConstants.HTTP_UNAUTHORIZED, NetworkConstants.HTTP_FORBIDDEN
        ):
            return AuthenticationError(operation, response.status_code, response.url, body)
        return UnexpectedStatusError(operation, response.status_code, response.url, body)
