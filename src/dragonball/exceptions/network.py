"""
Network-related exceptions.

Every failure of a client operation surfaces as one of these: the transport
could not complete the exchange, the service answered with a status other
than 200, or the body did not match the expected shape.
"""

from typing import Any, Dict, Optional

from .base import DragonBallError
from .templates import ErrorCodes, ErrorMessageTemplates, RecoverySuggestions


class NetworkError(DragonBallError):
    """Base class for errors raised by client operations.

    Attributes:
        operation: Client operation that failed (``login``, ``heroes_list``, ...)
        url: URL of the request, when one was built
    """

    def __init__(self, operation: str, message: str, url: Optional[str] = None, **details):
        super().__init__(message, **details)
        self.operation = operation
        self.url = url


class TransportError(NetworkError):
    """Raised when the underlying transport fails to complete the request."""

    def __init__(self, operation: str, cause: Exception, url: Optional[str] = None):
        super().__init__(
            operation,
            ErrorMessageTemplates.TRANSPORT_FAILED.format(operation=operation, details=cause),
            url,
            help_text=RecoverySuggestions.for_transport_error()[0],
            error_code=ErrorCodes.NETWORK_TRANSPORT_FAILED,
            technical_details=f"{type(cause).__name__}: {cause}",
        )
        self.cause = cause


class DecodingError(NetworkError):
    """Raised when a response body does not match the expected shape."""

    def __init__(self, operation: str, details: str, url: Optional[str] = None):
        super().__init__(
            operation,
            ErrorMessageTemplates.DECODING_FAILED.format(operation=operation, details=details),
            url,
            help_text=RecoverySuggestions.for_decoding_error()[0],
            error_code=ErrorCodes.NETWORK_DECODING_FAILED,
            technical_details=details,
        )
        self.details = details


class UnexpectedStatusError(NetworkError):
    """Raised when the service answers with a status other than 200."""

    template = ErrorMessageTemplates.UNEXPECTED_STATUS

    def __init__(self, operation: str, status_code: int, url: Optional[str] = None,
                 body: Optional[str] = None):
        super().__init__(
            operation,
            self.template.format(operation=operation, status_code=status_code),
            url,
            **self._details(status_code, body),
        )
        self.status_code = status_code

    def _details(self, status_code: int, body: Optional[str]) -> Dict[str, Any]:
        return {
            "help_text": RecoverySuggestions.for_status_error(status_code)[0],
            "error_code": ErrorCodes.NETWORK_UNEXPECTED_STATUS,
            "technical_details": body[:200] if body else None,
        }


class AuthenticationError(UnexpectedStatusError):
    """Raised when the service rejects the supplied credentials."""

    template = ErrorMessageTemplates.AUTH_FAILED

    REASONS = {
        401: "HTTP 401 Unauthorized - Invalid credentials",
        403: "HTTP 403 Forbidden - Access denied",
    }

    def _details(self, status_code: int, body: Optional[str]) -> Dict[str, Any]:
        return {
            "help_text": RecoverySuggestions.for_auth_error()[0],
            "error_code": ErrorCodes.NETWORK_AUTH_FAILED,
            "user_action": "Run: dragonball login --user <username>",
            "technical_details": self.REASONS.get(status_code),
        }
