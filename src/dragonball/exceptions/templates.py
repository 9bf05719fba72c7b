"""
Standardized error message templates and error codes.

Keeps the wording of DragonBall errors consistent so users get clear,
actionable messages whichever operation failed.
"""

from typing import List


class ErrorMessageTemplates:
    """Standardized error message templates for consistent formatting."""

    # Network error templates
    TRANSPORT_FAILED = "Request {operation} failed: transport error - {details}"
    DECODING_FAILED = "Request {operation} failed: could not decode response - {details}"
    UNEXPECTED_STATUS = "Request {operation} failed: unexpected HTTP status {status_code}"
    AUTH_FAILED = "Request {operation} failed: authentication rejected (HTTP {status_code})"

    # Configuration error templates
    CONFIG_INVALID = "Invalid configuration for '{field}': got {value}, expected {expected}"
    CONFIG_VALIDATION = "Configuration validation failed:"


class RecoverySuggestions:
    """Standard recovery suggestions for common error scenarios."""

    @staticmethod
    def for_auth_error() -> List[str]:
        """Get recovery suggestions for authentication errors."""
        return [
            "Verify your username and password are correct",
            "Log in again to obtain a fresh token",
        ]

    @staticmethod
    def for_transport_error() -> List[str]:
        """Get recovery suggestions for connection errors."""
        return [
            "Check your internet connection",
            "Verify the service base URL in your configuration",
            "Check firewall and proxy settings",
        ]

    @staticmethod
    def for_decoding_error() -> List[str]:
        """Get recovery suggestions for malformed responses."""
        return [
            "The service returned data in an unexpected format",
            "Verify the base URL points at the Dragon Ball heroes API",
        ]

    @staticmethod
    def for_status_error(status_code: int) -> List[str]:
        """Get recovery suggestions for unexpected HTTP statuses."""
        if status_code >= 500:
            return ["The service reported a server error, try again later"]
        return ["Check the request parameters and your token"]


class ErrorCodes:
    """Standardized error codes for consistent error categorization."""

    # Configuration errors (CONFIG_xxx)
    CONFIG_INVALID = "CONFIG_001"
    CONFIG_VALIDATION_ERROR = "CONFIG_002"

    # Network errors (NETWORK_xxx)
    NETWORK_TRANSPORT_FAILED = "NETWORK_001"
    NETWORK_DECODING_FAILED = "NETWORK_002"
    NETWORK_UNEXPECTED_STATUS = "NETWORK_003"
    NETWORK_AUTH_FAILED = "NETWORK_004"
