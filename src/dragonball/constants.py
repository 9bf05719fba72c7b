"""
Application constants.

This module centralizes the service URLs, endpoints and HTTP values used by
the client so they are not scattered through the code.
"""


class ApiConstants:
    """Dragon Ball heroes service constants."""

    BASE_URL = 'https://dragonball.keepcoding.education'

    # Endpoints (relative to BASE_URL); login posts to the service root
    LOGIN_ENDPOINT = ''
    HEROES_ENDPOINT = '/api/heros/all'
    TRANSFORMATIONS_ENDPOINT = '/api/heros/tranformations'

    # Form field carrying the parent hero id
    PARENT_HERO_FIELD = 'id'


class NetworkConstants:
    """Constants for network operations."""

    DEFAULT_REQUEST_TIMEOUT = 30
    MIN_REQUEST_TIMEOUT = 1
    MAX_REQUEST_TIMEOUT = 300

    # HTTP Status Codes
    HTTP_OK = 200
    HTTP_UNAUTHORIZED = 401
    HTTP_FORBIDDEN = 403

    TOKEN_ENCODING = 'utf-8'


class LoggingConstants:
    """Constants for logging configuration."""

    DEFAULT_LOG_FILE = 'logs/dragonball.log'
    DEFAULT_LOG_FILE_SIZE_BYTES = 10 * 1024 * 1024  # 10MB
    MIN_LOG_FILE_SIZE_BYTES = 1024
    DEFAULT_LOG_BACKUP_COUNT = 5
    SERVICE_NAME = 'dragonball'
