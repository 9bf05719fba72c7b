"""
Response body decoding.

The login endpoint answers with the token as raw text; the list endpoints
answer with JSON arrays of records. Every failure is reported as a
``DecodingError`` naming the operation.
"""

import json
from typing import List, Optional, Type

from pydantic import ValidationError

from dragonball.constants import NetworkConstants
from dragonball.exceptions import DecodingError
from dragonball.models.hero import RecordT, list_adapter


def decode_token(body: bytes, operation: str = "login", url: Optional[str] = None) -> str:
    """Decode an opaque session token from a raw response body."""
    try:
        token = body.decode(NetworkConstants.TOKEN_ENCODING)
    except UnicodeDecodeError as e:
        raise DecodingError(operation, f"token is not valid UTF-8 ({e.reason})", url) from e

    if not token:
        raise DecodingError(operation, "response body is empty, expected a token", url)
    return token


def decode_records(body: bytes, record_type: Type[RecordT], operation: str,
                   url: Optional[str] = None) -> List[RecordT]:
    """Decode a JSON array of ``record_type`` records."""
    try:
        payload = json.loads(body)
    except ValueError as e:
        raise DecodingError(operation, f"invalid JSON ({e})", url) from e

    if not isinstance(payload, list):
        raise DecodingError(
            operation, f"expected a JSON array, got {type(payload).__name__}", url
        )

    try:
        return list_adapter(record_type).validate_python(payload)
    except ValidationError as e:
        raise DecodingError(
            operation,
            f"{e.error_count()} invalid {record_type.__name__} field(s): {e.errors()[0]['msg']}",
            url,
        ) from e
