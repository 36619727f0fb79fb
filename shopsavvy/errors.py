"""
Error taxonomy for the ShopSavvy Data API client.

Every failure surfaced by the client is a ShopSavvyError subclass:
- credential problems are raised before any request is made
- HTTP failures carry the status code of the response
- transport and decoding failures wrap the underlying exception (``raise ... from``)
"""

from __future__ import annotations

import json
import logging
from typing import Dict, Optional, Type

logger = logging.getLogger(__name__)


class ShopSavvyError(Exception):
    """Base class for every error raised by the SDK."""

    prefix = "ShopSavvy error"

    def __init__(self, message: str, *, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.prefix}: {self.message}"


class MissingApiKeyError(ShopSavvyError):
    def __init__(self) -> None:
        super().__init__("API key is required. Get one at https://shopsavvy.com/data")

    def __str__(self) -> str:
        return self.message


class InvalidApiKeyError(ShopSavvyError):
    def __init__(self) -> None:
        super().__init__("Invalid API key format. API keys should start with ss_live_ or ss_test_")

    def __str__(self) -> str:
        return self.message


class ConfigError(ShopSavvyError):
    prefix = "Configuration error"


class HTTPStatusError(ShopSavvyError):
    """Non-2xx response. ``upstream_message`` keeps what the server actually said."""

    default_message: Optional[str] = None

    def __init__(self, message: str, *, status_code: int, upstream_message: Optional[str] = None) -> None:
        super().__init__(message, status_code=status_code)
        self.upstream_message = upstream_message if upstream_message is not None else message


class AuthenticationError(HTTPStatusError):
    prefix = "Authentication failed"
    default_message = "Authentication failed. Check your API key."


class NotFoundError(HTTPStatusError):
    prefix = "Resource not found"
    default_message = "Resource not found"


class ValidationError(HTTPStatusError):
    prefix = "Validation error"
    default_message = "Request validation failed. Check your parameters."


class RateLimitError(HTTPStatusError):
    prefix = "Rate limit exceeded"
    default_message = "Rate limit exceeded. Please slow down your requests."


class APIError(HTTPStatusError):
    def __str__(self) -> str:
        return f"API error ({self.status_code}): {self.message}"


class NetworkError(ShopSavvyError):
    prefix = "Network error"


class RequestTimeoutError(NetworkError):
    def __init__(self, message: str = "Request timeout") -> None:
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


class JSONError(ShopSavvyError):
    prefix = "JSON serialization error"


_STATUS_ERRORS: Dict[int, Type[HTTPStatusError]] = {
    401: AuthenticationError,
    404: NotFoundError,
    422: ValidationError,
    429: RateLimitError,
}


def error_from_status(status_code: int, message: str) -> HTTPStatusError:
    """
    Map an HTTP status to its error type.

    401/404/422/429 get the SDK's own fixed message; anything else is an
    APIError carrying the upstream message verbatim.
    """
    error_type = _STATUS_ERRORS.get(status_code)
    if error_type is None:
        return APIError(message, status_code=status_code)
    return error_type(error_type.default_message, status_code=status_code, upstream_message=message)


def extract_error_message(body: str) -> str:
    """Return the ``error`` string of a JSON error body, or the raw body text."""
    try:
        payload = json.loads(body)
    except ValueError:
        return body
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"]
    logger.debug("Error body has no string 'error' field; using raw text")
    return body
