"""Error taxonomy and response classification for DineTime API calls."""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, Any, Dict, Optional, Type

if TYPE_CHECKING:
    from .contracts import RawResponse

logger = logging.getLogger(__name__)


class ErrorKind(str, Enum):
    """Closed set of failure kinds a non-2xx response is mapped to."""

    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    GONE = "gone"
    SERVER_ERROR = "server_error"
    UNKNOWN = "unknown"


class DineTimeError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(DineTimeError, ValueError):
    """Raised when required settings such as the company UID are missing."""


class CredentialError(ConfigurationError):
    """Raised when an access key or secret key is missing."""


class MalformedResponseError(DineTimeError):
    """Raised when a page lacks the fields needed to continue pagination."""

    def __init__(self, message: str, data: Any = None) -> None:
        super().__init__(message)
        self.data = data


class PageCeilingExceededError(DineTimeError):
    """Raised when the configured page ceiling is hit while more data remains."""

    def __init__(self, ceiling: int, cutoff: Optional[str] = None) -> None:
        super().__init__(
            f"Pagination stopped after {ceiling} pages with more data pending"
            + (f" (cutoff={cutoff})" if cutoff else "")
        )
        self.ceiling = ceiling
        self.cutoff = cutoff


class ApiError(DineTimeError):
    """A non-2xx response from the API."""

    kind: ErrorKind = ErrorKind.UNKNOWN
    reason: str = "Unexpected API response"

    def __init__(self, status_code: int, body: bytes = b"", path: str = "") -> None:
        super().__init__(f"{self.reason} (HTTP {status_code}{' ' + path if path else ''})")
        self.status_code = status_code
        self.body = body
        self.path = path


class UnauthorizedError(ApiError):
    kind = ErrorKind.UNAUTHORIZED
    reason = "Not authorized"


class NotFoundError(ApiError):
    kind = ErrorKind.NOT_FOUND
    reason = "The visit was not found"


class ConflictError(ApiError):
    """The visit has already arrived or been seated."""

    kind = ErrorKind.CONFLICT
    reason = "The visit has already arrived or been seated"


class GoneError(ApiError):
    """The WebAhead is no longer active."""

    kind = ErrorKind.GONE
    reason = "The WebAhead is no longer considered active"


class ServerError(ApiError):
    kind = ErrorKind.SERVER_ERROR
    reason = "API server error"


class UnknownApiError(ApiError):
    kind = ErrorKind.UNKNOWN


_STATUS_ERRORS: Dict[int, Type[ApiError]] = {
    401: UnauthorizedError,
    403: UnauthorizedError,
    404: NotFoundError,
    405: ConflictError,
    410: GoneError,
    500: ServerError,
}


def error_for_status(status_code: int) -> Type[ApiError]:
    """Return the exception class for a non-2xx ``status_code``."""
    return _STATUS_ERRORS.get(status_code, UnknownApiError)


def classify_response(response: "RawResponse", path: str = "") -> bytes:
    """Return the raw body of a 2xx response, raise the mapped error otherwise.

    The body is passed through unchanged so the caller decides how to
    interpret it. Nothing is retried here.
    """
    if 200 <= response.status_code < 300:
        return response.body

    error_cls = error_for_status(response.status_code)
    if error_cls is UnknownApiError:
        logger.warning(
            f"DineTime API returned unexpected status {response.status_code} for {path or 'request'}"
        )
    else:
        logger.warning(f"DineTime API error: {error_cls.reason} ({path or 'request'})")
    raise error_cls(response.status_code, response.body, path)


__all__ = [
    "ApiError",
    "ConfigurationError",
    "ConflictError",
    "CredentialError",
    "DineTimeError",
    "ErrorKind",
    "GoneError",
    "MalformedResponseError",
    "NotFoundError",
    "PageCeilingExceededError",
    "ServerError",
    "UnauthorizedError",
    "UnknownApiError",
    "classify_response",
    "error_for_status",
]
