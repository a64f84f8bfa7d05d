"""DineTime: signed async client for the QSR DineTime Enterprise API."""

from .client import DineTimeClient
from .config import DineTimeConfig, load_config
from .contracts import Credential, PageCursor, PageResult, RawResponse, RequestDescriptor, SignedRequest
from .errors import (
    ApiError,
    ConfigurationError,
    ConflictError,
    CredentialError,
    DineTimeError,
    ErrorKind,
    GoneError,
    MalformedResponseError,
    NotFoundError,
    PageCeilingExceededError,
    ServerError,
    UnauthorizedError,
    UnknownApiError,
    classify_response,
)
from .pagination import CollectionSpec, fetch_all, fetch_page, iter_pages, paginate
from .persistence import get_repository
from .security import SigningTransport
from .transports import get_transport

__version__ = "0.1.0"
__all__ = [
    "DineTimeClient",
    "DineTimeConfig",
    "load_config",
    "Credential",
    "RequestDescriptor",
    "SignedRequest",
    "RawResponse",
    "PageCursor",
    "PageResult",
    "SigningTransport",
    "CollectionSpec",
    "iter_pages",
    "paginate",
    "fetch_all",
    "fetch_page",
    "classify_response",
    "ErrorKind",
    "DineTimeError",
    "ConfigurationError",
    "CredentialError",
    "MalformedResponseError",
    "PageCeilingExceededError",
    "ApiError",
    "UnauthorizedError",
    "NotFoundError",
    "ConflictError",
    "GoneError",
    "ServerError",
    "UnknownApiError",
    "get_transport",
    "get_repository",
]
