"""Core request, response and pagination contracts."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Any, Dict, Generic, List, Optional, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .constants import JSON_CONTENT_TYPE
from .errors import CredentialError
from .utils.timestamps import format_timestamp

T = TypeVar("T")

HTTP_METHODS = frozenset({"GET", "POST", "PATCH", "DELETE", "PUT"})


@dataclass(frozen=True)
class Credential:
    """Access key / secret key pair identifying the caller.

    The secret key is only ever used as an HMAC key and is kept out of
    ``repr`` so it does not leak into logs or tracebacks.
    """

    access_key: str
    secret_key: str = field(repr=False)

    def __post_init__(self) -> None:
        if not self.access_key:
            raise CredentialError("Cannot create credential, access key missing.")
        if not self.secret_key:
            raise CredentialError("Cannot create credential, secret key missing.")


def render_param(value: Any) -> str:
    """Render a query parameter value the way the API expects to read it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (datetime, date)):
        return format_timestamp(value)
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class RequestDescriptor(BaseModel):
    """Everything needed to sign and send one API call.

    ``query_params`` accepts a mapping or a sequence of pairs; ``None`` values
    are dropped so optional parameters can be passed straight through.
    """

    model_config = ConfigDict(frozen=True)

    method: str = "GET"
    path: str
    query_params: List[Tuple[str, str]] = Field(default_factory=list)
    body: bytes = b""
    content_type: Optional[str] = None

    @field_validator("method", mode="before")
    @classmethod
    def _normalize_method(cls, value: Any) -> str:
        method = (value or "GET").upper()
        if method not in HTTP_METHODS:
            raise ValueError(f"Unsupported HTTP method: {value}")
        return method

    @field_validator("query_params", mode="before")
    @classmethod
    def _normalize_params(cls, value: Any) -> List[Tuple[str, str]]:
        if value is None:
            return []
        items = value.items() if isinstance(value, Mapping) else value
        return [
            (str(key), render_param(val)) for key, val in items if val is not None
        ]

    @classmethod
    def build(
        cls,
        method: str,
        path: str,
        params: Any = None,
        json_body: Any = None,
    ) -> "RequestDescriptor":
        """Create a descriptor, encoding ``json_body`` as compact UTF-8 JSON."""
        if json_body is None:
            return cls(method=method, path=path, query_params=params)
        body = json.dumps(json_body, separators=(",", ":"), ensure_ascii=False)
        return cls(
            method=method,
            path=path,
            query_params=params,
            body=body.encode("utf-8"),
            content_type=JSON_CONTENT_TYPE,
        )


class SignedRequest(BaseModel):
    """A descriptor plus the signing headers attached right before dispatch."""

    model_config = ConfigDict(frozen=True)

    descriptor: RequestDescriptor
    headers: Dict[str, str]
    timestamp: str


class RawResponse(BaseModel):
    """Transport-level response as returned before classification."""

    status_code: int
    headers: Dict[str, str] = Field(default_factory=dict)
    body: bytes = b""

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON; an empty body decodes to ``None``."""
        if not self.body.strip():
            return None
        return json.loads(self.body)


class PageCursor(BaseModel):
    """Window and page budget driving one pagination loop.

    ``remaining_pages`` of ``None`` means unbounded.
    """

    model_config = ConfigDict(frozen=True)

    window_start: Optional[str] = None
    window_end: Optional[str] = None
    remaining_pages: Optional[int] = None

    @classmethod
    def create(
        cls,
        start: datetime | str | None = None,
        end: datetime | str | None = None,
        page_limit: Optional[int] = 0,
    ) -> "PageCursor":
        """Build a cursor; a ``page_limit`` of ``0`` or ``None`` is unbounded."""
        if page_limit is not None and page_limit < 0:
            raise ValueError("page_limit must be zero (unbounded) or positive")
        return cls(
            window_start=render_param(start) if start is not None else None,
            window_end=render_param(end) if end is not None else None,
            remaining_pages=page_limit or None,
        )

    @property
    def exhausted(self) -> bool:
        return self.remaining_pages == 0

    def advance(self, cutoff: Optional[str]) -> "PageCursor":
        """Return the cursor for the next page, starting at ``cutoff``."""
        remaining = self.remaining_pages
        if remaining is not None:
            remaining -= 1
        return self.model_copy(
            update={"window_start": cutoff, "remaining_pages": remaining}
        )


class PageResult(BaseModel, Generic[T]):
    """One page of a time-ordered collection."""

    items: List[T] = Field(default_factory=list)
    has_more: bool = False
    cutoff: Optional[str] = None
