"""httpx-based transport for talking to the live API."""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from ..constants import DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from ..contracts import RawResponse, SignedRequest
from ..security.canonical import canonical_query_string, encode_path
from .base import BaseTransport

logger = logging.getLogger(__name__)


def request_target(request: SignedRequest) -> str:
    """Path plus query string exactly as they were canonicalized."""
    descriptor = request.descriptor
    query = canonical_query_string(descriptor.query_params)
    return f"{descriptor.path}?{query}" if query else descriptor.path


class HttpxTransport(BaseTransport):
    """Dispatch signed requests with an ``httpx.AsyncClient``."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self._client = client
        self._owns_client = client is None

    async def connect(self) -> None:
        if self._client is None:
            self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout)
            self._owns_client = True

    async def disconnect(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def dispatch(self, request: SignedRequest) -> RawResponse:
        """Send ``request``; network errors from httpx propagate unchanged."""
        if self._client is None:
            await self.connect()

        descriptor = request.descriptor
        headers = dict(request.headers)
        if descriptor.content_type:
            headers["Content-Type"] = descriptor.content_type

        logger.debug(f"Dispatching {descriptor.method} {descriptor.path}")
        response = await self._client.request(
            descriptor.method,
            request_target(request),
            content=descriptor.body or None,
            headers=headers,
        )
        return RawResponse(
            status_code=response.status_code,
            headers=dict(response.headers),
            body=response.content,
        )
