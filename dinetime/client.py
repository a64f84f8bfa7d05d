"""Client entry point for the DineTime Enterprise API."""

from __future__ import annotations

import asyncio
import json
import logging
from datetime import datetime
from typing import Any, AsyncIterator, Dict, List, Optional

from .config import DineTimeConfig, load_config
from .contracts import Credential, PageCursor, PageResult, RawResponse, RequestDescriptor
from .errors import ConfigurationError, classify_response
from .pagination import CollectionSpec, FetchPage, fetch_all, iter_pages, paginate
from .resources import (
    GuestsResource,
    ReservationsResource,
    SitesResource,
    TablesResource,
    TeamMembersResource,
    VisitsResource,
    WaitListResource,
)
from .security.transport import Clock, SigningTransport
from .transports import BaseTransport, get_transport
from .utils.timestamps import format_timestamp, utcnow

logger = logging.getLogger(__name__)


class DineTimeClient:
    """Signed, classified access to the DineTime Enterprise API.

    Every call goes through one :class:`SigningTransport`. Resource groups
    (``sites``, ``tables``, ``visits`` ...) only describe requests; signing,
    error classification and pagination live here.
    """

    def __init__(
        self,
        company_uid: Optional[str] = None,
        credential: Optional[Credential] = None,
        *,
        transport: Optional[BaseTransport] = None,
        config: Optional[DineTimeConfig] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        config = config or load_config()
        self.company_uid = company_uid or config.company_uid
        if not self.company_uid:
            raise ConfigurationError("Cannot create client, company UID missing.")

        credential = credential or config.credentials.to_credential()
        transport = transport or get_transport(config=config)
        self._clock = clock or utcnow
        self._signing = SigningTransport(credential, transport, clock=self._clock)
        self.page_ceiling = config.pagination.page_ceiling

        self.sites = SitesResource(self)
        self.team_members = TeamMembersResource(self)
        self.tables = TablesResource(self)
        self.reservations = ReservationsResource(self)
        self.waitlist = WaitListResource(self)
        self.guests = GuestsResource(self)
        self.visits = VisitsResource(self)

    @property
    def transport(self) -> BaseTransport:
        return self._signing.transport

    async def __aenter__(self) -> "DineTimeClient":
        await self.transport.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def close(self) -> None:
        await self._signing.close()

    def timestamp(self) -> str:
        """Current time from the client clock in wire format."""
        return format_timestamp(self._clock())

    # ------------------------------------------------------------------
    # Request helpers
    async def send(self, descriptor: RequestDescriptor) -> RawResponse:
        """Sign and send ``descriptor``; non-2xx responses raise ``ApiError``."""
        response = await self._signing.send(descriptor)
        classify_response(response, descriptor.path)
        return response

    async def request(self, descriptor: RequestDescriptor) -> Any:
        """Send ``descriptor`` and decode the body (JSON when possible)."""
        response = await self.send(descriptor)
        if not response.body.strip():
            return None
        try:
            return json.loads(response.body)
        except ValueError:
            return response.body.decode("utf-8", errors="replace")

    async def request_ok(self, descriptor: RequestDescriptor) -> bool:
        """Send ``descriptor`` and report whether the API answered ``200``."""
        response = await self.send(descriptor)
        return response.status_code == 200

    # ------------------------------------------------------------------
    # Pagination helpers
    def page_fetcher(
        self,
        spec: CollectionSpec,
        path: str,
        params: Optional[Dict[str, Any]] = None,
    ) -> FetchPage[Any]:
        """Return a fetcher requesting ``path`` with the cursor's window."""

        async def fetch(cursor: PageCursor) -> PageResult[Any]:
            query = dict(params or {})
            query.update(spec.params(cursor))
            data = await self.request(RequestDescriptor.build("GET", path, query))
            return spec.parse_page(data)

        return fetch

    async def get_page(
        self,
        spec: CollectionSpec,
        path: str,
        cursor: PageCursor,
        params: Optional[Dict[str, Any]] = None,
    ) -> PageResult[Any]:
        return await self.page_fetcher(spec, path, params)(cursor)

    def iter_pages(
        self,
        spec: CollectionSpec,
        path: str,
        cursor: PageCursor,
        params: Optional[Dict[str, Any]] = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> AsyncIterator[PageResult[Any]]:
        return iter_pages(
            self.page_fetcher(spec, path, params),
            cursor,
            page_ceiling=self.page_ceiling,
            cancel_event=cancel_event,
        )

    def iter_items(
        self,
        spec: CollectionSpec,
        path: str,
        cursor: PageCursor,
        params: Optional[Dict[str, Any]] = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> AsyncIterator[Any]:
        return paginate(
            self.page_fetcher(spec, path, params),
            cursor,
            page_ceiling=self.page_ceiling,
            cancel_event=cancel_event,
        )

    async def get_all(
        self,
        spec: CollectionSpec,
        path: str,
        start: datetime | str | None,
        end: datetime | str | None = None,
        num_pages: int = 0,
        params: Optional[Dict[str, Any]] = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> List[Any]:
        """Walk a collection from ``start`` and return every item.

        ``num_pages`` of ``0`` fetches until the server reports no more data.
        """
        cursor = PageCursor.create(start, end, num_pages)
        items = await fetch_all(
            self.page_fetcher(spec, path, params),
            cursor,
            page_ceiling=self.page_ceiling,
            cancel_event=cancel_event,
        )
        logger.info(f"Fetched {len(items)} records from {path}")
        return items
