"""Tables, table status, history and events."""

from __future__ import annotations

from datetime import datetime
from typing import Any, List

from ..contracts import PageCursor, PageResult, RequestDescriptor
from ..models import TableEvent
from ..pagination import TABLE_EVENTS, TABLE_HISTORY
from .base import Resource


class TablesResource(Resource):
    async def get_tables(self, site_uid: str) -> Any:
        return await self._client.request(
            RequestDescriptor.build("GET", f"/Site/{site_uid}/Tables")
        )

    async def get_table_status(
        self, site_uid: str, start_time: datetime, end_time: datetime
    ) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "GET",
                f"/Site/{site_uid}/Tables/Status",
                {"startTime": start_time, "endTime": end_time},
            )
        )

    async def get_table_history(
        self, site_uid: str, start_time: datetime, end_time: datetime
    ) -> PageResult[Any]:
        """One page (up to 100) of table history updates."""
        return await self._client.get_page(
            TABLE_HISTORY,
            f"/Site/{site_uid}/Tables/History",
            PageCursor.create(start_time, end_time),
        )

    async def get_all_table_history(
        self,
        site_uid: str,
        start_time: datetime,
        end_time: datetime,
        num_pages: int = 0,
    ) -> List[Any]:
        return await self._client.get_all(
            TABLE_HISTORY, f"/Site/{site_uid}/Tables/History", start_time, end_time, num_pages
        )

    async def get_table_events(
        self, site_uid: str, start_time: datetime, end_time: datetime
    ) -> PageResult[Any]:
        """One page (up to 100) of table events."""
        return await self._client.get_page(
            TABLE_EVENTS,
            f"/Site/{site_uid}/Tables/Events",
            PageCursor.create(start_time, end_time),
        )

    async def get_all_table_events(
        self,
        site_uid: str,
        start_time: datetime,
        end_time: datetime,
        num_pages: int = 0,
    ) -> List[Any]:
        return await self._client.get_all(
            TABLE_EVENTS, f"/Site/{site_uid}/Tables/Events", start_time, end_time, num_pages
        )

    async def add_table_event(self, site_uid: str, event: TableEvent) -> bool:
        """Raise a table event for a table at the site."""
        return await self._client.request_ok(
            RequestDescriptor.build(
                "POST", f"/Site/{site_uid}/Visit/TableEvent", json_body=event.to_wire()
            )
        )
