"""Company guestbook."""

from __future__ import annotations

from typing import Any, List, Optional

from ..contracts import RequestDescriptor
from ..models import GuestRecord, GuestSearch
from .base import Resource


class GuestsResource(Resource):
    async def add_guest(self, guest: GuestRecord, sync_source: Optional[str] = None) -> Any:
        """Create a guest record; ``last_name`` is required."""
        if not guest.last_name:
            raise ValueError("Cannot add guest, last name missing.")
        return await self._client.request(
            RequestDescriptor.build(
                "POST",
                f"/company/{self.company_uid}/GuestBook",
                {"SyncSource": sync_source},
                json_body=guest.to_wire(),
            )
        )

    async def update_guest(
        self, guest_id: str, update: GuestRecord, sync_source: Optional[str] = None
    ) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build(
                "PATCH",
                f"/company/{self.company_uid}/GuestBook/{guest_id}",
                {"SyncSource": sync_source},
                json_body=update.to_wire(),
            )
        )

    async def remove_guest(self, guest_id: str, sync_source: Optional[str] = None) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build(
                "DELETE",
                f"/company/{self.company_uid}/GuestBook/{guest_id}",
                {"SyncSource": sync_source},
            )
        )

    async def search_guestbook(self, search: Optional[GuestSearch] = None) -> List[Any]:
        """Search the guestbook; returns the ``Guests`` of the requested page."""
        search = search or GuestSearch()
        data = await self._client.request(
            RequestDescriptor.build(
                "GET", f"/company/{self.company_uid}/GuestBook", search.to_wire()
            )
        )
        return (data or {}).get("Guests", [])
