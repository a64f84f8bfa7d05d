"""Visits: arrival, proximity, lookups and update polling."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from ..contracts import PageCursor, PageResult, RequestDescriptor
from ..models import VisitProximity
from ..pagination import VISIT_UPDATES
from .base import Resource


class VisitsResource(Resource):
    async def arrive_visit(self, site_uid: str, visit_id: str) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build(
                "POST",
                f"/Site/{site_uid}/Visit/{visit_id}/Arrive",
                {"SiteUID": site_uid, "VisitID": visit_id},
            )
        )

    async def update_proximity(
        self, site_uid: str, visit_id: str, proximity: VisitProximity
    ) -> bool:
        """Report how far a prospective visit is from the site.

        The reading is stamped with the client's clock.
        """
        body = {
            "SiteUID": site_uid,
            "VisitID": visit_id,
            "Timestamp": self._client.timestamp(),
            **proximity.to_wire(),
        }
        return await self._client.request_ok(
            RequestDescriptor.build(
                "PATCH", f"/Site/{site_uid}/Visit/{visit_id}/Proximity", json_body=body
            )
        )

    def _update_params(self, site_uid: str, sync_source: Optional[str]) -> Dict[str, Any]:
        return {"SiteUID": site_uid, "SyncSource": sync_source}

    async def get_visit_updates(
        self,
        site_uid: str,
        start_time: datetime,
        stop_time: datetime,
        sync_source: Optional[str] = None,
    ) -> PageResult[Any]:
        """One page (up to 30) of visit updates, excluding ``sync_source``'s own."""
        return await self._client.get_page(
            VISIT_UPDATES,
            f"/Site/{site_uid}/Visits",
            PageCursor.create(start_time, stop_time),
            self._update_params(site_uid, sync_source),
        )

    async def get_all_visit_updates(
        self,
        site_uid: str,
        start_time: datetime,
        stop_time: datetime,
        sync_source: Optional[str] = None,
        num_pages: int = 0,
    ) -> List[Any]:
        return await self._client.get_all(
            VISIT_UPDATES,
            f"/Site/{site_uid}/Visits",
            start_time,
            stop_time,
            num_pages,
            self._update_params(site_uid, sync_source),
        )

    async def get_by_external_id(self, site_uid: str, external_id: str) -> Any:
        return await self._client.request(
            RequestDescriptor.build("GET", f"/Site/{site_uid}/Visit/ExternalID/{external_id}")
        )

    async def get_visit(self, site_uid: str, visit_id: str) -> Any:
        return await self._client.request(
            RequestDescriptor.build("GET", f"/Site/{site_uid}/Visit/{visit_id}")
        )

    async def _find_open_visit(self, site_uid: str, params: Dict[str, Any]) -> Any:
        return await self._client.request(
            RequestDescriptor.build("GET", f"/Site/{site_uid}/Visit", params)
        )

    async def get_by_loyalty_card(
        self, site_uid: str, loyalty_card_id: str, status: Optional[str] = None
    ) -> Any:
        """Open (not completed, not canceled) visit of a loyalty card holder."""
        return await self._find_open_visit(
            site_uid, {"LoyaltyCard": loyalty_card_id, "status": status}
        )

    async def get_by_phone_number(
        self,
        site_uid: str,
        phone_number: str,
        country_code: str,
        status: Optional[str] = None,
    ) -> Any:
        """Open visit by guest phone number; ``country_code`` is ISO 3166-1 alpha-2."""
        return await self._find_open_visit(
            site_uid,
            {"PhoneNumber": phone_number, "CountryCode": country_code, "status": status},
        )

    async def get_by_pager(self, site_uid: str, pager_id: str, status: Optional[str] = None) -> Any:
        return await self._find_open_visit(site_uid, {"PagerID": pager_id, "status": status})

    async def update_party_mix(
        self, site_uid: str, visit_id: str, party_mix: Dict[str, Any]
    ) -> Any:
        """Replace the party mix; its guest count must equal the party size."""
        return await self._client.request(
            RequestDescriptor.build(
                "POST", f"/Site/{site_uid}/Visit/{visit_id}/PartyMix", json_body=party_mix
            )
        )
