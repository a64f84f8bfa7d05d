"""Wait list (WebAhead) entries, status and quotes.

A WebAhead is active while it is NotYetArrived, Waiting, PartiallyArrived or
Notified. Updates, cancels and arrivals only succeed on active entries; the
API answers 410 for inactive ones.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..contracts import RequestDescriptor
from ..models import NewWebAhead, WebAheadUpdate
from .base import Resource


def _numbered(prefix: str, values: Sequence[Any]) -> Dict[str, Any]:
    return {f"{prefix}{i}": value for i, value in enumerate(values, start=1)}


class WaitListResource(Resource):
    async def add_web_ahead(self, site_uid: str, entry: NewWebAhead) -> bool:
        """Add a party to the wait list."""
        return await self._client.request_ok(
            RequestDescriptor.build("POST", f"/Site/{site_uid}/WebAhead", json_body=entry.to_wire())
        )

    async def get_status(self, site_uid: str, party_size: int) -> Any:
        """Wait list status and quote for one party size."""
        return await self._client.request(
            RequestDescriptor.build(
                "GET", f"/Site/{site_uid}/WebAhead/Status", {"PartySize": int(party_size)}
            )
        )

    async def get_status_for_party_sizes(
        self, site_uid: str, party_sizes: Sequence[int]
    ) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "GET",
                f"/Site/{site_uid}/WebAhead/StatusforPartySize",
                _numbered("PartySize", [int(size) for size in party_sizes]),
            )
        )

    async def get_status_for_sites(
        self, site_uids: Sequence[str], party_sizes: Sequence[int]
    ) -> Any:
        params = _numbered("SiteUID", list(site_uids))
        params.update(_numbered("PartySize", [int(size) for size in party_sizes]))
        return await self._client.request(
            RequestDescriptor.build("GET", "/Site/WebAhead/Status", params)
        )

    async def get_web_ahead(
        self,
        site_uid: str,
        visit_id: str,
        expand: Optional[str] = None,
        ignore_status_for_current_business_day: Optional[bool] = None,
        include_updated_quote: Optional[bool] = None,
    ) -> Any:
        """Get a WebAhead; only active entries are returned by default."""
        return await self._client.request(
            RequestDescriptor.build(
                "GET",
                f"/Site/{site_uid}/WebAhead/{visit_id}",
                {
                    "expand": expand,
                    "ignoreStatusForCurrentBusinessDay": ignore_status_for_current_business_day,
                    "includeUpdatedQuote": include_updated_quote,
                },
            )
        )

    async def get_by_confirmation(
        self,
        confirmation_number: str,
        ignore_status_for_current_business_day: Optional[bool] = None,
    ) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "GET",
                f"/WebAhead/{confirmation_number}",
                {"ignoreStatusForCurrentBusinessDay": ignore_status_for_current_business_day},
            )
        )

    async def get_by_confirmation_id(
        self,
        confirmation_number_id: str,
        ignore_status_for_current_business_day: Optional[bool] = None,
    ) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "GET",
                "/WebAhead",
                {
                    "ConfirmationNumberId": confirmation_number_id,
                    "ignoreStatusForCurrentBusinessDay": ignore_status_for_current_business_day,
                },
            )
        )

    async def update_web_ahead(self, site_uid: str, visit_id: str, update: WebAheadUpdate) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "PATCH", f"/Site/{site_uid}/WebAhead/{visit_id}", json_body=update.to_wire()
            )
        )

    async def update_by_confirmation(self, confirmation_number: str, update: WebAheadUpdate) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "PATCH", f"/WebAhead/{confirmation_number}", json_body=update.to_wire()
            )
        )

    async def update_by_confirmation_id(
        self, confirmation_number_id: str, update: WebAheadUpdate
    ) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "PATCH",
                "/WebAhead",
                {"ConfirmationNumberID": confirmation_number_id},
                json_body=update.to_wire(),
            )
        )

    async def cancel_web_ahead(
        self, site_uid: str, visit_id: str, check_arrival_status: Optional[bool] = None
    ) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build(
                "POST",
                f"/Site/{site_uid}/WebAhead/{visit_id}/cancel",
                {"checkVisitArrivalStatus": check_arrival_status},
            )
        )

    async def cancel_by_confirmation(
        self, confirmation_number: str, check_arrival_status: Optional[bool] = None
    ) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build(
                "POST",
                f"/WebAhead/{confirmation_number}/cancel",
                {"checkVisitArrivalStatus": check_arrival_status},
            )
        )

    async def cancel_by_confirmation_id(
        self, confirmation_number_id: str, check_arrival_status: Optional[bool] = None
    ) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build(
                "POST",
                "/WebAhead/Cancel",
                {
                    "confirmationNumberId": confirmation_number_id,
                    "checkVisitArrivalStatus": check_arrival_status,
                },
            )
        )

    async def arrive_web_ahead(self, site_uid: str, visit_id: str) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build("POST", f"/Site/{site_uid}/WebAhead/{visit_id}/arrive")
        )

    async def arrive_by_confirmation(self, confirmation_number: str) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build("POST", f"/WebAhead/{confirmation_number}/arrive")
        )

    async def arrive_by_confirmation_id(self, confirmation_number_id: str) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build(
                "POST", "/WebAhead/Arrive", {"confirmationNumberId": confirmation_number_id}
            )
        )

    async def enable(self, site_uid: str) -> bool:
        """Turn WebAhead on for a site."""
        return await self._client.request_ok(
            RequestDescriptor.build("POST", f"/Site/{site_uid}/WebAhead/enable")
        )

    async def disable(self, site_uid: str) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build("POST", f"/Site/{site_uid}/WebAhead/disable")
        )

    async def get_precalculated_quotes(self, site_uid: str, party_size: Optional[int] = None) -> Any:
        """Current quote times for one party size, or all sizes when omitted."""
        return await self._client.request(
            RequestDescriptor.build(
                "GET", f"/Site/{site_uid}/PrecalculatedQuotes", {"PartySize": party_size}
            )
        )
