"""Reservations, external reservation sync and walk-ins."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from ..contracts import RequestDescriptor
from ..models import ExternalReservation, NewReservation, ReservationUpdate, WalkIn
from .base import Resource


class ReservationsResource(Resource):
    async def arrive_reservation(self, site_uid: str, visit_id: str) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build("POST", f"/Site/{site_uid}/reservations/{visit_id}/Arrive")
        )

    async def get_availability(
        self, site_uid: str, target_date: date | datetime, party_size: int
    ) -> Any:
        """Availability per calendar day for the business date and party size."""
        return await self._client.request(
            RequestDescriptor.build(
                "GET",
                f"/Site/{site_uid}/reservations/availability",
                {"date": target_date, "partySize": int(party_size)},
            )
        )

    async def get_by_confirmation(self, site_uid: str, confirmation_number: str) -> Any:
        return await self._client.request(
            RequestDescriptor.build(
                "GET", f"/site/{site_uid}/reservations", {"conf": confirmation_number}
            )
        )

    async def add_reservation(self, site_uid: str, reservation: NewReservation) -> Any:
        """Book a reservation for the given date and time; returns the visit."""
        return await self._client.request(
            RequestDescriptor.build(
                "POST", f"/site/{site_uid}/reservations", json_body=reservation.to_wire()
            )
        )

    async def update_reservation(
        self, site_uid: str, visit_id: str, update: ReservationUpdate
    ) -> bool:
        return await self._client.request_ok(
            RequestDescriptor.build(
                "PATCH", f"/site/{site_uid}/reservations/{visit_id}", json_body=update.to_wire()
            )
        )

    async def remove_reservation(self, site_uid: str, visit_id: str) -> bool:
        """Cancel a reservation visit."""
        return await self._client.request_ok(
            RequestDescriptor.build("DELETE", f"/site/{site_uid}/reservations/{visit_id}")
        )

    async def sync_external_reservation(
        self, site_uid: str, external_id: str, reservation: ExternalReservation
    ) -> bool:
        """Create or update a reservation owned by another system.

        Sync bypasses the availability check.
        """
        return await self._client.request_ok(
            RequestDescriptor.build(
                "PUT",
                f"/site/{site_uid}/externalreservations/{external_id}",
                json_body=reservation.to_wire(),
            )
        )

    async def add_walk_in(self, site_uid: str, walk_in: WalkIn) -> Any:
        """Add an arrived walk-in; returns the visit record."""
        return await self._client.request(
            RequestDescriptor.build("POST", f"/Site/{site_uid}/WalkIn", json_body=walk_in.to_wire())
        )
