"""Request payload models for resource operations.

Optional fields default to ``None`` and are left off the wire entirely;
explicit values, including ``False`` and ``0``, are always sent.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Dict, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_pascal

from .utils.timestamps import format_timestamp

Timestamp = Annotated[datetime, PlainSerializer(format_timestamp, return_type=str)]

NotificationType = Literal["None", "Call", "SMS", "Pager"]

TableEventType = Literal[
    "CheckPaid",
    "TableScanned",
    "CheckPartialPayment",
    "CourseComplete",
    "CheckPrinted",
    "ItemsOrdered",
    "TableOpened",
    "TableCleared",
    "TableDirtied",
]


class WireModel(BaseModel):
    """Base for payloads; field names map to PascalCase on the wire."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="forbid",
    )

    def to_wire(self) -> Dict[str, Any]:
        """Serialize present fields only, using wire names."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class MarketingPreferences(WireModel):
    is_subscribed_to_sms_marketing: Optional[bool] = None
    is_subscribed_to_email_marketing: Optional[bool] = None
    is_subscribed_to_qsr_marketing: Optional[bool] = None


class TableEvent(WireModel):
    """A table event raised from a point-of-sale or table scanner."""

    event_type: TableEventType
    table_name: str
    timestamp_utc: Timestamp
    transaction_number: Optional[int] = None
    check_amount: Optional[float] = None
    id: Optional[str] = Field(default=None, alias="ID")


class NewReservation(MarketingPreferences):
    estimated_arrival_time: Timestamp
    party_size: int
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    guest_id: Optional[str] = None
    notes: Optional[str] = None
    pager_id: Optional[str] = None
    phone_number: Optional[str] = None
    phone_number_string: Optional[str] = None
    seating_area_uid: Optional[str] = Field(default=None, alias="SeatingAreaUID")
    notification_type: Optional[NotificationType] = None


class ReservationUpdate(WireModel):
    estimated_arrival_time: Optional[Timestamp] = None
    party_size: Optional[int] = None
    notes: Optional[str] = None
    pager_id: Optional[str] = None
    phone_number: Optional[str] = None
    notification_type: Optional[NotificationType] = None
    food_allergies: Optional[str] = None


class ExternalReservation(WireModel):
    """Reservation owned by a third-party system.

    Arrival time, guest and size are required when the reservation is new to
    DineTime and optional when it already exists.
    """

    estimated_arrival_time: Optional[Timestamp] = None
    party_size: Optional[int] = None
    guest: Optional[Dict[str, Any]] = None
    size: Optional[int] = None
    canceled_time: Optional[Timestamp] = None
    custom_values: Optional[List[Dict[str, Any]]] = None
    notes: Optional[str] = None
    party_mix: Optional[Dict[str, Any]] = None
    sync_source: Optional[str] = None


class WalkIn(WireModel):
    """An arrived walk-in party.

    ``guest`` is either a full guest record or a guest ID / loyalty card ID.
    """

    party_size: int
    arrival_time: Optional[Timestamp] = None
    external_id: Optional[str] = Field(default=None, alias="ExternalID")
    guest: Optional[Union[Dict[str, Any], str]] = None
    notes: Optional[str] = None


class WebAheadUpdate(MarketingPreferences):
    party_size: Optional[int] = None
    phone_number_string: Optional[str] = None
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    email: Optional[str] = None
    guest_id: Optional[str] = Field(default=None, alias="GuestID")
    estimated_arrival_time: Optional[Timestamp] = None
    expand_guest: Optional[bool] = None
    notes: Optional[str] = None
    notification_type: Optional[NotificationType] = None


class NewWebAhead(WebAheadUpdate):
    """Wait-list entry; ``last_name`` may be omitted when ``guest_id`` is set."""

    party_size: int
    phone_number_string: str


class GuestRecord(MarketingPreferences):
    last_name: Optional[str] = None
    first_name: Optional[str] = None
    email: Optional[str] = None
    notes: Optional[str] = None
    is_anonymous: Optional[bool] = None
    loyalty: Optional[Dict[str, Any]] = None
    phone_numbers: Optional[List[Dict[str, Any]]] = None
    addresses: Optional[List[Dict[str, Any]]] = None
    custom_values: Optional[List[Dict[str, Any]]] = None


class GuestSearch(WireModel):
    """Guestbook filters; results are paged and ordered by last name."""

    guest_id: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    loyalty_card_id: Optional[str] = Field(default=None, alias="LoyaltyCardID")
    email: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    postal_code: Optional[str] = None
    mobile_phone_number: Optional[str] = None
    guests_per_page: Optional[int] = None
    page_number: Optional[int] = None


class VisitProximity(WireModel):
    source: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    distance: Optional[float] = None
