"""Request descriptor, timestamp and payload model tests."""

import json
from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from dinetime.contracts import RawResponse, RequestDescriptor, render_param
from dinetime.models import NewReservation, NewWebAhead, TableEvent, WalkIn, WebAheadUpdate
from dinetime.utils import format_timestamp, normalize_timestamp, parse_timestamp


def test_format_timestamp_is_utc_with_milliseconds():
    value = datetime(2024, 1, 2, 3, 4, 5, 678999, tzinfo=timezone.utc)
    assert format_timestamp(value) == "2024-01-02T03:04:05.678Z"


def test_format_timestamp_converts_offsets_and_dates():
    eastern = timezone(timedelta(hours=-5))
    assert format_timestamp(datetime(2024, 1, 1, 19, 0, tzinfo=eastern)) == (
        "2024-01-02T00:00:00.000Z"
    )
    assert format_timestamp(datetime(2024, 1, 1)) == "2024-01-01T00:00:00.000Z"
    assert format_timestamp(date(2024, 6, 30)) == "2024-06-30T00:00:00.000Z"


def test_parse_timestamp_variants():
    expected = datetime(2024, 1, 2, 3, 4, 5, 120000, tzinfo=timezone.utc)
    assert parse_timestamp("2024-01-02T03:04:05.12Z") == expected
    assert parse_timestamp("2024-01-02T03:04:05.1200000") == expected
    assert parse_timestamp("2024-01-02T03:04:05.12+00:00") == expected
    assert normalize_timestamp("2024-01-02T03:04:05Z") == "2024-01-02T03:04:05.000Z"


@pytest.mark.parametrize(
    "value, rendered",
    [
        (True, "true"),
        (False, "false"),
        (0, "0"),
        (4, "4"),
        (2.0, "2"),
        (2.5, "2.5"),
        ("abc", "abc"),
        (datetime(2024, 1, 1, tzinfo=timezone.utc), "2024-01-01T00:00:00.000Z"),
    ],
)
def test_render_param(value, rendered):
    assert render_param(value) == rendered


def test_descriptor_drops_absent_params_but_keeps_falsy_ones():
    descriptor = RequestDescriptor.build(
        "get", "/x", {"a": None, "b": False, "c": 0, "d": ""}
    )
    assert descriptor.method == "GET"
    assert descriptor.query_params == [("b", "false"), ("c", "0"), ("d", "")]


def test_descriptor_json_body_is_compact_utf8():
    descriptor = RequestDescriptor.build("post", "/x", json_body={"Name": "Café", "Size": 2})
    assert descriptor.body == '{"Name":"Café","Size":2}'.encode("utf-8")
    assert descriptor.content_type == "application/json"


def test_descriptor_without_body():
    descriptor = RequestDescriptor.build("DELETE", "/x")
    assert descriptor.body == b""
    assert descriptor.content_type is None
    assert descriptor.query_params == []


def test_descriptor_rejects_unknown_method():
    with pytest.raises(ValidationError):
        RequestDescriptor(method="TRACE", path="/x")


def test_descriptor_is_immutable():
    descriptor = RequestDescriptor.build("GET", "/x")
    with pytest.raises(ValidationError):
        descriptor.path = "/y"


def test_raw_response_json():
    assert RawResponse(status_code=200, body=b'{"a": 1}').json() == {"a": 1}
    assert RawResponse(status_code=204).json() is None
    assert RawResponse(status_code=204).ok
    assert not RawResponse(status_code=404).ok


def test_wire_model_omits_absent_fields():
    when = datetime(2024, 5, 1, 18, 30, tzinfo=timezone.utc)
    reservation = NewReservation(
        estimated_arrival_time=when,
        party_size=4,
        last_name="Smith",
        seating_area_uid="patio",
        is_subscribed_to_sms_marketing=False,
    )
    assert reservation.to_wire() == {
        "EstimatedArrivalTime": "2024-05-01T18:30:00.000Z",
        "PartySize": 4,
        "LastName": "Smith",
        "SeatingAreaUID": "patio",
        "IsSubscribedToSmsMarketing": False,
    }


def test_table_event_wire_names():
    event = TableEvent(
        event_type="CheckPaid",
        table_name="12",
        timestamp_utc=datetime(2024, 1, 1, tzinfo=timezone.utc),
        check_amount=0.0,
        id="evt-1",
    )
    assert event.to_wire() == {
        "EventType": "CheckPaid",
        "TableName": "12",
        "TimestampUtc": "2024-01-01T00:00:00.000Z",
        "CheckAmount": 0.0,
        "ID": "evt-1",
    }


def test_table_event_type_is_validated():
    with pytest.raises(ValidationError):
        TableEvent(event_type="Exploded", table_name="1", timestamp_utc=datetime(2024, 1, 1))


def test_web_ahead_models():
    update = WebAheadUpdate(expand_guest=False, guest_id="g-1", notification_type="SMS")
    assert update.to_wire() == {"ExpandGuest": False, "GuestID": "g-1", "NotificationType": "SMS"}

    with pytest.raises(ValidationError):
        NewWebAhead(last_name="Lee")

    entry = NewWebAhead(party_size=2, phone_number_string="5550100", last_name="Lee")
    assert json.loads(json.dumps(entry.to_wire())) == {
        "PartySize": 2,
        "PhoneNumberString": "5550100",
        "LastName": "Lee",
    }


def test_wire_models_reject_unknown_fields():
    with pytest.raises(ValidationError):
        WalkIn(party_size=2, table="7")
