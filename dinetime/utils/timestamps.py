"""Timestamp formatting shared by signing, query rendering and pagination."""

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone

_FRACTION_RE = re.compile(r"\.(\d+)")


def format_timestamp(value: datetime | date) -> str:
    """Render ``value`` as ``YYYY-MM-DDTHH:MM:SS.mmmZ`` in UTC.

    Naive datetimes are taken to be UTC. Plain dates render as midnight UTC.
    """
    if not isinstance(value, datetime):
        value = datetime.combine(value, time(), tzinfo=timezone.utc)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.strftime("%Y-%m-%dT%H:%M:%S") + f".{value.microsecond // 1000:03d}Z"


def parse_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 timestamp as returned by the API.

    Accepts a trailing ``Z`` and fractions longer than microseconds.
    Timestamps without an offset are taken to be UTC.
    """
    raw = value.strip()
    if raw.endswith("Z") or raw.endswith("z"):
        raw = raw[:-1] + "+00:00"
    raw = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), raw, count=1)
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def normalize_timestamp(value: str) -> str:
    """Re-render an API timestamp in the canonical UTC millisecond form."""
    return format_timestamp(parse_timestamp(value))


def utcnow() -> datetime:
    return datetime.now(timezone.utc)
