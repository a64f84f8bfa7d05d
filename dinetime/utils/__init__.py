"""Small shared helpers."""

from .timestamps import format_timestamp, normalize_timestamp, parse_timestamp, utcnow

__all__ = ["format_timestamp", "normalize_timestamp", "parse_timestamp", "utcnow"]
