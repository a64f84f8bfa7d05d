"""Canonical request construction for the DineTime signature scheme.

The canonical request is the deterministic string the signature is computed
over::

    METHOD&encoded-path&sorted-query-string&hex(sha256(body))

Field order and the ``&`` separator are part of the wire contract; the server
rebuilds the same string to verify the signature.
"""

from __future__ import annotations

import hashlib
from typing import Iterable, Tuple
from urllib.parse import quote, quote_plus

from ..contracts import RequestDescriptor

EMPTY_BODY_SHA256 = hashlib.sha256(b"").hexdigest()

# Characters left literal by encodeURIComponent beyond the RFC 3986 unreserved set.
_PATH_SAFE = "!*'()"


def encode_path(path: str) -> str:
    """Percent-encode ``path`` as one opaque component (``/`` included)."""
    return quote(path, safe=_PATH_SAFE)


def encode_form_component(value: str) -> str:
    """Encode a query key or value as ``application/x-www-form-urlencoded``.

    Spaces become ``+``; only ``A-Z a-z 0-9 * - . _`` are left literal.
    """
    return quote_plus(value, safe="*").replace("~", "%7E")


def canonical_query_string(params: Iterable[Tuple[str, str]]) -> str:
    """Encode ``params`` and sort them by encoded key.

    The sort is stable, so repeated keys keep their relative order.
    """
    encoded = [
        (encode_form_component(key), encode_form_component(value))
        for key, value in params
    ]
    encoded.sort(key=lambda pair: pair[0].encode("utf-8"))
    return "&".join(f"{key}={value}" for key, value in encoded)


def hash_body(body: bytes) -> str:
    """Hex SHA-256 of the wire body; empty bodies hash the empty string."""
    if not body:
        return EMPTY_BODY_SHA256
    return hashlib.sha256(body).hexdigest()


def build_canonical_request(descriptor: RequestDescriptor) -> str:
    """Return the canonical request string for ``descriptor``."""
    method = (descriptor.method or "GET").upper()
    return "&".join(
        (
            method,
            encode_path(descriptor.path),
            canonical_query_string(descriptor.query_params),
            hash_body(descriptor.body),
        )
    )
