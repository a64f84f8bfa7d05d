"""Signature generation for canonical requests."""

from __future__ import annotations

import hashlib
import hmac
from typing import NamedTuple

from ..constants import AUTH_HASH_ALGORITHM, SIGNATURE_VERSION, SIGNING_ALGORITHM
from ..contracts import Credential


class SignatureResult(NamedTuple):
    signature: str
    string_to_sign: str


def build_string_to_sign(canonical_request: str, access_key: str, timestamp: str) -> str:
    """Join the algorithm label, timestamp, access key and canonical hash."""
    canonical_hash = hashlib.sha256(canonical_request.encode("utf-8")).hexdigest()
    return "&".join((SIGNING_ALGORITHM, timestamp, access_key, canonical_hash))


class Signer:
    """Signs canonical requests with a caller's credential.

    Stateless apart from the immutable credential, so one signer can be
    shared between concurrent requests.
    """

    def __init__(self, credential: Credential) -> None:
        self._credential = credential

    @property
    def access_key(self) -> str:
        return self._credential.access_key

    def sign(self, canonical_request: str, timestamp: str) -> SignatureResult:
        """Return the lowercase hex HMAC-SHA1 signature and its input."""
        string_to_sign = build_string_to_sign(
            canonical_request, self._credential.access_key, timestamp
        )
        digest = hmac.new(
            self._credential.secret_key.encode("utf-8"),
            string_to_sign.encode("utf-8"),
            hashlib.sha1,
        ).hexdigest()
        return SignatureResult(signature=digest, string_to_sign=string_to_sign)

    def authorization(self, signature: str) -> str:
        """Format the ``Authorization`` header value for ``signature``."""
        return (
            f"{SIGNATURE_VERSION} Algorithm={AUTH_HASH_ALGORITHM}"
            f"&Credentials={self._credential.access_key}&Signature={signature}"
        )


def sign(canonical_request: str, credential: Credential, timestamp: str) -> SignatureResult:
    """Functional form of :meth:`Signer.sign`."""
    return Signer(credential).sign(canonical_request, timestamp)
