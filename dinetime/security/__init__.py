"""Request canonicalization and signing."""

from .canonical import build_canonical_request, canonical_query_string, encode_path, hash_body
from .signer import SignatureResult, Signer, build_string_to_sign, sign
from .transport import SigningTransport

__all__ = [
    "SignatureResult",
    "Signer",
    "SigningTransport",
    "build_canonical_request",
    "build_string_to_sign",
    "canonical_query_string",
    "encode_path",
    "hash_body",
    "sign",
]
