"""Signing transport: the single path every outbound request takes."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from ..constants import HEADER_AUTHORIZATION, HEADER_SIGNATURE_VERSION, HEADER_TIMESTAMP, SIGNATURE_VERSION
from ..contracts import Credential, RawResponse, RequestDescriptor, SignedRequest
from ..transports.base import BaseTransport
from ..utils.timestamps import format_timestamp, utcnow
from .canonical import build_canonical_request
from .signer import Signer

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


class SigningTransport:
    """Signs each request with an immutable credential and dispatches it.

    A fresh timestamp is captured per call, so signed requests are never
    reused. The wrapped transport only ever sees signed requests.
    """

    def __init__(
        self,
        credential: Credential,
        transport: BaseTransport,
        clock: Optional[Clock] = None,
    ) -> None:
        self._signer = Signer(credential)
        self._transport = transport
        self._clock = clock or utcnow

    @property
    def transport(self) -> BaseTransport:
        return self._transport

    def sign(self, descriptor: RequestDescriptor, timestamp: str) -> SignedRequest:
        """Attach the signature headers for ``descriptor`` at ``timestamp``."""
        canonical = build_canonical_request(descriptor)
        result = self._signer.sign(canonical, timestamp)
        headers = {
            HEADER_AUTHORIZATION: self._signer.authorization(result.signature),
            HEADER_TIMESTAMP: timestamp,
            HEADER_SIGNATURE_VERSION: SIGNATURE_VERSION,
        }
        return SignedRequest(descriptor=descriptor, headers=headers, timestamp=timestamp)

    async def send(self, descriptor: RequestDescriptor) -> RawResponse:
        """Sign ``descriptor`` with the current time and dispatch it."""
        timestamp = format_timestamp(self._clock())
        signed = self.sign(descriptor, timestamp)
        response = await self._transport.dispatch(signed)
        logger.debug(
            f"{descriptor.method} {descriptor.path} -> {response.status_code}"
        )
        return response

    async def close(self) -> None:
        await self._transport.disconnect()
