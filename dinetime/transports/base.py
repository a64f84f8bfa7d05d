"""Base transport interface for dispatching signed requests."""

from __future__ import annotations

import abc

from ..contracts import RawResponse, SignedRequest


class BaseTransport(metaclass=abc.ABCMeta):
    """Abstract network layer underneath the signing transport.

    Implementations only ever receive :class:`SignedRequest` objects; signing
    happens before a request reaches them.
    """

    async def connect(self) -> None:
        """Open underlying resources (no-op by default)."""
        pass

    async def disconnect(self) -> None:
        """Release underlying resources (no-op by default)."""
        pass

    @abc.abstractmethod
    async def dispatch(self, request: SignedRequest) -> RawResponse:
        """Send ``request`` and return the unclassified response."""
        raise NotImplementedError

    async def __aenter__(self) -> "BaseTransport":
        await self.connect()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.disconnect()
