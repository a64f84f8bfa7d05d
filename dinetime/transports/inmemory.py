"""In-memory transport for testing."""

from __future__ import annotations

import asyncio
import json
from collections import deque
from typing import Any, Awaitable, Callable, Deque, List, Optional, Union

from ..contracts import RawResponse, SignedRequest
from .base import BaseTransport

Handler = Callable[[SignedRequest], Union[RawResponse, Awaitable[RawResponse]]]


def json_response(data: Any, status_code: int = 200) -> RawResponse:
    """Build a JSON :class:`RawResponse` for canned replies."""
    return RawResponse(
        status_code=status_code,
        headers={"content-type": "application/json"},
        body=json.dumps(data).encode("utf-8"),
    )


class InMemoryTransport(BaseTransport):
    """Records dispatched requests and answers from a handler or a queue.

    Queued responses are consumed first; once the queue is empty the handler
    is used, and without a handler an empty ``200`` is returned.
    """

    def __init__(self, handler: Optional[Handler] = None) -> None:
        self.handler = handler
        self.sent: List[SignedRequest] = []
        self._responses: Deque[RawResponse] = deque()
        self._lock = asyncio.Lock()

    def queue(self, *responses: RawResponse) -> None:
        self._responses.extend(responses)

    def queue_json(self, *payloads: Any, status_code: int = 200) -> None:
        self.queue(*(json_response(p, status_code) for p in payloads))

    async def dispatch(self, request: SignedRequest) -> RawResponse:
        async with self._lock:
            self.sent.append(request)
            if self._responses:
                return self._responses.popleft()
        if self.handler is None:
            return RawResponse(status_code=200)
        result = self.handler(request)
        if asyncio.iscoroutine(result):
            result = await result
        return result

    @property
    def last_request(self) -> Optional[SignedRequest]:
        return self.sent[-1] if self.sent else None
