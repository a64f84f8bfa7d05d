"""Cursor-driven pagination over time-ordered API collections.

The API returns collections ordered by each record's last update. Every page
carries a more-data flag and a cutoff (the last update of the final record);
the next page is requested with the window start moved to that cutoff. The
cutoff is trusted as reported by the server.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, List, Optional, Tuple, TypeVar

from .contracts import PageCursor, PageResult
from .errors import MalformedResponseError, PageCeilingExceededError
from .utils.timestamps import normalize_timestamp

logger = logging.getLogger(__name__)

T = TypeVar("T")

FetchPage = Callable[[PageCursor], Awaitable[PageResult[T]]]


def _with_limit(cursor: PageCursor, page_limit: Optional[int]) -> PageCursor:
    if page_limit is None:
        return cursor
    if page_limit < 0:
        raise ValueError("page_limit must be zero (unbounded) or positive")
    return cursor.model_copy(update={"remaining_pages": page_limit or None})


async def fetch_page(fetch: FetchPage[T], cursor: PageCursor) -> PageResult[T]:
    """Fetch exactly one page at ``cursor`` and hand it back unchanged."""
    return await fetch(cursor)


async def iter_pages(
    fetch: FetchPage[T],
    cursor: PageCursor,
    page_limit: Optional[int] = None,
    *,
    page_ceiling: Optional[int] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> AsyncIterator[PageResult[T]]:
    """Yield pages until the server runs dry or the page budget is spent.

    Args:
        fetch: Coroutine returning the page for a cursor.
        cursor: Initial window. Its ``remaining_pages`` is the page budget.
        page_limit: Overrides the cursor's budget; ``0`` means unbounded.
        page_ceiling: Hard cap applied even to unbounded walks. Reaching it
            while the server still reports more data raises
            :class:`PageCeilingExceededError`.
        cancel_event: Checked between pages; once set, iteration stops.
    """
    if page_ceiling is not None and page_ceiling < 1:
        raise ValueError("page_ceiling must be positive or None (no ceiling)")
    cursor = _with_limit(cursor, page_limit)
    fetched = 0
    while True:
        if cancel_event is not None and cancel_event.is_set():
            logger.info(f"Pagination cancelled after {fetched} pages")
            return

        result = await fetch(cursor)
        fetched += 1
        logger.debug(
            f"Fetched page {fetched} ({len(result.items)} items, "
            f"more={result.has_more}, cutoff={result.cutoff})"
        )
        yield result

        cursor = cursor.advance(result.cutoff)
        if not result.has_more or cursor.exhausted:
            return
        if page_ceiling is not None and fetched >= page_ceiling:
            raise PageCeilingExceededError(page_ceiling, result.cutoff)


async def paginate(
    fetch: FetchPage[T],
    cursor: PageCursor,
    page_limit: Optional[int] = None,
    *,
    page_ceiling: Optional[int] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> AsyncIterator[T]:
    """Yield items from every page in order.

    The iterator is lazy and single-use. Items already yielded stay with the
    caller if a later page fails.
    """
    async for page in iter_pages(
        fetch,
        cursor,
        page_limit,
        page_ceiling=page_ceiling,
        cancel_event=cancel_event,
    ):
        for item in page.items:
            yield item


async def fetch_all(
    fetch: FetchPage[T],
    cursor: PageCursor,
    page_limit: Optional[int] = None,
    *,
    page_ceiling: Optional[int] = None,
    cancel_event: Optional[asyncio.Event] = None,
) -> List[T]:
    """Collect every item into a list; nothing is returned if a page fails."""
    return [
        item
        async for item in paginate(
            fetch,
            cursor,
            page_limit,
            page_ceiling=page_ceiling,
            cancel_event=cancel_event,
        )
    ]


@dataclass(frozen=True)
class CollectionSpec:
    """Field and parameter names of one paginated endpoint.

    ``cutoff_fields`` lists accepted names for the cutoff, first match wins.
    An ``items_field`` of ``None`` means each page is itself a single record.
    """

    items_field: Optional[str]
    more_field: str
    cutoff_fields: Tuple[str, ...]
    start_param: str
    end_param: Optional[str] = None
    normalize_cutoff: bool = False

    def params(self, cursor: PageCursor) -> Dict[str, Any]:
        params: Dict[str, Any] = {}
        if cursor.window_start is not None:
            params[self.start_param] = cursor.window_start
        if self.end_param and cursor.window_end is not None:
            params[self.end_param] = cursor.window_end
        return params

    def _cutoff(self, data: Dict[str, Any]) -> Optional[str]:
        for name in self.cutoff_fields:
            if data.get(name) is not None:
                return str(data[name])
        return None

    def parse_page(self, data: Any) -> PageResult[Any]:
        """Extract items, more-data flag and cutoff from a response body."""
        if not isinstance(data, dict):
            raise MalformedResponseError("Page response is not an object", data)
        if self.more_field not in data:
            raise MalformedResponseError(
                f"Page response missing '{self.more_field}'", data
            )

        if self.items_field is None:
            skip = {self.more_field, *self.cutoff_fields}
            items = [{k: v for k, v in data.items() if k not in skip}]
        else:
            items = data.get(self.items_field)
            if items is None:
                raise MalformedResponseError(
                    f"Page response missing '{self.items_field}'", data
                )

        has_more = bool(data[self.more_field])
        cutoff = self._cutoff(data)
        if cutoff is None and has_more:
            raise MalformedResponseError(
                f"Page response missing '{self.cutoff_fields[0]}' while more data is reported",
                data,
            )
        if cutoff is not None and self.normalize_cutoff:
            cutoff = normalize_timestamp(cutoff)
        return PageResult[Any](items=list(items), has_more=has_more, cutoff=cutoff)


TEAM_MEMBER_EVENTS = CollectionSpec(
    items_field="Events",
    more_field="MoreData",
    cutoff_fields=("TimeStampCutoff", "DownloadCutoff"),
    start_param="startTime",
    end_param="endTime",
)

TABLE_HISTORY = CollectionSpec(
    items_field="History",
    more_field="HasMoreData",
    cutoff_fields=("TimeStampCutoff", "CutOffDate"),
    start_param="startTime",
    end_param="endTime",
)

TABLE_EVENTS = CollectionSpec(
    items_field="Events",
    more_field="MoreData",
    cutoff_fields=("TimeStampCutoff", "DownloadCutoff"),
    start_param="startTime",
    end_param="endTime",
)

VISIT_UPDATES = CollectionSpec(
    items_field="Visits",
    more_field="MoreData",
    cutoff_fields=("TimestampCutoff",),
    start_param="start",
    end_param="stop",
    normalize_cutoff=True,
)

# One site per page, continued with an opaque token instead of a time window.
PARTNER_SITES = CollectionSpec(
    items_field=None,
    more_field="HasMore",
    cutoff_fields=("Token",),
    start_param="Token",
)
