from __future__ import annotations

from typing import Iterable, Iterator, Optional

from chronopage.core.request import PaginationRequest, SortDirection
from chronopage.lifecycle.observability import logger, track_page
from chronopage.utils.pagination import CursorPage
from chronopage.utils.settings import timestamp_of
from chronopage.utils.types import T, Timestamp


def _sort_items(items: Iterable[T], direction: SortDirection) -> list[T]:
    """Return a new list sorted by timestamp. Equal timestamps keep input order."""
    return sorted(
        items,
        key=timestamp_of,
        reverse=direction is SortDirection.DESCENDING,
    )


def _start_index(items_sorted: list[T], after_timestamp: Timestamp | None) -> tuple[int, bool]:
    """Locate the first item after the cursor.

    Returns the start index and whether the cursor matched an item. An
    unmatched cursor starts from the beginning.
    """
    if after_timestamp is None:
        return 0, False
    for position, item in enumerate(items_sorted):
        if timestamp_of(item) == after_timestamp:
            return position + 1, True
    logger.debug("Cursor %s not found in %d items; restarting from the first item", after_timestamp, len(items_sorted))
    return 0, False


def paginate(items: Iterable[T], page: Optional[PaginationRequest]) -> CursorPage[T]:
    """Compute one page of ``items`` ordered by timestamp.

    Without a request the items are returned as given: unsorted, unlimited.
    The input collection is never mutated, and no cursor value is an error:
    a stale cursor restarts at the first item and a cursor on the last item
    yields an empty page.
    """
    if page is None:
        unchanged = list(items)
        return CursorPage(
            items=unchanged,
            limit=len(unchanged),
            direction=None,
            offset=0,
            total=len(unchanged),
            cursor_found=False,
            has_next=False,
            next_after=None,
        )

    direction = page.resolved_direction
    with track_page(
        "paginate",
        direction=direction.value,
        limit=page.limit,
        after_timestamp=page.after_timestamp,
    ) as ctx:
        items_sorted = _sort_items(items, direction)
        start, cursor_found = _start_index(items_sorted, page.after_timestamp)
        end = min(start + page.limit, len(items_sorted))
        sliced = items_sorted[start:end]

        if items_sorted:
            ctx["item_type"] = type(items_sorted[0]).__name__
        ctx["offset"] = start
        ctx["total"] = len(items_sorted)
        ctx["cursor_found"] = cursor_found
        ctx["result_count"] = len(sliced)

    has_next = start + len(sliced) < len(items_sorted)
    return CursorPage(
        items=sliced,
        limit=page.limit,
        direction=direction,
        offset=start,
        total=len(items_sorted),
        cursor_found=cursor_found,
        has_next=has_next,
        next_after=timestamp_of(sliced[-1]) if has_next and sliced else None,
    )


def get_by_timestamp_pagination(items: Iterable[T], page: Optional[PaginationRequest]) -> list[T]:
    """Return the page of ``items`` selected by ``page``.

    ``T`` is not bound to ``Timestamped``: items configured through
    ``Settings.timestamp_field`` carry their timestamp in an attribute and
    have no ``timestamp()`` method. ``timestamp_of`` resolves either form.

    Args:
        items: Items implementing ``timestamp()`` or configured through
            ``Settings.timestamp_field``
        page: Cursor, direction and limit; None returns the items unchanged

    Returns:
        New list of at most ``page.limit`` items in sort order
    """
    return paginate(items, page).items


def iter_pages(items: Iterable[T], limit: int, direction: SortDirection | None = None) -> Iterator[list[T]]:
    """Yield successive pages until the collection is exhausted.

    Each page resumes after the last timestamp of the previous one, so every
    item is yielded exactly once. When that timestamp is shared with earlier
    items the cursor lands behind the current position; the page is then
    widened by the overlap and the repeated items are dropped.
    """
    if limit < 1:
        raise ValueError("limit must be >= 1")

    snapshot = list(items)
    request = PaginationRequest(direction=direction, limit=limit)
    position = 0
    while True:
        result = paginate(snapshot, request)
        overlap = position - result.offset
        if overlap > 0:
            logger.debug(
                "Cursor %s is shared by items before offset %d; skipping %d repeated items",
                request.after_timestamp,
                position,
                overlap,
            )
            result = paginate(snapshot, request.model_copy(update={"limit": limit + overlap}))
            fresh = result.items[overlap:]
        else:
            fresh = result.items
        if fresh:
            yield fresh
        if not result.has_next:
            return
        position = result.offset + len(result.items)
        request = request.next_after(fresh)
