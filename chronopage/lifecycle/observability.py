from __future__ import annotations

import logging
import time
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Iterator

logger = logging.getLogger("chronopage")


@dataclass(frozen=True)
class PageEvent:
    """One computed page as seen by tracing."""

    operation: str
    item_type: str = ""
    direction: str | None = None
    limit: int = 0
    after_timestamp: int | None = None
    cursor_found: bool = False
    offset: int = 0
    total: int = 0
    result_count: int | None = None
    duration_ms: float = 0.0


class _ObservabilityState:
    """Process-wide page tracing settings and captured pages."""

    def __init__(self) -> None:
        self.enabled: bool = False
        self.slow_page_threshold_ms: float = 100.0
        self.listeners: list[Callable[[PageEvent], Any]] = []
        self.events: list[PageEvent] = []
        self.capture_events: bool = False


_state = _ObservabilityState()


def enable_tracing(slow_page_ms: float = 100.0, capture_events: bool = False) -> None:
    """Start emitting a PageEvent for every paginated call.

    Args:
        slow_page_ms: Pages slower than this are logged as warnings
        capture_events: Keep events in memory for get_events()
    """
    _state.enabled = True
    _state.slow_page_threshold_ms = slow_page_ms
    _state.capture_events = capture_events


def disable_tracing() -> None:
    """Stop emitting page events; drop listeners and captured pages."""
    _state.enabled = False
    _state.slow_page_threshold_ms = 100.0
    _state.listeners.clear()
    _state.events.clear()
    _state.capture_events = False


def get_events() -> list[PageEvent]:
    """Return the pages captured since tracing was enabled."""
    return list(_state.events)


def clear_events() -> None:
    """Forget captured pages without disabling tracing."""
    _state.events.clear()


def add_listener(callback: Callable[[PageEvent], Any]) -> None:
    """Call ``callback`` with the PageEvent of every page computed."""
    _state.listeners.append(callback)


def remove_listener(callback: Callable[[PageEvent], Any]) -> None:
    """Stop sending page events to ``callback``."""
    _state.listeners.remove(callback)


def emit_event(event: PageEvent) -> None:
    """Hand a computed page to listeners, warning first when it was slow."""
    if not _state.enabled:
        return

    if _state.capture_events:
        _state.events.append(event)

    if event.duration_ms > _state.slow_page_threshold_ms:
        logger.warning(
            "Slow page: %s over %d %s items took %.1fms (threshold: %.1fms)",
            event.operation,
            event.total,
            event.item_type,
            event.duration_ms,
            _state.slow_page_threshold_ms,
        )

    for listener in _state.listeners:
        listener(event)


@contextmanager
def track_page(operation: str, item_type: str = "", direction: str | None = None, limit: int = 0, after_timestamp: int | None = None) -> Iterator[dict[str, Any]]:
    """Time a page computation.

    The paginator fills the yielded dict with the item type, offset, total,
    cursor outcome and result count; they end up on the emitted PageEvent.
    """
    ctx: dict[str, Any] = {"item_type": item_type, "result_count": None, "offset": 0, "total": 0, "cursor_found": False}
    if not _state.enabled:
        yield ctx
        return

    start = time.perf_counter()
    try:
        yield ctx
    finally:
        duration_ms = (time.perf_counter() - start) * 1000
        event = PageEvent(
            operation=operation,
            item_type=ctx["item_type"],
            direction=direction,
            limit=limit,
            after_timestamp=after_timestamp,
            cursor_found=ctx["cursor_found"],
            offset=ctx["offset"],
            total=ctx["total"],
            result_count=ctx["result_count"],
            duration_ms=duration_ms,
        )
        emit_event(event)
