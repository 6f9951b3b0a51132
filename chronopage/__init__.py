from chronopage.core import (
    DEFAULT_DIRECTION,
    PaginationRequest,
    SortDirection,
    get_by_timestamp_pagination,
    iter_pages,
    paginate,
)
from chronopage.lifecycle import (
    enable_tracing,
    disable_tracing,
    PageEvent,
    add_listener,
    remove_listener,
)
from chronopage.plugins import TimestampsMixin
from chronopage.utils import (
    ChronopageError,
    InvalidPaginationRequest,
    NotTimestamped,
    CursorPage,
    Timestamp,
    Timestamped,
    timestamp_of,
    to_timestamp,
)

__all__ = [
    # Core
    "DEFAULT_DIRECTION",
    "PaginationRequest",
    "SortDirection",
    "get_by_timestamp_pagination",
    "iter_pages",
    "paginate",
    # Lifecycle
    "enable_tracing",
    "disable_tracing",
    "PageEvent",
    "add_listener",
    "remove_listener",
    # Plugins
    "TimestampsMixin",
    # Utils
    "ChronopageError",
    "InvalidPaginationRequest",
    "NotTimestamped",
    "CursorPage",
    "Timestamp",
    "Timestamped",
    "timestamp_of",
    "to_timestamp",
]
