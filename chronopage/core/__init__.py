from chronopage.core.paginator import get_by_timestamp_pagination, iter_pages, paginate
from chronopage.core.request import DEFAULT_DIRECTION, PaginationRequest, SortDirection

__all__ = [
    "get_by_timestamp_pagination",
    "iter_pages",
    "paginate",
    "DEFAULT_DIRECTION",
    "PaginationRequest",
    "SortDirection",
]
