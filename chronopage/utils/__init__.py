from chronopage.utils.exceptions import (
    ChronopageError,
    InvalidPaginationRequest,
    NotTimestamped,
)
from chronopage.utils.pagination import CursorPage
from chronopage.utils.settings import SettingsResolver, timestamp_of
from chronopage.utils.types import Timestamp, Timestamped, to_timestamp

__all__ = [
    "ChronopageError",
    "InvalidPaginationRequest",
    "NotTimestamped",
    "CursorPage",
    "SettingsResolver",
    "timestamp_of",
    "Timestamp",
    "Timestamped",
    "to_timestamp",
]
