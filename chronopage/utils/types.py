from datetime import datetime, timedelta, timezone
from typing import Protocol, TypeVar, runtime_checkable

# Microseconds since the Unix epoch
Timestamp = int

# Paginated item type; unbound because Settings.timestamp_field items lack timestamp()
T = TypeVar("T")

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_MICROSECOND = timedelta(microseconds=1)


@runtime_checkable
class Timestamped(Protocol):
    """Anything that can report the timestamp it is ordered by."""

    def timestamp(self) -> Timestamp: ...


def to_timestamp(value: datetime) -> Timestamp:
    """Convert a datetime into microseconds since the epoch.

    Args:
        value: Aware datetime, or naive datetime taken to be UTC

    Returns:
        Integer microseconds since 1970-01-01T00:00:00Z
    """
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return (value - _EPOCH) // _MICROSECOND
