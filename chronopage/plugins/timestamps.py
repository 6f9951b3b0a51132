from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from chronopage.utils.exceptions import NotTimestamped
from chronopage.utils.types import Timestamp, to_timestamp


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampsMixin:
    """Mixin that gives a pydantic model a created_at field and timestamp().

    Usage: class Post(TimestampsMixin, BaseModel): ...
    """

    created_at: Optional[datetime] = Field(default_factory=_utcnow)

    def timestamp(self) -> Timestamp:
        if self.created_at is None:
            raise NotTimestamped(f"{type(self).__name__} has no created_at")
        return to_timestamp(self.created_at)
