from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Mapping, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from chronopage.utils.exceptions import InvalidPaginationRequest
from chronopage.utils.settings import timestamp_of
from chronopage.utils.types import Timestamp, to_timestamp


class SortDirection(str, Enum):
    """Order in which items are sorted by timestamp."""

    ASCENDING = "ascending"
    DESCENDING = "descending"


DEFAULT_DIRECTION = SortDirection.ASCENDING


class PaginationRequest(BaseModel):
    """Immutable request for one page of timestamped items.

    ``after_timestamp`` is an exclusive cursor: the page starts right after
    the first item carrying exactly that timestamp. ``direction`` defaults
    to ascending when omitted.
    """

    model_config = ConfigDict(frozen=True)

    after_timestamp: Optional[Timestamp] = None
    direction: Optional[SortDirection] = None
    limit: int = Field(ge=0)

    @field_validator("after_timestamp", mode="before")
    @classmethod
    def _coerce_datetime(cls, value: Any) -> Any:
        if isinstance(value, datetime):
            return to_timestamp(value)
        return value

    @classmethod
    def parse(cls, payload: Mapping[str, Any]) -> PaginationRequest:
        """Build a request from a deserialized payload.

        Args:
            payload: Mapping with ``limit`` and optional ``after_timestamp``
                and ``direction`` keys

        Raises:
            InvalidPaginationRequest: If the payload fails validation
        """
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise InvalidPaginationRequest(str(exc)) from exc

    @property
    def resolved_direction(self) -> SortDirection:
        return self.direction or DEFAULT_DIRECTION

    def next_after(self, items: Sequence[Any]) -> PaginationRequest:
        """Return the request for the page following ``items``.

        The cursor moves to the last item's timestamp. An empty page leaves
        the request unchanged.
        """
        if not items:
            return self
        return self.model_copy(update={"after_timestamp": timestamp_of(items[-1])})
