from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from chronopage.core.request import SortDirection

T = TypeVar("T")


@dataclass(frozen=True)
class CursorPage(Generic[T]):
    """Timestamp cursor pagination result.

    ``direction`` is the direction actually applied, ascending when the
    request left it unset, and None only when no request was given.
    """

    items: list[T]
    limit: int
    direction: SortDirection | None
    offset: int
    total: int
    cursor_found: bool
    has_next: bool
    next_after: int | None
