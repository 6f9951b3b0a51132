"""Settings resolution utilities for paginated item types."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from chronopage.utils.exceptions import NotTimestamped
from chronopage.utils.types import Timestamp, to_timestamp


class SettingsResolver:
    """Resolves item settings from an inner Settings class."""

    @staticmethod
    def get_timestamp_field(cls: type) -> str | None:
        """Get the attribute holding the item's timestamp, if configured.

        Args:
            cls: Item class

        Returns:
            Attribute name, or None when the class relies on timestamp()
        """
        settings = getattr(cls, "Settings", None)
        if settings and hasattr(settings, "timestamp_field"):
            return settings.timestamp_field
        return None


def timestamp_of(item: Any) -> Timestamp:
    """Return the timestamp an item is ordered by.

    A ``Settings.timestamp_field`` on the item's class takes precedence over
    the ``timestamp()`` accessor. Datetime values are converted to
    microseconds since the epoch.
    """
    field = SettingsResolver.get_timestamp_field(type(item))
    if field is not None:
        value = getattr(item, field)
    else:
        accessor = getattr(item, "timestamp", None)
        if not callable(accessor):
            raise NotTimestamped(
                f"{type(item).__name__} has no timestamp() accessor "
                "and no Settings.timestamp_field"
            )
        value = accessor()

    if isinstance(value, datetime):
        return to_timestamp(value)
    return value
