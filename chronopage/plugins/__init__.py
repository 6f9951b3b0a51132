from chronopage.plugins.timestamps import TimestampsMixin

__all__ = [
    "TimestampsMixin",
]
