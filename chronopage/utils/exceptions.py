class ChronopageError(Exception):
    """Base exception for all Chronopage errors."""


class InvalidPaginationRequest(ChronopageError, ValueError):
    """Raised when a pagination request payload fails validation."""


class NotTimestamped(ChronopageError, TypeError):
    """Raised when an item exposes no timestamp to paginate by."""
