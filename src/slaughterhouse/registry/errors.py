"""Registry error types."""


class SlaughterhouseError(Exception):
    """Base class for registry errors."""

    pass


class NotFoundError(SlaughterhouseError, LookupError):
    """Raised when a location, unit, or occupied hook does not exist."""

    pass


class NoCapacityError(SlaughterhouseError):
    """Raised when no eligible hook is free for a new animal."""

    pass
