"""Service-level errors."""


class NotFoundError(LookupError):
    """Raised when a requested record does not exist for the user."""
