"""Exceptions raised by the locator core."""


class InvalidArgumentError(ValueError):
    """Raised when a search input is not of the expected type."""
