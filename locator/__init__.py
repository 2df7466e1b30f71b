"""Locator - find the first occurrence of a substring."""

from locator.core.errors import InvalidArgumentError
from locator.core.search import NOT_FOUND, contains, find

__version__ = "0.1.0"

__all__ = ["InvalidArgumentError", "NOT_FOUND", "contains", "find", "__version__"]
