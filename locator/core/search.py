"""First-occurrence substring search."""

from locator.core.errors import InvalidArgumentError

NOT_FOUND = -1


def _require_str(value: object, label: str) -> str:
    if not isinstance(value, str):
        raise InvalidArgumentError(f"{label} must be a string, got {type(value).__name__}")
    return value


def find(haystack: str, needle: str, start: int = 0) -> int:
    """Return the index of the first occurrence of needle in haystack.

    Matching is exact and case-sensitive. An empty needle matches at the
    (clamped) start position.

    Args:
        haystack: The text to search
        needle: The substring to look for
        start: Index to begin searching from; clamped to [0, len(haystack)]

    Returns:
        The smallest index >= start where needle occurs, or NOT_FOUND

    Raises:
        InvalidArgumentError: If haystack or needle is not a str, or start is not an int
    """
    _require_str(haystack, "haystack")
    _require_str(needle, "needle")
    # bool is an int subclass but never a meaningful position
    if not isinstance(start, int) or isinstance(start, bool):
        raise InvalidArgumentError(f"start must be an integer, got {type(start).__name__}")

    start = min(max(start, 0), len(haystack))
    return haystack.find(needle, start)


def contains(haystack: str, needle: str) -> bool:
    """Check whether needle occurs anywhere in haystack."""
    return find(haystack, needle) != NOT_FOUND
