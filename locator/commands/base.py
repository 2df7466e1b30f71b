"""Base class for all search commands."""

from abc import ABC, abstractmethod
from typing import Any


class BaseCommand(ABC):
    """Base class for all search commands."""

    name: str  # e.g., "find"

    def __init__(self, haystack: str, **params: Any):
        """Initialize the command.

        Args:
            haystack: The text to search
            **params: Additional parameters for the command
        """
        self.haystack = haystack
        self.params = params

    @abstractmethod
    def execute(self) -> int:
        """Run the search and return the match index.

        Returns:
            Index of the first match, or -1 if there is none
        """
        pass

    def validate_required_params(self, *param_names: str) -> None:
        """Check that every named search parameter was supplied.

        Args:
            *param_names: Parameter names the search cannot run without,
                e.g. "needle"

        Raises:
            ValueError: Naming the command and each absent parameter
        """
        missing = [p for p in param_names if p not in self.params]
        if missing:
            raise ValueError(f"Missing required parameters for {self.name}: {', '.join(missing)}")

    @abstractmethod
    def validate(self) -> None:
        """Check the search parameters before the haystack is scanned.

        Raises:
            ValueError: If a needed parameter such as the needle is absent
        """
        pass
