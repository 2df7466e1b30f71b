"""Find command."""

import logging

from locator.commands.base import BaseCommand
from locator.commands.registry import register_command
from locator.core.search import find

logger = logging.getLogger(__name__)


class FindCommand(BaseCommand):
    """Report where a needle first occurs in the haystack.

    Parameters:
        needle: The substring to look for (required)
        start: Position to begin searching from (optional, default 0)
    """

    name = "find"

    def validate(self) -> None:
        """Validate that required parameters are present.

        Raises:
            ValueError: If required parameters are missing
        """
        self.validate_required_params("needle")

    def execute(self) -> int:
        """Search the haystack for the needle.

        Raises:
            InvalidArgumentError: If the inputs have the wrong type
        """
        needle = self.params["needle"]
        start = self.params.get("start", 0)
        logger.debug("searching %d chars for %r from %d", len(self.haystack), needle, start)
        return find(self.haystack, needle, start)


register_command(FindCommand)
