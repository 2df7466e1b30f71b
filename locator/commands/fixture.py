"""Fixture command: search the bundled reference paragraph."""

import logging
from typing import Any

from locator.commands.base import BaseCommand
from locator.commands.registry import register_command
from locator.core.fixture import DEFAULT_NEEDLE, PARAGRAPH
from locator.core.search import find

logger = logging.getLogger(__name__)


class FixtureCommand(BaseCommand):
    """Search the reference paragraph, ignoring the given haystack."""

    name = "fixture"

    def __init__(self, _haystack: str = "", **params: Any):
        super().__init__(PARAGRAPH, **params)

    def validate(self) -> None:
        """Nothing to check; every parameter is optional."""
        pass

    def execute(self) -> int:
        """Search the paragraph for the needle, "sharing" by default."""
        needle = self.params.get("needle", DEFAULT_NEEDLE)
        logger.debug("searching fixture paragraph for %r", needle)
        return find(self.haystack, needle)


register_command(FixtureCommand)
