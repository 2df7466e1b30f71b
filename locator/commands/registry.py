"""Command registry for dynamic dispatch of searches."""

import importlib
import logging
import pkgutil
from pathlib import Path
from typing import Any, Dict, Type

from locator.commands.base import BaseCommand

logger = logging.getLogger(__name__)

_registry: Dict[str, Type[BaseCommand]] = {}

_SKIP_MODULES = {"base", "registry"}


def register_command(command_class: Type[BaseCommand]) -> None:
    """Make a search command available under its ``name``.

    A later class with the same name replaces the earlier one.

    Raises:
        ValueError: If command_class doesn't have a name attribute
    """
    if not hasattr(command_class, "name"):
        raise ValueError(f"Command class {command_class.__name__} must have a 'name' attribute")
    _registry[command_class.name] = command_class


def get_command(name: str) -> Type[BaseCommand]:
    """Look up the search command registered as ``name`` (e.g. "find").

    Raises:
        ValueError: If no search command has that name
    """
    if name not in _registry:
        raise ValueError(f"Unknown command: {name}")
    return _registry[name]


def registered_commands() -> list[str]:
    """Return the names of all registered commands, sorted."""
    return sorted(_registry)


def discover_and_register_commands() -> None:
    """Import every command module so each one registers itself.

    Modules register their command class at import time via register_command(),
    so importing them is enough.
    """
    commands_dir = Path(__file__).parent

    for module_info in pkgutil.iter_modules([str(commands_dir)]):
        if module_info.name.startswith("_") or module_info.name in _SKIP_MODULES:
            continue
        importlib.import_module(f"locator.commands.{module_info.name}")


def run_command(name: str, haystack: str, **params: Any) -> int:
    """Run a command using the registry.

    Args:
        name: Name of the command to run
        haystack: The text to search
        **params: Additional parameters for the command

    Returns:
        The index reported by the command

    Raises:
        ValueError: If the command is unknown or parameters are invalid
    """
    command_class = get_command(name)
    command = command_class(haystack, **params)
    command.validate()
    result = command.execute()
    logger.debug("%s -> %d", name, result)
    return result
