"""CLI entry point for locator."""

import logging
from typing import IO, Any, Optional

import click

from locator import __version__
from locator.commands.registry import discover_and_register_commands, run_command
from locator.core.fixture import DEFAULT_NEEDLE, PARAGRAPH

# Dynamically discover and import all command modules
discover_and_register_commands()

package_logger = logging.getLogger("locator")


def configure_logging(verbose: bool) -> None:
    """Send locator log records to stderr at DEBUG when verbose, else WARNING."""
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


@click.group(context_settings={"auto_envvar_prefix": "LOCATOR"})
@click.version_option(version=__version__)
@click.option("-v", "--verbose", is_flag=True, help="Log search details to stderr.")
def main(verbose: bool) -> None:
    """Locator - find the first occurrence of a substring.

    Prints the zero-based index of the match, or -1 when there is none.
    """
    configure_logging(verbose)


def search(command_name: str, haystack: str, **params: Any) -> int:
    """Run a registered command and turn its errors into click errors.

    Args:
        command_name: Name of the registered command
        haystack: The text to search
        **params: Additional parameters for the command

    Raises:
        click.ClickException: If the command rejects its input
    """
    try:
        return run_command(command_name, haystack, **params)
    except ValueError as e:
        raise click.ClickException(str(e)) from e


def read_haystack(stream: IO[str]) -> str:
    """Read the whole haystack from a text stream.

    Raises:
        click.ClickException: If the bytes are not valid UTF-8
    """
    try:
        return stream.read()
    except UnicodeDecodeError as e:
        raise click.ClickException(f"Haystack is not valid UTF-8: {e}") from e


@main.command("find")
@click.argument("needle")
@click.argument("haystack", required=False)
@click.option(
    "--file",
    "source",
    type=click.File("r", encoding="utf-8", errors="strict"),
    help="Read the haystack from a file ('-' for stdin).",
)
@click.option("--start", type=int, default=0, show_default=True, help="Index to search from.")
def find_command(
    needle: str, haystack: Optional[str], source: Optional[IO[str]], start: int
) -> None:
    """Print the index of NEEDLE in HAYSTACK.

    With no HAYSTACK and no --file, the haystack is read from stdin.
    """
    if haystack is not None and source is not None:
        raise click.UsageError("Give HAYSTACK or --file, not both.")
    if haystack is None:
        if source is None:
            with click.open_file("-", encoding="utf-8", errors="strict") as stdin:
                haystack = read_haystack(stdin)
        else:
            haystack = read_haystack(source)

    click.echo(search("find", haystack, needle=needle, start=start))


@main.command("fixture")
@click.option("--needle", default=DEFAULT_NEEDLE, show_default=True, help="Substring to look for.")
def fixture_command(needle: str) -> None:
    """Search the bundled reference paragraph."""
    click.echo(search("fixture", PARAGRAPH, needle=needle))


if __name__ == "__main__":
    main()
