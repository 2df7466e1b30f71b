"""Allow running locator with ``python -m locator``."""

from locator.cli import main

main(prog_name="locator")
