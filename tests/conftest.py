"""Pytest configuration and shared fixtures for locator tests."""

import logging

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Click test runner for invoking the CLI."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_locator_logger():
    """Leave the package logger as the CLI found it after each test."""
    logger = logging.getLogger("locator")
    handlers = list(logger.handlers)
    level = logger.level
    yield
    logger.handlers = handlers
    logger.setLevel(level)
