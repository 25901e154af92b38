"""Shared fixtures for license-files tests."""

import pytest
from click.testing import CliRunner

from license_files.logger import reset_logging


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _reset_package_logging():
    """Drop handlers the CLI installs so they do not leak between tests."""
    yield
    reset_logging()
