"""
Pytest configuration and shared fixtures.
"""

import io
import os

import pytest
from unittest.mock import MagicMock
from rich.console import Console

from cli_interpreter.container import DependencyContainer
from cli_interpreter.entities.session import Session


@pytest.fixture
def temp_directory(tmp_path, monkeypatch):
    """
    Create a temporary directory tree and make it the working directory.

    The original working directory is restored after the test, so tests may
    freely call cd.

    Returns:
        Path to the temporary directory (as a string)
    """
    os.makedirs(os.path.join(tmp_path, "projects", "app"))
    os.makedirs(os.path.join(tmp_path, "home", "user"))

    with open(os.path.join(tmp_path, "notes.txt"), "w") as f:
        f.write("not a directory")

    monkeypatch.chdir(tmp_path)
    yield str(tmp_path)


@pytest.fixture
def session(temp_directory):
    """Session starting in the temporary directory."""
    return Session(temp_directory)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


def make_console() -> Console:
    """Console writing plain text into a StringIO buffer."""
    return Console(
        file=io.StringIO(),
        force_terminal=False,
        color_system=None,
        soft_wrap=True,
        highlight=False,
    )


@pytest.fixture
def console():
    return make_console()


@pytest.fixture
def error_console():
    return make_console()


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked logger for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
