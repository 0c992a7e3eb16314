"""
Pytest configuration and shared fixtures.
"""

import io
import os
import tempfile
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from file_manager.config.settings import Settings
from file_manager.container import DependencyContainer
from file_manager.entities.session import SessionState


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Returns:
        Path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        # Create some test files
        test_file1 = os.path.join(temp_dir, "test1.txt")
        test_file2 = os.path.join(temp_dir, "test2.py")

        with open(test_file1, "w") as f:
            f.write("This is a test file.")

        with open(test_file2, "w") as f:
            f.write("print('Hello, world!')")

        # Create a subdirectory with a file
        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)

        test_file3 = os.path.join(subdir, "test3.md")
        with open(test_file3, "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        yield os.path.realpath(temp_dir)


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


def _capture_console() -> Console:
    return Console(
        file=io.StringIO(), width=200, color_system=None, highlight=False, soft_wrap=True
    )


@pytest.fixture
def console():
    """Console writing into a StringIO; read it with ``console.file.getvalue()``."""
    return _capture_console()


@pytest.fixture
def error_console():
    return _capture_console()


@pytest.fixture
def session(temp_directory):
    return SessionState(temp_directory)


@pytest.fixture
def settings(monkeypatch, temp_directory):
    """Settings pointing at the temp directory, independent of the caller's env."""
    for key in ("FM_USERNAME", "FM_LOG_LEVEL", "FM_CHUNK_SIZE", "FM_BROTLI_QUALITY"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("FM_START_DIR", temp_directory)
    # Small chunks so streaming loops run more than once
    monkeypatch.setenv("FM_CHUNK_SIZE", "8")
    monkeypatch.setenv("FM_BROTLI_QUALITY", "5")
    return Settings()


@pytest.fixture
def dependency_container(settings, console, error_console, mock_logger):
    """
    Create a dependency container with capturing consoles for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer(settings, console, error_console)
    # Replace the logger with our mock
    container._logger = mock_logger
    return container
