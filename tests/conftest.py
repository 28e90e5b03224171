"""
Pytest configuration and shared fixtures.
"""

import os
import sys
import tempfile
import time
from unittest.mock import MagicMock

import pytest

from taminal.container import DependencyContainer
from taminal.entities.Session import Session


@pytest.fixture
def temp_directory():
    """
    Create a temporary directory for testing file operations.

    Layout:
        test1.txt
        test2.py
        subdir/test3.md
        empty/

    Returns:
        Canonical path to the temporary directory
    """
    with tempfile.TemporaryDirectory() as temp_dir:
        temp_dir = os.path.realpath(temp_dir)

        with open(os.path.join(temp_dir, "test1.txt"), "w") as f:
            f.write("This is a test file.")

        with open(os.path.join(temp_dir, "test2.py"), "w") as f:
            f.write("print('Hello, world!')")

        subdir = os.path.join(temp_dir, "subdir")
        os.makedirs(subdir)
        with open(os.path.join(subdir, "test3.md"), "w") as f:
            f.write("# Test Markdown\n\nThis is a test.")

        os.makedirs(os.path.join(temp_dir, "empty"))

        yield temp_dir


@pytest.fixture
def mock_logger():
    """
    Create a mock logger for testing.

    Returns:
        Mock logger instance
    """
    return MagicMock()


@pytest.fixture
def session(temp_directory):
    """Session whose working directory is the temporary directory."""
    return Session(temp_directory)


@pytest.fixture
def dependency_container(mock_logger):
    """
    Create a dependency container with mocked dependencies for testing.

    Returns:
        DependencyContainer instance with mocked logger
    """
    container = DependencyContainer()
    # Replace the logger with our mock
    container._logger = mock_logger
    return container


@pytest.fixture
def engine(dependency_container, temp_directory):
    """Shell engine wired with the real adapters, started in the temporary directory."""
    return dependency_container.create_shell_engine(temp_directory)


@pytest.fixture
def sleeper(temp_directory):
    """
    Child that sleeps until interrupted, run from the temporary directory.

    The child restores the default SIGINT action itself, so the test does not
    depend on the disposition inherited from the runner, then touches a marker
    file once it can be interrupted.

    Returns:
        Tuple of (argv, wait_until_ready)
    """
    marker = os.path.join(temp_directory, ".sleeper-ready")
    script = os.path.join(temp_directory, "sleeper.py")
    with open(script, "w") as f:
        f.write(
            "import signal, time\n"
            "signal.signal(signal.SIGINT, signal.SIG_DFL)\n"
            f"open({marker!r}, 'w').close()\n"
            "time.sleep(30)\n"
        )

    def wait_until_ready(timeout: float = 10.0) -> None:
        deadline = time.monotonic() + timeout
        while not os.path.exists(marker):
            if time.monotonic() > deadline:
                raise TimeoutError("Child never became ready")
            time.sleep(0.02)

    return [sys.executable, "sleeper.py"], wait_until_ready
