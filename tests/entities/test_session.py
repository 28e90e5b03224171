"""
Tests for the Session entity.
"""

import os
import threading
from unittest.mock import MagicMock

import pytest

from taminal.entities.Session import Session


class TestSession:
    """Test cases for the Session entity."""

    def test_initialization_defaults_to_process_cwd(self):
        """Test that a session starts in the process's current directory."""
        session = Session()

        assert session.working_directory == os.path.realpath(os.getcwd())
        assert session.get_history() == []
        assert session.running_child is None
        assert session.terminated is False

    def test_initialization_with_directory(self, temp_directory):
        """Test that an explicit start directory is canonicalized."""
        session = Session(os.path.join(temp_directory, "subdir", ".."))

        assert session.working_directory == temp_directory

    def test_initialization_with_file_path(self, temp_directory):
        """Test that a file cannot be the working directory."""
        with pytest.raises(NotADirectoryError, match="Not a directory"):
            Session(os.path.join(temp_directory, "test1.txt"))

    def test_history_is_append_only_snapshot(self, session):
        """Test that get_history returns a copy in submission order."""
        session.append_history("ls")
        session.append_history("pwd")

        history = session.get_history()
        history.append("tampered")

        assert session.get_history() == ["ls", "pwd"]

    def test_attach_and_release_child(self, session):
        """Test the running child is only present between attach and release."""
        child = MagicMock()

        session.attach_child(child)
        assert session.running_child is child

        session.release_child()
        assert session.running_child is None

    def test_terminate(self, session):
        """Test that terminate sets the flag."""
        session.terminate()

        assert session.terminated is True
        assert session.get_details()["terminated"] is True

    def test_concurrent_history_appends(self, session):
        """Test that appends from several threads are all recorded."""

        def _append(prefix: str) -> None:
            for i in range(200):
                session.append_history(f"{prefix}{i}")

        threads = [threading.Thread(target=_append, args=(p,)) for p in "abcd"]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        history = session.get_history()
        assert len(history) == 800
        assert [h for h in history if h.startswith("a")] == [f"a{i}" for i in range(200)]

    def test_interrupt_at_prompt_is_not_kept(self, session):
        """Test that an interrupt outside a command is dropped."""
        assert session.request_interrupt() is None
        assert not session.interrupt_pending
        assert session.attach_child(MagicMock()) is False

    def test_interrupt_before_child_is_attached(self, session):
        """Test that an interrupt requested while a child starts is handed to it."""
        session.begin_command()

        assert session.request_interrupt() is None
        assert session.interrupt_pending

        assert session.attach_child(MagicMock()) is True
        assert not session.interrupt_pending

    def test_end_command_drops_pending_interrupt(self, session):
        """Test that a pending interrupt does not leak into the next command."""
        session.begin_command()
        session.request_interrupt()
        session.end_command()

        session.begin_command()
        assert session.attach_child(MagicMock()) is False

    def test_request_interrupt_returns_running_child(self, session):
        """Test that a running child is returned and nothing is deferred."""
        child = MagicMock()
        session.begin_command()
        session.attach_child(child)

        assert session.request_interrupt() is child
        assert not session.interrupt_pending
