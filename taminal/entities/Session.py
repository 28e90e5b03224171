"""
Session domain entity.
"""

from __future__ import annotations

import os
import threading
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from taminal.ports.process.process_launcher_port import ChildProcessPort


class Session:
    """
    Mutable state shared by every command submitted within one run of the shell.

    History and the running child are read from other threads (GUI recall,
    interrupt button), so every access to them goes through a lock.
    """

    def __init__(self, working_directory: Optional[str] = None):
        """
        Initialize the Session.

        Args:
            working_directory: Initial directory. Defaults to the process's current directory.

        Raises:
            NotADirectoryError: If the initial directory is not an existing directory
        """
        start = os.path.realpath(working_directory or os.getcwd())
        if not os.path.isdir(start):
            raise NotADirectoryError(f"Not a directory: {start}")

        self.working_directory: str = start
        self._history: list[str] = []
        self._running_child: Optional[ChildProcessPort] = None
        self._command_active = False
        self._interrupt_pending = False
        self._terminated = False
        self._lock = threading.Lock()

    def append_history(self, line: str) -> None:
        with self._lock:
            self._history.append(line)

    def get_history(self) -> list[str]:
        """Snapshot of the submitted lines, oldest first."""
        with self._lock:
            return list(self._history)

    @property
    def running_child(self) -> Optional[ChildProcessPort]:
        with self._lock:
            return self._running_child

    @property
    def interrupt_pending(self) -> bool:
        with self._lock:
            return self._interrupt_pending

    def begin_command(self) -> None:
        with self._lock:
            self._command_active = True
            self._interrupt_pending = False

    def end_command(self) -> None:
        with self._lock:
            self._command_active = False
            self._interrupt_pending = False

    def request_interrupt(self) -> Optional[ChildProcessPort]:
        """
        Claim the child an interrupt should be delivered to.

        While a command is executing but its child has not been attached yet,
        the request is kept and handed over by attach_child.

        Returns:
            The running child, or None if there is nothing to signal right now
        """
        with self._lock:
            if self._running_child is None and self._command_active:
                self._interrupt_pending = True
            return self._running_child

    def attach_child(self, child: ChildProcessPort) -> bool:
        """
        Register the foreground child.

        Returns:
            True if an interrupt was requested before the child was attached
        """
        with self._lock:
            self._running_child = child
            pending = self._interrupt_pending
            self._interrupt_pending = False
            return pending

    def release_child(self) -> None:
        with self._lock:
            self._running_child = None

    @property
    def terminated(self) -> bool:
        return self._terminated

    def terminate(self) -> None:
        self._terminated = True

    def get_details(self) -> dict[str, object]:
        return {
            "working_directory": self.working_directory,
            "history_size": len(self.get_history()),
            "child_running": self.running_child is not None,
            "terminated": self._terminated,
        }

    def __repr__(self) -> str:
        return f"Session(working_directory='{self.working_directory}')"
