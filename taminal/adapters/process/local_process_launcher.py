import logging
import os
import signal
import subprocess
from typing import Optional

from typing_extensions import override

from taminal.exceptions import SpawnError
from taminal.ports.process.process_launcher_port import (
    ChildProcessPort,
    ProcessLauncherPort,
    ProcessResult,
)


def _status_to_exit_code(returncode: int) -> int:
    # Popen reports death by signal N as -N; shells report 128 + N.
    if returncode < 0:
        return 128 - returncode
    return returncode


class LocalChildProcess(ChildProcessPort):
    def __init__(
        self,
        proc: subprocess.Popen,
        capture_output: bool,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._proc = proc
        self._capture_output = capture_output
        self._logger = logger or logging.getLogger(__name__)

    @property
    @override
    def pid(self) -> int:
        return self._proc.pid

    @override
    def wait(self) -> ProcessResult:
        if self._capture_output:
            out, err = self._proc.communicate()
            return ProcessResult(
                exit_code=_status_to_exit_code(self._proc.returncode),
                stdout_lines=(out or "").splitlines(),
                stderr_lines=(err or "").splitlines(),
            )
        returncode = self._proc.wait()
        return ProcessResult(exit_code=_status_to_exit_code(returncode))

    @override
    def send_interrupt(self) -> None:
        if self._proc.poll() is not None:
            return
        sig = signal.CTRL_BREAK_EVENT if os.name == "nt" else signal.SIGINT  # type: ignore[attr-defined]
        try:
            self._proc.send_signal(sig)
            self._logger.info(f"Sent interrupt to child pid={self._proc.pid}")
        except ProcessLookupError:
            # Child exited between poll() and send_signal().
            self._logger.debug(f"Child pid={self._proc.pid} already gone")

    @override
    def kill(self) -> None:
        if self._proc.poll() is not None:
            return
        try:
            self._proc.kill()
            self._logger.warning(f"Killed child pid={self._proc.pid}")
        except ProcessLookupError:
            self._logger.debug(f"Child pid={self._proc.pid} already gone")


class LocalProcessLauncher(ProcessLauncherPort):
    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self._logger = logger or logging.getLogger(__name__)

    @override
    def spawn(
        self, argv: list[str], cwd: str, capture_output: bool = False
    ) -> ChildProcessPort:
        name = argv[0]
        if not os.path.isdir(cwd):
            raise SpawnError(f"{name}: working directory {cwd} no longer exists", 126)

        kwargs: dict[str, object] = {"cwd": cwd}
        if capture_output:
            kwargs.update(
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
            )
        if os.name == "nt":
            # Needed so CTRL_BREAK_EVENT reaches the child and not the shell.
            kwargs["creationflags"] = subprocess.CREATE_NEW_PROCESS_GROUP  # type: ignore[attr-defined]

        try:
            proc = subprocess.Popen(argv, **kwargs)  # type: ignore[call-overload]
        except (FileNotFoundError, NotADirectoryError):
            self._logger.info(f"Command not found: {name}")
            raise SpawnError(f"{name}: command not found", 127)
        except PermissionError:
            self._logger.info(f"Permission denied executing: {name}")
            raise SpawnError(f"{name}: permission denied", 126)
        except OSError as e:
            self._logger.error(f"Failed to launch {name}: {e}")
            raise SpawnError(f"{name}: {e.strerror or e}", 126)

        self._logger.info(f"Launched {name} (pid={proc.pid}) in {cwd}")
        return LocalChildProcess(proc, capture_output, self._logger)
