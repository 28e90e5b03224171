from abc import ABC, abstractmethod
from dataclasses import dataclass, field


@dataclass(frozen=True)
class ProcessResult:
    exit_code: int
    stdout_lines: list[str] = field(default_factory=list)
    stderr_lines: list[str] = field(default_factory=list)


class ChildProcessPort(ABC):
    """Handle on a running external command."""

    @property
    @abstractmethod
    def pid(self) -> int:
        pass

    @abstractmethod
    def wait(self) -> ProcessResult:
        """
        Block until the child exits.

        Returns:
            ProcessResult; a child killed by signal N reports exit code 128 + N
        """
        pass

    @abstractmethod
    def send_interrupt(self) -> None:
        """Deliver the platform's interrupt signal to the child only."""
        pass

    @abstractmethod
    def kill(self) -> None:
        """Terminate the child unconditionally; used when it ignores interrupts."""
        pass


class ProcessLauncherPort(ABC):
    @abstractmethod
    def spawn(
        self, argv: list[str], cwd: str, capture_output: bool = False
    ) -> ChildProcessPort:
        """
        Start an external command.

        Args:
            argv: Program name followed by its arguments
            cwd: Working directory of the child
            capture_output: Collect stdout/stderr instead of inheriting the streams

        Returns:
            Handle on the started child

        Raises:
            SpawnError: If the program cannot be found or executed
        """
        pass
