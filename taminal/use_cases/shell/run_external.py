import logging
from typing import Optional

from taminal.entities.Outcome import CommandOutcome
from taminal.entities.Session import Session
from taminal.exceptions import SpawnError
from taminal.ports.process.process_launcher_port import ProcessLauncherPort


class RunExternalCommandUseCase:
    def __init__(
        self,
        launcher: ProcessLauncherPort,
        capture_output: bool = False,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self._launcher = launcher
        self._capture_output = capture_output
        self._logger = logger or logging.getLogger(__name__)

    @property
    def capture_output(self) -> bool:
        return self._capture_output

    def execute(self, session: Session, name: str, args: list[str]) -> CommandOutcome:
        """
        Run name with args in the session's working directory and wait for it.

        The child is registered on the session for the whole run so that an
        interrupt can be forwarded to it.
        """
        try:
            child = self._launcher.spawn(
                [name, *args],
                cwd=session.working_directory,
                capture_output=self._capture_output,
            )
        except SpawnError as e:
            self._logger.info(f"Could not start {name}: {e.message}")
            return CommandOutcome.failure(e)

        interrupted_early = session.attach_child(child)
        try:
            if interrupted_early:
                self._logger.info(f"Delivering interrupt requested while {name} was starting")
                child.send_interrupt()
            result = child.wait()
        finally:
            session.release_child()

        self._logger.info(f"{name} (pid={child.pid}) exited with {result.exit_code}")
        lines = list(result.stdout_lines)
        lines.extend(f"[ERROR] {line}" for line in result.stderr_lines)
        return CommandOutcome(output_lines=lines, exit_code=result.exit_code)
