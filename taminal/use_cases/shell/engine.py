"""
Command execution engine shared by the CLI and GUI front-ends.
"""

import logging
from typing import Mapping, Optional

from taminal.entities.Outcome import CommandOutcome
from taminal.entities.Session import Session
from taminal.ports.shell.builtin_command_port import BuiltinCommandPort
from taminal.use_cases.shell.complete_directory import CompleteDirectoryUseCase
from taminal.use_cases.shell.dispatch import BuiltinKind, BuiltinRoute, route_command
from taminal.use_cases.shell.parse_command import parse_command
from taminal.use_cases.shell.run_external import RunExternalCommandUseCase
from taminal.utils.paths import last_component


class ShellEngine:
    """
    Read-dispatch-execute core of the shell.

    Front-ends only talk to the engine: they submit raw lines, forward
    interrupts and read back prompt text, history and the terminated flag.
    They never mutate the Session themselves.
    """

    def __init__(
        self,
        session: Session,
        builtins: Mapping[BuiltinKind, BuiltinCommandPort],
        run_external: RunExternalCommandUseCase,
        complete_directory: CompleteDirectoryUseCase,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the engine.

        Args:
            session: Session state owned by this engine
            builtins: Handler for every BuiltinKind
            run_external: Use case launching non-builtin commands
            complete_directory: Use case computing cd completion hints
            logger: Logger instance to use for logging

        Raises:
            ValueError: If a builtin kind has no handler
        """
        missing = [kind.value for kind in BuiltinKind if kind not in builtins]
        if missing:
            raise ValueError(f"No handler for builtins: {', '.join(missing)}")

        self._session = session
        self._builtins = dict(builtins)
        self._run_external = run_external
        self._complete_directory = complete_directory
        self._logger = logger or logging.getLogger(__name__)
        self._logger.debug(f"Session started: {session.get_details()}")

    @property
    def session(self) -> Session:
        return self._session

    def submit(self, raw_line: str) -> Optional[CommandOutcome]:
        """
        Execute one input line.

        Args:
            raw_line: Line as typed by the user

        Returns:
            The CommandOutcome, or None for a blank line (or once terminated)
        """
        if self._session.terminated:
            self._logger.warning("Input submitted after the session terminated")
            return None

        parsed = parse_command(raw_line)
        if parsed is None:
            return None

        self._session.append_history(raw_line.rstrip("\r\n"))
        route = route_command(parsed.name)
        self._logger.debug(f"{parsed} -> {route}")

        self._session.begin_command()
        try:
            if isinstance(route, BuiltinRoute):
                outcome = self._builtins[route.kind].execute(self._session, list(parsed.args))
            else:
                outcome = self._run_external.execute(
                    self._session, parsed.name, list(parsed.args)
                )
        finally:
            self._session.end_command()

        self._logger.debug(f"Outcome: {outcome.get_details()}")
        failure = outcome.error
        if failure is not None:
            self._logger.info(
                f"{parsed.name} failed ({failure.kind.value}), exit code {outcome.exit_code}"
            )
        return outcome

    def interrupt(self) -> bool:
        """
        Forward an interrupt to the running child, if any.

        A command that is still starting its child receives the interrupt as
        soon as the child is attached.

        Returns:
            True if a child was signalled or will be; False when at the prompt (no-op)
        """
        child = self._session.request_interrupt()
        if child is not None:
            self._logger.info(f"Forwarding interrupt to pid={child.pid}")
            child.send_interrupt()
            return True
        if self._session.interrupt_pending:
            self._logger.info("Interrupt deferred until the child has started")
            return True
        return False

    def kill_running_child(self) -> bool:
        """
        Forcefully stop the running child, if any.

        Returns:
            True if a child was killed
        """
        child = self._session.running_child
        if child is None:
            return False
        child.kill()
        return True

    def has_running_child(self) -> bool:
        return self._session.running_child is not None

    def end_of_input(self) -> None:
        """End-of-input at an empty prompt behaves like exit."""
        self._session.terminate()

    def get_prompt_text(self) -> str:
        return last_component(self._session.working_directory)

    def get_working_directory(self) -> str:
        return self._session.working_directory

    def get_history(self) -> list[str]:
        return self._session.get_history()

    def is_terminated(self) -> bool:
        return self._session.terminated

    def complete(self, partial: str) -> list[str]:
        """Subdirectory names completing a partially typed cd argument."""
        return self._complete_directory.execute(self._session, partial)
