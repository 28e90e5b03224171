"""
Use cases for moving around the filesystem: cd and pwd.
"""

import logging
from typing import Optional

from taminal.entities.Outcome import CommandOutcome
from taminal.entities.Session import Session
from taminal.exceptions import ArgumentError, CommandError
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.ports.shell.builtin_command_port import BuiltinCommandPort
from taminal.utils.paths import home_directory, resolve_operand


class ChangeDirectoryUseCase(BuiltinCommandPort):
    """Use case for changing the session's working directory."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize the use case.

        Args:
            file_system: Port for filesystem operations
            logger: Logger instance to use for logging
        """
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, args: list[str]) -> CommandOutcome:
        """
        Change directory to args[0], or to the home directory without arguments.

        The working directory is only replaced once the target has been
        validated, so a failed cd leaves the session untouched.
        """
        if len(args) > 1:
            return CommandOutcome.failure(ArgumentError("cd: too many arguments"))

        operand = args[0] if args else home_directory()
        target = resolve_operand(session.working_directory, operand)
        try:
            canonical = self._file_system.resolve_directory(target)
        except CommandError as e:
            self._logger.info(f"cd to {target} refused: {e.kind.value}")
            return CommandOutcome.failure(e.with_context(f"cd: {operand}"))

        self._logger.info(f"Working directory: {session.working_directory} -> {canonical}")
        session.working_directory = canonical
        return CommandOutcome()


class PrintWorkingDirectoryUseCase(BuiltinCommandPort):
    def execute(self, session: Session, args: list[str]) -> CommandOutcome:
        return CommandOutcome(output_lines=[session.working_directory])
