"""
Use case for listing the entries of a directory.
"""

import logging
from typing import Optional

from taminal.entities.Outcome import CommandOutcome
from taminal.entities.Session import Session
from taminal.exceptions import ArgumentError, CommandError
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.ports.shell.builtin_command_port import BuiltinCommandPort
from taminal.utils.paths import resolve_operand


class ListDirectoryUseCase(BuiltinCommandPort):
    """Use case for listing entries in a directory."""

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
        List entry names of a directory.

        Args:
            session: Session whose working directory is the default target
            args: At most one directory operand

        Returns:
            CommandOutcome with one name per line, sorted case-sensitively
        """
        if len(args) > 1:
            return CommandOutcome.failure(ArgumentError("ls: too many arguments"))

        operand = args[0] if args else "."
        directory = resolve_operand(session.working_directory, operand)
        try:
            self._logger.info(f"Listing directory: {directory}")
            names = sorted(self._file_system.list_dir(directory))
            self._logger.info(f"Found {len(names)} entries")
        except CommandError as e:
            return CommandOutcome.failure(e.with_context(f"ls: cannot access '{operand}'"))
        return CommandOutcome(output_lines=names)
