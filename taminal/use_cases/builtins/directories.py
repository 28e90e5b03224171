"""
Use cases for creating and removing empty directories.
"""

import logging
from typing import Optional

from taminal.entities.Outcome import CommandOutcome
from taminal.entities.Session import Session
from taminal.exceptions import ArgumentError, CommandError
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.ports.shell.builtin_command_port import BuiltinCommandPort
from taminal.utils.paths import resolve_operand


class MakeDirectoryUseCase(BuiltinCommandPort):
    """Use case for mkdir: one directory per operand, parents are never created."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, args: list[str]) -> CommandOutcome:
        if not args:
            return CommandOutcome.failure(ArgumentError("mkdir: missing operand"))

        outcome = CommandOutcome()
        for operand in args:
            path = resolve_operand(session.working_directory, operand)
            try:
                self._file_system.make_dir(path)
            except CommandError as e:
                self._logger.info(f"mkdir {path} failed: {e.kind.value}")
                outcome.add_failure(
                    e.with_context(f"mkdir: cannot create directory '{operand}'")
                )
        return outcome


class RemoveDirectoryUseCase(BuiltinCommandPort):
    """Use case for rmdir: only empty directories are removed."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, args: list[str]) -> CommandOutcome:
        if not args:
            return CommandOutcome.failure(ArgumentError("rmdir: missing operand"))

        outcome = CommandOutcome()
        for operand in args:
            path = resolve_operand(session.working_directory, operand)
            try:
                self._file_system.remove_dir(path)
            except CommandError as e:
                self._logger.info(f"rmdir {path} failed: {e.kind.value}")
                outcome.add_failure(e.with_context(f"rmdir: failed to remove '{operand}'"))
        return outcome
