"""
Use case computing directory completion hints for a partial cd argument.
"""

import logging
from typing import Optional

from taminal.entities.Session import Session
from taminal.exceptions import CommandError
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.utils.paths import resolve_operand, split_partial


class CompleteDirectoryUseCase:
    """Use case for listing subdirectories matching a typed prefix."""

    def __init__(
        self,
        file_system: FileSystemPort,
        logger: Optional[logging.Logger] = None,
    ):
        self._file_system = file_system
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, partial: str) -> list[str]:
        """
        List subdirectory names for a partially typed path.

        Args:
            session: Session whose working directory anchors relative input
            partial: Text typed so far, e.g. "src/ma"

        Returns:
            Sorted names of subdirectories of the typed base starting with the
            typed prefix (case-sensitive). Empty when the base cannot be read.
        """
        directory_part, prefix = split_partial(partial)
        base = resolve_operand(session.working_directory, directory_part or ".")
        try:
            names = self._file_system.list_dir(base)
        except CommandError as e:
            self._logger.debug(f"No completion for {partial!r}: {e.message}")
            return []

        matches = [
            name
            for name in names
            if name.startswith(prefix) and self._is_directory(base, name)
        ]
        return sorted(matches)

    def _is_directory(self, base: str, name: str) -> bool:
        # cd follows symlinks, so a link to a directory is a valid candidate.
        path = resolve_operand(base, name)
        if self._file_system.is_dir(path):
            return True
        try:
            self._file_system.resolve_directory(path)
            return True
        except CommandError:
            return False
