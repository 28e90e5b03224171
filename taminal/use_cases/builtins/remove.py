"""
Use case for rm: removing files and, with -r, whole directory trees.
"""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from taminal.entities.Outcome import CommandOutcome
from taminal.entities.Session import Session
from taminal.exceptions import ArgumentError, CommandError
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.ports.shell.builtin_command_port import BuiltinCommandPort
from taminal.utils.paths import resolve_operand


@dataclass(frozen=True)
class RemoveOptions:
    force: bool
    recursive: bool
    targets: list[str]


def parse_remove_args(args: list[str]) -> RemoveOptions:
    """
    Split rm arguments into flags and targets.

    Flags may be given separately or bundled (-r -f, -rf, -fR); '--' ends
    option parsing and a lone '-' is a target.

    Raises:
        ArgumentError: On an unknown flag letter
    """
    force = False
    recursive = False
    targets: list[str] = []
    options_done = False
    for arg in args:
        if options_done or arg == "-" or not arg.startswith("-"):
            targets.append(arg)
            continue
        if arg == "--":
            options_done = True
            continue
        for ch in arg[1:]:
            if ch == "f":
                force = True
            elif ch in ("r", "R"):
                recursive = True
            else:
                raise ArgumentError(f"rm: invalid option -- '{ch}'")
    return RemoveOptions(force=force, recursive=recursive, targets=targets)


class RemoveUseCase(BuiltinCommandPort):
    """Use case for removing files and directory trees."""

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
        Remove every target.

        Without -f every failure is reported and the remaining targets are
        still processed. With -f the outcome is always a success.
        """
        try:
            options = parse_remove_args(args)
        except ArgumentError as e:
            return CommandOutcome.failure(e)

        failures: list[CommandError] = []
        if not options.targets:
            failures.append(ArgumentError("rm: missing operand"))

        for operand in options.targets:
            path = resolve_operand(session.working_directory, operand)
            if options.recursive:
                failures.extend(self._remove_recursive(path, operand))
            else:
                try:
                    self._file_system.remove_file(path)
                except CommandError as e:
                    failures.append(e.with_context(f"rm: cannot remove '{operand}'"))

        outcome = CommandOutcome()
        if options.force:
            for failure in failures:
                self._logger.debug(f"Suppressed by -f: {failure.message}")
            return outcome
        for failure in failures:
            outcome.add_failure(failure)
        return outcome

    def _remove_recursive(self, root: str, operand: str) -> list[CommandError]:
        """
        Remove root and everything below it, children before their directory.

        Traversal uses an explicit stack. An entry that cannot be removed is
        reported and its ancestors are left in place, but every other
        removable entry is still removed. Nothing is rolled back.
        """
        if os.path.basename(os.path.normpath(operand)) in (".", ".."):
            return [
                ArgumentError(
                    f"rm: refusing to remove '.' or '..' directory: skipping '{operand}'"
                )
            ]

        failures: list[CommandError] = []
        # Paths of directories that still hold an entry we failed to remove.
        blocked: set[str] = set()
        # (path, shown to the user, parent path, children already pushed)
        stack: list[tuple[str, str, Optional[str], bool]] = [(root, operand, None, False)]

        while stack:
            path, shown, parent, expanded = stack.pop()

            if expanded:
                if path in blocked:
                    if parent is not None:
                        blocked.add(parent)
                    continue
                try:
                    self._file_system.remove_dir(path)
                except CommandError as e:
                    failures.append(e.with_context(f"rm: cannot remove '{shown}'"))
                    if parent is not None:
                        blocked.add(parent)
                continue

            if self._file_system.is_dir(path):
                try:
                    names = self._file_system.list_dir(path)
                except CommandError as e:
                    failures.append(e.with_context(f"rm: cannot remove '{shown}'"))
                    if parent is not None:
                        blocked.add(parent)
                    continue
                stack.append((path, shown, parent, True))
                for name in names:
                    stack.append(
                        (os.path.join(path, name), os.path.join(shown, name), path, False)
                    )
                continue

            try:
                self._file_system.remove_file(path)
            except CommandError as e:
                failures.append(e.with_context(f"rm: cannot remove '{shown}'"))
                if parent is not None:
                    blocked.add(parent)

        if failures:
            self._logger.info(
                f"Recursive removal of {root} left {len(failures)} entries in place"
            )
        return failures
