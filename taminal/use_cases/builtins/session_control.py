import logging
from typing import Optional

from taminal.entities.Outcome import CommandOutcome, DisplayAction
from taminal.entities.Session import Session
from taminal.ports.shell.builtin_command_port import BuiltinCommandPort

HELP_TEXT = """\
=== Taminal - Available Commands ===

File and Directory Operations:
  ls [dir]      - List directory contents
  cd [dir]      - Change directory (no argument: home directory)
  pwd           - Print working directory
  mkdir <dir>   - Create directory
  rmdir <dir>   - Remove empty directory
  rm <file>     - Remove file
    -f          - Force removal (ignore errors)
    -r, -R      - Remove directories and their contents recursively

Terminal Control:
  clear         - Clear screen
  help          - Show this help message
  exit/quit     - Exit the terminal

Other Commands:
  [command]     - Execute as external command

Shortcuts:
  Ctrl+C        - Interrupt running command
  Ctrl+D        - Exit on empty line
  Tab           - Suggest directories while typing a cd argument

Examples:
  rm file.txt           - Remove a file
  rm -rf directory/     - Remove a directory and all its contents
  mkdir new_folder      - Create a new directory
  rmdir old_folder      - Remove an empty directory"""


class ClearUseCase(BuiltinCommandPort):
    def execute(self, session: Session, args: list[str]) -> CommandOutcome:
        return CommandOutcome(display_action=DisplayAction.CLEAR)


class HelpUseCase(BuiltinCommandPort):
    def execute(self, session: Session, args: list[str]) -> CommandOutcome:
        return CommandOutcome(output_lines=HELP_TEXT.splitlines())


class ExitUseCase(BuiltinCommandPort):
    """Marks the session as terminated; the front-end stops before re-prompting."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger(__name__)

    def execute(self, session: Session, args: list[str]) -> CommandOutcome:
        self._logger.info("Session terminated by user")
        session.terminate()
        return CommandOutcome()
