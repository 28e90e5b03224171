"""
Command outcome domain entities.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from taminal.exceptions import CommandError, ErrorKind


class DisplayAction(str, Enum):
    """Instruction for the front-end about its own display buffer."""

    NONE = "none"
    CLEAR = "clear"


@dataclass(frozen=True)
class CommandFailure:
    kind: ErrorKind
    message: str

    @classmethod
    def from_error(cls, error: CommandError) -> "CommandFailure":
        return cls(kind=error.kind, message=error.message)


@dataclass
class CommandOutcome:
    """Result of executing one parsed command."""

    output_lines: list[str] = field(default_factory=list)
    errors: list[CommandFailure] = field(default_factory=list)
    exit_code: int = 0
    display_action: DisplayAction = DisplayAction.NONE

    @property
    def error(self) -> Optional[CommandFailure]:
        """First failure reported by the command, if any."""
        return self.errors[0] if self.errors else None

    @property
    def succeeded(self) -> bool:
        return self.exit_code == 0 and not self.errors

    def add_failure(self, error: CommandError) -> None:
        """Record a failure; the first failure decides the exit code."""
        if not self.errors:
            self.exit_code = error.exit_code
        self.errors.append(CommandFailure.from_error(error))

    @classmethod
    def failure(cls, error: CommandError) -> "CommandOutcome":
        outcome = cls()
        outcome.add_failure(error)
        return outcome

    def get_details(self) -> dict[str, object]:
        return {
            "output_lines": list(self.output_lines),
            "errors": [
                {"kind": f.kind.value, "message": f.message} for f in self.errors
            ],
            "exit_code": self.exit_code,
            "display_action": self.display_action.value,
        }
