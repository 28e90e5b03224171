"""
Builtin command port interface.
"""

from abc import ABC, abstractmethod

from taminal.entities.Outcome import CommandOutcome
from taminal.entities.Session import Session


class BuiltinCommandPort(ABC):
    """Contract shared by every command the engine implements itself."""

    @abstractmethod
    def execute(self, session: Session, args: list[str]) -> CommandOutcome:
        """
        Run the builtin against the session.

        Args:
            session: Session state; only cd and exit/quit mutate it
            args: Argument tokens following the command name

        Returns:
            CommandOutcome; failures are reported in it, never raised
        """
        pass
