"""
Custom exceptions for the application.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """Failure categories reported to the front-ends."""

    PATH_NOT_FOUND = "PathNotFoundError"
    NOT_A_DIRECTORY = "NotADirectoryError"
    IS_A_DIRECTORY = "IsADirectoryError"
    ALREADY_EXISTS = "AlreadyExistsError"
    NOT_EMPTY = "NotEmptyError"
    PERMISSION_DENIED = "PermissionError"
    SPAWN = "SpawnError"
    ARGUMENT = "ArgumentError"


class BaseAppError(Exception):
    """Base exception class for application errors."""

    pass


class ConfigurationError(BaseAppError):
    """Exception raised for configuration errors."""

    pass


class CommandError(BaseAppError):
    """Exception raised when a shell command cannot complete."""

    def __init__(self, kind: ErrorKind, message: str, exit_code: int = 1):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.exit_code = exit_code

    def with_context(self, context: str) -> "CommandError":
        """Copy of this error with its message prefixed, e.g. "rm: cannot remove 'x'"."""
        return CommandError(self.kind, f"{context}: {self.message}", self.exit_code)


class SpawnError(CommandError):
    """Exception raised when an external command cannot be started."""

    def __init__(self, message: str, exit_code: int = 127):
        super().__init__(ErrorKind.SPAWN, message, exit_code)


class ArgumentError(CommandError):
    """Exception raised for wrong arity or unknown options of a builtin."""

    def __init__(self, message: str):
        super().__init__(ErrorKind.ARGUMENT, message, 2)
