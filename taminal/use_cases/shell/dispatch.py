"""
Static routing of command names to builtins or external execution.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class BuiltinKind(str, Enum):
    CD = "cd"
    PWD = "pwd"
    LS = "ls"
    MKDIR = "mkdir"
    RMDIR = "rmdir"
    RM = "rm"
    CLEAR = "clear"
    HELP = "help"
    EXIT = "exit"


BUILTIN_TABLE: dict[str, BuiltinKind] = {
    "cd": BuiltinKind.CD,
    "pwd": BuiltinKind.PWD,
    "ls": BuiltinKind.LS,
    "mkdir": BuiltinKind.MKDIR,
    "rmdir": BuiltinKind.RMDIR,
    "rm": BuiltinKind.RM,
    "clear": BuiltinKind.CLEAR,
    "help": BuiltinKind.HELP,
    "exit": BuiltinKind.EXIT,
    "quit": BuiltinKind.EXIT,
}


@dataclass(frozen=True)
class BuiltinRoute:
    kind: BuiltinKind


@dataclass(frozen=True)
class ExternalRoute:
    name: str


Route = Union[BuiltinRoute, ExternalRoute]


def route_command(name: str) -> Route:
    """Exact, case-sensitive lookup; builtins shadow executables of the same name."""
    kind: Optional[BuiltinKind] = BUILTIN_TABLE.get(name)
    if kind is None:
        return ExternalRoute(name)
    return BuiltinRoute(kind)
