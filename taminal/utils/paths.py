"""Path helpers shared by the builtins and the completion provider.

Operands are resolved against the session's working directory, never against
the process's current directory, which the shell does not change.
"""

from __future__ import annotations

import os


def resolve_operand(base: str, operand: str) -> str:
    """Return operand as an absolute path, relative operands joined to base."""
    if os.path.isabs(operand):
        return operand
    return os.path.join(base, operand)


def home_directory() -> str:
    """User home from HOME or the OS profile lookup; '/' when it cannot be resolved."""
    home = os.path.expanduser("~")
    if home == "~" or not os.path.isdir(home):
        return os.path.abspath(os.sep)
    return home


def split_partial(partial: str) -> tuple[str, str]:
    """Split a partially typed path into (directory part, name prefix).

    'src/ma' -> ('src/', 'ma'); 'src/' -> ('src/', ''); 'ma' -> ('', 'ma').
    """
    head, sep, tail = partial.rpartition("/")
    if not sep:
        return "", partial
    return head + sep, tail


def last_component(path: str) -> str:
    name = os.path.basename(os.path.normpath(path))
    return name or path
