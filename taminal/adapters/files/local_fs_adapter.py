"""
Local file system adapter implementation for filesystem operations.
"""

import errno
import logging
import os
import stat

from typing_extensions import override

from taminal.exceptions import CommandError, ErrorKind
from taminal.ports.files.file_system_port import FileSystemPort

_ERRNO_KINDS: dict[int, tuple[ErrorKind, str]] = {
    errno.ENOENT: (ErrorKind.PATH_NOT_FOUND, "No such file or directory"),
    errno.ENOTDIR: (ErrorKind.NOT_A_DIRECTORY, "Not a directory"),
    errno.EISDIR: (ErrorKind.IS_A_DIRECTORY, "Is a directory"),
    errno.EEXIST: (ErrorKind.ALREADY_EXISTS, "File exists"),
    errno.ENOTEMPTY: (ErrorKind.NOT_EMPTY, "Directory not empty"),
    errno.EACCES: (ErrorKind.PERMISSION_DENIED, "Permission denied"),
    errno.EPERM: (ErrorKind.PERMISSION_DENIED, "Operation not permitted"),
    errno.EROFS: (ErrorKind.PERMISSION_DENIED, "Read-only file system"),
}


class LocalFileSystemAdapter(FileSystemPort):
    """Local file system implementation of the filesystem port."""

    def __init__(self, logger: logging.Logger | None = None):
        """
        Initialize the adapter with an optional logger.

        Args:
            logger: Logger instance to use for logging. If None, a default logger will be created.
        """
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _translate(self, exc: OSError, path: str) -> CommandError:
        """
        Convert an OSError into a CommandError carrying the matching kind.

        Args:
            exc: The error raised by the os module
            path: Path the operation was applied to (for logging only)

        Returns:
            CommandError whose message is the bare reason, e.g. "Permission denied"
        """
        kind, reason = _ERRNO_KINDS.get(
            exc.errno or 0,
            (ErrorKind.PERMISSION_DENIED, exc.strerror or str(exc)),
        )
        self._logger.debug(f"{kind.value} on {path}: {exc}")
        return CommandError(kind, reason)

    @override
    def exists(self, path: str) -> bool:
        return os.path.lexists(path)

    @override
    def is_dir(self, path: str) -> bool:
        try:
            return stat.S_ISDIR(os.lstat(path).st_mode)
        except OSError:
            return False

    @override
    def resolve_directory(self, path: str) -> str:
        canonical = os.path.realpath(path)
        if not os.path.exists(canonical):
            raise CommandError(ErrorKind.PATH_NOT_FOUND, "No such file or directory")
        if not os.path.isdir(canonical):
            raise CommandError(ErrorKind.NOT_A_DIRECTORY, "Not a directory")
        # cd targets must be both listable and searchable.
        if not os.access(canonical, os.R_OK | os.X_OK):
            raise CommandError(ErrorKind.PERMISSION_DENIED, "Permission denied")
        return canonical

    @override
    def list_dir(self, path: str) -> list[str]:
        try:
            return os.listdir(path)
        except OSError as e:
            raise self._translate(e, path)

    @override
    def make_dir(self, path: str) -> None:
        if os.path.lexists(path):
            raise CommandError(ErrorKind.ALREADY_EXISTS, "File exists")
        try:
            os.mkdir(path)
        except OSError as e:
            raise self._translate(e, path)
        self._logger.info(f"Created directory {path}")

    @override
    def remove_dir(self, path: str) -> None:
        try:
            os.rmdir(path)
        except OSError as e:
            # Some platforms report a non-empty directory as EEXIST.
            if e.errno in (errno.ENOTEMPTY, errno.EEXIST):
                raise CommandError(ErrorKind.NOT_EMPTY, "Directory not empty")
            raise self._translate(e, path)
        self._logger.info(f"Removed directory {path}")

    @override
    def remove_file(self, path: str) -> None:
        if self.is_dir(path):
            raise CommandError(ErrorKind.IS_A_DIRECTORY, "Is a directory")
        try:
            os.unlink(path)
        except OSError as e:
            raise self._translate(e, path)
        self._logger.info(f"Removed {path}")
