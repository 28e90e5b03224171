"""
File system port interface defining the contract for filesystem operations.
"""

from abc import ABC, abstractmethod


class FileSystemPort(ABC):
    """Port interface for the filesystem primitives the builtins rely on.

    Implementations translate OS failures into CommandError with the matching
    ErrorKind; callers never see a raw OSError.
    """

    @abstractmethod
    def exists(self, path: str) -> bool:
        """Return True if something (file, directory or dangling link) exists at path."""
        pass

    @abstractmethod
    def is_dir(self, path: str) -> bool:
        """
        Return True if path is a directory.

        Symbolic links are not followed, so a link to a directory is not a directory.
        """
        pass

    @abstractmethod
    def resolve_directory(self, path: str) -> str:
        """
        Canonicalize a directory path for use as a working directory.

        Args:
            path: Absolute path of the candidate directory

        Returns:
            The canonical absolute path

        Raises:
            CommandError: PathNotFoundError, NotADirectoryError or PermissionError
        """
        pass

    @abstractmethod
    def list_dir(self, path: str) -> list[str]:
        """
        List entry names of a directory, unsorted and without recursion.

        Raises:
            CommandError: If the directory cannot be read
        """
        pass

    @abstractmethod
    def make_dir(self, path: str) -> None:
        """
        Create a single directory; the parent must already exist.

        Raises:
            CommandError: AlreadyExistsError, PathNotFoundError or PermissionError
        """
        pass

    @abstractmethod
    def remove_dir(self, path: str) -> None:
        """
        Remove an empty directory.

        Raises:
            CommandError: NotEmptyError, PathNotFoundError, NotADirectoryError or PermissionError
        """
        pass

    @abstractmethod
    def remove_file(self, path: str) -> None:
        """
        Remove a file or symbolic link.

        Raises:
            CommandError: PathNotFoundError, IsADirectoryError or PermissionError
        """
        pass
