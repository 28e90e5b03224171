"""
Tests for the ListDirectoryUseCase.
"""

import os
from unittest.mock import MagicMock

from taminal.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from taminal.exceptions import CommandError, ErrorKind
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.use_cases.builtins.list_directory import ListDirectoryUseCase


class TestListDirectoryUseCase:
    """Test cases for the ListDirectoryUseCase."""

    def test_execute_success(self, session, mock_logger):
        """Test listing the working directory."""
        use_case = ListDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        outcome = use_case.execute(session, [])

        assert outcome.succeeded
        assert outcome.output_lines == ["empty", "subdir", "test1.txt", "test2.py"]

    def test_sorting_is_case_sensitive(self, session, mock_logger):
        """Test that uppercase names sort before lowercase ones."""
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.list_dir.return_value = ["b", "C", "a"]
        use_case = ListDirectoryUseCase(mock_fs, mock_logger)

        outcome = use_case.execute(session, [])

        assert outcome.output_lines == ["C", "a", "b"]

    def test_relative_operand(self, session, temp_directory, mock_logger):
        """Test that the operand is resolved against the working directory."""
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.list_dir.return_value = ["test3.md"]
        use_case = ListDirectoryUseCase(mock_fs, mock_logger)

        outcome = use_case.execute(session, ["subdir"])

        assert outcome.output_lines == ["test3.md"]
        mock_fs.list_dir.assert_called_once_with(os.path.join(temp_directory, "subdir"))

    def test_empty_directory(self, session, mock_logger):
        """Test that an empty directory produces no lines."""
        use_case = ListDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        outcome = use_case.execute(session, ["empty"])

        assert outcome.succeeded
        assert outcome.output_lines == []

    def test_missing_directory(self, session, mock_logger):
        """Test listing a directory that does not exist."""
        use_case = ListDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        outcome = use_case.execute(session, ["missing"])

        assert outcome.exit_code == 1
        assert outcome.error.kind is ErrorKind.PATH_NOT_FOUND
        assert outcome.error.message == "ls: cannot access 'missing': No such file or directory"

    def test_file_operand(self, session, mock_logger):
        """Test listing a regular file."""
        use_case = ListDirectoryUseCase(LocalFileSystemAdapter(mock_logger), mock_logger)

        outcome = use_case.execute(session, ["test1.txt"])

        assert outcome.error.kind is ErrorKind.NOT_A_DIRECTORY

    def test_too_many_arguments(self, session, mock_logger):
        """Test that only one operand is accepted."""
        mock_fs = MagicMock(spec=FileSystemPort)
        use_case = ListDirectoryUseCase(mock_fs, mock_logger)

        outcome = use_case.execute(session, ["a", "b"])

        assert outcome.error.kind is ErrorKind.ARGUMENT
        mock_fs.list_dir.assert_not_called()

    def test_port_error_is_logged_and_reported(self, session, mock_logger):
        """Test that a permission error from the port becomes a failed outcome."""
        mock_fs = MagicMock(spec=FileSystemPort)
        mock_fs.list_dir.side_effect = CommandError(
            ErrorKind.PERMISSION_DENIED, "Permission denied"
        )
        use_case = ListDirectoryUseCase(mock_fs, mock_logger)

        outcome = use_case.execute(session, ["locked"])

        assert outcome.error.kind is ErrorKind.PERMISSION_DENIED
        assert outcome.output_lines == []
        mock_logger.info.assert_called_once()
