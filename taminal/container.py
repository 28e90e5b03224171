"""
Dependency injection container for managing application dependencies.
"""

import logging
from typing import Optional

from taminal.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from taminal.adapters.process.local_process_launcher import LocalProcessLauncher
from taminal.config.settings import Settings
from taminal.entities.Session import Session
from taminal.ports.files.file_system_port import FileSystemPort
from taminal.ports.process.process_launcher_port import ProcessLauncherPort
from taminal.ports.shell.builtin_command_port import BuiltinCommandPort
from taminal.use_cases.builtins.directories import (
    MakeDirectoryUseCase,
    RemoveDirectoryUseCase,
)
from taminal.use_cases.builtins.list_directory import ListDirectoryUseCase
from taminal.use_cases.builtins.navigation import (
    ChangeDirectoryUseCase,
    PrintWorkingDirectoryUseCase,
)
from taminal.use_cases.builtins.remove import RemoveUseCase
from taminal.use_cases.builtins.session_control import (
    ClearUseCase,
    ExitUseCase,
    HelpUseCase,
)
from taminal.use_cases.shell.complete_directory import CompleteDirectoryUseCase
from taminal.use_cases.shell.dispatch import BuiltinKind
from taminal.use_cases.shell.engine import ShellEngine
from taminal.use_cases.shell.run_external import RunExternalCommandUseCase


class DependencyContainer:
    """
    Container for managing application dependencies using dependency injection.
    """

    def __init__(self):
        self._instances = {}
        self._logger = logging.getLogger(__name__)

    def get_settings(self) -> Settings:
        """
        Get application settings, read once from the environment.

        Raises:
            ConfigurationError: If an environment variable holds an invalid value
        """
        if "settings" not in self._instances:
            self._instances["settings"] = Settings()
        return self._instances["settings"]

    def get_file_system(self) -> FileSystemPort:
        """
        Get filesystem adapter instance.

        Returns:
            FileSystemPort implementation
        """
        if "file_system" not in self._instances:
            self._instances["file_system"] = LocalFileSystemAdapter(self._logger)
        return self._instances["file_system"]

    def get_process_launcher(self) -> ProcessLauncherPort:
        """
        Get process launcher instance.

        Returns:
            ProcessLauncherPort implementation
        """
        if "process_launcher" not in self._instances:
            self._instances["process_launcher"] = LocalProcessLauncher(self._logger)
        return self._instances["process_launcher"]

    def get_builtins(self) -> dict[BuiltinKind, BuiltinCommandPort]:
        """
        Get the builtin handlers keyed by kind, all sharing the filesystem adapter.
        """
        if "builtins" not in self._instances:
            fs = self.get_file_system()
            self._instances["builtins"] = {
                BuiltinKind.CD: ChangeDirectoryUseCase(fs, self._logger),
                BuiltinKind.PWD: PrintWorkingDirectoryUseCase(),
                BuiltinKind.LS: ListDirectoryUseCase(fs, self._logger),
                BuiltinKind.MKDIR: MakeDirectoryUseCase(fs, self._logger),
                BuiltinKind.RMDIR: RemoveDirectoryUseCase(fs, self._logger),
                BuiltinKind.RM: RemoveUseCase(fs, self._logger),
                BuiltinKind.CLEAR: ClearUseCase(),
                BuiltinKind.HELP: HelpUseCase(),
                BuiltinKind.EXIT: ExitUseCase(self._logger),
            }
        return self._instances["builtins"]

    def get_run_external_use_case(self, capture_output: bool = False) -> RunExternalCommandUseCase:
        """
        Get the external command use case.

        Args:
            capture_output: True for front-ends without a terminal (GUI)
        """
        key = "run_external_captured" if capture_output else "run_external"
        if key not in self._instances:
            self._instances[key] = RunExternalCommandUseCase(
                self.get_process_launcher(), capture_output, self._logger
            )
        return self._instances[key]

    def get_complete_directory_use_case(self) -> CompleteDirectoryUseCase:
        if "complete_directory" not in self._instances:
            self._instances["complete_directory"] = CompleteDirectoryUseCase(
                self.get_file_system(), self._logger
            )
        return self._instances["complete_directory"]

    def create_shell_engine(
        self,
        working_directory: Optional[str] = None,
        capture_output: bool = False,
    ) -> ShellEngine:
        """
        Create an engine around a fresh Session.

        Engines are not cached: each front-end session owns its own state.

        Args:
            working_directory: Initial directory (default: process current directory)
            capture_output: Collect child output into outcomes instead of the terminal
        """
        session = Session(working_directory)
        return ShellEngine(
            session,
            self.get_builtins(),
            self.get_run_external_use_case(capture_output),
            self.get_complete_directory_use_case(),
            self._logger,
        )

    def reset(self):
        """Reset all instances (useful for testing)."""
        self._instances.clear()


# Global container instance
container = DependencyContainer()
