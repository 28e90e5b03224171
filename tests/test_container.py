"""
Tests for the DependencyContainer.
"""

from taminal.adapters.files.local_fs_adapter import LocalFileSystemAdapter
from taminal.adapters.process.local_process_launcher import LocalProcessLauncher
from taminal.use_cases.shell.dispatch import BuiltinKind


class TestDependencyContainer:
    """Test cases for dependency wiring."""

    def test_adapters_are_cached(self, dependency_container):
        """Test that adapters are created once."""
        fs = dependency_container.get_file_system()

        assert isinstance(fs, LocalFileSystemAdapter)
        assert dependency_container.get_file_system() is fs
        assert isinstance(dependency_container.get_process_launcher(), LocalProcessLauncher)

    def test_every_builtin_has_a_handler(self, dependency_container):
        """Test that the builtin table is complete."""
        assert set(dependency_container.get_builtins()) == set(BuiltinKind)

    def test_capture_modes_are_separate(self, dependency_container):
        """Test that terminal and captured launchers are distinct instances."""
        inherited = dependency_container.get_run_external_use_case()
        captured = dependency_container.get_run_external_use_case(capture_output=True)

        assert inherited is not captured
        assert not inherited.capture_output
        assert captured.capture_output

    def test_engines_have_independent_sessions(self, dependency_container, temp_directory):
        """Test that each engine gets a fresh session."""
        first = dependency_container.create_shell_engine(temp_directory)
        second = dependency_container.create_shell_engine(temp_directory)

        first.submit("cd subdir")

        assert first.session is not second.session
        assert second.get_working_directory() == temp_directory

    def test_reset(self, dependency_container):
        """Test that reset drops cached instances."""
        fs = dependency_container.get_file_system()

        dependency_container.reset()

        assert dependency_container.get_file_system() is not fs
