"""
Tests for the RunExternalCommandUseCase.
"""

from unittest.mock import MagicMock

import pytest

from taminal.exceptions import ErrorKind, SpawnError
from taminal.ports.process.process_launcher_port import (
    ChildProcessPort,
    ProcessLauncherPort,
    ProcessResult,
)
from taminal.use_cases.shell.run_external import RunExternalCommandUseCase


class TestRunExternalCommandUseCase:
    """Test cases for launching external commands."""

    def test_execute_success(self, session, temp_directory, mock_logger):
        """Test that the child runs in the session directory and its status is returned."""
        mock_launcher = MagicMock(spec=ProcessLauncherPort)
        mock_child = MagicMock(spec=ChildProcessPort)
        mock_child.pid = 42
        mock_child.wait.return_value = ProcessResult(exit_code=0)
        mock_launcher.spawn.return_value = mock_child
        use_case = RunExternalCommandUseCase(mock_launcher, logger=mock_logger)

        outcome = use_case.execute(session, "git", ["status"])

        assert outcome.succeeded
        assert outcome.output_lines == []
        mock_launcher.spawn.assert_called_once_with(
            ["git", "status"], cwd=temp_directory, capture_output=False
        )

    def test_child_is_registered_while_running(self, session, mock_logger):
        """Test that the session holds the child only while it runs."""
        mock_launcher = MagicMock(spec=ProcessLauncherPort)
        mock_child = MagicMock(spec=ChildProcessPort)
        mock_child.pid = 7
        seen = []

        def _wait():
            seen.append(session.running_child)
            return ProcessResult(exit_code=130)

        mock_child.wait.side_effect = _wait
        mock_launcher.spawn.return_value = mock_child
        use_case = RunExternalCommandUseCase(mock_launcher, logger=mock_logger)

        outcome = use_case.execute(session, "sleep", ["10"])

        assert seen == [mock_child]
        assert session.running_child is None
        assert outcome.exit_code == 130
        assert outcome.errors == []

    def test_child_released_when_wait_fails(self, session, mock_logger):
        """Test that the running child is cleared even if waiting raises."""
        mock_launcher = MagicMock(spec=ProcessLauncherPort)
        mock_child = MagicMock(spec=ChildProcessPort)
        mock_child.wait.side_effect = OSError("wait failed")
        mock_launcher.spawn.return_value = mock_child
        use_case = RunExternalCommandUseCase(mock_launcher, logger=mock_logger)

        with pytest.raises(OSError):
            use_case.execute(session, "broken", [])

        assert session.running_child is None

    def test_spawn_error(self, session, mock_logger):
        """Test that a launch failure becomes a failed outcome."""
        mock_launcher = MagicMock(spec=ProcessLauncherPort)
        mock_launcher.spawn.side_effect = SpawnError("nope: command not found")
        use_case = RunExternalCommandUseCase(mock_launcher, logger=mock_logger)

        outcome = use_case.execute(session, "nope", [])

        assert outcome.error.kind is ErrorKind.SPAWN
        assert outcome.error.message == "nope: command not found"
        assert outcome.exit_code == 127
        assert session.running_child is None

    def test_capture_mode_marks_stderr(self, session, mock_logger):
        """Test that captured stderr lines follow stdout with an error marker."""
        mock_launcher = MagicMock(spec=ProcessLauncherPort)
        mock_child = MagicMock(spec=ChildProcessPort)
        mock_child.wait.return_value = ProcessResult(
            exit_code=2, stdout_lines=["out"], stderr_lines=["bad thing"]
        )
        mock_launcher.spawn.return_value = mock_child
        use_case = RunExternalCommandUseCase(mock_launcher, capture_output=True, logger=mock_logger)

        outcome = use_case.execute(session, "tool", [])

        assert use_case.capture_output
        assert outcome.output_lines == ["out", "[ERROR] bad thing"]
        assert outcome.exit_code == 2
        assert mock_launcher.spawn.call_args.kwargs["capture_output"] is True

    def test_interrupt_requested_during_spawn(self, session, mock_logger):
        """Test that an interrupt arriving before the child is attached still reaches it."""
        mock_launcher = MagicMock(spec=ProcessLauncherPort)
        mock_child = MagicMock(spec=ChildProcessPort)
        mock_child.pid = 9
        mock_child.wait.return_value = ProcessResult(exit_code=130)

        def _spawn(*args, **kwargs):
            assert session.request_interrupt() is None
            return mock_child

        mock_launcher.spawn.side_effect = _spawn
        use_case = RunExternalCommandUseCase(mock_launcher, logger=mock_logger)
        session.begin_command()

        outcome = use_case.execute(session, "sleep", ["10"])

        mock_child.send_interrupt.assert_called_once_with()
        assert outcome.exit_code == 130
