from __future__ import annotations

from typing import Optional

from PySide6.QtCore import QEvent, QObject, Qt, QThread, Signal, Slot
from PySide6.QtGui import QAction, QCloseEvent, QFontDatabase, QKeySequence, QTextCursor
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from taminal.entities.Outcome import CommandOutcome, DisplayAction
from taminal.use_cases.shell.engine import ShellEngine
from taminal.utils.paths import split_partial

BANNER = [
    "=== Taminal GUI Terminal ===",
    "Type 'help' for available commands",
    "",
]


class CommandInput(QLineEdit):
    historyPrevious = Signal()
    historyNext = Signal()
    completionRequested = Signal()

    def event(self, event: QEvent) -> bool:  # type: ignore[override]
        # Tab would otherwise move focus before keyPressEvent sees it.
        if event.type() == QEvent.Type.KeyPress and event.key() == Qt.Key.Key_Tab:  # type: ignore[attr-defined]
            self.completionRequested.emit()
            return True
        return super().event(event)

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        if event.key() == Qt.Key.Key_Up:
            self.historyPrevious.emit()
            return
        if event.key() == Qt.Key.Key_Down:
            self.historyNext.emit()
            return
        super().keyPressEvent(event)


class _CommandWorker(QObject):
    finished = Signal(object)
    error = Signal(str)

    def __init__(self, engine: ShellEngine, line: str) -> None:
        super().__init__()
        self._engine = engine
        self._line = line

    @Slot()
    def run(self) -> None:
        try:
            outcome = self._engine.submit(self._line)
        except Exception as e:  # pragma: no cover
            self.error.emit(str(e))
            return
        self.finished.emit(outcome)


class MainWindow(QMainWindow):
    def __init__(self, engine: ShellEngine, scrollback_lines: int = 1000) -> None:
        super().__init__()
        self._engine = engine
        self._history_index = len(engine.get_history())
        self._busy = False
        self._thread: Optional[QThread] = None
        self._worker: Optional[_CommandWorker] = None

        self.setWindowTitle("Taminal - GUI Terminal")
        self.resize(800, 600)
        self.setMinimumSize(400, 300)

        self._build_actions()
        self._build_layout(scrollback_lines)
        self._append_lines(BANNER)
        self._refresh_prompt()

    # UI building
    def _build_actions(self) -> None:
        self.action_clear = QAction("Clear", self)
        self.action_clear.setShortcut(QKeySequence("Ctrl+L"))
        self.action_clear.triggered.connect(self._on_clear_triggered)
        self.addAction(self.action_clear)

        self.action_stop = QAction("Stop", self)
        self.action_stop.setShortcut(QKeySequence("Ctrl+Shift+C"))
        self.action_stop.triggered.connect(self._on_stop_clicked)
        self.action_stop.setEnabled(False)
        self.addAction(self.action_stop)

    def _build_layout(self, scrollback_lines: int) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(12, 12, 12, 12)

        mono = QFontDatabase.systemFont(QFontDatabase.SystemFont.FixedFont)

        self.cwd_label = QLabel(central)
        self.cwd_label.setTextInteractionFlags(Qt.TextInteractionFlag.TextSelectableByMouse)

        self.scrollback = QPlainTextEdit(central)
        self.scrollback.setReadOnly(True)
        self.scrollback.setFont(mono)
        self.scrollback.setMaximumBlockCount(scrollback_lines)

        input_row = QHBoxLayout()
        self.prompt_label = QLabel(central)
        self.prompt_label.setFont(mono)
        self.input_edit = CommandInput(central)
        self.input_edit.setFont(mono)
        self.input_edit.returnPressed.connect(self._on_execute_clicked)
        self.input_edit.historyPrevious.connect(self._on_history_previous)
        self.input_edit.historyNext.connect(self._on_history_next)
        self.input_edit.completionRequested.connect(self._on_completion_requested)

        self.execute_btn = QPushButton("Execute", central)
        self.execute_btn.clicked.connect(self._on_execute_clicked)
        self.stop_btn = QPushButton("Stop", central)
        self.stop_btn.clicked.connect(self._on_stop_clicked)
        self.stop_btn.setEnabled(False)

        input_row.addWidget(self.prompt_label)
        input_row.addWidget(self.input_edit)
        input_row.addWidget(self.execute_btn)
        input_row.addWidget(self.stop_btn)

        layout.addWidget(self.cwd_label)
        layout.addWidget(self.scrollback)
        layout.addLayout(input_row)
        self.input_edit.setFocus()

    # Helpers
    def _append_lines(self, lines: list[str]) -> None:
        for line in lines:
            self.scrollback.appendPlainText(line)
        self.scrollback.moveCursor(QTextCursor.MoveOperation.End)

    def _refresh_prompt(self) -> None:
        self.prompt_label.setText(f"{self._engine.get_prompt_text()}> ")
        self.cwd_label.setText(f"Current Directory: {self._engine.get_working_directory()}")

    def _set_busy(self, busy: bool) -> None:
        self._busy = busy
        self.input_edit.setEnabled(not busy)
        self.execute_btn.setEnabled(not busy)
        self.stop_btn.setEnabled(busy)
        self.action_stop.setEnabled(busy)
        if not busy:
            self.input_edit.setFocus()

    def _render_outcome(self, outcome: CommandOutcome) -> None:
        if outcome.display_action is DisplayAction.CLEAR:
            self.scrollback.clear()
            self._append_lines(["=== Terminal Cleared ==="])
        self._append_lines(outcome.output_lines)
        self._append_lines([failure.message for failure in outcome.errors])
        if outcome.exit_code != 0 and not outcome.errors:
            self._append_lines([f"Command exited with status: {outcome.exit_code}"])

    # Slots
    @Slot()
    def _on_execute_clicked(self) -> None:
        if self._busy:
            return
        line = self.input_edit.text()
        self.input_edit.clear()
        if not line.strip():
            return

        self._append_lines([f"{self._engine.get_prompt_text()}> {line}"])
        self._set_busy(True)

        self._thread = QThread(self)
        self._worker = _CommandWorker(self._engine, line)
        self._worker.moveToThread(self._thread)

        self._thread.started.connect(self._worker.run)
        self._worker.finished.connect(self._on_command_finished)
        self._worker.error.connect(self._on_command_error)
        self._worker.finished.connect(self._thread.quit)
        self._worker.error.connect(self._thread.quit)
        self._worker.finished.connect(self._worker.deleteLater)
        self._worker.error.connect(self._worker.deleteLater)
        self._thread.finished.connect(self._thread.deleteLater)

        self._thread.start()

    @Slot(object)
    def _on_command_finished(self, outcome: Optional[CommandOutcome]) -> None:
        self._thread = None
        self._worker = None
        if outcome is not None:
            self._render_outcome(outcome)
        self._history_index = len(self._engine.get_history())
        self._refresh_prompt()
        self._set_busy(False)
        if self._engine.is_terminated():
            self.close()

    @Slot(str)
    def _on_command_error(self, message: str) -> None:  # pragma: no cover
        self._thread = None
        self._worker = None
        self._set_busy(False)
        QMessageBox.critical(self, "Command error", message)

    @Slot()
    def _on_stop_clicked(self) -> None:
        if self._engine.interrupt():
            self._append_lines(["^C"])

    @Slot()
    def _on_clear_triggered(self) -> None:
        self.scrollback.clear()
        self._append_lines(["=== Terminal Cleared ==="])

    @Slot()
    def _on_history_previous(self) -> None:
        history = self._engine.get_history()
        if self._history_index > 0:
            self._history_index = min(self._history_index, len(history)) - 1
            self.input_edit.setText(history[self._history_index])

    @Slot()
    def _on_history_next(self) -> None:
        history = self._engine.get_history()
        if self._history_index < len(history):
            self._history_index += 1
            if self._history_index == len(history):
                self.input_edit.clear()
            else:
                self.input_edit.setText(history[self._history_index])

    @Slot()
    def _on_completion_requested(self) -> None:
        text = self.input_edit.text()
        stripped = text.lstrip()
        if not stripped.startswith("cd "):
            return
        partial = stripped[3:].lstrip()
        matches = self._engine.complete(partial)
        if len(matches) == 1:
            directory_part, _ = split_partial(partial)
            self.input_edit.setText(f"cd {directory_part}{matches[0]}/")
        elif matches:
            self._append_lines(["Possible completions:", *(f"  {m}/" for m in matches)])

    def closeEvent(self, event: QCloseEvent) -> None:  # type: ignore[override]
        thread = self._thread
        if self._busy and thread is not None:
            self._engine.interrupt()
            thread.quit()
            if not thread.wait(3000):
                # The child ignored the interrupt; the thread must not outlive the window.
                self._engine.kill_running_child()
                thread.wait()
        super().closeEvent(event)
