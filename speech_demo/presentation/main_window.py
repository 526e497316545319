from collections.abc import Callable

from PySide6.QtGui import QAction, QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QTextEdit,
    QVBoxLayout,
    QWidget,
)

from speech_demo.domain.sample_library import SampleTrigger
from speech_demo.presentation.sample_board_bridge import SampleBoardBridge

BUTTON_COLORS = {
    "plain": "#4b0082",
    "annotated": "#ff8c00",
    "markup": "#d32f2f",
}

BUTTON_STYLE = (
    "QPushButton {{ background-color: {color}; color: white;"
    " border-radius: 14px; padding: 6px 16px; }}"
    "QPushButton:pressed {{ background-color: #555555; }}"
)


class MainWindow(QMainWindow):
    def __init__(
        self,
        bridge: SampleBoardBridge,
        *,
        on_stop: Callable[[], None] | None = None,
    ):
        super().__init__()
        self.bridge = bridge
        self.on_stop = on_stop

        self.setWindowTitle("Speech Demo")
        self.resize(720, 560)

        central = QWidget()
        layout = QVBoxLayout(central)

        for group, triggers in self.bridge.board.groups():
            title = QLabel(group)
            title.setStyleSheet("font-weight: bold;")
            layout.addWidget(title)
            layout.addLayout(self._build_row(triggers))

        self.log_view = QTextEdit()
        self.log_view.setReadOnly(True)
        layout.addWidget(self.log_view, stretch=1)

        self.setCentralWidget(central)

        self._setup_menu()
        self.statusBar().showMessage("Ready")

        self.bridge.log.connect(self.append_log)
        self.bridge.notice.connect(self.show_notice)

    def _build_row(self, triggers: list[SampleTrigger]) -> QHBoxLayout:
        row = QHBoxLayout()
        row.addStretch()
        for trigger in triggers:
            button = QPushButton(trigger.label)
            button.setStyleSheet(BUTTON_STYLE.format(color=BUTTON_COLORS[trigger.mode]))
            button.setToolTip(f"{trigger.mode}: {trigger.sample_key}")
            # Bind the trigger now, not at click time.
            button.clicked.connect(lambda _checked=False, t=trigger: self.bridge.press(t))
            row.addWidget(button)
            row.addStretch()
        return row

    def _setup_menu(self) -> None:
        tools_menu = self.menuBar().addMenu("Tools")

        self.stop_action = QAction("Stop speaking", self)
        self.stop_action.setEnabled(self.on_stop is not None)
        self.stop_action.triggered.connect(self.on_request_stop)
        tools_menu.addAction(self.stop_action)

        self.save_log_action = QAction("Save log", self)
        self.save_log_action.triggered.connect(self.bridge.save_log)
        tools_menu.addAction(self.save_log_action)

    def on_request_stop(self) -> None:
        if self.on_stop:
            self.on_stop()
            self.statusBar().showMessage("Stopped")

    def show_notice(self, message: str) -> None:
        self.statusBar().showMessage(message)

    def append_log(self, text: str):
        self.log_view.append(text)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.bridge.save_log()
        super().closeEvent(event)
