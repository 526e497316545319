from PySide6.QtCore import QObject, Signal

from speech_demo.application.sample_board import SampleBoard
from speech_demo.domain.sample_library import SampleTrigger
from speech_demo.utils.logger import Logger


class SampleBoardBridge(QObject):
    log = Signal(str)
    notice = Signal(str)

    def __init__(self, board: SampleBoard, logger: Logger):
        super().__init__()
        self.board = board
        self.logger = logger

        self.logger.on_emit = self.log.emit
        self.board.on_notice = self.notice.emit

    def press(self, trigger: SampleTrigger) -> None:
        self.board.press(trigger)

    def save_log(self) -> None:
        # Also runs from closeEvent; an unwritable log_dir must not escape the handler.
        try:
            path = self.logger.save()
        except OSError as e:
            self.notice.emit(f"Could not save log: {e}")
            return

        if path is not None:
            self.notice.emit(f"Log saved to {path}")
