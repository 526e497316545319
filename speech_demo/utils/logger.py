from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Callable


class Logger:
    """Line logger that feeds the window's log view and can be saved to disk.

    Lines emitted before the first subscriber attaches are buffered and
    replayed to it, so start-up messages still reach the UI.
    """

    def __init__(
        self,
        *,
        log_dir: Path = Path("logs"),
        on_emit: Callable[[str], None] | None = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.log_dir = log_dir
        self._clock = clock
        self._on_emit: Callable[[str], None] | None = None

        self._lines: list[str] = []
        self._started_at = clock()

        self.on_emit = on_emit

    @property
    def on_emit(self) -> Callable[[str], None] | None:
        return self._on_emit

    @on_emit.setter
    def on_emit(self, callback: Callable[[str], None] | None) -> None:
        should_replay = self._on_emit is None and callback is not None
        self._on_emit = callback

        if should_replay:
            for line in self._lines:
                callback(line)

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def log(self, message: str) -> None:
        if not message:
            return

        line = f"[{self._clock():%H:%M:%S}] {message}"
        self._lines.append(line)

        if self._on_emit:
            self._on_emit(line)

    def save(self) -> Path | None:
        if not self._lines:
            return None

        self.log_dir.mkdir(parents=True, exist_ok=True)

        filename = self._started_at.strftime("speech-demo_%Y-%m-%d_%H-%M-%S.txt")
        path = self.log_dir / filename

        path.write_text("\n".join(self._lines) + "\n", encoding="utf-8")
        return path
