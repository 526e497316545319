from __future__ import annotations

from speech_demo.domain.vo.utterance import UtteranceRequest
from speech_demo.infrastructure.markup import check_markup, render_payload
from speech_demo.utils.logger import Logger


class LoggingSpeechEngine:
    """Dry-run engine: logs what would be spoken instead of speaking."""

    def __init__(self, *, logger: Logger):
        self.logger = logger

    def check_markup(self, markup: str) -> None:
        check_markup(markup)

    def submit(self, request: UtteranceRequest) -> None:
        settings = request.settings
        self.logger.log(
            f"[dry-run] say locale={settings.locale} volume={settings.volume:.2f} "
            f"rate={settings.rate:+.2f} pitch={settings.pitch:+.2f}"
        )
        for line in render_payload(request.payload).splitlines() or [""]:
            self.logger.log(f"[dry-run]   {line}")
