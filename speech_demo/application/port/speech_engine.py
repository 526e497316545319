from __future__ import annotations

from typing import Protocol

from speech_demo.domain.vo.utterance import UtteranceRequest


class SpeechEngine(Protocol):
    def check_markup(self, markup: str) -> None:
        """Raise UnsupportedMarkupError if the engine cannot take this markup."""
        ...

    def submit(self, request: UtteranceRequest) -> None:
        """Start speaking the request. Playback continues asynchronously."""
        ...
