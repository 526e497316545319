from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from datetime import datetime
from itertools import count
from typing import Iterator

from speech_demo.application.errors import InvalidVoiceSettingsError, UnsupportedMarkupError
from speech_demo.application.port.speech_engine import SpeechEngine
from speech_demo.domain.vo.pronunciation import annotate, missing_words
from speech_demo.domain.vo.utterance import (
    AnnotatedText,
    MarkupText,
    Payload,
    PlainText,
    Submission,
    UtteranceRequest,
    VoiceSettings,
)
from speech_demo.utils.logger import Logger
from speech_demo.utils.text import preview


@dataclass
class UtteranceDispatcher:
    """Turns one of the three payload shapes into a single engine submission.

    Every call returns a `Submission` handle. Playback itself happens
    asynchronously inside the engine; the dispatcher keeps no queue.
    """

    engine: SpeechEngine
    settings: VoiceSettings = field(default_factory=VoiceSettings)
    logger: Logger | None = None

    _sequence: Iterator[int] = field(
        default_factory=lambda: count(1), init=False, repr=False, compare=False
    )

    def speak_plain(
        self,
        text: str,
        *,
        voice_locale: str | None = None,
        volume: float | None = None,
    ) -> Submission:
        settings = self._resolve_settings(voice_locale=voice_locale, volume=volume)
        return self._submit(PlainText(text), settings)

    def speak_annotated(
        self,
        text: str,
        overrides: Mapping[str, str],
        *,
        voice_locale: str | None = None,
        volume: float | None = None,
    ) -> Submission:
        settings = self._resolve_settings(voice_locale=voice_locale, volume=volume)

        skipped = missing_words(text, overrides)
        if skipped:
            self._log(f"No pronunciation range for: {', '.join(skipped)}")

        payload = AnnotatedText(text=text, annotations=annotate(text, overrides))
        return self._submit(payload, settings)

    def speak_markup(
        self,
        markup: str,
        *,
        voice_locale: str | None = None,
        volume: float | None = None,
    ) -> Submission:
        settings = self._resolve_settings(voice_locale=voice_locale, volume=volume)

        try:
            self.engine.check_markup(markup)
        except UnsupportedMarkupError as e:
            self._log(f"Unsupported markup: {e}")
            raise

        return self._submit(MarkupText(markup), settings)

    def _resolve_settings(
        self,
        *,
        voice_locale: str | None,
        volume: float | None,
    ) -> VoiceSettings:
        changes: dict[str, object] = {}
        if voice_locale is not None:
            changes["locale"] = voice_locale
        if volume is not None:
            changes["volume"] = volume
        if not changes:
            return self.settings

        try:
            return replace(self.settings, **changes)
        except ValueError as e:
            self._log(f"Rejected voice settings: {e}")
            raise InvalidVoiceSettingsError(str(e)) from e

    def _submit(self, payload: Payload, settings: VoiceSettings) -> Submission:
        request = UtteranceRequest(payload=payload, settings=settings)
        self.engine.submit(request)

        submission = Submission(
            sequence=next(self._sequence),
            request=request,
            submitted_at=datetime.now(),
        )
        self._log(
            f"#{submission.sequence} {payload.kind} "
            f"voice={settings.locale} volume={settings.volume:.2f}: "
            f"{preview(self._describe(payload))}"
        )
        return submission

    @staticmethod
    def _describe(payload: Payload) -> str:
        if isinstance(payload, MarkupText):
            return payload.markup
        return payload.text

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.log(message)
