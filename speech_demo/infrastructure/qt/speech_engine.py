from __future__ import annotations

from PySide6.QtCore import QLocale
from PySide6.QtTextToSpeech import QTextToSpeech

from speech_demo.application.errors import SpeechEngineError
from speech_demo.domain.vo.utterance import UtteranceRequest, VoiceSettings
from speech_demo.infrastructure.markup import check_markup, render_payload
from speech_demo.utils.logger import Logger


def to_qlocale(tag: str) -> QLocale:
    # QLocale expects "fr_FR"; voice tags are written "fr-FR".
    return QLocale(tag.replace("-", "_"))


class QtSpeechEngine:
    """Speaks requests through the platform engine behind QTextToSpeech.

    Markup and annotated text are passed to `say()` as SSML; whether the
    tags are honoured, read aloud or dropped depends on the platform engine.
    """

    def __init__(
        self,
        *,
        engine_name: str | None = None,
        logger: Logger | None = None,
        speech: QTextToSpeech | None = None,
    ):
        self.logger = logger

        if speech is None:
            speech = QTextToSpeech(engine_name) if engine_name else QTextToSpeech()
        self._speech = speech

        self._speech.stateChanged.connect(self._on_state_changed)
        self._speech.errorOccurred.connect(self._on_error)

    @property
    def is_speaking(self) -> bool:
        return self._speech.state() == QTextToSpeech.State.Speaking

    def check_markup(self, markup: str) -> None:
        check_markup(markup)

    def submit(self, request: UtteranceRequest) -> None:
        if self._speech.state() == QTextToSpeech.State.Error:
            message = self._speech.errorString() or "speech engine is in an error state"
            raise SpeechEngineError(message)

        self._apply_settings(request.settings)
        self._speech.say(render_payload(request.payload))

    def stop(self) -> None:
        self._speech.stop()

    def available_locales(self) -> list[str]:
        return [locale.bcp47Name() for locale in self._speech.availableLocales()]

    def _apply_settings(self, settings: VoiceSettings) -> None:
        locale = to_qlocale(settings.locale)
        if self._speech.locale() != locale:
            self._speech.setLocale(locale)
        self._speech.setVolume(settings.volume)
        self._speech.setRate(settings.rate)
        self._speech.setPitch(settings.pitch)

    def _on_state_changed(self, state: QTextToSpeech.State) -> None:
        self._log(f"Engine state: {state.name}")

    def _on_error(self, reason: QTextToSpeech.ErrorReason, message: str) -> None:
        self._log(f"Engine error ({reason.name}): {message}")

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.log(message)
