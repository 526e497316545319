from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from speech_demo.application.errors import DispatchError, UnsupportedMarkupError
from speech_demo.application.utterance_dispatcher import UtteranceDispatcher
from speech_demo.domain.sample_library import SampleLibrary, SampleTrigger
from speech_demo.domain.vo.utterance import Submission
from speech_demo.utils.logger import Logger


@dataclass
class SampleBoard:
    dispatcher: UtteranceDispatcher
    library: SampleLibrary
    logger: Logger | None = None

    # Optional hook for the UI status bar.
    on_notice: Callable[[str], None] | None = None

    def groups(self) -> list[tuple[str, list[SampleTrigger]]]:
        return self.library.groups()

    def press_label(self, group: str, label: str) -> Submission | None:
        return self.press(self.library.find(group, label))

    def press(self, trigger: SampleTrigger) -> Submission | None:
        """Dispatch the sample bound to `trigger`.

        Dispatch failures become notices; they never reach the UI event loop.
        """

        text = self.library.text(trigger.sample_key)
        self._log(f"Pressed {trigger.group} / {trigger.label}")

        try:
            submission = self._dispatch(trigger, text)
        except UnsupportedMarkupError:
            self._notify(f"Unsupported markup: {trigger.label}")
            return None
        except DispatchError as e:
            self._log(f"Speech failed: {e}")
            self._notify(f"Speech failed: {trigger.label} ({e})")
            return None

        self._notify(f"Speaking: {trigger.group} / {trigger.label}")
        return submission

    def _dispatch(self, trigger: SampleTrigger, text: str) -> Submission:
        if trigger.mode == "plain":
            return self.dispatcher.speak_plain(text, voice_locale=trigger.voice_locale)
        if trigger.mode == "annotated":
            return self.dispatcher.speak_annotated(
                text,
                self.library.overrides,
                voice_locale=trigger.voice_locale,
            )
        return self.dispatcher.speak_markup(text, voice_locale=trigger.voice_locale)

    def _notify(self, message: str) -> None:
        if self.on_notice:
            self.on_notice(message)

    def _log(self, message: str) -> None:
        if self.logger:
            self.logger.log(message)
