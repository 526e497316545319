from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Literal, Union

from speech_demo.domain.vo.pronunciation import PronunciationAnnotation

PayloadKind = Literal["plain", "annotated", "markup"]

DEFAULT_VOICE_LOCALE = "fr-FR"
DEFAULT_VOLUME = 0.9
DEFAULT_RATE = 0.0
DEFAULT_PITCH = 0.0

MIN_VOLUME = 0.0
MAX_VOLUME = 1.0


@dataclass(frozen=True)
class PlainText:
    text: str

    @property
    def kind(self) -> PayloadKind:
        return "plain"


@dataclass(frozen=True)
class AnnotatedText:
    text: str
    annotations: tuple[PronunciationAnnotation, ...] = ()

    @property
    def kind(self) -> PayloadKind:
        return "annotated"


@dataclass(frozen=True)
class MarkupText:
    markup: str

    @property
    def kind(self) -> PayloadKind:
        return "markup"


Payload = Union[PlainText, AnnotatedText, MarkupText]


@dataclass(frozen=True)
class VoiceSettings:
    locale: str = DEFAULT_VOICE_LOCALE
    volume: float = DEFAULT_VOLUME
    rate: float = DEFAULT_RATE
    pitch: float = DEFAULT_PITCH

    def __post_init__(self) -> None:
        # NaN fails every comparison, so it is rejected too.
        if not MIN_VOLUME <= self.volume <= MAX_VOLUME:
            raise ValueError(
                f"volume must be between {MIN_VOLUME} and {MAX_VOLUME}, got {self.volume}"
            )
        if not -1.0 <= self.rate <= 1.0:
            raise ValueError(f"rate must be between -1.0 and 1.0, got {self.rate}")
        if not -1.0 <= self.pitch <= 1.0:
            raise ValueError(f"pitch must be between -1.0 and 1.0, got {self.pitch}")


@dataclass(frozen=True)
class UtteranceRequest:
    payload: Payload
    settings: VoiceSettings


@dataclass(frozen=True)
class Submission:
    """Handle for one utterance handed to the speech engine."""

    sequence: int
    request: UtteranceRequest
    submitted_at: datetime

    @property
    def kind(self) -> PayloadKind:
        return self.request.payload.kind
