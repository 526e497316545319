from __future__ import annotations

import os
from dataclasses import dataclass, field, replace

from speech_demo.domain.vo.utterance import (
    DEFAULT_PITCH,
    DEFAULT_RATE,
    DEFAULT_VOICE_LOCALE,
    DEFAULT_VOLUME,
    VoiceSettings,
)

DEFAULT_ENGINE = "qt"
ENGINES = ("qt", "log")
DEFAULT_LOG_DIR = "logs"


@dataclass(frozen=True)
class SpeechConfig:
    engine: str = DEFAULT_ENGINE
    qt_engine: str | None = None
    voice_locale: str = DEFAULT_VOICE_LOCALE
    volume: float = DEFAULT_VOLUME
    rate: float = DEFAULT_RATE
    pitch: float = DEFAULT_PITCH

    def __post_init__(self) -> None:
        if self.engine not in ENGINES:
            raise ValueError(
                f"SPEECH_DEMO_ENGINE must be one of {', '.join(ENGINES)} (got {self.engine!r})."
            )
        # Validates the numeric ranges.
        self.voice_settings()

    def voice_settings(self) -> VoiceSettings:
        return VoiceSettings(
            locale=self.voice_locale,
            volume=self.volume,
            rate=self.rate,
            pitch=self.pitch,
        )


@dataclass(frozen=True)
class AppConfig:
    speech: SpeechConfig = field(default_factory=SpeechConfig)
    samples_file: str | None = None
    log_dir: str = DEFAULT_LOG_DIR

    @staticmethod
    def from_env() -> "AppConfig":
        speech = SpeechConfig(
            engine=os.getenv("SPEECH_DEMO_ENGINE") or DEFAULT_ENGINE,
            qt_engine=os.getenv("SPEECH_DEMO_QT_ENGINE") or None,
            voice_locale=os.getenv("SPEECH_DEMO_VOICE") or DEFAULT_VOICE_LOCALE,
            volume=_float_env("SPEECH_DEMO_VOLUME", DEFAULT_VOLUME),
            rate=_float_env("SPEECH_DEMO_RATE", DEFAULT_RATE),
            pitch=_float_env("SPEECH_DEMO_PITCH", DEFAULT_PITCH),
        )

        return AppConfig(
            speech=speech,
            samples_file=os.getenv("SPEECH_DEMO_SAMPLES_FILE") or None,
            log_dir=os.getenv("SPEECH_DEMO_LOG_DIR") or DEFAULT_LOG_DIR,
        )

    def with_overrides(
        self,
        *,
        engine: str | None = None,
        voice_locale: str | None = None,
        volume: float | None = None,
        samples_file: str | None = None,
    ) -> "AppConfig":
        """Apply command-line overrides on top of the environment."""

        speech_changes: dict[str, object] = {}
        if engine is not None:
            speech_changes["engine"] = engine
        if voice_locale is not None:
            speech_changes["voice_locale"] = voice_locale
        if volume is not None:
            speech_changes["volume"] = volume

        return replace(
            self,
            speech=replace(self.speech, **speech_changes),
            samples_file=samples_file if samples_file is not None else self.samples_file,
        )


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be a number.") from exc
