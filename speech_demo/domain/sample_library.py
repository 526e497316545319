from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from textwrap import dedent
from types import MappingProxyType
from typing import Any, get_args

from speech_demo.domain.vo.utterance import PayloadKind
from speech_demo.utils.text import read_text_file

PAYLOAD_KINDS: tuple[str, ...] = get_args(PayloadKind)


def _markup(text: str) -> str:
    return dedent(text).strip()


PRONUNCIATION_OVERRIDES: Mapping[str, str] = MappingProxyType(
    {
        "squat": "skwat",
        "quadriceps": "kwa.dri.sɛps",
    }
)

SAMPLE_TEXTS: Mapping[str, str] = MappingProxyType(
    {
        "text.squat": "A vous, quart de squat pendant 30 secondes",
        "text.quadri": "Etirez votre quadriceps gauche pendant 30 secondes",
        "ssml.squat": _markup(
            """
            <speak>
                A vous, quart de <prosody rate="150%"><phoneme alphabet="ipa" ph="skwat" >squat</phoneme></prosody> pendant 30 secondes
            </speak>
            """
        ),
        "ssml.quadri": _markup(
            """
            <speak>
                Etirez votre <prosody rate="120%"><phoneme alphabet="ipa" ph="/kwa.dri.sɛps/" >quadriceps</phoneme></prosody> gauche pendant <emphasis level="moderate"> 30 secondes </emphasis>
            </speak>
            """
        ),
        "ssml.countdown": _markup(
            """
            <speak>
                <prosody volume="-10dB">
                3
                </prosody>
                <break time="1s" />
                <prosody volume="+0dB">
                2
                </prosody>
                <break time="1s" />
                <prosody volume="+10dB">
                1
                </prosody>
            </speak>
            """
        ),
        "ssml.speed": _markup(
            """
            <speak>
                <prosody rate="200%">
                    Voici la deuxième partie de l'apprentissage de la position assise.
                </prosody>
                <prosody rate="70%">
                    Vous aurez besoin d'une chaise.
                </prosody>
                <prosody rate="120%">
                    Regardez la vidéo.
                </prosody>
            </speak>
            """
        ),
        "ssml.pitch": _markup(
            """
            <speak>
                <prosody pitch="low">
                    Faites un pas à droite, levez le genou gauche, et changez de côté.
                </prosody>
                <prosody pitch="high">
                    Faites un pas à droite, levez le genou gauche, et changez de côté.
                </prosody>
                <prosody pitch="low">
                    Faites un pas à droite,
                </prosody>
                <prosody pitch="medium">
                    levez le genou gauche
                </prosody>
                <prosody pitch="high">
                    et changez de côté.
                </prosody>
                <prosody pitch="x-low">
                    Faites un pas à droite, levez le genou gauche, et changez de côté.
                </prosody>
                <prosody pitch="x-high">
                    Faites un pas à droite, levez le genou gauche, et changez de côté.
                </prosody>
            </speak>
            """
        ),
        "ssml.emphasis": _markup(
            """
            <speak>
                That is a huge bank account!
                That is a <emphasis level="strong"> huge </emphasis> bank account!
            </speak>
            """
        ),
        "ssml.duration": _markup(
            """
            <speak>
                <prosody duration="10s">
                    Faites un pas à droite, levez le genou gauche, et changez de côté.
                </prosody>
                <prosody duration="2s">
                    Faites un pas à droite, levez le genou gauche, et changez de côté.
                </prosody>
            </speak>
            """
        ),
        "ssml.gender": _markup(
            """
            <speak>
                <voice gender="female">
                    Faites un pas à droite.
                </voice>
                <voice gender="male">
                    Faites un pas à droite.
                </voice>
            </speak>
            """
        ),
        "ssml.age": _markup(
            """
            <speak>
                <voice age="6">
                    Faites un pas à droite.
                </voice>
                <voice age="30">
                    Faites un pas à droite !
                </voice>
            </speak>
            """
        ),
        "ssml.lang": _markup(
            """
            <speak>
                Il préfère les pâtes
                <lang xml:lang="it-IT">
                    mozarella
                </lang>.
                Appuyer sur le bouton
                <lang xml:lang="en-UK">
                    Start
                </lang> et ensuite vous pouvez commencer.
                <lang xml:lang="en-UK">Ready?</lang>
            </speak>
            """
        ),
        "ssml.spell": _markup(
            """
            <speak>
                <say-as interpret-as='telephone'>06 02 56 76 13</say-as>
                <say-as interpret-as="verbatim">abcdefg</say-as>
            </speak>
            """
        ),
    }
)


@dataclass(frozen=True)
class SampleTrigger:
    group: str
    label: str
    mode: PayloadKind
    sample_key: str
    voice_locale: str | None = None


BUILTIN_TRIGGERS: tuple[SampleTrigger, ...] = (
    SampleTrigger("SQUAT", "String", "plain", "text.squat"),
    SampleTrigger("SQUAT", "Attributed", "annotated", "text.squat"),
    SampleTrigger("SQUAT", "SSML", "markup", "ssml.squat"),
    SampleTrigger("QUADRI", "String", "plain", "text.quadri"),
    SampleTrigger("QUADRI", "Attributed", "annotated", "text.quadri"),
    SampleTrigger("QUADRI", "SSML", "markup", "ssml.quadri"),
    SampleTrigger("Tests SSML", "Countdown", "markup", "ssml.countdown"),
    SampleTrigger("Tests SSML", "Speed", "markup", "ssml.speed"),
    SampleTrigger("Tests SSML", "Pitch", "markup", "ssml.pitch"),
    SampleTrigger("Failed Tests SSML", "Emphasis", "markup", "ssml.emphasis", "en-GB"),
    SampleTrigger("Failed Tests SSML", "Duration", "markup", "ssml.duration"),
    SampleTrigger("Failed Tests SSML", "Gender", "markup", "ssml.gender"),
    SampleTrigger("Failed Tests SSML", "Age", "markup", "ssml.age"),
    SampleTrigger("Failed Tests SSML", "Langue", "markup", "ssml.lang"),
    SampleTrigger("Failed Tests SSML", "Spell", "markup", "ssml.spell"),
)


def _trigger_from_dict(item: Any) -> SampleTrigger:
    if not isinstance(item, dict):
        raise ValueError(f"Invalid trigger entry: {item!r}")

    for name in ("group", "label", "mode", "sample"):
        if not isinstance(item.get(name), str):
            raise ValueError(f"Invalid trigger entry {item!r}: '{name}' must be a string.")

    voice = item.get("voice")
    if voice is not None and not isinstance(voice, str):
        raise ValueError(f"Invalid trigger entry {item!r}: 'voice' must be a string.")

    return SampleTrigger(
        group=item["group"],
        label=item["label"],
        mode=item["mode"],
        sample_key=item["sample"],
        voice_locale=voice or None,
    )


@dataclass(frozen=True)
class SampleLibrary:
    """Read-only table of demo literals and the triggers bound to them."""

    samples: Mapping[str, str]
    overrides: Mapping[str, str] = field(default_factory=lambda: PRONUNCIATION_OVERRIDES)
    triggers: tuple[SampleTrigger, ...] = ()

    def __post_init__(self) -> None:
        for trigger in self.triggers:
            if trigger.mode not in PAYLOAD_KINDS:
                raise ValueError(
                    f"Trigger {trigger.group}/{trigger.label}: unknown mode {trigger.mode!r}."
                )
            if trigger.sample_key not in self.samples:
                raise ValueError(
                    f"Trigger {trigger.group}/{trigger.label}: unknown sample {trigger.sample_key!r}."
                )

    @staticmethod
    def builtin() -> "SampleLibrary":
        return SampleLibrary(
            samples=SAMPLE_TEXTS,
            overrides=PRONUNCIATION_OVERRIDES,
            triggers=BUILTIN_TRIGGERS,
        )

    @staticmethod
    def from_json(path: str) -> "SampleLibrary":
        """Load a library from a JSON file.

        Expected shape::

            {
              "overrides": {"squat": "skwat"},
              "samples": {"text.squat": "A vous, quart de squat"},
              "triggers": [
                {"group": "SQUAT", "label": "String", "mode": "plain", "sample": "text.squat"}
              ]
            }
        """

        try:
            data = json.loads(read_text_file(path))
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path} is not valid JSON: {exc}") from exc

        return SampleLibrary.from_dict(data)

    @staticmethod
    def from_dict(data: Mapping[str, Any]) -> "SampleLibrary":
        if not isinstance(data, dict):
            raise ValueError("Sample library must be a JSON object.")

        samples = data.get("samples")
        if not isinstance(samples, dict) or not samples:
            raise ValueError("Sample library needs a non-empty 'samples' table.")

        overrides = data.get("overrides") or {}
        if not isinstance(overrides, dict):
            raise ValueError("'overrides' must map words to IPA transcriptions.")

        items = data.get("triggers") or []
        if not isinstance(items, list):
            raise ValueError("'triggers' must be a list.")

        triggers = [_trigger_from_dict(item) for item in items]

        return SampleLibrary(
            samples=MappingProxyType({str(k): str(v) for k, v in samples.items()}),
            overrides=MappingProxyType({str(k): str(v) for k, v in overrides.items()}),
            triggers=tuple(triggers),
        )

    def text(self, key: str) -> str:
        return self.samples[key]

    def groups(self) -> list[tuple[str, list[SampleTrigger]]]:
        """Triggers grouped by their group name, in declaration order."""
        grouped: dict[str, list[SampleTrigger]] = {}
        for trigger in self.triggers:
            grouped.setdefault(trigger.group, []).append(trigger)
        return list(grouped.items())

    def find(self, group: str, label: str) -> SampleTrigger:
        for trigger in self.triggers:
            if trigger.group == group and trigger.label == label:
                return trigger
        raise KeyError(f"{group}/{label}")
