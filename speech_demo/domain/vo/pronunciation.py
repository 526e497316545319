from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class PronunciationAnnotation:
    word: str
    start: int
    end: int
    ipa: str

    @property
    def length(self) -> int:
        return self.end - self.start


def annotate(
    text: str, overrides: Mapping[str, str]
) -> tuple[PronunciationAnnotation, ...]:
    """Attach one pronunciation annotation per override key found in `text`.

    Only the first occurrence of each key is annotated. Matching is a plain
    substring search: no word-boundary check, so "squat" also matches inside
    "squats". Keys that do not occur are skipped.
    """

    annotations: list[PronunciationAnnotation] = []
    for word, ipa in overrides.items():
        if not word:
            continue

        start = text.find(word)
        if start < 0:
            continue

        annotations.append(
            PronunciationAnnotation(
                word=word,
                start=start,
                end=start + len(word),
                ipa=ipa,
            )
        )

    annotations.sort(key=lambda annotation: annotation.start)
    return tuple(annotations)


def missing_words(text: str, overrides: Mapping[str, str]) -> list[str]:
    return [word for word in overrides if word and word not in text]
