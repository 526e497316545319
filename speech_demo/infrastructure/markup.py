from __future__ import annotations

import html
import xml.etree.ElementTree as ET

from speech_demo.application.errors import UnsupportedMarkupError
from speech_demo.domain.vo.utterance import AnnotatedText, MarkupText, Payload, PlainText

ROOT_ELEMENT = "speak"


def check_markup(markup: str) -> None:
    """Accept well-formed XML whose root element is <speak>.

    The element vocabulary and attribute values are left to the engine.
    """

    try:
        root = ET.fromstring(markup.strip())
    except ET.ParseError as exc:
        raise UnsupportedMarkupError(f"markup is not well-formed XML ({exc})") from exc

    # Namespaced tags look like "{http://www.w3.org/2001/10/synthesis}speak".
    local_name = root.tag.rsplit("}", 1)[-1]
    if local_name != ROOT_ELEMENT:
        raise UnsupportedMarkupError(
            f"root element must be <{ROOT_ELEMENT}>, got <{local_name}>"
        )


def render_annotated(payload: AnnotatedText) -> str:
    """Render annotated text as SSML with one <phoneme> element per annotation.

    An annotation overlapping an earlier one cannot nest and is dropped.
    """

    text = payload.text
    parts: list[str] = []
    cursor = 0

    for annotation in sorted(payload.annotations, key=lambda a: a.start):
        if annotation.start < cursor:
            continue

        parts.append(html.escape(text[cursor : annotation.start], quote=False))
        parts.append(
            f'<phoneme alphabet="ipa" ph="{html.escape(annotation.ipa)}">'
            f"{html.escape(text[annotation.start : annotation.end], quote=False)}"
            "</phoneme>"
        )
        cursor = annotation.end

    parts.append(html.escape(text[cursor:], quote=False))
    return f"<{ROOT_ELEMENT}>{''.join(parts)}</{ROOT_ELEMENT}>"


def render_payload(payload: Payload) -> str:
    """Text handed to the engine for a payload."""
    if isinstance(payload, PlainText):
        return payload.text
    if isinstance(payload, AnnotatedText):
        return render_annotated(payload)
    if isinstance(payload, MarkupText):
        return payload.markup
    raise TypeError(f"Unsupported payload type: {type(payload).__name__}")
