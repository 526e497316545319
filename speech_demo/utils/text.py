from __future__ import annotations

from pathlib import Path


def read_text_file(path: str) -> str:
    return Path(path).read_text(encoding="utf-8").strip()


def preview(text: str, limit: int = 60) -> str:
    """Single-line excerpt of `text` for log lines."""
    flat = " ".join(text.split())
    if len(flat) <= limit:
        return flat
    return flat[: limit - 3] + "..."
