from __future__ import annotations

import argparse


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Speak hand-written samples through the platform TTS engine"
    )
    parser.add_argument(
        "--env-file",
        default=".env",
        help="Path to .env file (default: .env). Use empty to disable.",
    )
    parser.add_argument(
        "--engine",
        choices=("qt", "log"),
        default=None,
        help="Speech engine: 'qt' speaks, 'log' only logs (default: SPEECH_DEMO_ENGINE or qt).",
    )
    parser.add_argument(
        "--voice",
        default=None,
        help="Default voice locale, e.g. fr-FR or en-GB.",
    )
    parser.add_argument(
        "--volume",
        type=float,
        default=None,
        help="Default volume between 0.0 and 1.0.",
    )
    parser.add_argument(
        "--samples-file",
        default=None,
        help="JSON sample library to use instead of the built-in samples.",
    )
    parser.add_argument(
        "--list-samples",
        action="store_true",
        help="Print the sample triggers and exit.",
    )
    return parser.parse_args(argv)
