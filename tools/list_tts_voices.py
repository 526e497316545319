from __future__ import annotations

import argparse
import platform
import sys

from PySide6 import __version__ as pyside_version
from PySide6.QtCore import QCoreApplication
from PySide6.QtTextToSpeech import QTextToSpeech


def _fmt_voice(voice) -> str:
    return (
        f"name={voice.name()} locale={voice.locale().bcp47Name()} "
        f"gender={voice.gender().name} age={voice.age().name}"
    )


def main() -> int:
    parser = argparse.ArgumentParser(description="Print Qt text-to-speech engines and voices")
    parser.add_argument("--engine", default=None, help="Only inspect this engine")
    parser.add_argument("--voices", action="store_true", help="List voices for every locale")
    args = parser.parse_args()

    app = QCoreApplication(sys.argv[:1])

    print(f"python: {sys.version.splitlines()[0]}")
    print(f"platform: {platform.platform()}")
    print(f"PySide6: {pyside_version}")

    engines = QTextToSpeech.availableEngines()
    print(f"engines: {', '.join(engines) or '(none)'}")

    for name in [args.engine] if args.engine else engines:
        speech = QTextToSpeech(name)
        print(f"\n-- {name} --")
        print(f"state: {speech.state().name}")
        if speech.state() == QTextToSpeech.State.Error:
            print(f"error: {speech.errorString()}")
            continue

        print(f"default locale: {speech.locale().bcp47Name()}")
        locales = speech.availableLocales()
        print(f"locales: {', '.join(sorted(loc.bcp47Name() for loc in locales))}")

        if args.voices:
            for locale in locales:
                speech.setLocale(locale)
                for voice in speech.availableVoices():
                    print(_fmt_voice(voice))

    del app
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
