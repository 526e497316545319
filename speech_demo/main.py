from __future__ import annotations

import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from speech_demo.di_container import AppContainer


def _print_samples(container: AppContainer) -> None:
    for group, triggers in container.sample_board.groups():
        print(group)
        for trigger in triggers:
            voice = f" [{trigger.voice_locale}]" if trigger.voice_locale else ""
            print(f"  {trigger.label:<12} {trigger.mode:<10} {trigger.sample_key}{voice}")


def main(argv: list[str] | None = None) -> int:
    from speech_demo.config import AppConfig
    from speech_demo.di_container import build_container
    from speech_demo.utils.args import parse_args
    from speech_demo.utils.env import load_dotenv

    args = parse_args(sys.argv[1:] if argv is None else argv)
    load_dotenv(args.env_file)

    try:
        config = AppConfig.from_env().with_overrides(
            engine="log" if args.list_samples else args.engine,
            voice_locale=args.voice,
            volume=args.volume,
            samples_file=args.samples_file,
        )
        if args.list_samples:
            _print_samples(build_container(config))
            return 0
    except (OSError, ValueError) as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 2

    from PySide6.QtWidgets import QApplication

    from speech_demo.presentation.main_window import MainWindow
    from speech_demo.presentation.sample_board_bridge import SampleBoardBridge

    app = QApplication(sys.argv[:1])

    try:
        container = build_container(config)
    except (OSError, ValueError) as exc:
        print(f"Config error: {exc}", file=sys.stderr)
        return 2

    bridge = SampleBoardBridge(container.sample_board, container.logger)
    window = MainWindow(bridge, on_stop=getattr(container.engine, "stop", None))
    window.show()

    container.logger.log(
        f"Ready. engine={config.speech.engine} voice={config.speech.voice_locale} "
        f"volume={config.speech.volume:.2f}"
    )
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
