from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from speech_demo.application.port.speech_engine import SpeechEngine
from speech_demo.application.sample_board import SampleBoard
from speech_demo.application.utterance_dispatcher import UtteranceDispatcher
from speech_demo.config import AppConfig
from speech_demo.domain.sample_library import SampleLibrary
from speech_demo.infrastructure.console.speech_engine import LoggingSpeechEngine
from speech_demo.utils.logger import Logger


@dataclass(frozen=True)
class AppContainer:
    config: AppConfig
    logger: Logger
    engine: SpeechEngine
    library: SampleLibrary
    dispatcher: UtteranceDispatcher
    sample_board: SampleBoard


def build_library(config: AppConfig) -> SampleLibrary:
    if config.samples_file:
        return SampleLibrary.from_json(config.samples_file)
    return SampleLibrary.builtin()


def build_container(
    config: AppConfig,
    *,
    logger: Logger | None = None,
    engine: SpeechEngine | None = None,
    library: SampleLibrary | None = None,
) -> AppContainer:
    logger = logger or Logger(log_dir=Path(config.log_dir))
    library = library or build_library(config)

    if engine is None:
        if config.speech.engine == "log":
            engine = LoggingSpeechEngine(logger=logger)
        else:
            # Needs a running QApplication.
            from speech_demo.infrastructure.qt.speech_engine import QtSpeechEngine

            engine = QtSpeechEngine(engine_name=config.speech.qt_engine, logger=logger)

    dispatcher = UtteranceDispatcher(
        engine=engine,
        settings=config.speech.voice_settings(),
        logger=logger,
    )

    sample_board = SampleBoard(
        dispatcher=dispatcher,
        library=library,
        logger=logger,
    )

    return AppContainer(
        config=config,
        logger=logger,
        engine=engine,
        library=library,
        dispatcher=dispatcher,
        sample_board=sample_board,
    )
