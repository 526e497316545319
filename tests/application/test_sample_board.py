"""Unit tests for SampleBoard."""
from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from speech_demo.application.errors import SpeechEngineError
from speech_demo.application.sample_board import SampleBoard
from speech_demo.application.utterance_dispatcher import UtteranceDispatcher
from speech_demo.domain.sample_library import SampleLibrary
from speech_demo.infrastructure.markup import check_markup


class TestSampleBoard(unittest.TestCase):
    """Test cases for SampleBoard."""

    def setUp(self):
        """Set up test fixtures."""
        self.engine = MagicMock()
        self.engine.check_markup.side_effect = check_markup
        self.notices: list[str] = []
        self.board = SampleBoard(
            dispatcher=UtteranceDispatcher(engine=self.engine),
            library=SampleLibrary.builtin(),
            on_notice=self.notices.append,
        )

    def test_groups_in_display_order(self):
        """Test that groups follow declaration order."""
        names = [group for group, _ in self.board.groups()]
        self.assertEqual(names, ["SQUAT", "QUADRI", "Tests SSML", "Failed Tests SSML"])

    def test_press_plain(self):
        """Test that a String trigger dispatches plain text."""
        submission = self.board.press_label("SQUAT", "String")

        self.assertIsNotNone(submission)
        self.assertEqual(submission.kind, "plain")
        self.assertEqual(self.notices, ["Speaking: SQUAT / String"])

    def test_press_attributed_uses_override_table(self):
        """Test that an Attributed trigger annotates with the library overrides."""
        submission = self.board.press_label("QUADRI", "Attributed")

        payload = submission.request.payload
        self.assertEqual([a.word for a in payload.annotations], ["quadriceps"])
        self.assertEqual(payload.annotations[0].ipa, "kwa.dri.sɛps")

    def test_press_emphasis_uses_english_voice(self):
        """Test that the Emphasis sample is spoken with en-GB."""
        submission = self.board.press_label("Failed Tests SSML", "Emphasis")
        self.assertEqual(submission.request.settings.locale, "en-GB")

    def test_every_builtin_trigger_is_accepted(self):
        """Test that all built-in samples reach the engine."""
        for trigger in self.board.library.triggers:
            with self.subTest(trigger=trigger.label):
                self.assertIsNotNone(self.board.press(trigger))
        self.assertEqual(self.engine.submit.call_count, len(self.board.library.triggers))

    def test_unsupported_markup_becomes_notice(self):
        """Test that rejected markup shows a notice instead of raising."""
        library = SampleLibrary.from_dict(
            {
                "samples": {"broken": "<speak>unclosed"},
                "triggers": [
                    {"group": "Broken", "label": "Bad", "mode": "markup", "sample": "broken"}
                ],
            }
        )
        board = SampleBoard(
            dispatcher=UtteranceDispatcher(engine=self.engine),
            library=library,
            on_notice=self.notices.append,
        )

        result = board.press_label("Broken", "Bad")

        self.assertIsNone(result)
        self.engine.submit.assert_not_called()
        self.assertEqual(self.notices, ["Unsupported markup: Bad"])

    def test_engine_failure_becomes_notice(self):
        """Test that an engine error is reported, not raised."""
        self.engine.submit.side_effect = SpeechEngineError("no audio device")

        result = self.board.press_label("SQUAT", "String")

        self.assertIsNone(result)
        self.assertEqual(len(self.notices), 1)
        self.assertIn("Speech failed: String", self.notices[0])
        self.assertIn("no audio device", self.notices[0])

    def test_press_unknown_label(self):
        """Test that an unknown trigger raises KeyError."""
        with self.assertRaises(KeyError):
            self.board.press_label("SQUAT", "Nope")


if __name__ == "__main__":
    unittest.main()
