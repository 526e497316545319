"""Unit tests for UtteranceDispatcher."""
from __future__ import annotations

import unittest
from unittest.mock import MagicMock

from speech_demo.application.errors import InvalidVoiceSettingsError, UnsupportedMarkupError
from speech_demo.application.utterance_dispatcher import UtteranceDispatcher
from speech_demo.domain.vo.utterance import AnnotatedText, MarkupText, PlainText, VoiceSettings
from speech_demo.utils.logger import Logger


class TestUtteranceDispatcher(unittest.TestCase):
    """Test cases for UtteranceDispatcher."""

    def setUp(self):
        """Set up test fixtures."""
        self.engine = MagicMock()
        self.logger = Logger()
        self.dispatcher = UtteranceDispatcher(engine=self.engine, logger=self.logger)

    def submitted_requests(self):
        return [c.args[0] for c in self.engine.submit.call_args_list]

    def test_speak_plain_submits_once(self):
        """Test that plain text is submitted exactly once with default settings."""
        submission = self.dispatcher.speak_plain("Bonjour")

        self.engine.submit.assert_called_once()
        request = self.submitted_requests()[0]
        self.assertEqual(request.payload, PlainText("Bonjour"))
        self.assertEqual(request.settings, VoiceSettings())
        self.assertIs(submission.request, request)
        self.assertEqual(submission.kind, "plain")

    def test_speak_plain_accepts_empty_and_whitespace(self):
        """Test that empty and whitespace-only text are still submitted."""
        for text in ["", "   ", "\n\t"]:
            with self.subTest(text=text):
                self.engine.reset_mock()
                self.dispatcher.speak_plain(text)
                self.engine.submit.assert_called_once()
                self.assertEqual(self.submitted_requests()[0].payload.text, text)

    def test_speak_plain_with_overrides(self):
        """Test that per-call voice and volume override the defaults."""
        self.dispatcher.speak_plain("Hello", voice_locale="en-GB", volume=0.5)

        settings = self.submitted_requests()[0].settings
        self.assertEqual(settings.locale, "en-GB")
        self.assertEqual(settings.volume, 0.5)

    def test_volume_out_of_range_is_rejected(self):
        """Test that an out-of-range volume raises and submits nothing."""
        for volume in [-0.1, 1.5, float("nan")]:
            with self.subTest(volume=volume):
                with self.assertRaises(InvalidVoiceSettingsError):
                    self.dispatcher.speak_plain("Bonjour", volume=volume)
        self.engine.submit.assert_not_called()

    def test_volume_bounds_are_accepted(self):
        """Test that 0.0 and 1.0 are valid volumes."""
        self.dispatcher.speak_plain("a", volume=0.0)
        self.dispatcher.speak_plain("b", volume=1.0)
        volumes = [r.settings.volume for r in self.submitted_requests()]
        self.assertEqual(volumes, [0.0, 1.0])

    def test_invalid_volume_is_a_value_error(self):
        """Test that callers can catch a rejected volume as ValueError."""
        with self.assertRaises(ValueError):
            self.dispatcher.speak_markup("<speak>x</speak>", volume=2.0)

    def test_speak_annotated_squat(self):
        """Test the full-word annotation for 'squat'."""
        self.dispatcher.speak_annotated("squat", {"squat": "skwat"})

        payload = self.submitted_requests()[0].payload
        self.assertIsInstance(payload, AnnotatedText)
        self.assertEqual(len(payload.annotations), 1)
        annotation = payload.annotations[0]
        self.assertEqual((annotation.start, annotation.end), (0, 5))
        self.assertEqual(annotation.length, 5)
        self.assertEqual(annotation.ipa, "skwat")

    def test_speak_annotated_skips_missing_words(self):
        """Test that override keys absent from the text are skipped."""
        text = "A vous, quart de squat pendant 30 secondes"
        overrides = {"squat": "skwat", "quadriceps": "kwa.dri.sɛps"}

        self.dispatcher.speak_annotated(text, overrides)

        payload = self.submitted_requests()[0].payload
        self.assertEqual([a.word for a in payload.annotations], ["squat"])
        self.assertEqual(payload.annotations[0].start, text.index("squat"))
        self.assertTrue(any("quadriceps" in line for line in self.logger.lines))

    def test_speak_annotated_without_matches(self):
        """Test that no match at all still submits the text."""
        self.dispatcher.speak_annotated("Bonjour", {"squat": "skwat"})

        payload = self.submitted_requests()[0].payload
        self.assertEqual(payload.annotations, ())
        self.assertEqual(payload.text, "Bonjour")

    def test_speak_markup_telephone(self):
        """Test that say-as telephone markup takes the pure markup path."""
        markup = "<speak><say-as interpret-as='telephone'>06 02 56 76 13</say-as></speak>"

        submission = self.dispatcher.speak_markup(markup)

        self.engine.check_markup.assert_called_once_with(markup)
        self.assertEqual(submission.request.payload, MarkupText(markup))
        self.assertEqual(submission.kind, "markup")

    def test_speak_markup_rejected(self):
        """Test that rejected markup raises and is never submitted."""
        self.engine.check_markup.side_effect = UnsupportedMarkupError("not well-formed")

        with self.assertRaises(UnsupportedMarkupError):
            self.dispatcher.speak_markup("<speak>")

        self.engine.submit.assert_not_called()
        self.assertTrue(any("Unsupported markup" in line for line in self.logger.lines))

    def test_markup_uses_default_volume(self):
        """Test that markup gets the same default volume as other payloads."""
        dispatcher = UtteranceDispatcher(
            engine=self.engine,
            settings=VoiceSettings(locale="fr-FR", volume=0.4),
        )
        dispatcher.speak_markup("<speak>x</speak>", voice_locale="en-GB")

        settings = self.submitted_requests()[0].settings
        self.assertEqual(settings.volume, 0.4)
        self.assertEqual(settings.locale, "en-GB")

    def test_same_request_twice_gives_two_submissions(self):
        """Test that dispatching twice yields independent submissions."""
        first = self.dispatcher.speak_plain("Bonjour")
        second = self.dispatcher.speak_plain("Bonjour")

        self.assertEqual(self.engine.submit.call_count, 2)
        self.assertEqual((first.sequence, second.sequence), (1, 2))
        self.assertEqual(first.request, second.request)
        self.assertIsNot(first, second)

    def test_works_without_logger(self):
        """Test that the logger is optional."""
        dispatcher = UtteranceDispatcher(engine=self.engine)
        dispatcher.speak_annotated("x", {"squat": "skwat"})
        self.engine.submit.assert_called_once()


if __name__ == "__main__":
    unittest.main()
