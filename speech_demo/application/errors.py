from __future__ import annotations


class DispatchError(Exception):
    """Raised when an utterance could not be handed to the speech engine."""


class UnsupportedMarkupError(DispatchError):
    """Raised when the speech engine does not accept a markup payload."""


class InvalidVoiceSettingsError(DispatchError, ValueError):
    """Raised when volume, rate or pitch is out of range for a dispatch call."""


class SpeechEngineError(DispatchError, RuntimeError):
    """Raised when the speech engine is unable to speak."""
