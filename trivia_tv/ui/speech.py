"""Text-to-speech narrator backed by Qt's speech module."""

from __future__ import annotations

import logging

from PySide6.QtCore import QObject
from PySide6.QtTextToSpeech import QTextToSpeech

from trivia_tv.constants.playback_constants import SPEECH_PITCH, SPEECH_RATE, SPEECH_VOLUME
from trivia_tv.core.narration import LoggingNarrator, SwitchableNarrator

logger = logging.getLogger(__name__)


class QtSpeechNarrator:
    """Speaks with cancel-then-speak semantics; a new request supersedes the old one."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._speech = QTextToSpeech(parent)
        self._speech.setRate(SPEECH_RATE)
        self._speech.setPitch(SPEECH_PITCH)
        self._speech.setVolume(SPEECH_VOLUME)

    def speak(self, text: str) -> None:
        self._speech.stop()
        logger.debug("Narration: %s", text)
        self._speech.say(text)

    def cancel(self) -> None:
        self._speech.stop()


def create_narrator(parent: QObject | None = None) -> SwitchableNarrator:
    """Use the platform speech engine when one is installed, else log narrations."""
    if QTextToSpeech.availableEngines():
        return SwitchableNarrator(QtSpeechNarrator(parent))
    logger.warning("No text-to-speech engine available; narration will only be logged")
    return SwitchableNarrator(LoggingNarrator())
