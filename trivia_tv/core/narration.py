"""Narration collaborator contract used by the playback session."""

from __future__ import annotations

import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class Narrator(Protocol):
    """Queue of depth one: every ``speak`` cancels whatever is still playing."""

    def speak(self, text: str) -> None: ...

    def cancel(self) -> None: ...


class LoggingNarrator:
    """Narrator for hosts without a speech engine; writes narrations to the log."""

    def __init__(self) -> None:
        self.current: str | None = None

    def speak(self, text: str) -> None:
        self.current = text
        logger.info("Narration: %s", text)

    def cancel(self) -> None:
        self.current = None


class SwitchableNarrator:
    """Wraps a narrator so the settings dialog can mute and unmute it."""

    def __init__(self, inner: Narrator, enabled: bool = True) -> None:
        self._inner = inner
        self.enabled = enabled

    def speak(self, text: str) -> None:
        if not self.enabled:
            self._inner.cancel()
            return
        self._inner.speak(text)

    def cancel(self) -> None:
        self._inner.cancel()
