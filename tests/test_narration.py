import pytest

from trivia_tv.core.narration import LoggingNarrator, SwitchableNarrator


def test_logging_narrator_tracks_current_utterance(caplog):
    narrator = LoggingNarrator()
    with caplog.at_level("INFO"):
        narrator.speak("First")
        narrator.speak("Second")
    assert narrator.current == "Second"
    assert "Narration: Second" in caplog.text

    narrator.cancel()
    assert narrator.current is None


def test_switchable_narrator_forwards_when_enabled(narrator):
    switchable = SwitchableNarrator(narrator)
    switchable.speak("Hello")
    switchable.cancel()
    assert narrator.spoken == ["Hello"]
    assert narrator.cancel_count == 1


def test_muted_narrator_only_silences(narrator):
    switchable = SwitchableNarrator(narrator, enabled=False)
    switchable.speak("Hello")
    assert narrator.spoken == []
    assert narrator.cancel_count == 1

    switchable.enabled = True
    switchable.speak("Back")
    assert narrator.spoken == ["Back"]


class FakeSpeechEngine:
    """Stands in for ``QTextToSpeech`` and records every call in order."""

    engines: list[str] = ["fake"]

    def __init__(self, parent=None) -> None:
        self.calls: list[tuple] = []

    @classmethod
    def availableEngines(cls) -> list[str]:
        return list(cls.engines)

    def setRate(self, rate: float) -> None:
        self.calls.append(("rate", rate))

    def setPitch(self, pitch: float) -> None:
        self.calls.append(("pitch", pitch))

    def setVolume(self, volume: float) -> None:
        self.calls.append(("volume", volume))

    def stop(self) -> None:
        self.calls.append(("stop",))

    def say(self, text: str) -> None:
        self.calls.append(("say", text))


@pytest.fixture
def speech_module(monkeypatch):
    speech = pytest.importorskip("trivia_tv.ui.speech")
    monkeypatch.setattr(speech, "QTextToSpeech", FakeSpeechEngine)
    monkeypatch.setattr(FakeSpeechEngine, "engines", ["fake"])
    return speech


def test_qt_narrator_applies_voice_settings(speech_module):
    narrator = speech_module.QtSpeechNarrator()
    assert narrator._speech.calls == [("rate", -0.15), ("pitch", -0.1), ("volume", 1.0)]


def test_qt_narrator_stops_before_every_utterance(speech_module):
    narrator = speech_module.QtSpeechNarrator()
    engine = narrator._speech
    engine.calls.clear()

    narrator.speak("First")
    narrator.speak("Second")
    narrator.cancel()

    assert engine.calls == [
        ("stop",),
        ("say", "First"),
        ("stop",),
        ("say", "Second"),
        ("stop",),
    ]


def test_create_narrator_uses_speech_engine_when_available(speech_module):
    narrator = speech_module.create_narrator()
    assert isinstance(narrator, SwitchableNarrator)
    assert isinstance(narrator._inner, speech_module.QtSpeechNarrator)
    assert narrator.enabled


def test_create_narrator_falls_back_to_log_without_engines(speech_module, monkeypatch, caplog):
    monkeypatch.setattr(FakeSpeechEngine, "engines", [])
    with caplog.at_level("WARNING"):
        narrator = speech_module.create_narrator()
    assert isinstance(narrator._inner, LoggingNarrator)
    assert "No text-to-speech engine available" in caplog.text
