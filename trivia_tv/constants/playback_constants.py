"""Timing and narration constants shared by the playback core and UI."""

QUESTION_SECONDS: int = 8
ANSWER_SECONDS: int = 6
TICK_INTERVAL_MS: int = 1000
WELCOME_DELAY_MS: int = 800

MIN_PHASE_SECONDS: int = 3
MAX_PHASE_SECONDS: int = 30

# QTextToSpeech uses -1.0..1.0 for rate and pitch with 0.0 as the engine default.
SPEECH_RATE: float = -0.15
SPEECH_PITCH: float = -0.1
SPEECH_VOLUME: float = 1.0
