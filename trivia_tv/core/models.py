"""Domain models for the trivia application."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TriviaItem:
    """One question/answer record tagged with a country and a time period."""

    country: str
    period: str
    question: str
    answer: str
    fun_fact: str | None = None

    def to_dict(self) -> dict[str, str]:
        """Return the wire representation, omitting ``funFact`` when absent."""
        payload = {
            "country": self.country,
            "period": self.period,
            "question": self.question,
            "answer": self.answer,
        }
        if self.fun_fact:
            payload["funFact"] = self.fun_fact
        return payload


@dataclass(frozen=True, slots=True)
class SessionSelection:
    """Choices made on the selection screen, handed to playback via the query."""

    country: str
    period: str
    question_count: int
