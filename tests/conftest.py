import pytest

from trivia_tv.core.models import TriviaItem


class RecordingNarrator:
    """Narrator double that remembers everything it was asked to say."""

    def __init__(self) -> None:
        self.spoken: list[str] = []
        self.cancel_count = 0

    def speak(self, text: str) -> None:
        self.spoken.append(text)

    def cancel(self) -> None:
        self.cancel_count += 1

    @property
    def last(self) -> str | None:
        return self.spoken[-1] if self.spoken else None


@pytest.fixture
def narrator() -> RecordingNarrator:
    return RecordingNarrator()


@pytest.fixture
def sample_items() -> list[TriviaItem]:
    return [
        TriviaItem("USA", "1960-1979", "Which mission landed on the Moon?", "Apollo 11", "It launched in July 1969."),
        TriviaItem("USA", "1980-1999", "Which city hosted the 1996 Olympics?", "Atlanta"),
        TriviaItem("USA", "1960-1979", "Which president resigned in 1974?", "Richard Nixon"),
        TriviaItem("Nigeria", "1960-1979", "Who wrote Things Fall Apart?", "Chinua Achebe"),
        TriviaItem("Nigeria", "1980-1999", "Which city became the capital in 1991?", "Abuja"),
        TriviaItem("Nigeria", "2000-2019", "What is Nigeria's film industry called?", "Nollywood"),
    ]


@pytest.fixture
def two_items() -> list[TriviaItem]:
    return [
        TriviaItem("USA", "1960-1979", "Question A?", "Answer A", "Fact A."),
        TriviaItem("USA", "1960-1979", "Question B?", "Answer B"),
    ]
