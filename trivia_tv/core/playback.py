"""Question/answer/countdown state machine driving a trivia round.

The machine is a pure function, ``transition(state, event, timing)``, that
returns the next state together with the text to narrate (if any). It owns
no timer: the UI feeds it a ``Tick`` once per second while
``state.is_ticking`` is true, and feeds user actions as discrete events.

``PlaybackSession`` keeps the current state and forwards narrations to an
injected ``Narrator``.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, auto
import logging
from typing import Callable, NamedTuple, Union

from trivia_tv.constants.playback_constants import ANSWER_SECONDS, QUESTION_SECONDS
from trivia_tv.constants.ui_constants import (
    ANSWER_NARRATION_TEMPLATE,
    FINISHED_NARRATION,
    INTRO_NARRATION_TEMPLATE,
    LAST_QUESTION_NARRATION,
    LOAD_FAILED_MESSAGE,
    LOAD_FAILED_NARRATION,
    NOT_FOUND_MESSAGE,
    PAUSED_NARRATION,
    REPLAY_NARRATION,
    RESUMED_NARRATION,
)
from trivia_tv.core.models import TriviaItem
from trivia_tv.core.narration import Narrator

logger = logging.getLogger(__name__)


class PlaybackPhase(Enum):
    LOADING = auto()
    ERROR = auto()
    QUESTION = auto()
    ANSWER = auto()
    ENDED = auto()


@dataclass(frozen=True, slots=True)
class PlaybackTiming:
    """Seconds a question stays up before its answer, and the answer before moving on."""

    question_seconds: int = QUESTION_SECONDS
    answer_seconds: int = ANSWER_SECONDS

    def __post_init__(self) -> None:
        if self.question_seconds < 1 or self.answer_seconds < 1:
            raise ValueError("Countdown durations must be at least one second.")


@dataclass(frozen=True, slots=True)
class PlaybackState:
    phase: PlaybackPhase = PlaybackPhase.LOADING
    items: tuple[TriviaItem, ...] = ()
    current_index: int = 0
    is_paused: bool = False
    countdown: int = QUESTION_SECONDS
    message: str | None = None
    country: str = ""

    @property
    def show_answer(self) -> bool:
        return self.phase is PlaybackPhase.ANSWER

    @property
    def has_ended(self) -> bool:
        return self.phase is PlaybackPhase.ENDED

    @property
    def is_playing(self) -> bool:
        return self.phase in (PlaybackPhase.QUESTION, PlaybackPhase.ANSWER)

    @property
    def is_ticking(self) -> bool:
        return self.is_playing and not self.is_paused

    @property
    def current_item(self) -> TriviaItem | None:
        if not self.items or not 0 <= self.current_index < len(self.items):
            return None
        return self.items[self.current_index]

    @property
    def has_next_item(self) -> bool:
        return self.current_index < len(self.items) - 1


# --- Events ---


@dataclass(frozen=True, slots=True)
class ItemsLoaded:
    items: tuple[TriviaItem, ...]
    country: str = ""


@dataclass(frozen=True, slots=True)
class LoadFailed:
    reason: str = ""


@dataclass(frozen=True, slots=True)
class Tick:
    pass


@dataclass(frozen=True, slots=True)
class TogglePause:
    pass


@dataclass(frozen=True, slots=True)
class Repeat:
    pass


@dataclass(frozen=True, slots=True)
class Next:
    pass


@dataclass(frozen=True, slots=True)
class Replay:
    pass


PlaybackEvent = Union[ItemsLoaded, LoadFailed, Tick, TogglePause, Repeat, Next, Replay]


class Transition(NamedTuple):
    state: PlaybackState
    narration: str | None = None


# --- Narration text ---


def answer_narration(item: TriviaItem) -> str:
    text = ANSWER_NARRATION_TEMPLATE.format(answer=item.answer)
    if item.fun_fact:
        text = f"{text} {item.fun_fact}"
    return text


def repeat_narration(state: PlaybackState) -> str | None:
    item = state.current_item
    if item is None:
        return None
    if state.show_answer:
        return f"{item.question}. {answer_narration(item)}"
    return item.question


def _join(*parts: str) -> str:
    return " ".join(part for part in parts if part)


# --- Transitions ---


def _on_items_loaded(state: PlaybackState, event: ItemsLoaded, timing: PlaybackTiming) -> Transition:
    if state.phase is not PlaybackPhase.LOADING:
        return Transition(state)
    if not event.items:
        failed = replace(state, phase=PlaybackPhase.ERROR, message=NOT_FOUND_MESSAGE, country=event.country)
        return Transition(failed, NOT_FOUND_MESSAGE)
    started = PlaybackState(
        phase=PlaybackPhase.QUESTION,
        items=tuple(event.items),
        current_index=0,
        countdown=timing.question_seconds,
        country=event.country,
    )
    intro = INTRO_NARRATION_TEMPLATE.format(country=event.country, count=len(event.items))
    return Transition(started, _join(intro, event.items[0].question))


def _on_load_failed(state: PlaybackState, event: LoadFailed, timing: PlaybackTiming) -> Transition:
    if state.phase is not PlaybackPhase.LOADING:
        return Transition(state)
    return Transition(
        replace(state, phase=PlaybackPhase.ERROR, message=LOAD_FAILED_MESSAGE),
        LOAD_FAILED_NARRATION,
    )


def _advance(state: PlaybackState, timing: PlaybackTiming, ended_narration: str) -> Transition:
    """Move to the next question, or end the round when there is none."""
    if state.has_next_item:
        advanced = replace(
            state,
            phase=PlaybackPhase.QUESTION,
            current_index=state.current_index + 1,
            countdown=timing.question_seconds,
        )
        return Transition(advanced, advanced.current_item.question)
    ended = replace(state, phase=PlaybackPhase.ENDED, is_paused=False, countdown=0)
    return Transition(ended, ended_narration)


def _on_tick(state: PlaybackState, event: Tick, timing: PlaybackTiming) -> Transition:
    if not state.is_ticking:
        return Transition(state)
    remaining = state.countdown - 1
    if remaining > 0:
        return Transition(replace(state, countdown=remaining))
    if state.phase is PlaybackPhase.QUESTION:
        revealed = replace(state, phase=PlaybackPhase.ANSWER, countdown=timing.answer_seconds)
        return Transition(revealed, answer_narration(revealed.current_item))
    return _advance(state, timing, FINISHED_NARRATION)


def _on_toggle_pause(state: PlaybackState, event: TogglePause, timing: PlaybackTiming) -> Transition:
    if not state.is_playing:
        return Transition(state)
    if state.is_paused:
        return Transition(replace(state, is_paused=False), RESUMED_NARRATION)
    return Transition(replace(state, is_paused=True), PAUSED_NARRATION)


def _on_repeat(state: PlaybackState, event: Repeat, timing: PlaybackTiming) -> Transition:
    if not state.is_playing:
        return Transition(state)
    return Transition(state, repeat_narration(state))


def _on_next(state: PlaybackState, event: Next, timing: PlaybackTiming) -> Transition:
    if not state.is_playing:
        return Transition(state)
    return _advance(state, timing, LAST_QUESTION_NARRATION)


def _on_replay(state: PlaybackState, event: Replay, timing: PlaybackTiming) -> Transition:
    if not state.has_ended:
        return Transition(state)
    restarted = replace(
        state,
        phase=PlaybackPhase.QUESTION,
        current_index=0,
        is_paused=False,
        countdown=timing.question_seconds,
    )
    return Transition(restarted, _join(REPLAY_NARRATION, restarted.current_item.question))


_HANDLERS: dict[type, Callable[[PlaybackState, PlaybackEvent, PlaybackTiming], Transition]] = {
    ItemsLoaded: _on_items_loaded,
    LoadFailed: _on_load_failed,
    Tick: _on_tick,
    TogglePause: _on_toggle_pause,
    Repeat: _on_repeat,
    Next: _on_next,
    Replay: _on_replay,
}


def transition(
    state: PlaybackState,
    event: PlaybackEvent,
    timing: PlaybackTiming = PlaybackTiming(),
) -> Transition:
    """Apply one event. Events that do not apply in ``state`` leave it unchanged."""
    handler = _HANDLERS.get(type(event))
    if handler is None:
        raise TypeError(f"Unsupported playback event: {event!r}")
    return handler(state, event, timing)


class PlaybackSession:
    """Holds the live playback state and narrates each transition."""

    def __init__(self, narrator: Narrator, timing: PlaybackTiming | None = None) -> None:
        self._narrator = narrator
        self._timing = timing or PlaybackTiming()
        self._state = PlaybackState(countdown=self._timing.question_seconds)

    @property
    def state(self) -> PlaybackState:
        return self._state

    @property
    def timing(self) -> PlaybackTiming:
        return self._timing

    def set_timing(self, timing: PlaybackTiming) -> None:
        """Use new durations from the next countdown reset onwards."""
        self._timing = timing

    def is_ticking(self) -> bool:
        return self._state.is_ticking

    def dispatch(self, event: PlaybackEvent) -> PlaybackState:
        result = transition(self._state, event, self._timing)
        if result.state != self._state:
            logger.debug(
                "%s: %s -> %s (index=%d, countdown=%d, paused=%s)",
                type(event).__name__,
                self._state.phase.name,
                result.state.phase.name,
                result.state.current_index,
                result.state.countdown,
                result.state.is_paused,
            )
        self._state = result.state
        if result.narration:
            self._narrator.speak(result.narration)
        return self._state

    def reset(self) -> None:
        """Return to the loading state, silencing any narration."""
        self._narrator.cancel()
        self._state = PlaybackState(countdown=self._timing.question_seconds)

    # Convenience wrappers used by the UI.

    def load(self, items: list[TriviaItem], country: str) -> PlaybackState:
        return self.dispatch(ItemsLoaded(items=tuple(items), country=country))

    def fail(self, reason: str = "") -> PlaybackState:
        return self.dispatch(LoadFailed(reason=reason))

    def tick(self) -> PlaybackState:
        return self.dispatch(Tick())

    def toggle_pause(self) -> PlaybackState:
        return self.dispatch(TogglePause())

    def repeat(self) -> PlaybackState:
        return self.dispatch(Repeat())

    def next(self) -> PlaybackState:
        return self.dispatch(Next())

    def replay(self) -> PlaybackState:
        return self.dispatch(Replay())
