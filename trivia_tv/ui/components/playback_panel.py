"""Component presenting a trivia round: question, countdown, answer, repeat."""

from __future__ import annotations

import logging
from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_tv.constants.playback_constants import TICK_INTERVAL_MS
from trivia_tv.constants.ui_constants import (
    ANSWER_COUNTDOWN_TEMPLATE,
    BACK_TO_MENU_BUTTON,
    EXIT_ROUND_BUTTON,
    FINISHED_SUMMARY_TEMPLATE,
    FINISHED_TITLE,
    HIGH_CONTRAST_BUTTON,
    LARGE_TEXT_BUTTON,
    LOADING_MESSAGE,
    NEXT_BUTTON,
    NORMAL_CONTRAST_BUTTON,
    NORMAL_TEXT_BUTTON,
    PAUSE_BUTTON,
    PAUSED_HINT,
    PAUSED_TITLE,
    PROGRESS_TEMPLATE,
    QUESTION_COUNTDOWN_TEMPLATE,
    REPEAT_BUTTON,
    REPLAY_BUTTON,
    RESUME_BUTTON,
)
from trivia_tv.core.narration import Narrator
from trivia_tv.core.playback import PlaybackPhase, PlaybackSession, PlaybackState, PlaybackTiming
from trivia_tv.core.selection import parse_playback_query
from trivia_tv.core.trivia_manager import TriviaManager
from trivia_tv.styling.styles import Styles

logger = logging.getLogger(__name__)

_LOADING_VIEW = 0
_MESSAGE_VIEW = 1
_PLAYING_VIEW = 2


def _seconds_unit(seconds: int) -> str:
    return "second" if seconds == 1 else "seconds"


class PlaybackPanel(QWidget):
    """UI component that owns the one-second tick driving a ``PlaybackSession``."""

    def __init__(
        self,
        trivia_manager: TriviaManager,
        narrator: Narrator,
        on_back_to_menu: Callable[[], None],
        on_toggle_contrast: Callable[[], None],
        on_toggle_text_size: Callable[[], None],
        timing: PlaybackTiming | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.trivia_manager = trivia_manager
        self.narrator = narrator
        self.on_back_to_menu = on_back_to_menu
        self.on_toggle_contrast = on_toggle_contrast
        self.on_toggle_text_size = on_toggle_text_size

        self.session = PlaybackSession(narrator, timing)
        self._timer_key: tuple | None = None

        self._build_ui()
        self._configure_tick_timer()

    # --- Layout ---

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.view_stack = QStackedWidget(self)
        self.view_stack.addWidget(self._build_loading_view())
        self.view_stack.addWidget(self._build_message_view())
        self.view_stack.addWidget(self._build_playing_view())
        layout.addWidget(self.view_stack)

    def _build_loading_view(self) -> QWidget:
        view = QWidget(self)
        view_layout = QVBoxLayout()
        view.setLayout(view_layout)
        self.loading_label = QLabel(LOADING_MESSAGE, view)
        self.loading_label.setAlignment(Qt.AlignCenter)
        view_layout.addWidget(self.loading_label)
        return view

    def _build_message_view(self) -> QWidget:
        """Shared by the error and the finished screens."""
        view = QWidget(self)
        view_layout = QVBoxLayout()
        view.setLayout(view_layout)
        view_layout.addStretch()

        self.message_title_label = QLabel("", view)
        self.message_title_label.setAlignment(Qt.AlignCenter)
        view_layout.addWidget(self.message_title_label)

        self.message_label = QLabel("", view)
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        self.message_label.setAccessibleName("Status message")
        view_layout.addWidget(self.message_label)

        button_row = QHBoxLayout()
        button_row.addStretch()
        self.replay_button = QPushButton(REPLAY_BUTTON, view)
        self.replay_button.clicked.connect(self._handle_replay)
        button_row.addWidget(self.replay_button)

        self.message_back_button = QPushButton(BACK_TO_MENU_BUTTON, view)
        self.message_back_button.clicked.connect(self._handle_back_to_menu)
        button_row.addWidget(self.message_back_button)
        button_row.addStretch()
        view_layout.addLayout(button_row)
        view_layout.addStretch()
        return view

    def _build_playing_view(self) -> QWidget:
        view = QWidget(self)
        view_layout = QVBoxLayout()
        view.setLayout(view_layout)

        # Control row
        control_row = QHBoxLayout()
        self.exit_button = QPushButton(EXIT_ROUND_BUTTON, view)
        self.exit_button.setAccessibleName("Exit round")
        self.exit_button.clicked.connect(self._handle_back_to_menu)
        control_row.addWidget(self.exit_button)
        control_row.addStretch()

        self.contrast_button = QPushButton(HIGH_CONTRAST_BUTTON, view)
        self.contrast_button.clicked.connect(self.on_toggle_contrast)
        control_row.addWidget(self.contrast_button)

        self.text_size_button = QPushButton(LARGE_TEXT_BUTTON, view)
        self.text_size_button.clicked.connect(self.on_toggle_text_size)
        control_row.addWidget(self.text_size_button)

        self.pause_button = QPushButton(PAUSE_BUTTON, view)
        self.pause_button.clicked.connect(self._handle_pause_play)
        control_row.addWidget(self.pause_button)

        self.repeat_button = QPushButton(REPEAT_BUTTON, view)
        self.repeat_button.clicked.connect(self._handle_repeat)
        control_row.addWidget(self.repeat_button)

        self.next_button = QPushButton(NEXT_BUTTON, view)
        self.next_button.clicked.connect(self._handle_next)
        control_row.addWidget(self.next_button)
        view_layout.addLayout(control_row)

        self.progress_label = QLabel("", view)
        self.progress_label.setAlignment(Qt.AlignCenter)
        view_layout.addWidget(self.progress_label)

        self.question_countdown_label = QLabel("", view)
        self.question_countdown_label.setAlignment(Qt.AlignCenter)
        view_layout.addWidget(self.question_countdown_label, alignment=Qt.AlignHCenter)

        self.question_label = QLabel("", view)
        self.question_label.setAlignment(Qt.AlignCenter)
        self.question_label.setWordWrap(True)
        view_layout.addWidget(self.question_label, stretch=1)

        # Answer card
        self.answer_card = QFrame(view)
        card_layout = QVBoxLayout()
        self.answer_card.setLayout(card_layout)
        self.answer_label = QLabel("", self.answer_card)
        self.answer_label.setAlignment(Qt.AlignCenter)
        self.answer_label.setWordWrap(True)
        self.answer_label.setAccessibleName("Answer")
        card_layout.addWidget(self.answer_label)

        self.fun_fact_label = QLabel("", self.answer_card)
        self.fun_fact_label.setAlignment(Qt.AlignCenter)
        self.fun_fact_label.setWordWrap(True)
        card_layout.addWidget(self.fun_fact_label)

        self.answer_countdown_label = QLabel("", self.answer_card)
        self.answer_countdown_label.setAlignment(Qt.AlignCenter)
        card_layout.addWidget(self.answer_countdown_label)
        view_layout.addWidget(self.answer_card)

        self.paused_label = QLabel(f"{PAUSED_TITLE}\n{PAUSED_HINT}", view)
        self.paused_label.setAlignment(Qt.AlignCenter)
        view_layout.addWidget(self.paused_label)
        return view

    # --- Timer lifetime ---

    def _configure_tick_timer(self) -> None:
        self.tick_timer = QTimer(self)
        self.tick_timer.setInterval(TICK_INTERVAL_MS)
        self.tick_timer.timeout.connect(self._handle_tick)

    def _sync_tick_timer(self) -> None:
        """Run the tick only while playing and unpaused.

        The timer restarts whenever the question, the reveal flag or the pause
        flag changes, so each phase begins with a full second.
        """
        state = self.session.state
        if not state.is_ticking:
            self._stop_tick_timer()
            return
        key = (state.current_index, state.phase, state.is_paused)
        if key != self._timer_key or not self.tick_timer.isActive():
            self._timer_key = key
            self.tick_timer.start()

    def _stop_tick_timer(self) -> None:
        self._timer_key = None
        if self.tick_timer.isActive():
            self.tick_timer.stop()

    # --- Session lifecycle ---

    def start_round(self, query: str) -> None:
        """Begin a round described by a navigation query string."""
        self._stop_tick_timer()
        self.session.reset()
        self._render(self.session.state)
        try:
            selection = parse_playback_query(query)
            items = self.trivia_manager.fetch_trivia(
                country=selection.country,
                period=selection.period,
                limit=selection.question_count,
            )
        except Exception as exc:
            logger.exception("Failed to load trivia for query %r", query)
            reason = str(exc)
            self._apply(lambda: self.session.fail(reason))
            return
        self._apply(lambda: self.session.load(items, selection.country))

    def stop_round(self) -> None:
        """Release the tick and silence narration; safe to call repeatedly."""
        self._stop_tick_timer()
        self.session.reset()

    def set_timing(self, timing: PlaybackTiming) -> None:
        self.session.set_timing(timing)

    def hideEvent(self, event) -> None:
        # Minimizing the window also hides children; only a real navigation ends the round.
        if not event.spontaneous():
            self.stop_round()
        super().hideEvent(event)

    def _apply(self, action: Callable[[], PlaybackState]) -> None:
        state = action()
        self._render(state)
        self._sync_tick_timer()

    # --- Handlers ---

    def _handle_tick(self) -> None:
        self._apply(self.session.tick)

    def _handle_pause_play(self) -> None:
        self._apply(self.session.toggle_pause)

    def _handle_repeat(self) -> None:
        self._apply(self.session.repeat)

    def _handle_next(self) -> None:
        self._apply(self.session.next)

    def _handle_replay(self) -> None:
        self._apply(self.session.replay)

    def _handle_back_to_menu(self) -> None:
        self.stop_round()
        self.on_back_to_menu()

    # --- Rendering ---

    def _render(self, state: PlaybackState) -> None:
        if state.phase is PlaybackPhase.LOADING:
            self.view_stack.setCurrentIndex(_LOADING_VIEW)
        elif state.phase is PlaybackPhase.ERROR:
            self._render_message(title="", message=state.message or "", allow_replay=False)
        elif state.phase is PlaybackPhase.ENDED:
            summary = FINISHED_SUMMARY_TEMPLATE.format(count=len(state.items), country=state.country)
            self._render_message(title=FINISHED_TITLE, message=summary, allow_replay=True)
        else:
            self._render_playing(state)

    def _render_message(self, title: str, message: str, allow_replay: bool) -> None:
        self.message_title_label.setText(title)
        self.message_title_label.setVisible(bool(title))
        self.message_label.setText(message)
        self.replay_button.setVisible(allow_replay)
        self.view_stack.setCurrentIndex(_MESSAGE_VIEW)

    def _render_playing(self, state: PlaybackState) -> None:
        item = state.current_item
        self.view_stack.setCurrentIndex(_PLAYING_VIEW)
        self.progress_label.setText(
            PROGRESS_TEMPLATE.format(number=state.current_index + 1, total=len(state.items))
        )
        self.question_label.setText(item.question if item else "")
        self.pause_button.setText(RESUME_BUTTON if state.is_paused else PAUSE_BUTTON)

        seconds = state.countdown
        show_question_countdown = not state.show_answer and not state.is_paused
        self.question_countdown_label.setVisible(show_question_countdown)
        self.question_countdown_label.setText(
            QUESTION_COUNTDOWN_TEMPLATE.format(seconds=seconds, unit=_seconds_unit(seconds))
        )

        self.answer_card.setVisible(state.show_answer)
        if state.show_answer and item is not None:
            self.answer_label.setText(item.answer)
            self.fun_fact_label.setText(item.fun_fact or "")
            self.fun_fact_label.setVisible(bool(item.fun_fact))
            self.answer_countdown_label.setText(
                ANSWER_COUNTDOWN_TEMPLATE.format(seconds=seconds, unit=_seconds_unit(seconds))
            )
            self.answer_countdown_label.setVisible(seconds > 0 and not state.is_paused)

        self.paused_label.setVisible(state.is_paused)

    def apply_display_preferences(self, high_contrast: bool, large_text: bool) -> None:
        theme = Styles.theme_for(high_contrast)

        self.contrast_button.setText(NORMAL_CONTRAST_BUTTON if high_contrast else HIGH_CONTRAST_BUTTON)
        self.text_size_button.setText(NORMAL_TEXT_BUTTON if large_text else LARGE_TEXT_BUTTON)
        self.next_button.setStyleSheet(Styles.get_next_button_style(theme))

        self.loading_label.setStyleSheet(Styles.get_heading_style(theme, large_text))
        self.message_title_label.setStyleSheet(Styles.get_heading_style(theme, large_text))
        self.progress_label.setStyleSheet(Styles.get_highlight_style(theme, large_text))
        self.question_countdown_label.setStyleSheet(Styles.get_countdown_style(theme, large_text))
        self.question_label.setStyleSheet(Styles.get_question_style(theme, large_text))
        self.answer_card.setStyleSheet(Styles.get_answer_card_style(theme))
        self.answer_label.setStyleSheet(Styles.get_answer_style(theme, large_text))
        self.fun_fact_label.setStyleSheet(Styles.get_fun_fact_style(theme, large_text))
        self.answer_countdown_label.setStyleSheet(
            Styles.get_highlight_style(theme, large_text) + " font-weight: bold;"
        )
        self.paused_label.setStyleSheet(Styles.get_paused_style(theme, large_text))
