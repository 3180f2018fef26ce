"""Component for choosing the country, period and number of questions."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QButtonGroup,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
    QWidget,
)

from trivia_tv.constants.playback_constants import WELCOME_DELAY_MS
from trivia_tv.constants.ui_constants import (
    COUNT_HEADING,
    COUNT_NARRATION_TEMPLATE,
    COUNTRY_HEADING,
    DEFAULT_QUESTION_COUNT,
    HIGH_CONTRAST_BUTTON,
    INSTRUCTIONS_NARRATION,
    LARGE_TEXT_BUTTON,
    MAX_QUESTION_COUNT,
    MIN_QUESTION_COUNT,
    NORMAL_CONTRAST_BUTTON,
    NORMAL_TEXT_BUTTON,
    PERIOD_HEADING,
    REPEAT_INSTRUCTIONS_BUTTON,
    SELECTION_SUBTITLE,
    SELECTION_TITLE,
    START_BUTTON,
    WELCOME_NARRATION,
)
from trivia_tv.core.models import SessionSelection
from trivia_tv.core.narration import Narrator
from trivia_tv.core.selection import build_playback_query
from trivia_tv.styling.styles import Styles


class SelectionPanel(QWidget):
    """UI component collecting the choices for a trivia round."""

    def __init__(
        self,
        narrator: Narrator,
        countries: list[str],
        periods: list[str],
        on_start: Callable[[str], None],
        on_toggle_contrast: Callable[[], None],
        on_toggle_text_size: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.narrator = narrator
        self.countries = list(countries)
        self.periods = list(periods)
        self.on_start = on_start
        self.on_toggle_contrast = on_toggle_contrast
        self.on_toggle_text_size = on_toggle_text_size

        self._selected_country: str | None = None
        self._selected_period: str | None = None

        self._build_ui()
        self._configure_welcome_timer()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        self.title_label = QLabel(SELECTION_TITLE, self)
        self.title_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.title_label)

        self.subtitle_label = QLabel(SELECTION_SUBTITLE, self)
        self.subtitle_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.subtitle_label)

        # Display settings row
        display_row = QHBoxLayout()
        display_row.addStretch()
        self.contrast_button = QPushButton(HIGH_CONTRAST_BUTTON, self)
        self.contrast_button.clicked.connect(self.on_toggle_contrast)
        display_row.addWidget(self.contrast_button)

        self.text_size_button = QPushButton(LARGE_TEXT_BUTTON, self)
        self.text_size_button.clicked.connect(self.on_toggle_text_size)
        display_row.addWidget(self.text_size_button)

        self.instructions_button = QPushButton(REPEAT_INSTRUCTIONS_BUTTON, self)
        self.instructions_button.clicked.connect(self._handle_repeat_instructions)
        display_row.addWidget(self.instructions_button)
        display_row.addStretch()
        layout.addLayout(display_row)

        # Country choices
        self.country_heading = QLabel(COUNTRY_HEADING, self)
        self.country_heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.country_heading)
        self.country_group = self._build_choice_grid(layout, self.countries, columns=2)
        self.country_group.buttonClicked.connect(self._handle_country_clicked)

        # Period choices
        self.period_heading = QLabel(PERIOD_HEADING, self)
        self.period_heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.period_heading)
        self.period_group = self._build_choice_grid(layout, self.periods, columns=3)
        self.period_group.buttonClicked.connect(self._handle_period_clicked)

        # Question count
        self.count_heading = QLabel(COUNT_HEADING, self)
        self.count_heading.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.count_heading)

        count_row = QHBoxLayout()
        count_row.addStretch()
        self.count_spinbox = QSpinBox(self)
        self.count_spinbox.setRange(MIN_QUESTION_COUNT, MAX_QUESTION_COUNT)
        self.count_spinbox.setValue(DEFAULT_QUESTION_COUNT)
        self.count_spinbox.setAccessibleName("Number of questions")
        self.count_spinbox.valueChanged.connect(self._handle_count_changed)
        count_row.addWidget(self.count_spinbox)
        count_row.addStretch()
        layout.addLayout(count_row)

        self.start_button = QPushButton(START_BUTTON, self)
        self.start_button.setEnabled(False)
        self.start_button.clicked.connect(self._handle_start)
        layout.addWidget(self.start_button)
        layout.addStretch()

    def _build_choice_grid(self, layout: QVBoxLayout, labels: list[str], columns: int) -> QButtonGroup:
        grid = QGridLayout()
        group = QButtonGroup(self)
        group.setExclusive(True)
        for idx, label in enumerate(labels):
            button = QPushButton(label, self)
            button.setCheckable(True)
            button.setAccessibleName(f"Select {label}")
            group.addButton(button)
            grid.addWidget(button, idx // columns, idx % columns)
        layout.addLayout(grid)
        return group

    def _configure_welcome_timer(self) -> None:
        self.welcome_timer = QTimer(self)
        self.welcome_timer.setSingleShot(True)
        self.welcome_timer.setInterval(WELCOME_DELAY_MS)
        self.welcome_timer.timeout.connect(lambda: self.narrator.speak(WELCOME_NARRATION))

    def announce_welcome(self) -> None:
        """Speak the welcome message shortly after the screen appears."""
        self.welcome_timer.start()

    def stop_announcements(self) -> None:
        self.welcome_timer.stop()

    def hideEvent(self, event) -> None:
        self.stop_announcements()
        super().hideEvent(event)

    def _handle_country_clicked(self, button: QPushButton) -> None:
        self._selected_country = button.text()
        self.narrator.speak(self._selected_country)
        self._update_start_button()

    def _handle_period_clicked(self, button: QPushButton) -> None:
        self._selected_period = button.text()
        self.narrator.speak(self._selected_period)
        self._update_start_button()

    def _handle_count_changed(self, count: int) -> None:
        self.narrator.speak(COUNT_NARRATION_TEMPLATE.format(count=count))

    def _handle_repeat_instructions(self) -> None:
        self.stop_announcements()
        self.narrator.speak(
            INSTRUCTIONS_NARRATION.format(
                countries=" or ".join(self.countries),
                minimum=MIN_QUESTION_COUNT,
                maximum=MAX_QUESTION_COUNT,
            )
        )

    def _update_start_button(self) -> None:
        self.start_button.setEnabled(self.current_selection() is not None)

    def current_selection(self) -> SessionSelection | None:
        if not self._selected_country or not self._selected_period:
            return None
        return SessionSelection(
            country=self._selected_country,
            period=self._selected_period,
            question_count=self.count_spinbox.value(),
        )

    def _handle_start(self) -> None:
        selection = self.current_selection()
        if selection is None:
            return
        self.stop_announcements()
        # The playback intro is the start announcement.
        self.on_start(build_playback_query(selection))

    def apply_display_preferences(self, high_contrast: bool, large_text: bool) -> None:
        theme = Styles.theme_for(high_contrast)
        self.contrast_button.setText(NORMAL_CONTRAST_BUTTON if high_contrast else HIGH_CONTRAST_BUTTON)
        self.text_size_button.setText(NORMAL_TEXT_BUTTON if large_text else LARGE_TEXT_BUTTON)
        self.title_label.setStyleSheet(Styles.get_heading_style(theme, large_text))
        heading_style = Styles.get_highlight_style(theme, large_text) + " font-weight: bold;"
        for heading in (self.country_heading, self.period_heading, self.count_heading):
            heading.setStyleSheet(heading_style)
