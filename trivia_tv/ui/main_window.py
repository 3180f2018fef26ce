"""Qt main window switching between the selection and playback screens."""

from __future__ import annotations

from enum import Enum, auto

from PySide6.QtCore import QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from trivia_tv.constants.about import (
    APP_ABOUT_TEXT,
    APP_LICENSE,
    APP_NAME,
    APP_VERSION,
    HELP_TEXT,
)
from trivia_tv.constants.playback_constants import ANSWER_SECONDS, QUESTION_SECONDS
from trivia_tv.constants.ui_constants import (
    ABOUT_BUTTON,
    COUNTRIES,
    DATA_UNAVAILABLE_MESSAGE,
    DATA_UNAVAILABLE_TITLE,
    HELP_BUTTON,
    PERIODS,
    SETTINGS_BUTTON,
    WINDOW_TITLE,
)
from trivia_tv.core.narration import SwitchableNarrator
from trivia_tv.core.playback import PlaybackTiming
from trivia_tv.core.trivia_manager import TriviaManager
from trivia_tv.styling.styles import Styles
from trivia_tv.ui.components.playback_panel import PlaybackPanel
from trivia_tv.ui.components.selection_panel import SelectionPanel
from trivia_tv.ui.dialog_helpers import show_error, show_info
from trivia_tv.ui.settings_dialog import SettingsDialog


class ScreenMode(Enum):
    """Which screen the window is showing."""

    SELECTION = auto()
    PLAYBACK = auto()


class TriviaMainWindow(QMainWindow):
    """Main Qt window hosting the selection and playback screens."""

    def __init__(self, trivia_manager: TriviaManager, narrator: SwitchableNarrator) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.trivia_manager = trivia_manager
        self.narrator = narrator

        self._mode = ScreenMode.SELECTION
        self._high_contrast: bool = False
        self._large_text: bool = False
        self._question_seconds: int = QUESTION_SECONDS
        self._answer_seconds: int = ANSWER_SECONDS

        self._build_ui()
        self._apply_styles()
        self._set_mode(ScreenMode.SELECTION)
        self.selection_panel.announce_welcome()
        if self.trivia_manager.get_item_count() == 0:
            QTimer.singleShot(0, self._warn_data_unavailable)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_menu_buttons(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.selection_panel = SelectionPanel(
            self.narrator,
            countries=self.trivia_manager.get_countries() or list(COUNTRIES),
            periods=self._selectable_periods(),
            on_start=self._handle_start_round,
            on_toggle_contrast=self._toggle_high_contrast,
            on_toggle_text_size=self._toggle_large_text,
            parent=self,
        )
        self.playback_panel = PlaybackPanel(
            self.trivia_manager,
            self.narrator,
            on_back_to_menu=self._handle_back_to_menu,
            on_toggle_contrast=self._toggle_high_contrast,
            on_toggle_text_size=self._toggle_large_text,
            timing=self._current_timing(),
            parent=self,
        )
        self.mode_stack.addWidget(self.selection_panel)
        self.mode_stack.addWidget(self.playback_panel)
        root_layout.addWidget(self.mode_stack)

    def _build_menu_buttons(self, layout: QVBoxLayout) -> None:
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.about_button = QPushButton(ABOUT_BUTTON, self)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        self.help_button = QPushButton(HELP_BUTTON, self)
        self.help_button.clicked.connect(self._handle_help)
        button_row.addWidget(self.help_button)

        self.settings_button = QPushButton(SETTINGS_BUTTON, self)
        self.settings_button.clicked.connect(self._handle_settings)
        button_row.addWidget(self.settings_button)

        layout.addLayout(button_row)

    def _selectable_periods(self) -> list[str]:
        periods = self.trivia_manager.get_periods()
        # An empty collection still reports the "Any Time" label on its own.
        return periods if len(periods) > 1 else list(PERIODS)

    def _current_timing(self) -> PlaybackTiming:
        return PlaybackTiming(
            question_seconds=self._question_seconds,
            answer_seconds=self._answer_seconds,
        )

    def _set_mode(self, mode: ScreenMode) -> None:
        self._mode = mode
        index_map = {
            ScreenMode.SELECTION: 0,
            ScreenMode.PLAYBACK: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])
        self.settings_button.setEnabled(mode == ScreenMode.SELECTION)

    def _handle_start_round(self, query: str) -> None:
        self._set_mode(ScreenMode.PLAYBACK)
        self.playback_panel.start_round(query)

    def _handle_back_to_menu(self) -> None:
        self.narrator.cancel()
        self._set_mode(ScreenMode.SELECTION)
        self.selection_panel.announce_welcome()

    def _toggle_high_contrast(self) -> None:
        self._high_contrast = not self._high_contrast
        self._apply_styles()

    def _toggle_large_text(self) -> None:
        self._large_text = not self._large_text
        self._apply_styles()

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"About {APP_NAME}", details, large_text=self._large_text)

    def _handle_help(self) -> None:
        show_info(self, f"{APP_NAME} Help", HELP_TEXT, large_text=self._large_text)

    def _warn_data_unavailable(self) -> None:
        show_error(self, DATA_UNAVAILABLE_TITLE, DATA_UNAVAILABLE_MESSAGE, large_text=self._large_text)

    def _handle_settings(self) -> None:
        dialog = SettingsDialog(
            self,
            self.narrator.enabled,
            self._question_seconds,
            self._answer_seconds,
            self._high_contrast,
            self._large_text,
        )
        if dialog.exec():
            self.narrator.enabled = dialog.get_narration_enabled()
            self._question_seconds = dialog.get_question_seconds()
            self._answer_seconds = dialog.get_answer_seconds()
            self._high_contrast = dialog.get_high_contrast()
            self._large_text = dialog.get_large_text()

            self.playback_panel.set_timing(self._current_timing())
            self._apply_styles()

    def _apply_styles(self) -> None:
        theme = Styles.theme_for(self._high_contrast)
        self.setStyleSheet(Styles.get_main_window_style(theme, self._large_text))
        self.selection_panel.apply_display_preferences(self._high_contrast, self._large_text)
        self.playback_panel.apply_display_preferences(self._high_contrast, self._large_text)

    def closeEvent(self, event) -> None:
        self.playback_panel.stop_round()
        self.selection_panel.stop_announcements()
        super().closeEvent(event)
