"""Qt UI components for the trivia presenter."""

from .dialog_helpers import show_error, show_info
from .main_window import TriviaMainWindow

__all__ = [
    "TriviaMainWindow",
    "show_error",
    "show_info",
]
