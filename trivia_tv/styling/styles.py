"""Centralized styles and font definitions for the application."""

from dataclasses import dataclass

from .color_palette import ColorPalette, Theme


@dataclass(frozen=True)
class FontSizes:
    """Point sizes for one text-size preference."""
    body: int
    heading: int
    question: int
    answer: int


NORMAL_FONT_SIZES = FontSizes(body=20, heading=40, question=40, answer=34)
LARGE_FONT_SIZES = FontSizes(body=26, heading=50, question=50, answer=42)


class Styles:
    """Helper class to generate Qt stylesheets based on the display preferences."""

    @staticmethod
    def theme_for(high_contrast: bool) -> Theme:
        return Theme.HIGH_CONTRAST if high_contrast else Theme.NORMAL

    @staticmethod
    def font_sizes(large_text: bool) -> FontSizes:
        return LARGE_FONT_SIZES if large_text else NORMAL_FONT_SIZES

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.NORMAL, large_text: bool = False) -> str:
        sizes = Styles.font_sizes(large_text)
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: {sizes.body}pt;
            }}
            QLabel {{
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                background: transparent;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_BG.get(theme)};
                color: {ColorPalette.BUTTON_TEXT.get(theme)};
                border: none;
                border-radius: 12px;
                padding: 16px 28px;
                font-weight: bold;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:focus {{
                border: 4px solid {ColorPalette.FOCUS_RING.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.BUTTON_SELECTED_BG.get(theme)};
                color: {ColorPalette.BUTTON_SELECTED_TEXT.get(theme)};
            }}
            QPushButton:disabled {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
                color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
            }}
            QSpinBox, QCheckBox {{
                font-size: {sizes.body}pt;
            }}
        """

    @staticmethod
    def get_heading_style(theme: Theme, large_text: bool = False) -> str:
        sizes = Styles.font_sizes(large_text)
        return f"font-size: {sizes.heading}pt; font-weight: bold; color: {ColorPalette.TEXT_PRIMARY.get(theme)};"

    @staticmethod
    def get_highlight_style(theme: Theme, large_text: bool = False) -> str:
        sizes = Styles.font_sizes(large_text)
        return f"font-size: {sizes.body}pt; color: {ColorPalette.TEXT_HIGHLIGHT.get(theme)};"

    @staticmethod
    def get_question_style(theme: Theme, large_text: bool = False) -> str:
        sizes = Styles.font_sizes(large_text)
        return f"font-size: {sizes.question}pt; font-weight: bold; color: {ColorPalette.TEXT_PRIMARY.get(theme)};"

    @staticmethod
    def get_countdown_style(theme: Theme, large_text: bool = False) -> str:
        sizes = Styles.font_sizes(large_text)
        return (
            f"font-size: {sizes.body}pt; font-weight: bold; color: #000000; "
            f"background-color: {ColorPalette.COUNTDOWN_BG.get(theme)}; "
            "border-radius: 28px; padding: 12px 40px;"
        )

    @staticmethod
    def get_answer_card_style(theme: Theme) -> str:
        return (
            f"background-color: {ColorPalette.ANSWER_BG.get(theme)}; "
            "border-radius: 24px; padding: 32px;"
        )

    @staticmethod
    def get_answer_style(theme: Theme, large_text: bool = False) -> str:
        sizes = Styles.font_sizes(large_text)
        return f"font-size: {sizes.answer}pt; font-weight: bold; color: {ColorPalette.TEXT_PRIMARY.get(theme)};"

    @staticmethod
    def get_fun_fact_style(theme: Theme, large_text: bool = False) -> str:
        sizes = Styles.font_sizes(large_text)
        return f"font-size: {sizes.body}pt; color: {ColorPalette.ANSWER_SECONDARY_TEXT.get(theme)};"

    @staticmethod
    def get_paused_style(theme: Theme, large_text: bool = False) -> str:
        sizes = Styles.font_sizes(large_text)
        return (
            f"font-size: {sizes.body}pt; font-weight: bold; color: #000000; "
            f"background-color: {ColorPalette.PAUSED_BG.get(theme)}; "
            "border-radius: 16px; padding: 24px;"
        )

    @staticmethod
    def get_next_button_style(theme: Theme) -> str:
        return f"background-color: {ColorPalette.NEXT_BUTTON_BG.get(theme)};"
