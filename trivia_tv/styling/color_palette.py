"""Color palette for World Trivia TV supporting normal and high-contrast themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    NORMAL = auto()
    HIGH_CONTRAST = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    normal: str
    high_contrast: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.normal if theme == Theme.NORMAL else self.high_contrast


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        normal="#FFFFFF",      # White
        high_contrast="#FFFFFF"
    )

    TEXT_HIGHLIGHT = ThemeColors(
        normal="#FDE047",      # Yellow
        high_contrast="#FFFF00"
    )

    BACKGROUND_PRIMARY = ThemeColors(
        normal="#1E3A8A",      # Deep blue
        high_contrast="#000000"
    )

    BUTTON_BG = ThemeColors(
        normal="#3B82F6",      # Blue
        high_contrast="#FFFFFF"
    )

    BUTTON_TEXT = ThemeColors(
        normal="#FFFFFF",
        high_contrast="#000000"
    )

    BUTTON_HOVER_BG = ThemeColors(
        normal="#60A5FA",      # Lighter blue
        high_contrast="#E5E7EB"
    )

    BUTTON_SELECTED_BG = ThemeColors(
        normal="#EAB308",      # Amber
        high_contrast="#FFFF00"
    )

    BUTTON_SELECTED_TEXT = ThemeColors(
        normal="#000000",
        high_contrast="#000000"
    )

    FOCUS_RING = ThemeColors(
        normal="#FACC15",
        high_contrast="#FFFF00"
    )

    ANSWER_BG = ThemeColors(
        normal="#16A34A",      # Green
        high_contrast="#006400"
    )

    ANSWER_SECONDARY_TEXT = ThemeColors(
        normal="#DCFCE7",
        high_contrast="#FFFFFF"
    )

    COUNTDOWN_BG = ThemeColors(
        normal="#EAB308",
        high_contrast="#FFFF00"
    )

    PAUSED_BG = ThemeColors(
        normal="#EAB308",
        high_contrast="#FFFF00"
    )

    NEXT_BUTTON_BG = ThemeColors(
        normal="#16A34A",
        high_contrast="#FFFFFF"
    )
