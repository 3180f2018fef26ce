"""Styling module for World Trivia TV."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
