"""Helper functions for common dialog patterns in the trivia UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget

from trivia_tv.styling.styles import Styles


def _show_message(
    parent: QWidget,
    icon: QMessageBox.Icon,
    title: str,
    message: str,
    large_text: bool,
) -> None:
    point_size = Styles.font_sizes(large_text).body
    msg_box = QMessageBox(parent)
    msg_box.setIcon(icon)
    msg_box.setWindowTitle(title)
    msg_box.setText(message)
    msg_box.setStandardButtons(QMessageBox.Ok)
    msg_box.setStyleSheet(
        f"QLabel {{ font-size: {point_size}pt; }}\n"
        f"QPushButton {{ font-size: {point_size}pt; }}"
    )
    msg_box.exec()


def show_error(parent: QWidget, title: str, message: str, *, large_text: bool = False) -> None:
    """Show a modal error box sized for the current text preference."""
    _show_message(parent, QMessageBox.Critical, title, message, large_text)


def show_info(parent: QWidget, title: str, message: str, *, large_text: bool = False) -> None:
    """Show a modal information box.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Information message
        large_text: Use the larger font preset
    """
    _show_message(parent, QMessageBox.Information, title, message, large_text)
