"""Settings dialog for configuring World Trivia TV preferences."""

from __future__ import annotations

from PySide6.QtWidgets import (
    QCheckBox,
    QDialog,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QSpinBox,
    QVBoxLayout,
)

from trivia_tv.constants.playback_constants import (
    ANSWER_SECONDS,
    MAX_PHASE_SECONDS,
    MIN_PHASE_SECONDS,
    QUESTION_SECONDS,
)


class SettingsDialog(QDialog):
    """Dialog for configuring narration, round timing and display preferences."""

    def __init__(
        self,
        parent=None,
        narration_enabled: bool = True,
        question_seconds: int = QUESTION_SECONDS,
        answer_seconds: int = ANSWER_SECONDS,
        high_contrast: bool = False,
        large_text: bool = False,
    ) -> None:
        super().__init__(parent)
        self.setWindowTitle("Settings")
        self.setModal(True)
        self.setMinimumWidth(480)

        self._narration_enabled = narration_enabled
        self._question_seconds = _clamp_seconds(question_seconds)
        self._answer_seconds = _clamp_seconds(answer_seconds)
        self._high_contrast = high_contrast
        self._large_text = large_text

        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Timing group
        timing_group = QGroupBox("Round Timing")
        timing_layout = QVBoxLayout()
        timing_group.setLayout(timing_layout)

        self.question_spinbox = self._add_seconds_row(
            timing_layout,
            "Seconds before the answer is shown:",
            self._question_seconds,
        )
        self.answer_spinbox = self._add_seconds_row(
            timing_layout,
            "Seconds before the next question:",
            self._answer_seconds,
        )
        layout.addWidget(timing_group)

        # Display and narration group
        display_group = QGroupBox("Display & Narration")
        display_layout = QVBoxLayout()
        display_group.setLayout(display_layout)

        self.narration_checkbox = QCheckBox("Read questions and answers aloud")
        self.narration_checkbox.setChecked(self._narration_enabled)
        display_layout.addWidget(self.narration_checkbox)

        self.contrast_checkbox = QCheckBox("High contrast")
        self.contrast_checkbox.setChecked(self._high_contrast)
        display_layout.addWidget(self.contrast_checkbox)

        self.large_text_checkbox = QCheckBox("Larger text")
        self.large_text_checkbox.setChecked(self._large_text)
        display_layout.addWidget(self.large_text_checkbox)

        layout.addWidget(display_group)

        # Buttons
        button_row = QHBoxLayout()
        button_row.addStretch()

        self.cancel_button = QPushButton("Cancel")
        self.cancel_button.clicked.connect(self.reject)  # type: ignore[arg-type]
        button_row.addWidget(self.cancel_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.clicked.connect(self.accept)  # type: ignore[arg-type]
        self.apply_button.setDefault(True)
        button_row.addWidget(self.apply_button)

        layout.addLayout(button_row)

    def _add_seconds_row(self, layout: QVBoxLayout, text: str, value: int) -> QSpinBox:
        row = QHBoxLayout()
        label = QLabel(text)
        spinbox = QSpinBox()
        spinbox.setRange(MIN_PHASE_SECONDS, MAX_PHASE_SECONDS)
        spinbox.setValue(value)
        spinbox.setSuffix(" s")
        row.addWidget(label)
        row.addStretch()
        row.addWidget(spinbox)
        layout.addLayout(row)
        return spinbox

    def get_narration_enabled(self) -> bool:
        return self.narration_checkbox.isChecked()

    def get_question_seconds(self) -> int:
        return self.question_spinbox.value()

    def get_answer_seconds(self) -> int:
        return self.answer_spinbox.value()

    def get_high_contrast(self) -> bool:
        return self.contrast_checkbox.isChecked()

    def get_large_text(self) -> bool:
        return self.large_text_checkbox.isChecked()


def _clamp_seconds(value: int) -> int:
    return max(MIN_PHASE_SECONDS, min(MAX_PHASE_SECONDS, value))
