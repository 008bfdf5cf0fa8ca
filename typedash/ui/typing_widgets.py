"""Typing test widgets: colored target text and the results card."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QFrame, QGridLayout, QLabel, QVBoxLayout, QWidget

from typedash.core.scoring import ScoreResult
from typedash.ui.colors import Palette
from typedash.ui.render import render_target_html


class TargetTextLabel(QLabel):
    """Rich-text label showing the target with per-character coloring."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setTextFormat(Qt.RichText)
        self.setWordWrap(True)
        self.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.setMinimumHeight(80)
        self.setStyleSheet("QLabel { font-size: 18px; }")

    def set_progress(self, target: str, typed: str) -> None:
        self.setText(render_target_html(target, typed))


class ResultsCard(QFrame):
    """Card listing WPM, accuracy and character counts for a finished session."""

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self.setObjectName("ResultsCard")
        self.setStyleSheet(
            f"""
            QFrame#ResultsCard {{
                background: {Palette.CARD_BG};
                border: 1px solid {Palette.BORDER};
                border-radius: 8px;
            }}
            """
        )
        layout = QVBoxLayout(self)
        layout.setContentsMargins(16, 16, 16, 16)

        title = QLabel("Results")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"font-size: 22px; font-weight: 700; color: {Palette.TEXT_PRIMARY};")
        layout.addWidget(title)

        grid = QGridLayout()
        grid.setVerticalSpacing(12)
        layout.addLayout(grid)
        self._wpm_value = self._add_row(grid, 0, "Words Per Minute:", Palette.HIGHLIGHT)
        self._accuracy_value = self._add_row(grid, 1, "Accuracy:", Palette.HIGHLIGHT)
        self._correct_value = self._add_row(grid, 2, "Correct Characters:", Palette.CORRECT_DARK)
        self._incorrect_value = self._add_row(grid, 3, "Incorrect Characters:", Palette.INCORRECT_DARK)

    @staticmethod
    def _add_row(grid: QGridLayout, row: int, caption: str, color: str) -> QLabel:
        label = QLabel(caption)
        label.setStyleSheet(f"font-size: 16px; font-weight: 700; color: {Palette.TEXT_SECONDARY};")
        value = QLabel("")
        value.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        value.setStyleSheet(f"font-size: 16px; font-weight: 700; color: {color};")
        grid.addWidget(label, row, 0)
        grid.addWidget(value, row, 1)
        return value

    def set_result(self, result: ScoreResult) -> None:
        self._wpm_value.setText(f"{result.wpm} WPM")
        self._accuracy_value.setText(f"{result.accuracy}%")
        self._correct_value.setText(f"{result.correct_chars}")
        self._incorrect_value.setText(f"{result.incorrect_chars}")
