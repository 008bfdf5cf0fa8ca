from __future__ import annotations

import logging
import time
from typing import Optional

from PySide6.QtCore import Qt, QThreadPool, QTimer
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPlainTextEdit,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from typedash.core.config import Settings
from typedash.core.session import (
    Finished,
    InputChanged,
    Session,
    SessionEvent,
    Started,
    TextLoaded,
    TimerTick,
    reduce,
)
from typedash.core.words import WordSource
from typedash.ui.audio import ErrorCue
from typedash.ui.colors import Palette, blend_hex
from typedash.ui.render import format_time_left
from typedash.ui.typing_widgets import ResultsCard, TargetTextLabel
from typedash.ui.workers import WordFetchWorker

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Typing speed test window.

    All state lives in an immutable :class:`Session`; widget callbacks turn
    user actions and timer ticks into events, run them through ``reduce``
    and re-render from the result.
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings
        self._session = Session(duration=settings.duration_seconds, time_left=settings.duration_seconds)
        self._word_source = WordSource(
            url=settings.word_api_url,
            count=settings.word_count,
            timeout=settings.request_timeout,
        )
        self._error_cue = ErrorCue(settings.error_sound, enabled=settings.sound_enabled)
        self._fetch_request_id = 0
        self._fetch_worker: Optional[WordFetchWorker] = None
        self._syncing_input = False

        self._countdown = QTimer(self)
        self._countdown.setInterval(1000)
        self._countdown.timeout.connect(self._on_countdown_tick)

        self._build_ui()
        self._render()

    def _build_ui(self) -> None:
        self.setWindowTitle("Typing Speed Test")
        self.resize(900, 700)

        root = QWidget()
        root.setStyleSheet(f"background: {Palette.BG};")
        layout = QVBoxLayout(root)
        layout.setContentsMargins(48, 32, 48, 32)
        layout.setSpacing(16)

        title = QLabel("Typing Speed Test")
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet(f"font-size: 32px; font-weight: 700; color: {Palette.TEXT_PRIMARY};")
        layout.addWidget(title)

        self.time_label = QLabel()
        self.time_label.setAlignment(Qt.AlignCenter)
        self.time_label.setStyleSheet(f"font-size: 20px; font-weight: 600; color: {Palette.TEXT_SECONDARY};")
        layout.addWidget(self.time_label)

        self.target_label = TargetTextLabel()
        layout.addWidget(self.target_label)

        self.input_box = QPlainTextEdit()
        self.input_box.setPlaceholderText("Start typing...")
        self.input_box.setFixedHeight(128)
        self.input_box.setStyleSheet(
            f"""
            QPlainTextEdit {{
                background: white;
                color: {Palette.TEXT_PRIMARY};
                border: 1px solid {Palette.BORDER};
                border-radius: 8px;
                padding: 12px;
                font-size: 16px;
            }}
            QPlainTextEdit:focus {{
                border: 1px solid {Palette.FOCUS};
            }}
            """
        )
        self.input_box.textChanged.connect(self._on_input_changed)
        layout.addWidget(self.input_box)

        self.results_card = ResultsCard()
        self.results_card.setVisible(False)
        layout.addWidget(self.results_card)

        buttons = QHBoxLayout()
        buttons.setSpacing(16)
        self.start_button = self._make_button()
        self.start_button.clicked.connect(self._on_start_or_finish)
        self.reset_button = self._make_button("Reset Test")
        self.reset_button.clicked.connect(self._start)
        buttons.addStretch(1)
        buttons.addWidget(self.start_button)
        buttons.addWidget(self.reset_button)
        buttons.addStretch(1)
        layout.addLayout(buttons)
        layout.addStretch(1)

        self.setCentralWidget(root)

    @staticmethod
    def _make_button(text: str = "") -> QPushButton:
        button = QPushButton(text)
        button.setCursor(Qt.PointingHandCursor)
        hover = blend_hex(Palette.PRIMARY, Palette.PRIMARY_DARK, 0.6)
        button.setStyleSheet(
            f"""
            QPushButton {{
                background: {Palette.PRIMARY};
                color: white;
                border: none;
                border-radius: 8px;
                padding: 8px 16px;
                font-size: 15px;
            }}
            QPushButton:hover {{
                background: {hover};
            }}
            """
        )
        return button

    def _dispatch(self, event: SessionEvent) -> None:
        was_running = self._session.is_running
        self._session = reduce(self._session, event)
        if was_running and not self._session.is_running:
            self._countdown.stop()
        self._render()

    def _render(self) -> None:
        session = self._session
        self.time_label.setText(format_time_left(session.time_left))
        self.target_label.set_progress(session.target_text, session.typed_text)
        self.start_button.setText("Finish" if session.is_running else "Start Test")
        self.input_box.setEnabled(session.is_running)
        if self.input_box.toPlainText() != session.typed_text:
            self._syncing_input = True
            self.input_box.setPlainText(session.typed_text)
            self._syncing_input = False
        if session.result is not None:
            self.results_card.set_result(session.result)
        self.results_card.setVisible(session.result is not None)

    def _on_start_or_finish(self) -> None:
        if self._session.is_running:
            self._dispatch(Finished(timestamp=time.time()))
        else:
            self._start()

    def _start(self) -> None:
        self._dispatch(Started(timestamp=time.time(), duration=self._settings.duration_seconds))
        self._request_text()
        self._countdown.start()
        self.input_box.setFocus()

    def _request_text(self) -> None:
        self._fetch_request_id += 1
        worker = WordFetchWorker(self._word_source, self._fetch_request_id)
        worker.signals.loaded.connect(self._on_text_loaded)
        self._fetch_worker = worker
        QThreadPool.globalInstance().start(worker)

    def _on_text_loaded(self, request_id: int, text: str) -> None:
        if request_id != self._fetch_request_id:
            logger.debug("Dropping stale word fetch %d", request_id)
            return
        self._fetch_worker = None
        self._dispatch(TextLoaded(text))

    def _on_countdown_tick(self) -> None:
        self._dispatch(TimerTick(self._session.time_left - 1))

    def _on_input_changed(self) -> None:
        if self._syncing_input:
            return
        self._dispatch(InputChanged(self.input_box.toPlainText()))
        if self._session.has_trailing_error:
            self._error_cue.play()

    def closeEvent(self, event: QCloseEvent) -> None:
        self._countdown.stop()
        super().closeEvent(event)
