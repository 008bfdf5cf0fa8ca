from __future__ import annotations

from PySide6.QtCore import QObject, QRunnable, Signal

from typedash.core.words import WordSource


class WordFetchSignals(QObject):
    loaded = Signal(int, str)  # request id, text


class WordFetchWorker(QRunnable):
    """Fetches target text off the UI thread.

    ``WordSource.fetch_text`` never raises, so ``loaded`` is always emitted,
    carrying the placeholder text on failure.
    """

    def __init__(self, source: WordSource, request_id: int) -> None:
        super().__init__()
        self.source = source
        self.request_id = request_id
        self.signals = WordFetchSignals()

    def run(self) -> None:
        self.signals.loaded.emit(self.request_id, self.source.fetch_text())
