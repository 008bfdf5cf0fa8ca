from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QUrl
from PySide6.QtMultimedia import QSoundEffect
from PySide6.QtWidgets import QApplication

logger = logging.getLogger(__name__)


class ErrorCue:
    """Plays a short sound when a wrong character is typed.

    Uses the configured sound file, or the system beep when none is set.
    """

    def __init__(self, sound_path: Optional[str] = None, enabled: bool = True) -> None:
        self.enabled = enabled
        self._effect: Optional[QSoundEffect] = None
        if sound_path:
            path = Path(sound_path)
            if path.exists():
                self._effect = QSoundEffect()
                self._effect.setSource(QUrl.fromLocalFile(str(path)))
                self._effect.setVolume(0.25)
            else:
                logger.warning("Error sound not found: %s", path)

    def play(self) -> None:
        if not self.enabled:
            return
        if self._effect is not None:
            self._effect.play()
        else:
            QApplication.beep()
