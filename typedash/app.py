"""Application entry point and setup for the typedash typing test."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from typedash.core.config import default_config_path, load_settings
from typedash.ui.main_window import MainWindow


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def run() -> None:
    """Load settings, build the main window and start the Qt event loop."""
    configure_logging()
    app = QApplication(sys.argv)
    app.setApplicationName("typedash")
    app.setApplicationDisplayName("Typing Speed Test")

    config_path = default_config_path()
    try:
        settings = load_settings(config_path)
    except ValueError as e:
        logging.error("Invalid configuration in %s: %s", config_path, e)
        sys.exit(2)
    logging.info(
        "Starting with a %ds test of %d words from %s",
        settings.duration_seconds,
        settings.word_count,
        settings.word_api_url,
    )

    window = MainWindow(settings=settings)
    window.show()

    sys.exit(app.exec())
