"""Application entry point and setup for the Hakasha typing trainer."""

import logging
import os
import sys
from pathlib import Path

from PySide6.QtWidgets import QApplication

from hakasha.core.levels import LevelTable
from hakasha.ui.main_window import MainWindow

LEVELS_FILE_ENV = "HAKASHA_LEVELS_FILE"


def configure_logging() -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def levels_path_from_env() -> Path | None:
    """Optional override of the bundled levels file."""
    value = os.environ.get(LEVELS_FILE_ENV)
    if not value:
        return None
    logging.info(f"Using levels file from {LEVELS_FILE_ENV}: {value}")
    return Path(value)


def run() -> None:
    """Load the level table, open the practice window and start the event loop."""
    configure_logging()
    config = LevelTable.load(levels_path_from_env())

    app = QApplication(sys.argv)
    app.setApplicationName("Hakasha")
    app.setApplicationDisplayName("Hakasha")

    window = MainWindow(config)
    window.resize(960, 540)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
