"""Application entry point and setup for Daily Canvas."""

import logging
import sys

from PySide6.QtGui import QGuiApplication
from PySide6.QtWidgets import QApplication

from dailycanvas.config import Settings
from dailycanvas.core.artifacts import ArtifactStore
from dailycanvas.core.board import ChallengeBoard
from dailycanvas.core.catalog import ChallengeCatalog
from dailycanvas.core.progress import ProgressStore
from dailycanvas.core.storage import JsonFileStorage
from dailycanvas.ui.main_window import MainWindow


def configure_logging(level: str = "INFO") -> None:
    """Configure application-wide logging with a standard format."""
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


def build_board(settings: Settings) -> ChallengeBoard:
    """Wire the file-backed stores for *settings* into a ChallengeBoard."""
    storage = JsonFileStorage(settings.storage_dir)
    return ChallengeBoard(
        ProgressStore(storage),
        ArtifactStore(storage),
        total_challenges=settings.total_challenges,
        progress_key=settings.progress_key,
        artifacts_key=settings.artifacts_key,
    )


def run() -> None:
    """Load settings, catalog and progress, then start the main window."""
    settings = Settings.from_env()
    configure_logging(settings.log_level)
    logging.info("Using data directory %s", settings.home)

    app = QApplication(sys.argv)
    app.setApplicationName("Daily Canvas")
    app.setApplicationDisplayName("Daily Canvas")

    catalog = ChallengeCatalog()
    board = build_board(settings)
    if len(catalog) > settings.total_challenges:
        logging.warning(
            "Catalog defines %d challenges but only %d tiles are configured",
            len(catalog),
            settings.total_challenges,
        )

    window = MainWindow(catalog, board, unlock_all=settings.unlock_all)
    screen = QGuiApplication.primaryScreen()
    if screen is not None:
        geometry = screen.availableGeometry()
        window.resize(min(1100, geometry.width()), min(820, geometry.height()))
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    run()
