"""Application entry point for World Trivia TV."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from trivia_tv.constants.network_constants import DEFAULT_HOST, DEFAULT_PORT
from trivia_tv.core.trivia_manager import TriviaManager
from trivia_tv.server.api_server import start_api_server
from trivia_tv.ui.main_window import TriviaMainWindow
from trivia_tv.ui.speech import create_narrator
from trivia_tv.utils.logging_config import configure_logging


def main() -> None:
    """Initialize logging, start the API server, and launch the Qt UI."""
    logger = configure_logging()
    logger.info("Starting World Trivia TV...")

    trivia_manager = TriviaManager.from_default_file()
    start_api_server(trivia_manager=trivia_manager, host=DEFAULT_HOST, port=DEFAULT_PORT)

    app = QApplication(sys.argv)
    narrator = create_narrator(app)
    window = TriviaMainWindow(trivia_manager=trivia_manager, narrator=narrator)
    window.showMaximized()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
