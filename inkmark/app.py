"""
Application entry point.
"""
import logging
import sys
from typing import Optional, Sequence

from PyQt5.QtWidgets import QApplication

from inkmark.config import parse_args
from inkmark.core.engine import initialize_engine
from inkmark.ui.windows import MainWindow
from inkmark.utils import setup_logging

logger = logging.getLogger(__name__)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the PDF annotator.

    A file path given on the command line is opened at start-up; otherwise
    the configured sample document is loaded when it exists.
    """
    config, file_path = parse_args(argv)

    setup_logging(config.log_level)
    initialize_engine(config)

    app = QApplication(sys.argv[:1])
    app.setApplicationName("Inkmark PDF")

    window = MainWindow(config, file_path)
    window.showMaximized()

    logger.info("Inkmark PDF started")
    return app.exec_()
