"""
layoutmanager - preview entry point.

Launches the Qt layout preview window.
"""

import sys
import logging
from PySide6.QtWidgets import QApplication

from . import __version__
from .ui import PreviewWindow
from .utils import setup_logging


def main():
    """Main entry point for the layout preview."""
    setup_logging(log_level="INFO", log_file=True)
    logger = logging.getLogger(__name__)

    logger.info(f"layoutmanager v{__version__} starting...")

    app = QApplication(sys.argv)
    app.setApplicationName("layoutmanager")

    window = PreviewWindow()
    window.show()

    exit_code = app.exec()

    logger.info("layoutmanager exiting")
    return exit_code
