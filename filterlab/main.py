"""
FilterLab main entry point

Run this to start the GUI application.
"""

import sys
from PySide6.QtWidgets import QApplication

from filterlab.ui.main_window import MainWindow
from filterlab.oiio import OiioAdapter
from filterlab.utils.logging import logger


def main():
    """Launch the application."""
    # Verify OIIO
    logger.info("OpenImageIO version: %s", OiioAdapter.get_oiio_version())

    # Create Qt application
    app = QApplication(sys.argv)
    app.setApplicationName("FilterLab")

    # Create and show main window
    window = MainWindow()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
