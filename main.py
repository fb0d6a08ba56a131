"""
ProjectBuddy — checklist, focus timer, notes and chat for school projects.
Entry point for the application.
"""

import faulthandler
import logging
import sys
from pathlib import Path

faulthandler.enable()

# Ensure the package is importable when run from a checkout
sys.path.insert(0, str(Path(__file__).resolve().parent))

from PySide6.QtWidgets import QApplication

from projectbuddy import config
from projectbuddy.ui.main_window import MainWindow
from projectbuddy.ui.styles import HACKER_STYLESHEET


def setup_logging() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.StreamHandler(),
            logging.FileHandler(config.LOG_FILE, encoding="utf-8"),
        ],
    )


def main() -> None:
    setup_logging()
    logger = logging.getLogger(__name__)
    logger.info("Starting ProjectBuddy...")

    app = QApplication(sys.argv)
    app.setApplicationName("ProjectBuddy")
    app.setOrganizationName("ProjectBuddy")
    app.setStyleSheet(HACKER_STYLESHEET)

    window = MainWindow()
    window.show()

    logger.info("Application started (backend: %s).", config.BACKEND_URL)
    sys.exit(app.exec())


if __name__ == "__main__":
    main()


# ---------------------------------------------------------------------------
# Explanation (for interviews)
# ---------------------------------------------------------------------------
# What this file does:
#   Sets up logging, creates the Qt application, applies the hacker theme
#   and opens MainWindow.
#
# Key points:
#   - Logging goes to both console and project_buddy.log.
#   - app.exec() starts the Qt event loop; the one-second timer tick and
#     chat results are all delivered through it.
