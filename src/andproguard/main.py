"""
Application entry point for the AndProguard settings window.

This module initializes the PyQt6 application and shows the rule settings
window backed by the per-user settings file.

Example:
    Run the application from command line:
    $ python -m andproguard.main
"""

import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from andproguard import __version__
from andproguard.core.settings_store import SettingsStore
from andproguard.gui import SettingsWindow
from andproguard.utils.logger import setup_logger

# Application metadata
APP_NAME = "AndProguard"
APP_VERSION = __version__
ORGANIZATION_NAME = "AndProguard Developers"


def main() -> int:
    """
    Initialize and run the settings application.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    logger = setup_logger(
        "andproguard",
        level="INFO",
        log_file=Path("logs/andproguard.log")
    )

    logger.info(f"Application starting - version {APP_VERSION}")

    try:
        app = QApplication(sys.argv)

        app.setApplicationName(APP_NAME)
        app.setOrganizationName(ORGANIZATION_NAME)
        app.setApplicationVersion(APP_VERSION)

        store = SettingsStore()
        logger.info(f"Using settings file {store.file_path}")

        window = SettingsWindow(store)
        window.center_on_screen()
        window.show()

        logger.info("Settings window displayed")

        return app.exec()

    except Exception as e:
        logger.exception(f"Fatal error during application startup: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
