"""
Settings window for the AndProguard application.

This module provides the SettingsWindow class, a main window hosting the
rule settings page together with Defaults, Reset, Apply and OK buttons.
"""

from PyQt6.QtGui import QCloseEvent
from PyQt6.QtWidgets import (
    QApplication,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from andproguard.core.rule_pattern import RuleSyntaxError
from andproguard.core.settings_store import SettingsStore
from andproguard.gui.rule_settings_page import RuleSettingsPage
from andproguard.gui.styles.stylesheet import get_application_stylesheet, get_widget_style
from andproguard.utils.logger import get_logger
from andproguard.utils.path_utils import get_platform

logger = get_logger("andproguard.gui.main_window")


class SettingsWindow(QMainWindow):
    """
    Main window showing the rule settings page.

    Attributes:
        DEFAULT_WIDTH: Default window width in pixels.
        DEFAULT_HEIGHT: Default window height in pixels.
        MIN_WIDTH: Minimum window width in pixels.
        MIN_HEIGHT: Minimum window height in pixels.
    """

    DEFAULT_WIDTH = 640
    DEFAULT_HEIGHT = 420
    MIN_WIDTH = 480
    MIN_HEIGHT = 360

    def __init__(self, store: SettingsStore) -> None:
        """Initialize the window with a page backed by the given store."""
        super().__init__()

        logger.info(f"Initializing SettingsWindow on {get_platform()}")

        self.page = RuleSettingsPage(store)
        self._setup_window_properties()
        self._setup_central_widget()
        self._connect_signals()
        self._update_buttons()

        logger.info("SettingsWindow initialization complete")

    def _setup_window_properties(self) -> None:
        """Configure window title, size, and constraints."""
        self.setWindowTitle(self.page.display_name)
        self.resize(self.DEFAULT_WIDTH, self.DEFAULT_HEIGHT)
        self.setMinimumSize(self.MIN_WIDTH, self.MIN_HEIGHT)
        self.setStyleSheet(get_application_stylesheet())

    def _setup_central_widget(self) -> None:
        """Set up the title, the page panel and the button row."""
        container = QWidget()
        layout = QVBoxLayout(container)
        layout.setContentsMargins(16, 16, 16, 16)
        layout.setSpacing(12)

        title_label = QLabel(self.page.display_name)
        title_label.setStyleSheet(get_widget_style("title_label"))
        layout.addWidget(title_label)

        layout.addWidget(self.page.create_component(), 1)

        buttons_layout = QHBoxLayout()
        buttons_layout.setSpacing(8)

        self.defaults_button = QPushButton("Defaults")
        self.defaults_button.setToolTip("Show the rules the tool ships with")
        self.defaults_button.setStyleSheet(get_widget_style("secondary_button"))
        buttons_layout.addWidget(self.defaults_button)

        buttons_layout.addStretch()

        self.reset_button = QPushButton("Reset")
        self.reset_button.setToolTip("Discard edits and show the saved settings")
        self.reset_button.setStyleSheet(get_widget_style("secondary_button"))
        buttons_layout.addWidget(self.reset_button)

        self.apply_button = QPushButton("Apply")
        self.apply_button.setToolTip("Save the settings")
        self.apply_button.setStyleSheet(get_widget_style("primary_button"))
        buttons_layout.addWidget(self.apply_button)

        self.ok_button = QPushButton("OK")
        self.ok_button.setToolTip("Save the settings and close")
        self.ok_button.setStyleSheet(get_widget_style("primary_button"))
        buttons_layout.addWidget(self.ok_button)

        layout.addLayout(buttons_layout)
        self.setCentralWidget(container)

    def _connect_signals(self) -> None:
        """Connect form and button signals to handlers."""
        self.page.form.settings_changed.connect(self._on_settings_changed)
        self.defaults_button.clicked.connect(self._on_defaults_clicked)
        self.reset_button.clicked.connect(self._on_reset_clicked)
        self.apply_button.clicked.connect(self._on_apply_clicked)
        self.ok_button.clicked.connect(self._on_ok_clicked)

    def _update_buttons(self) -> None:
        modified = self.page.is_modified()
        self.apply_button.setEnabled(modified)
        self.reset_button.setEnabled(modified)

    def _on_settings_changed(self, settings: dict) -> None:
        self._update_buttons()

    def _on_defaults_clicked(self) -> None:
        self.page.restore_defaults()

    def _on_reset_clicked(self) -> None:
        self.page.reset()

    def apply_settings(self) -> bool:
        """
        Apply the page, reporting failures in a message box.

        Returns:
            True if the settings were saved.
        """
        try:
            self.page.apply()
        except RuleSyntaxError as e:
            logger.warning(f"Invalid rule not applied: {e}")
            QMessageBox.critical(self, "Invalid Rule", str(e))
            return False
        except OSError as e:
            logger.error(f"Failed to save settings: {e}")
            QMessageBox.critical(self, "Save Failed", f"Failed to save settings: {e}")
            return False
        finally:
            self._update_buttons()
        return True

    def _on_apply_clicked(self) -> None:
        self.apply_settings()

    def _on_ok_clicked(self) -> None:
        if not self.page.is_modified() or self.apply_settings():
            self.close()

    def center_on_screen(self) -> None:
        """Center the window on the primary screen."""
        screen = QApplication.primaryScreen()
        if screen is None:
            logger.warning("Could not get primary screen - skipping window centering")
            return

        geometry = screen.geometry()
        x = (geometry.width() - self.width()) // 2
        y = (geometry.height() - self.height()) // 2
        self.move(x, y)

    def closeEvent(self, event: QCloseEvent) -> None:
        """
        Handle window close event.

        Unapplied edits are discarded.
        """
        if self.page.is_modified():
            logger.info("Closing settings window with unapplied changes")
        event.accept()
        super().closeEvent(event)
