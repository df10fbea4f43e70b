"""
GUI package for the AndProguard settings application.

This package provides the PyQt6 settings window, the settings page
controller and the rule settings form.

Example:
    >>> from andproguard.core import SettingsStore
    >>> from andproguard.gui import SettingsWindow
    >>> window = SettingsWindow(SettingsStore())
    >>> window.show()
"""

from .main_window import SettingsWindow
from .rule_settings_page import RuleSettingsPage

__all__ = ["SettingsWindow", "RuleSettingsPage"]
