"""
Settings page pairing the rule settings form with the settings store.

The page loads the persisted settings, builds the form from them on first
use, and moves values between the two on apply and reset.
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtWidgets import QWidget

from andproguard.core.config import RuleSettings
from andproguard.core.settings_store import SettingsStore
from andproguard.gui.widgets.rule_settings_form import RuleSettingsForm
from andproguard.utils.logger import get_logger

logger = get_logger("andproguard.gui.rule_settings_page")

DISPLAY_NAME = "AndProguard Config"


class RuleSettingsPage:
    """Controller for the rule settings form.

    Args:
        store: Store the persisted settings are loaded from and applied to.
    """

    def __init__(self, store: SettingsStore) -> None:
        self._store = store
        self._settings = store.load()
        self._form: Optional[RuleSettingsForm] = None
        logger.debug("RuleSettingsPage initialized")

    @property
    def display_name(self) -> str:
        return DISPLAY_NAME

    @property
    def settings(self) -> RuleSettings:
        """The persisted settings as last loaded or applied."""
        return self._settings

    @property
    def form(self) -> RuleSettingsForm:
        """The form, created from the persisted settings on first access."""
        if self._form is None:
            self._form = RuleSettingsForm.from_settings(self._settings)
            logger.debug("Rule settings form created")
        return self._form

    def create_component(self) -> QWidget:
        """Return the panel to embed in the settings window."""
        return self.form.get_panel()

    def is_modified(self) -> bool:
        """Return True if any form value differs from the persisted settings."""
        return self.form.get_settings() != self._settings

    def apply(self) -> None:
        """Validate the form values and persist them.

        Raises:
            RuleSyntaxError: If a naming rule in the form does not compile;
                the persisted settings are left untouched.
            OSError: If the settings file cannot be written.
        """
        settings = self.form.get_settings()
        self._store.save(settings)
        self._settings = settings
        logger.info("Rule settings applied")

    def reset(self) -> None:
        """Copy the persisted settings back into the form."""
        self.form.set_settings(self._settings)
        logger.debug("Rule settings form reset")

    def restore_defaults(self) -> None:
        """Show the shipped default settings in the form without persisting them."""
        self.form.set_settings(RuleSettings.defaults())
        logger.debug("Rule settings form set to defaults")

    def dispose(self) -> None:
        """Drop the form; the next access builds a fresh one."""
        if self._form is not None:
            self._form.get_panel().deleteLater()
            self._form = None
            logger.debug("Rule settings form disposed")
