"""Persistence of rule settings.

This module provides the SettingsStore class, which saves and loads the
RuleSettings record as a JSON file in the user's configuration directory.
A missing file is not an error: the shipped defaults are returned instead.

Example:
    >>> store = SettingsStore(Path("rule_settings.json"))
    >>> settings = store.load()
    >>> settings.exclude_path = "com.example.api"
    >>> store.save(settings)
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

from andproguard.core.config import RuleSettings
from andproguard.core.rule_pattern import RuleSyntaxError
from andproguard.utils.logger import get_logger
from andproguard.utils.path_utils import ensure_directory, get_config_directory

logger = get_logger("andproguard.core.settings_store")

SETTINGS_FILE_NAME = "rule_settings.json"


class SettingsStore:
    """Load/save manager for the persisted RuleSettings.

    Args:
        file_path: Location of the JSON file; defaults to
            ``~/.andproguard/rule_settings.json``
    """

    def __init__(self, file_path: Optional[Path] = None) -> None:
        self._file_path = file_path or get_config_directory() / SETTINGS_FILE_NAME

    @property
    def file_path(self) -> Path:
        return self._file_path

    def exists(self) -> bool:
        return self._file_path.exists()

    def load(self) -> RuleSettings:
        """Load settings from the JSON file.

        Returns:
            Persisted settings, or RuleSettings.defaults() if no file exists

        Raises:
            ValueError: If the file is not valid JSON or has an unsupported version
        """
        if not self._file_path.exists():
            logger.info(f"No settings file at {self._file_path}, using defaults")
            return RuleSettings.defaults()

        try:
            with open(self._file_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in settings file {self._file_path}: {e}")
            raise ValueError(f"Invalid JSON format in settings file: {e}")

        if not isinstance(data, dict):
            logger.error(f"Settings file {self._file_path} does not contain an object")
            raise ValueError("Settings file must contain a JSON object")

        try:
            settings = RuleSettings.from_dict(data)
        except (TypeError, ValueError) as e:
            logger.error(f"Invalid settings in {self._file_path}: {e}")
            raise ValueError(f"Invalid settings file: {e}")

        logger.debug(f"Settings loaded from {self._file_path}")
        return settings

    def save(self, settings: RuleSettings) -> None:
        """Validate and write settings to the JSON file.

        Raises:
            RuleSyntaxError: If a naming rule does not compile
            ValueError: If a field has the wrong type
            OSError: If the file cannot be written
        """
        try:
            settings.validate()
        except RuleSyntaxError as e:
            logger.error(f"Refusing to save settings with invalid rule: {e}")
            raise
        except ValueError as e:
            logger.error(f"Validation failed for settings: {e}")
            raise

        try:
            ensure_directory(self._file_path.parent)
            with open(self._file_path, 'w', encoding='utf-8') as f:
                json.dump(settings.to_dict(), f, indent=2)
        except OSError as e:
            logger.error(f"Failed to write settings to {self._file_path}: {e}")
            raise OSError(f"Failed to write settings file: {e}")

        logger.info(f"Settings saved to {self._file_path}")

    def reset_to_defaults(self) -> RuleSettings:
        """Persist and return the shipped default settings."""
        settings = RuleSettings.defaults()
        self.save(settings)
        logger.info("Settings reset to defaults")
        return settings
