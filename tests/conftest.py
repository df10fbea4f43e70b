"""Shared fixtures for the AndProguard test suite."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

# Qt must pick its platform plugin before the first QApplication exists
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from andproguard.core.config import RuleSettings
from andproguard.core.settings_store import SettingsStore


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by every GUI test."""
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def settings_file(tmp_path) -> Path:
    """Path to a settings file that does not exist yet."""
    return tmp_path / "config" / "rule_settings.json"


@pytest.fixture
def store(settings_file) -> SettingsStore:
    """Store writing into a temporary directory."""
    return SettingsStore(settings_file)


@pytest.fixture
def custom_settings() -> RuleSettings:
    """Valid settings different from the shipped defaults."""
    return RuleSettings(
        skip_data=False,
        class_rule="[1000](1)[0100](4,8)",
        method_rule="[0100](5)",
        field_rule="[0100](3)<_>[0010](2)",
        id_res_rule="<id_>[0100](6)",
        layout_res_rule="<layout_>[0100](6)",
        exclude_path="com.example.api;build/",
    )
