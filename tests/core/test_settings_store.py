"""Tests for SettingsStore persistence."""

import json

import pytest

from andproguard.core.config import RuleSettings
from andproguard.core.rule_pattern import RuleSyntaxError
from andproguard.core.settings_store import SETTINGS_FILE_NAME, SettingsStore


class TestLoad:
    """Test loading settings."""

    def test_missing_file_loads_defaults(self, store):
        assert not store.exists()
        assert store.load() == RuleSettings.defaults()

    def test_load_saved_file(self, store, custom_settings):
        store.save(custom_settings)
        assert store.load() == custom_settings

    def test_load_partial_file(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"version": "1.0", "exclude_path": "vendor/"}), encoding="utf-8")

        settings = SettingsStore(settings_file).load()
        assert settings.exclude_path == "vendor/"
        assert settings.class_rule == ""

    def test_invalid_json_raises_value_error(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("{not json", encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid JSON"):
            SettingsStore(settings_file).load()

    def test_non_object_raises_value_error(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("[1, 2]", encoding="utf-8")

        with pytest.raises(ValueError, match="JSON object"):
            SettingsStore(settings_file).load()

    def test_unknown_version_raises_value_error(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"version": "9.9"}), encoding="utf-8")

        with pytest.raises(ValueError, match="Invalid settings file"):
            SettingsStore(settings_file).load()

    def test_wrong_field_types_raise_value_error(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(
            json.dumps({"version": "1.0", "class_rule": 5, "skip_data": "yes"}), encoding="utf-8"
        )

        with pytest.raises(ValueError, match="Invalid settings file"):
            SettingsStore(settings_file).load()

    def test_null_rule_raises_value_error(self, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text(json.dumps({"version": "1.0", "method_rule": None}), encoding="utf-8")

        with pytest.raises(ValueError, match="method_rule"):
            SettingsStore(settings_file).load()


class TestSave:
    """Test saving settings."""

    def test_save_creates_parent_directory(self, store, settings_file, custom_settings):
        store.save(custom_settings)
        assert settings_file.exists()

    def test_saved_file_is_indented_json(self, store, settings_file, custom_settings):
        store.save(custom_settings)
        content = settings_file.read_text(encoding="utf-8")
        assert content.startswith("{\n  ")
        assert json.loads(content) == custom_settings.to_dict()

    def test_invalid_rule_is_not_written(self, store, settings_file, custom_settings):
        custom_settings.class_rule = "-keep class **"
        with pytest.raises(RuleSyntaxError):
            store.save(custom_settings)
        assert not settings_file.exists()

    def test_invalid_rule_keeps_previous_file(self, store, custom_settings):
        store.save(custom_settings)
        broken = RuleSettings.from_dict(custom_settings.to_dict())
        broken.field_rule = "{"
        with pytest.raises(RuleSyntaxError):
            store.save(broken)
        assert store.load() == custom_settings

    def test_write_failure_raises_os_error(self, tmp_path, custom_settings):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        store = SettingsStore(blocker / SETTINGS_FILE_NAME)

        with pytest.raises(OSError, match="Failed to write settings file"):
            store.save(custom_settings)

    def test_reset_to_defaults(self, store, custom_settings):
        store.save(custom_settings)
        assert store.reset_to_defaults() == RuleSettings.defaults()
        assert store.load() == RuleSettings.defaults()


class TestDefaultLocation:
    """Test the default settings file location."""

    def test_default_path_in_home_config_directory(self, tmp_path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))
        store = SettingsStore()
        assert store.file_path == tmp_path / ".andproguard" / SETTINGS_FILE_NAME
