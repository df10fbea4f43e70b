"""Tests for RuleSettingsPage apply/reset/is_modified behaviour."""

import pytest
from PyQt6.QtWidgets import QWidget

from andproguard.core.config import RuleSettings
from andproguard.core.rule_pattern import RuleSyntaxError
from andproguard.gui.rule_settings_page import DISPLAY_NAME, RuleSettingsPage

pytestmark = pytest.mark.usefixtures("qapp")


class TestPageCreation:
    """Test the page before any edit."""

    def test_display_name(self, store):
        assert RuleSettingsPage(store).display_name == DISPLAY_NAME == "AndProguard Config"

    def test_loads_defaults_without_file(self, store):
        page = RuleSettingsPage(store)
        assert page.settings == RuleSettings.defaults()
        assert page.form.get_settings() == RuleSettings.defaults()

    def test_loads_persisted_settings(self, store, custom_settings):
        store.save(custom_settings)
        page = RuleSettingsPage(store)
        assert page.form.get_settings() == custom_settings

    def test_create_component_is_stable(self, store):
        page = RuleSettingsPage(store)
        component = page.create_component()
        assert isinstance(component, QWidget)
        assert page.create_component() is component

    def test_not_modified_initially(self, store):
        assert not RuleSettingsPage(store).is_modified()


class TestApplyAndReset:
    """Test moving values between form and store."""

    def test_edit_marks_page_modified(self, store):
        page = RuleSettingsPage(store)
        page.form.set_exclude_path("vendor/")
        assert page.is_modified()

    def test_skip_data_edit_marks_page_modified(self, store):
        page = RuleSettingsPage(store)
        page.form.set_skip_data(not page.settings.skip_data)
        assert page.is_modified()

    def test_apply_persists_and_clears_modified(self, store):
        page = RuleSettingsPage(store)
        page.form.set_class_rule("[1000](1)[0100](5)")

        page.apply()

        assert not page.is_modified()
        assert page.settings.class_rule == "[1000](1)[0100](5)"
        assert store.load().class_rule == "[1000](1)[0100](5)"

    def test_apply_invalid_rule_keeps_persisted_settings(self, store):
        page = RuleSettingsPage(store)
        page.form.set_field_rule("-keepclassmembers")

        with pytest.raises(RuleSyntaxError) as exc_info:
            page.apply()

        assert exc_info.value.field == "field_rule"
        assert page.is_modified()
        assert page.settings == RuleSettings.defaults()
        assert not store.exists()

    def test_reset_restores_persisted_values(self, store, custom_settings):
        store.save(custom_settings)
        page = RuleSettingsPage(store)
        page.form.set_method_rule("[0010](3)")
        page.form.set_skip_data(True)

        page.reset()

        assert page.form.get_settings() == custom_settings
        assert not page.is_modified()

    def test_restore_defaults_does_not_persist(self, store, custom_settings):
        store.save(custom_settings)
        page = RuleSettingsPage(store)

        page.restore_defaults()

        assert page.form.get_settings() == RuleSettings.defaults()
        assert page.is_modified()
        assert store.load() == custom_settings

    def test_dispose_builds_fresh_form(self, store):
        page = RuleSettingsPage(store)
        first = page.form
        first.set_exclude_path("vendor/")

        page.dispose()

        assert page.form is not first
        assert page.form.get_exclude_path() == ""
