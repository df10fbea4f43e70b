"""Tests for the RuleSettings data model."""

import pytest

from andproguard.core.config import (
    DEFAULT_RULES,
    RULE_FIELDS,
    SETTINGS_VERSION,
    RuleSettings,
)
from andproguard.core.rule_pattern import RuleSyntaxError


class TestRuleSettingsDefaults:
    """Test construction defaults and the shipped defaults."""

    def test_bare_settings_are_empty(self):
        settings = RuleSettings()
        assert settings.skip_data is False
        for name in RULE_FIELDS + ("exclude_path",):
            assert getattr(settings, name) == ""

    def test_shipped_defaults(self):
        settings = RuleSettings.defaults()
        assert settings.skip_data is True
        assert settings.class_rule == "{[1000](1)[0100](6,12)}(2,3)"
        assert settings.method_rule == "[0100](7,13){[1000](1)[0100](6,12)}(0,2)"
        assert settings.field_rule == "[0100](7,13){[1000](1)[0100](6,12)}(0,1)"
        assert settings.id_res_rule == "[0100](7,11){<_>[0100](7,11)}(0,1)"
        assert settings.layout_res_rule == "[0100](7,11){<_>[0100](7,11)}(1,2)"
        assert settings.exclude_path == ""

    def test_defaults_returns_fresh_instances(self):
        first = RuleSettings.defaults()
        first.class_rule = "[1000](3)"
        assert RuleSettings.defaults().class_rule == DEFAULT_RULES["class_rule"]

    def test_field_names_order(self):
        assert RuleSettings.field_names() == [
            "skip_data",
            "class_rule",
            "method_rule",
            "field_rule",
            "id_res_rule",
            "layout_res_rule",
            "exclude_path",
        ]

    def test_rules_mapping(self, custom_settings):
        rules = custom_settings.rules()
        assert list(rules) == list(RULE_FIELDS)
        assert rules["field_rule"] == "[0100](3)<_>[0010](2)"


class TestExcludeList:
    """Test splitting and matching of the exclude path."""

    def test_exclude_list_drops_blank_entries(self):
        settings = RuleSettings(exclude_path="a.b; ;c/d;")
        assert settings.exclude_list == ["a.b", "c/d"]

    def test_empty_exclude_path(self):
        assert RuleSettings().exclude_list == []

    def test_is_excluded_by_package(self):
        settings = RuleSettings(exclude_path="com.example.api")
        assert settings.is_excluded("com.example.api")
        assert settings.is_excluded("com.example.api.model.User")
        assert settings.is_excluded("com/example/api/Client.kt")

    def test_is_excluded_by_path(self):
        settings = RuleSettings(exclude_path="build/;vendor")
        assert settings.is_excluded("build/generated")
        assert settings.is_excluded("vendor")
        assert not settings.is_excluded("src/main")

    def test_sibling_prefix_is_not_excluded(self):
        settings = RuleSettings(exclude_path="com.example")
        assert not settings.is_excluded("com.examples.app")

    def test_nothing_excluded_without_entries(self):
        assert not RuleSettings().is_excluded("com.example")


class TestValidation:
    """Test validate()."""

    def test_defaults_are_valid(self):
        RuleSettings.defaults().validate()

    def test_custom_settings_are_valid(self, custom_settings):
        custom_settings.validate()

    def test_invalid_rule_names_field(self, custom_settings):
        custom_settings.method_rule = "-keepclassmembers"
        with pytest.raises(RuleSyntaxError) as exc_info:
            custom_settings.validate()
        assert exc_info.value.field == "method_rule"
        assert str(exc_info.value).startswith("method_rule:")

    def test_empty_rule_is_invalid(self, custom_settings):
        custom_settings.id_res_rule = ""
        with pytest.raises(RuleSyntaxError, match="id_res_rule"):
            custom_settings.validate()

    def test_exclude_path_not_syntax_checked(self, custom_settings):
        custom_settings.exclude_path = "[[[ not a rule"
        custom_settings.validate()

    def test_wrong_skip_data_type(self, custom_settings):
        custom_settings.skip_data = "yes"
        with pytest.raises(ValueError, match="skip_data"):
            custom_settings.validate()

    def test_wrong_rule_type(self, custom_settings):
        custom_settings.class_rule = 42
        with pytest.raises(ValueError, match="class_rule"):
            custom_settings.validate()


class TestSerialization:
    """Test to_dict() and from_dict()."""

    def test_to_dict_contains_version_and_fields(self, custom_settings):
        data = custom_settings.to_dict()
        assert data["version"] == SETTINGS_VERSION
        assert data["skip_data"] is False
        assert data["exclude_path"] == "com.example.api;build/"
        assert set(data) == {"version", *RuleSettings.field_names()}

    def test_from_dict_restores_settings(self, custom_settings):
        assert RuleSettings.from_dict(custom_settings.to_dict()) == custom_settings

    def test_from_dict_missing_keys_use_defaults(self):
        settings = RuleSettings.from_dict({"class_rule": "[1000](2)"})
        assert settings == RuleSettings(class_rule="[1000](2)")

    def test_from_dict_ignores_unknown_keys(self):
        settings = RuleSettings.from_dict({"version": "1.0", "color": "blue"})
        assert settings == RuleSettings()

    def test_from_dict_rejects_unknown_version(self):
        with pytest.raises(ValueError, match="Invalid version"):
            RuleSettings.from_dict({"version": "2.0"})

    @pytest.mark.parametrize(
        "data,field",
        [
            ({"skip_data": "yes"}, "skip_data"),
            ({"class_rule": 5}, "class_rule"),
            ({"exclude_path": ["build/"]}, "exclude_path"),
        ],
    )
    def test_from_dict_rejects_wrong_types(self, data, field):
        with pytest.raises(ValueError, match=field):
            RuleSettings.from_dict({"version": "1.0", **data})
