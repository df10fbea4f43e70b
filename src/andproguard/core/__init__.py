"""Core settings model module.

This module provides the rule settings data model, its persistence, and
the rule pattern compiler used to generate replacement names.

Classes:
    RuleSettings: Settings data model
    SettingsStore: JSON load/save of the settings
    NameGenerator: Random names from the five compiled rules
    RuleSyntaxError: Exception for malformed rule patterns
"""

from andproguard.core.config import DEFAULT_RULES, RULE_FIELDS, RuleSettings
from andproguard.core.name_generator import NameGenerator
from andproguard.core.rule_pattern import RuleSyntaxError, compile_rule, is_valid_rule
from andproguard.core.settings_store import SettingsStore

__all__ = [
    "DEFAULT_RULES",
    "RULE_FIELDS",
    "RuleSettings",
    "SettingsStore",
    "NameGenerator",
    "RuleSyntaxError",
    "compile_rule",
    "is_valid_rule",
]
