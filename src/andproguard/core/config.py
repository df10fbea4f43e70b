"""Rule settings data model.

This module defines the RuleSettings dataclass holding the seven values the
settings page edits: the skip-data flag, the five naming rules and the
exclude path. It handles conversion to and from the JSON settings file,
rule validation, and splitting of the exclude path.

Example:
    Starting from the shipped defaults:

    >>> settings = RuleSettings.defaults()
    >>> settings.validate()
    >>> settings.to_dict()["class_rule"]
    '{[1000](1)[0100](6,12)}(2,3)'

    Checking exclusions:

    >>> settings = RuleSettings(exclude_path="com.example.api;build/")
    >>> settings.is_excluded("com.example.api.Client")
    True
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, List

from andproguard.core.rule_pattern import RuleSyntaxError, compile_rule
from andproguard.utils.logger import get_logger
from andproguard.utils.path_utils import is_path_within

logger = get_logger("andproguard.core.config")

SETTINGS_VERSION = "1.0"

# Separator between entries of the exclude path
EXCLUDE_SEPARATOR = ";"

# Fields holding naming rules, in the order the name generator compiles them
RULE_FIELDS = (
    "class_rule",
    "method_rule",
    "field_rule",
    "id_res_rule",
    "layout_res_rule",
)

# Rules shipped with the tool: pseudo words built from camel-cased runs of letters
DEFAULT_RULES: Dict[str, str] = {
    "class_rule": "{[1000](1)[0100](6,12)}(2,3)",
    "method_rule": "[0100](7,13){[1000](1)[0100](6,12)}(0,2)",
    "field_rule": "[0100](7,13){[1000](1)[0100](6,12)}(0,1)",
    "id_res_rule": "[0100](7,11){<_>[0100](7,11)}(0,1)",
    "layout_res_rule": "[0100](7,11){<_>[0100](7,11)}(1,2)",
}
DEFAULT_SKIP_DATA = True


@dataclass
class RuleSettings:
    """Settings record edited by the rule settings page.

    A bare RuleSettings() is all empty strings with skip_data False; use
    defaults() for the values the tool ships with.

    Attributes:
        skip_data: Leave data holders (bean accessors and their fields,
            data class constructor parameters) unrenamed
        class_rule: Naming rule for classes
        method_rule: Naming rule for methods
        field_rule: Naming rule for fields
        id_res_rule: Naming rule for resource ids
        layout_res_rule: Naming rule for layout resources
        exclude_path: ``;`` separated package names or paths to skip
    """

    skip_data: bool = False
    class_rule: str = ""
    method_rule: str = ""
    field_rule: str = ""
    id_res_rule: str = ""
    layout_res_rule: str = ""
    exclude_path: str = ""

    @classmethod
    def defaults(cls) -> RuleSettings:
        """Return the settings the tool ships with."""
        return cls(skip_data=DEFAULT_SKIP_DATA, **DEFAULT_RULES)

    @classmethod
    def field_names(cls) -> List[str]:
        return [f.name for f in fields(cls)]

    @property
    def exclude_list(self) -> List[str]:
        """Non-blank entries of exclude_path, stripped."""
        entries = (entry.strip() for entry in self.exclude_path.split(EXCLUDE_SEPARATOR))
        return [entry for entry in entries if entry]

    def is_excluded(self, name: str) -> bool:
        """Check whether a package name or path falls under an exclude entry."""
        return any(is_path_within(name, entry) for entry in self.exclude_list)

    def rules(self) -> Dict[str, str]:
        """Return the five naming rules keyed by field name."""
        return {name: getattr(self, name) for name in RULE_FIELDS}

    def check_types(self) -> None:
        """Check that skip_data is a bool and every other field a str.

        Raises:
            ValueError: If a field has the wrong type
        """
        if not isinstance(self.skip_data, bool):
            raise ValueError("Setting 'skip_data' must be a boolean")

        for name in RULE_FIELDS + ("exclude_path",):
            if not isinstance(getattr(self, name), str):
                raise ValueError(f"Setting '{name}' must be a string")

    def validate(self) -> None:
        """Validate field types and compile every naming rule.

        Raises:
            ValueError: If a field has the wrong type
            RuleSyntaxError: If a rule does not compile; its field attribute
                names the offending setting
        """
        self.check_types()

        for name, rule in self.rules().items():
            try:
                compile_rule(rule)
            except RuleSyntaxError as e:
                logger.debug(f"Rule validation failed for {name}: {e}")
                raise e.with_field(name) from e

        logger.debug("Rule settings validated successfully")

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a dictionary for JSON serialization."""
        data: Dict[str, Any] = {"version": SETTINGS_VERSION}
        for name in self.field_names():
            data[name] = getattr(self, name)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> RuleSettings:
        """Create settings from a dictionary.

        Keys that are missing take the dataclass defaults; unknown keys are
        ignored.

        Raises:
            ValueError: If the version is not supported or a field has the
                wrong type
        """
        version = data.get("version", SETTINGS_VERSION)
        if version != SETTINGS_VERSION:
            raise ValueError(f"Invalid version: {version}. Expected '{SETTINGS_VERSION}'")

        values = {name: data[name] for name in cls.field_names() if name in data}
        settings = cls(**values)
        settings.check_types()
        logger.debug(f"Created rule settings from dictionary ({len(values)} field(s))")
        return settings
