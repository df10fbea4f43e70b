"""Random replacement names built from the rules of a RuleSettings."""

from __future__ import annotations

import random
from typing import Dict, Optional

from andproguard.core.config import RULE_FIELDS, RuleSettings
from andproguard.core.rule_pattern import Group, RuleSyntaxError, compile_rule
from andproguard.utils.logger import get_logger

logger = get_logger("andproguard.core.name_generator")


class NameGenerator:
    """Generates class, member and resource names from compiled rules.

    All five rules are compiled once when the generator is created, so a
    malformed rule fails here rather than halfway through a rename pass.

    Args:
        settings: Settings providing the five naming rules
        rng: Random source; pass a seeded random.Random for repeatable names

    Raises:
        RuleSyntaxError: If any rule does not compile
    """

    def __init__(self, settings: RuleSettings, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._nodes: Dict[str, Group] = {}
        for name, rule in settings.rules().items():
            try:
                self._nodes[name] = compile_rule(rule)
            except RuleSyntaxError as e:
                logger.error(f"Cannot build name generator: {e.with_field(name)}")
                raise e.with_field(name) from e

        logger.debug(f"NameGenerator ready with {len(self._nodes)} rules")

    def _generate(self, rule_field: str) -> str:
        return self._nodes[rule_field].generate(self._rng)

    def random_class_name(self) -> str:
        return self._generate(RULE_FIELDS[0])

    def random_method_name(self) -> str:
        return self._generate(RULE_FIELDS[1])

    def random_field_name(self) -> str:
        return self._generate(RULE_FIELDS[2])

    def random_id_res_name(self) -> str:
        return self._generate(RULE_FIELDS[3])

    def random_layout_res_name(self) -> str:
        return self._generate(RULE_FIELDS[4])
