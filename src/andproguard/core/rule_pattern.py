"""Rule pattern compiler for random name generation.

A rule describes how a replacement identifier is built. It is a sequence of
items, each of which is one of:

    [UlDu](n,m)    character class: four 0/1 flags selecting uppercase,
                   lowercase, digits and underscore, repeated n..m times
    {...}(n,m)     group: the enclosed rule repeated n..m times
    <text>         literal text, emitted once

A range may also be written as a fixed count ``(n)``. Ranges are inclusive.

Example:
    An upper camel pseudo word followed by ``Activity``:

    >>> node = compile_rule("{[1000](1)[0100](3,9)}(1,2)<Activity>")
    >>> name = node.generate(random.Random(7))
    >>> name.endswith("Activity")
    True

Malformed rules raise RuleSyntaxError, which is a ValueError carrying the
offending rule and the position where parsing stopped.
"""

from __future__ import annotations

import random
import re
import string
from dataclasses import dataclass, field
from typing import List, Optional, Tuple, Union

from andproguard.utils.logger import get_logger

logger = get_logger("andproguard.core.rule_pattern")

# Alphabets selected by the four character class flags, in flag order
CHAR_UPPER = string.ascii_uppercase
CHAR_LOWER = string.ascii_lowercase
CHAR_DIGIT = string.digits
CHAR_UNDERLINE = "_"
CHARSETS = (CHAR_UPPER, CHAR_LOWER, CHAR_DIGIT, CHAR_UNDERLINE)

_COUNT_RE = re.compile(r"[0-9]+")


class RuleSyntaxError(ValueError):
    """Raised when a rule pattern cannot be compiled.

    Attributes:
        message: Description of the problem
        rule: The rule being compiled
        position: Index in the rule where the problem was found, if known
        field: Settings field the rule belongs to, if known
    """

    def __init__(
        self,
        message: str,
        rule: str = "",
        position: Optional[int] = None,
        field: Optional[str] = None,
    ) -> None:
        self.message = message
        self.rule = rule
        self.position = position
        self.field = field
        super().__init__(self._describe())

    def _describe(self) -> str:
        text = self.message
        if self.position is not None:
            text += f" at position {self.position}"
        if self.rule:
            text += f" in rule {self.rule!r}"
        if self.field:
            text = f"{self.field}: {text}"
        return text

    def with_field(self, field_name: str) -> RuleSyntaxError:
        """Return a copy of this error attributed to a settings field."""
        return RuleSyntaxError(self.message, self.rule, self.position, field_name)


@dataclass(frozen=True)
class Repeat:
    """Inclusive repeat range of an item."""

    start: int
    end: int

    def pick(self, rng: random.Random) -> int:
        if self.start == self.end:
            return self.start
        return rng.randint(self.start, self.end)


@dataclass(frozen=True)
class Literal:
    """Fixed text emitted as is."""

    text: str

    def generate(self, rng: random.Random) -> str:
        return self.text


@dataclass(frozen=True)
class CharClass:
    """Run of characters drawn from an alphabet."""

    alphabet: str
    repeat: Repeat

    def generate(self, rng: random.Random) -> str:
        return "".join(rng.choice(self.alphabet) for _ in range(self.repeat.pick(rng)))


@dataclass(frozen=True)
class Group:
    """Sequence of items repeated as a whole."""

    children: Tuple["Node", ...]
    repeat: Repeat = field(default_factory=lambda: Repeat(1, 1))

    def generate(self, rng: random.Random) -> str:
        count = self.repeat.pick(rng)
        return "".join(child.generate(rng) for _ in range(count) for child in self.children)


Node = Union[Literal, CharClass, Group]


class _RuleParser:
    """Single pass, left to right parser over one rule string."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        self.pos = 0

    def parse(self) -> Group:
        children = self._parse_sequence(closing=None)
        return Group(tuple(children))

    def _error(self, message: str, position: Optional[int] = None) -> RuleSyntaxError:
        return RuleSyntaxError(
            message,
            rule=self.rule,
            position=self.pos if position is None else position,
        )

    def _parse_sequence(self, closing: Optional[str]) -> List[Node]:
        start = self.pos
        children: List[Node] = []
        while self.pos < len(self.rule):
            char = self.rule[self.pos]
            if char == closing:
                break
            if char == "[":
                children.append(self._parse_char_class())
            elif char == "{":
                children.append(self._parse_group())
            elif char == "<":
                children.append(self._parse_literal())
            else:
                raise self._error(f"Unexpected character {char!r}")
        else:
            if closing is not None:
                raise self._error(f"Missing closing {closing!r}", start - 1)

        if not children:
            raise self._error("Empty group" if closing else "Rule is empty", start)
        return children

    def _parse_char_class(self) -> CharClass:
        open_pos = self.pos
        close_pos = self.rule.find("]", open_pos)
        if close_pos < 0:
            raise self._error("Missing closing ']'")

        flags = self.rule[open_pos + 1:close_pos]
        if len(flags) != 4 or any(flag not in "01" for flag in flags):
            raise self._error(f"Character class '[{flags}]' must be four 0/1 flags")
        if "1" not in flags:
            raise self._error(f"Character class '[{flags}]' selects no characters")

        alphabet = "".join(charset for flag, charset in zip(flags, CHARSETS) if flag == "1")
        self.pos = close_pos + 1
        return CharClass(alphabet, self._parse_repeat())

    def _parse_group(self) -> Group:
        self.pos += 1
        children = self._parse_sequence(closing="}")
        self.pos += 1
        return Group(tuple(children), self._parse_repeat())

    def _parse_literal(self) -> Literal:
        open_pos = self.pos
        close_pos = self.rule.find(">", open_pos)
        if close_pos < 0:
            raise self._error("Missing closing '>'")

        text = self.rule[open_pos + 1:close_pos]
        if not text:
            raise self._error("Literal text is empty")

        self.pos = close_pos + 1
        if self.pos < len(self.rule) and self.rule[self.pos] == "(":
            raise self._error("Literal text cannot take a repeat range")
        return Literal(text)

    def _parse_repeat(self) -> Repeat:
        if self.pos >= len(self.rule) or self.rule[self.pos] != "(":
            raise self._error("Expected repeat range '(n)' or '(n,m)'")

        close_pos = self.rule.find(")", self.pos)
        if close_pos < 0:
            raise self._error("Missing closing ')'")

        parts = self.rule[self.pos + 1:close_pos].split(",")
        if len(parts) > 2 or not all(_COUNT_RE.fullmatch(part) for part in parts):
            raise self._error("Repeat range must be '(n)' or '(n,m)' with non-negative integers")

        start = int(parts[0])
        end = int(parts[-1])
        if start > end:
            raise self._error(f"Invalid repeat range ({start},{end})")

        self.pos = close_pos + 1
        return Repeat(start, end)


def compile_rule(rule: str) -> Group:
    """Compile a rule string into a node tree.

    Args:
        rule: Rule pattern; surrounding whitespace is ignored

    Returns:
        Root Group whose generate() produces one random name

    Raises:
        RuleSyntaxError: If the rule is malformed
    """
    node = _RuleParser(rule.strip()).parse()
    logger.debug(f"Compiled rule {rule!r} into {len(node.children)} item(s)")
    return node


def is_valid_rule(rule: str) -> bool:
    """Return True if the rule compiles."""
    try:
        compile_rule(rule)
    except RuleSyntaxError:
        return False
    return True


def generate_name(rule: str, rng: Optional[random.Random] = None) -> str:
    """Compile a rule and generate a single name from it."""
    return compile_rule(rule).generate(rng or random.Random())
