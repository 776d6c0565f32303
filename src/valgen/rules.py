"""
Rule Vocabulary

The closed set of validation rules a struct field can carry.

    required   -> Required()
    gte=N      -> MinBound(N)
    lte=N      -> MaxBound(N)

Rules are immutable values. The synthesizer dispatches on RuleKind, so
adding a rule means adding a kind here and entries in the check table.

ARCHITECTURAL RULE:
    Rules know nothing about Go, types or emitted code.
    They only say WHAT must hold, never HOW it is checked.
"""

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum

from valgen.errors import MalformedOperandError, UnknownRuleError


class RuleKind(Enum):
    """Rule kinds, valued by their clause name in a validate tag."""

    REQUIRED = "required"
    MIN_BOUND = "gte"
    MAX_BOUND = "lte"


_OPERAND_RE = re.compile(r"^[0-9]+$")


class Rule(ABC):
    """
    Base class for all rules.

    Structure only. Subclasses are frozen dataclasses.
    """

    @property
    @abstractmethod
    def kind(self) -> RuleKind:
        ...

    def __str__(self) -> str:
        return format_rule(self)


@dataclass(frozen=True)
class Required(Rule):
    """Value must differ from the zero value of its type."""

    @property
    def kind(self) -> RuleKind:
        return RuleKind.REQUIRED


def _check_bound(rule_name: str, bound) -> None:
    # bool is an int subclass; True is not a bound
    if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
        raise MalformedOperandError(rule_name, bound)


@dataclass(frozen=True)
class MinBound(Rule):
    """
    Value must be >= bound.

    For textual fields the bound applies to the length.
    """

    bound: int

    def __post_init__(self):
        _check_bound(RuleKind.MIN_BOUND.value, self.bound)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MIN_BOUND


@dataclass(frozen=True)
class MaxBound(Rule):
    """
    Value must be <= bound.

    For textual fields the bound applies to the length.
    """

    bound: int

    def __post_init__(self):
        _check_bound(RuleKind.MAX_BOUND.value, self.bound)

    @property
    def kind(self) -> RuleKind:
        return RuleKind.MAX_BOUND


def parse_rule(token: str) -> Rule:
    """
    Parse a single validate clause into a Rule.

    Args:
        token: Clause text, e.g. "required", "gte=5", "lte=10"

    Returns:
        The parsed Rule

    Raises:
        UnknownRuleError: If the clause names no known rule
        MalformedOperandError: If the operand is missing, unexpected,
            or not a non-negative integer
    """
    token = token.strip()
    name, sep, operand = token.partition("=")
    name = name.strip()
    operand = operand.strip()

    try:
        kind = RuleKind(name)
    except ValueError:
        raise UnknownRuleError(token) from None

    if kind is RuleKind.REQUIRED:
        if sep:
            raise MalformedOperandError(name, operand)
        return Required()

    if not sep or not _OPERAND_RE.match(operand):
        raise MalformedOperandError(name, operand if sep else None)

    if kind is RuleKind.MIN_BOUND:
        return MinBound(int(operand))
    return MaxBound(int(operand))


def format_rule(rule: Rule) -> str:
    """Render a Rule back to its clause text (MinBound(5) -> "gte=5")."""
    if isinstance(rule, (MinBound, MaxBound)):
        return f"{rule.kind.value}={rule.bound}"
    return rule.kind.value
