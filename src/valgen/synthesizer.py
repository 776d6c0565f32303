"""
Expression Synthesizer

Turns (field name, rule, declared type) into a CheckExpression by looking
the (RuleKind, TypeClass) pair up in a table. The table is the whole
type x rule matrix; a miss is an error, never a guess.
"""

from types import MappingProxyType
from typing import Callable, Dict, Mapping, Tuple

from valgen.errors import UnsupportedCombinationError
from valgen.expressions import (
    CheckExpression,
    ComparisonOperator,
    FieldReference,
    Length,
    Literal,
)
from valgen.rules import Rule, RuleKind
from valgen.type_classes import NUMERIC_CLASSES, TypeClass, classify


Builder = Callable[[str, Rule], CheckExpression]


def _required_textual(field_name: str, rule: Rule) -> CheckExpression:
    return CheckExpression(
        left=FieldReference(field_name),
        operator=ComparisonOperator.EQUALS,
        right=Literal(""),
        message=f"{field_name} required",
    )


def _required_numeric(field_name: str, rule: Rule) -> CheckExpression:
    return CheckExpression(
        left=FieldReference(field_name),
        operator=ComparisonOperator.EQUALS,
        right=Literal(0),
        message=f"{field_name} required",
    )


def _min_numeric(field_name: str, rule: Rule) -> CheckExpression:
    return CheckExpression(
        left=FieldReference(field_name),
        operator=ComparisonOperator.LESS_THAN,
        right=Literal(rule.bound),
        message=f"{field_name} must be >= {rule.bound}",
    )


def _max_numeric(field_name: str, rule: Rule) -> CheckExpression:
    return CheckExpression(
        left=FieldReference(field_name),
        operator=ComparisonOperator.GREATER_THAN,
        right=Literal(rule.bound),
        message=f"{field_name} must be <= {rule.bound}",
    )


def _min_length(field_name: str, rule: Rule) -> CheckExpression:
    return CheckExpression(
        left=Length(FieldReference(field_name)),
        operator=ComparisonOperator.LESS_THAN,
        right=Literal(rule.bound),
        message=f"length {field_name} must be >= {rule.bound}",
    )


def _max_length(field_name: str, rule: Rule) -> CheckExpression:
    return CheckExpression(
        left=Length(FieldReference(field_name)),
        operator=ComparisonOperator.GREATER_THAN,
        right=Literal(rule.bound),
        message=f"length {field_name} must be <= {rule.bound}",
    )


def _build_table() -> Dict[Tuple[RuleKind, TypeClass], Builder]:
    table: Dict[Tuple[RuleKind, TypeClass], Builder] = {
        (RuleKind.REQUIRED, TypeClass.TEXTUAL): _required_textual,
        (RuleKind.MIN_BOUND, TypeClass.TEXTUAL): _min_length,
        (RuleKind.MAX_BOUND, TypeClass.TEXTUAL): _max_length,
    }
    for type_class in NUMERIC_CLASSES:
        table[(RuleKind.REQUIRED, type_class)] = _required_numeric
        table[(RuleKind.MIN_BOUND, type_class)] = _min_numeric
        table[(RuleKind.MAX_BOUND, type_class)] = _max_numeric
    return table


_CHECK_TABLE = _build_table()


def supported_combinations() -> Mapping[Tuple[RuleKind, TypeClass], Builder]:
    """Read-only view of the (RuleKind, TypeClass) check table."""
    return MappingProxyType(_CHECK_TABLE)


def is_supported(rule: Rule, declared_type: str) -> bool:
    """True if synthesize() would succeed for this rule and Go type."""
    if not isinstance(rule, Rule):
        return False
    return (rule.kind, classify(declared_type)) in _CHECK_TABLE


def synthesize(field_name: str, rule: Rule, declared_type: str) -> CheckExpression:
    """
    Build the check enforcing one rule on one field.

    Args:
        field_name: Struct field identifier
        rule: Parsed rule (Required, MinBound, MaxBound)
        declared_type: Go type name of the field

    Returns:
        CheckExpression describing the failure condition

    Raises:
        UnsupportedCombinationError: If no check shape exists for the
            rule on this type (e.g. MinBound on a bool, or an unknown type)
    """
    if not isinstance(rule, Rule):
        raise UnsupportedCombinationError(field_name, rule, declared_type)

    builder = _CHECK_TABLE.get((rule.kind, classify(declared_type)))
    if builder is None:
        raise UnsupportedCombinationError(field_name, rule, declared_type)
    return builder(field_name, rule)
