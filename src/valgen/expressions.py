"""
Check Expression IR

One synthesized check is a comparison between two operands plus the
message reported when the comparison holds:

    len(obj.FirstName) < 5   ->  "length FirstName must be >= 5"

Operands are small ASTs, never code strings. Turning them into Go
(or anything else) is the job of a renderer in valgen.backends.

ARCHITECTURAL RULE:
    Nothing in this module knows the target language's syntax.
"""

from abc import ABC
from dataclasses import dataclass
from enum import Enum
from typing import Union


class Operand(ABC):
    """
    Base class for check operands.

    Structure only. No evaluation, no string rendering.
    """
    pass


class ComparisonOperator(Enum):
    """
    Operators a check can use.

    A check fires (reports its message) when the comparison is TRUE,
    so the operator is the negation of the rule being enforced.
    """

    EQUALS = "=="
    LESS_THAN = "<"
    GREATER_THAN = ">"


@dataclass(frozen=True)
class FieldReference(Operand):
    """
    Accesses a field of the instance under validation.

    Properties:
        name: Struct field identifier (e.g. "FirstName")
    """

    name: str


@dataclass(frozen=True)
class Length(Operand):
    """
    Length of another operand.

    Example:
        Length(FieldReference("FirstName"))  ->  len(obj.FirstName)
    """

    operand: Operand


@dataclass(frozen=True)
class Literal(Operand):
    """
    A constant value.

    Examples:
        - ""   (zero value of a string)
        - 0    (zero value of a number)
        - 130  (a bound)
    """

    value: Union[int, str]


@dataclass(frozen=True)
class CheckExpression:
    """
    One runtime check, produced per rule per field.

    Properties:
        left: Operand being checked (field or length of field)
        operator: ComparisonOperator that signals a failure
        right: Operand compared against (zero value or bound)
        message: Human-readable failure description

    IMPORTANT:
        This object is immutable (frozen=True) and transient:
        the assembler consumes it within a single generation pass.
    """

    left: Operand
    operator: ComparisonOperator
    right: Operand
    message: str
