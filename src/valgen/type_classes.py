"""
Type classification for Go field types.

The synthesizer never looks at a Go type name directly. It asks which
TypeClass the name belongs to and looks the (rule, class) pair up in its
check table. Supporting a new family of types means adding a class here
and rows to that table.
"""

from enum import Enum
from typing import Dict, Optional


class TypeClass(Enum):
    """Families of Go types that share a comparison shape."""

    TEXTUAL = "textual"
    SIGNED_INTEGER = "signed-integer"
    UNSIGNED_INTEGER = "unsigned-integer"
    FLOATING_POINT = "floating-point"
    BOOLEAN = "boolean"


GO_TYPE_CLASSES: Dict[str, TypeClass] = {
    "string": TypeClass.TEXTUAL,
    "int": TypeClass.SIGNED_INTEGER,
    "int8": TypeClass.SIGNED_INTEGER,
    "int16": TypeClass.SIGNED_INTEGER,
    "int32": TypeClass.SIGNED_INTEGER,
    "int64": TypeClass.SIGNED_INTEGER,
    "rune": TypeClass.SIGNED_INTEGER,
    "uint": TypeClass.UNSIGNED_INTEGER,
    "uint8": TypeClass.UNSIGNED_INTEGER,
    "uint16": TypeClass.UNSIGNED_INTEGER,
    "uint32": TypeClass.UNSIGNED_INTEGER,
    "uint64": TypeClass.UNSIGNED_INTEGER,
    "uintptr": TypeClass.UNSIGNED_INTEGER,
    "byte": TypeClass.UNSIGNED_INTEGER,
    "float32": TypeClass.FLOATING_POINT,
    "float64": TypeClass.FLOATING_POINT,
    "bool": TypeClass.BOOLEAN,
}

NUMERIC_CLASSES = frozenset({
    TypeClass.SIGNED_INTEGER,
    TypeClass.UNSIGNED_INTEGER,
    TypeClass.FLOATING_POINT,
})


def classify(type_name: str) -> Optional[TypeClass]:
    """
    Map a Go type name to its TypeClass.

    Args:
        type_name: Declared Go type (e.g. "string", "uint8")

    Returns:
        The TypeClass, or None for types outside the table
        (pointers, slices, named types, ...)
    """
    if not isinstance(type_name, str):
        return None
    return GO_TYPE_CLASSES.get(type_name.strip())


def is_numeric(type_class: Optional[TypeClass]) -> bool:
    return type_class in NUMERIC_CLASSES
