"""
Structure Model

Describes one annotated Go struct as handed to the generator:

    type User struct {
        FirstName string `validate:"required,gte=5"`
        MyAge     uint8  `validate:"required"`
    }

These are plain data classes. The generator reads them and never
mutates them; every generation call builds its own output.

INVARIANTS:
    - fields keep declaration order (the order checks are emitted in)
    - rules keep clause order within a field
    - a field with no rules contributes no check
"""

from dataclasses import dataclass, field
from typing import List, Optional

from valgen.rules import Rule


@dataclass
class Field:
    """
    One struct field.

    Properties:
        name: Field identifier (e.g. "FirstName")
        type: Declared Go type name (e.g. "string", "uint8")
        tag: Raw struct tag, kept for diagnostics only
        rules: Parsed rules, in clause order
    """

    name: str
    type: str
    tag: str = ""
    rules: List[Rule] = field(default_factory=list)


@dataclass
class Structure:
    """
    One Go struct and its validation annotations.

    Properties:
        name: Struct identifier (e.g. "User")
        fields: Fields in declaration order
        has_validate_tag: True when at least one field carries a
            validate tag. Informational; rules are authoritative.
        package: Go package the generated file belongs to
    """

    name: str
    fields: List[Field] = field(default_factory=list)
    has_validate_tag: bool = False
    package: str = "main"

    def get_field(self, field_name: str) -> Optional[Field]:
        """
        Retrieve a field by name.

        Returns:
            Field object or None if not found
        """
        for f in self.fields:
            if f.name == field_name:
                return f
        return None

    def validated_fields(self) -> List[Field]:
        """Fields carrying at least one rule, in declaration order."""
        return [f for f in self.fields if f.rules]

    def rule_count(self) -> int:
        return sum(len(f.rules) for f in self.fields)
