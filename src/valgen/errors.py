"""
Error types raised while turning annotated structures into validators.

Every error derives from GenerationError so callers can catch the whole
family at once. Generation is all-or-nothing: when one of these is raised
no source text is produced for that structure.
"""


class GenerationError(Exception):
    """Base class for all valgen errors."""
    pass


class TagParseError(GenerationError):
    """Raised when a struct tag cannot be parsed."""
    pass


class UnknownRuleError(GenerationError):
    """Raised when a validate clause names a rule outside the vocabulary."""

    def __init__(self, token: str):
        self.token = token
        super().__init__(f"Unknown validation rule: {token!r}")


class MalformedOperandError(GenerationError):
    """Raised when a bound rule carries an operand that is not a non-negative integer."""

    def __init__(self, rule_name: str, operand):
        self.rule_name = rule_name
        self.operand = operand
        super().__init__(
            f"Malformed operand for {rule_name!r}: {operand!r} "
            f"(expected a non-negative integer)"
        )


class UnsupportedCombinationError(GenerationError):
    """
    Raised when a rule is applied to a type that has no check shape.

    Carries enough context to fix the annotation: the field name,
    the rule and the declared type.
    """

    def __init__(self, field_name: str, rule, declared_type: str):
        self.field_name = field_name
        self.rule = rule
        self.declared_type = declared_type
        super().__init__(
            f"Field {field_name!r}: rule {rule!s} is not supported "
            f"for type {declared_type!r}"
        )


class DescriptionError(GenerationError):
    """Raised when a structure description is missing keys or has wrongly typed values."""
    pass


class InvalidIdentifierError(GenerationError):
    """Raised when a name that ends up in generated source is not a Go identifier."""

    def __init__(self, role: str, value):
        self.role = role
        self.value = value
        super().__init__(f"{role} must be a Go identifier, got {value!r}")
