"""
valgen: Go validator generation from struct annotations.

Turns validate tags on struct fields into a plain Go validation function:

    FirstName string `validate:"required,gte=5"`

becomes guard blocks inside UserValidate(obj *User) []error.

Layers:
    rules / type_classes   what a rule means, which family a type is in
    synthesizer            (field, rule, type) -> CheckExpression
    assembler              Structure -> one Go unit, via a backend renderer

The core is pure: no I/O, no shared state. Reading descriptions and
writing files happens in serialization, assembler.save_validator_file
and the CLI.
"""

__version__ = "0.1.0"
