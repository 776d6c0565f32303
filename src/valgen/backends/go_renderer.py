"""
Go source renderer for synthesized checks.

Owns every piece of Go spelling the generator emits: the package
preamble, the function signature, the guard blocks and the operand
syntax. The assembler decides WHAT goes into the unit; this module
decides how it reads in Go.

Output for one required string field:

    package main

    import (
    	"fmt"
    )

    func UserValidate(obj *User) []error {
    	var errs []error

    	if obj.FirstName == "" {
    		errs = append(errs, fmt.Errorf("%w: FirstName required", ErrValidation))
    	}

    	return errs
    }
"""

import re
from dataclasses import dataclass
from typing import List

from valgen.errors import InvalidIdentifierError
from valgen.expressions import (
    CheckExpression,
    FieldReference,
    Length,
    Literal,
    Operand,
)


_GO_IDENTIFIER_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

GO_KEYWORDS = frozenset({
    "break", "case", "chan", "const", "continue", "default", "defer", "else",
    "fallthrough", "for", "func", "go", "goto", "if", "import", "interface",
    "map", "package", "range", "return", "select", "struct", "switch", "type",
    "var",
})


def check_identifier(role: str, value) -> str:
    """
    Return value if it can be spelled as a Go identifier.

    Raises:
        InvalidIdentifierError: For non-strings, malformed names and keywords
    """
    if not isinstance(value, str) or not _GO_IDENTIFIER_RE.fullmatch(value) or value in GO_KEYWORDS:
        raise InvalidIdentifierError(role, value)
    return value


def _escape_go_string(s: str) -> str:
    """Quote a value as a Go interpreted string literal."""
    s = s.replace("\\", "\\\\")
    s = s.replace('"', '\\"')
    s = s.replace("\n", "\\n")
    s = s.replace("\t", "\\t")
    return f'"{s}"'


def _escape_format_text(s: str) -> str:
    """Escape text placed inside an fmt format string."""
    return s.replace("%", "%%")


@dataclass(frozen=True)
class GoRenderer:
    """
    Go spelling choices for generated validators.

    Properties:
        receiver: Name of the parameter holding the instance
        sentinel: Shared error value every failure wraps
        errors_var: Name of the accumulated error slice
        indent: One indentation level
    """

    receiver: str = "obj"
    sentinel: str = "ErrValidation"
    errors_var: str = "errs"
    indent: str = "\t"

    def __post_init__(self):
        for attr in ("receiver", "sentinel", "errors_var"):
            check_identifier(attr, getattr(self, attr))

    def render_operand(self, operand: Operand) -> str:
        if isinstance(operand, FieldReference):
            return f"{self.receiver}.{check_identifier('field name', operand.name)}"
        elif isinstance(operand, Length):
            return f"len({self.render_operand(operand.operand)})"
        elif isinstance(operand, Literal):
            if isinstance(operand.value, str):
                return _escape_go_string(operand.value)
            return str(operand.value)
        raise TypeError(f"Unsupported operand type: {type(operand)}")

    def render_condition(self, check: CheckExpression) -> str:
        left = self.render_operand(check.left)
        right = self.render_operand(check.right)
        return f"{left} {check.operator.value} {right}"

    def render_guard(self, check: CheckExpression) -> str:
        """One if-block appending the check's error."""
        fmt_string = _escape_go_string("%w: " + _escape_format_text(check.message))
        i1 = self.indent
        i2 = self.indent * 2
        lines = [
            f"{i1}if {self.render_condition(check)} {{",
            f"{i2}{self.errors_var} = append({self.errors_var}, "
            f"fmt.Errorf({fmt_string}, {self.sentinel}))",
            f"{i1}}}",
        ]
        return "\n".join(lines) + "\n"

    def render_preamble(self, package: str) -> str:
        check_identifier("package", package)
        return f'package {package}\n\nimport (\n{self.indent}"fmt"\n)\n'

    def render_function(self, function_name: str, struct_name: str,
                        checks: List[CheckExpression]) -> str:
        check_identifier("function name", function_name)
        check_identifier("struct name", struct_name)
        lines = [
            f"func {function_name}({self.receiver} *{struct_name}) []error {{\n",
            f"{self.indent}var {self.errors_var} []error\n",
            "\n",
        ]
        for check in checks:
            lines.append(self.render_guard(check))
            lines.append("\n")
        lines.append(f"{self.indent}return {self.errors_var}\n")
        lines.append("}\n")
        return "".join(lines)

    def render_unit(self, package: str, function_name: str, struct_name: str,
                    checks: List[CheckExpression]) -> str:
        """Preamble followed by the validator function."""
        return (
            self.render_preamble(package)
            + "\n"
            + self.render_function(function_name, struct_name, checks)
        )


__all__ = ["GoRenderer", "check_identifier"]
