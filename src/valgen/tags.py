"""
Struct tag parsing (Raw annotation -> Rules).

Reads Go struct tags such as

    `json:"first_name" validate:"required,gte=5"`

and turns the validate clauses into Rule objects. Tag syntax follows
Go's reflect.StructTag conventions: space-separated key:"value" pairs,
values as Go interpreted string literals.

This is the upstream side of generation. The assembler only ever sees
parsed rules and never goes back to the raw tag.
"""

import warnings
from typing import Dict, List

from valgen.errors import TagParseError
from valgen.model import Field, Structure
from valgen.rules import Rule, parse_rule


VALIDATE_KEY = "validate"

_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "\\": "\\",
    '"': '"',
}


def _unquote(quoted: str) -> str:
    out = []
    i = 1
    end = len(quoted) - 1
    while i < end:
        ch = quoted[i]
        if ch == "\\":
            if i + 1 >= end:
                raise TagParseError(f"Dangling escape in tag value {quoted}")
            nxt = quoted[i + 1]
            if nxt not in _ESCAPES:
                raise TagParseError(f"Unsupported escape '\\{nxt}' in tag value {quoted}")
            out.append(_ESCAPES[nxt])
            i += 2
            continue
        out.append(ch)
        i += 1
    return "".join(out)


def parse_struct_tag(tag: str) -> Dict[str, str]:
    """
    Parse a Go struct tag into its key/value pairs.

    Surrounding backquotes are optional. When a key repeats, the first
    occurrence wins (as reflect.StructTag.Lookup does).

    Args:
        tag: Raw tag text

    Returns:
        Dict of key -> unquoted value, in tag order

    Raises:
        TagParseError: If the tag is not a sequence of key:"value" pairs
    """
    tag = tag.strip()
    if len(tag) >= 2 and tag[0] == "`" and tag[-1] == "`":
        tag = tag[1:-1]

    pairs: Dict[str, str] = {}
    pos = 0
    n = len(tag)

    while pos < n:
        while pos < n and tag[pos] == " ":
            pos += 1
        if pos >= n:
            break

        start = pos
        while pos < n and tag[pos] > " " and tag[pos] not in ':"\x7f':
            pos += 1
        key = tag[start:pos]
        if not key or pos + 1 >= n or tag[pos] != ":" or tag[pos + 1] != '"':
            raise TagParseError(f"Malformed struct tag near position {start}: {tag!r}")

        # opening quote
        pos += 1
        value_start = pos
        pos += 1
        while pos < n and tag[pos] != '"':
            if tag[pos] == "\\":
                pos += 1
            pos += 1
        if pos >= n:
            raise TagParseError(f"Unterminated value for key {key!r} in tag {tag!r}")

        value = _unquote(tag[value_start:pos + 1])
        pos += 1
        pairs.setdefault(key, value)

    return pairs


def parse_validate_tag(tag: str) -> List[Rule]:
    """
    Parse the validate clauses of a struct tag, in order.

    Empty clauses ("required,,gte=1") are skipped. A tag without a
    validate key yields no rules.

    Raises:
        TagParseError: If the tag itself is malformed
        UnknownRuleError: If a clause names an unknown rule
        MalformedOperandError: If a bound clause has a bad operand
    """
    if not tag or not tag.strip():
        return []
    value = parse_struct_tag(tag).get(VALIDATE_KEY)
    if value is None:
        return []
    return [parse_rule(clause) for clause in value.split(",") if clause.strip()]


def field_from_tag(name: str, type_name: str, tag: str = "") -> Field:
    """Build a Field whose rules are parsed from its raw tag."""
    return Field(name=name, type=type_name, tag=tag, rules=parse_validate_tag(tag))


def has_validate_key(tag: str) -> bool:
    if not tag or not tag.strip():
        return False
    return VALIDATE_KEY in parse_struct_tag(tag)


def structure_from_fields(name: str, fields: List[Field], package: str = "main") -> Structure:
    """
    Build a Structure, deriving has_validate_tag from the fields' tags.

    A field carrying rules without a validate key in its tag is allowed
    (rules are authoritative) but reported with a UserWarning.
    """
    tagged = False
    for f in fields:
        keyed = has_validate_key(f.tag)
        tagged = tagged or keyed
        if f.rules and not keyed:
            warnings.warn(
                f"{name}.{f.name} has rules but no validate tag",
                UserWarning,
            )
    return Structure(
        name=name,
        fields=list(fields),
        has_validate_tag=tagged or any(f.rules for f in fields),
        package=package,
    )
