"""
Structure Analyzer: diagnostics for annotated structures before generation.

Reports what the generator would do with a Structure and flags
annotations that look wrong:
    - Rule inventory and coverage
    - Rules that have no check shape for their field's type
    - Contradictory bounds (gte above lte)
    - Repeated rules on one field
    - has_validate_tag disagreeing with the parsed rules

IMPORTANT: This module does NOT modify the structure and does not
generate code. It only produces read-only reports. Rules are treated as
authoritative; has_validate_tag is informational only.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from valgen.backends.go_renderer import check_identifier
from valgen.errors import InvalidIdentifierError
from valgen.model import Structure
from valgen.rules import MaxBound, MinBound, Rule, format_rule
from valgen.synthesizer import is_supported
from valgen.type_classes import classify


@dataclass
class StructureReport:
    """Analysis report for one structure."""

    structure_name: str
    total_fields: int = 0
    total_rules: int = 0
    validated_fields: List[str] = field(default_factory=list)
    unvalidated_fields: List[str] = field(default_factory=list)

    # Rule usage: clause kind -> count
    rule_usage: Dict[str, int] = field(default_factory=dict)

    # (field, rule clause, type) triples the synthesizer will reject
    unsupported: List[Tuple[str, str, str]] = field(default_factory=list)
    unknown_types: List[Tuple[str, str]] = field(default_factory=list)
    contradictory_bounds: List[str] = field(default_factory=list)
    duplicate_rules: List[Tuple[str, str]] = field(default_factory=list)
    duplicate_fields: List[str] = field(default_factory=list)
    invalid_names: List[str] = field(default_factory=list)
    validate_flag_mismatch: bool = False

    coverage_percent: float = 0.0

    warnings: List[str] = field(default_factory=list)

    def add_warning(self, msg: str) -> None:
        """Add a warning to the report."""
        if msg not in self.warnings:
            self.warnings.append(msg)

    @property
    def generatable(self) -> bool:
        """True when assemble() will succeed on this structure."""
        return not self.unsupported and not self.invalid_names


def analyze_structure(structure: Structure) -> StructureReport:
    """
    Analyze a Structure ahead of generation.

    Returns a StructureReport with counts and warnings.
    """
    report = StructureReport(structure_name=structure.name)
    report.total_fields = len(structure.fields)
    report.total_rules = structure.rule_count()

    names = [("package", structure.package), ("struct name", structure.name)]
    names += [("field name", f.name) for f in structure.fields if f.rules]
    for role, name in names:
        try:
            check_identifier(role, name)
        except InvalidIdentifierError:
            report.invalid_names.append(f"{role} {name!r}")

    seen_names: Dict[str, int] = {}

    for f in structure.fields:
        seen_names[f.name] = seen_names.get(f.name, 0) + 1

        if f.rules:
            report.validated_fields.append(f.name)
        else:
            report.unvalidated_fields.append(f.name)

        if f.rules and classify(f.type) is None:
            report.unknown_types.append((f.name, f.type))

        seen_clauses: List[str] = []
        for rule in f.rules:
            if not isinstance(rule, Rule):
                report.unsupported.append((f.name, repr(rule), str(f.type)))
                continue

            clause = format_rule(rule)
            kind = rule.kind.value
            report.rule_usage[kind] = report.rule_usage.get(kind, 0) + 1

            if not is_supported(rule, f.type):
                report.unsupported.append((f.name, clause, f.type))

            if clause in seen_clauses:
                report.duplicate_rules.append((f.name, clause))
            seen_clauses.append(clause)

        mins = [r.bound for r in f.rules if isinstance(r, MinBound)]
        maxs = [r.bound for r in f.rules if isinstance(r, MaxBound)]
        if mins and maxs and max(mins) > min(maxs):
            report.contradictory_bounds.append(f.name)

    report.duplicate_fields = [name for name, count in seen_names.items() if count > 1]

    has_rules = report.total_rules > 0
    report.validate_flag_mismatch = structure.has_validate_tag != has_rules

    if report.total_fields > 0:
        report.coverage_percent = (len(report.validated_fields) / report.total_fields) * 100

    # =========================================================================
    # WARNING FLAGS
    # =========================================================================

    if report.unsupported:
        report.add_warning(
            "Unsupported rules: " + ", ".join(
                f"{name} ({clause} on {type_name})"
                for name, clause, type_name in report.unsupported
            )
        )

    if report.invalid_names:
        report.add_warning(f"Names that are not Go identifiers: {', '.join(report.invalid_names)}")

    if report.unknown_types:
        report.add_warning(
            "Unknown field types: " + ", ".join(
                f"{name} {type_name}" for name, type_name in report.unknown_types
            )
        )

    if report.contradictory_bounds:
        report.add_warning(
            f"Contradictory bounds (gte above lte): {', '.join(report.contradictory_bounds)}"
        )

    if report.duplicate_rules:
        report.add_warning(
            "Repeated rules: " + ", ".join(
                f"{name} {clause}" for name, clause in report.duplicate_rules
            )
        )

    if report.duplicate_fields:
        report.add_warning(f"Duplicate field names: {', '.join(report.duplicate_fields)}")

    if report.validate_flag_mismatch:
        if has_rules:
            report.add_warning(
                f"{structure.name} has rules but is not marked as declaring validation"
            )
        else:
            report.add_warning(
                f"{structure.name} is marked as declaring validation but has no rules"
            )

    return report
