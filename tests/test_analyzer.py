"""
Tests for the Structure Analyzer.

Tests verify that the analyzer correctly:
    - Counts fields and rules
    - Flags rules the generator cannot emit
    - Detects contradictory and repeated rules
    - Reports a has_validate_tag flag that disagrees with the rules
"""

from valgen.analyzer import analyze_structure
from valgen.model import Field, Structure
from valgen.rules import MaxBound, MinBound, Required


def test_simple_structure():
    structure = Structure(
        name="User",
        fields=[
            Field(name="FirstName", type="string", rules=[Required(), MinBound(2)]),
            Field(name="Note", type="string"),
        ],
        has_validate_tag=True,
    )

    report = analyze_structure(structure)

    assert report.structure_name == "User"
    assert report.total_fields == 2
    assert report.total_rules == 2
    assert report.validated_fields == ["FirstName"]
    assert report.unvalidated_fields == ["Note"]
    assert report.rule_usage == {"required": 1, "gte": 1}
    assert report.coverage_percent == 50.0
    assert report.generatable
    assert report.warnings == []


def test_unsupported_rules():
    """Should list rules the synthesizer will reject."""
    structure = Structure(
        name="Flags",
        fields=[
            Field(name="Active", type="bool", rules=[Required()]),
            Field(name="Tags", type="[]string", rules=[MaxBound(3)]),
        ],
        has_validate_tag=True,
    )

    report = analyze_structure(structure)

    assert not report.generatable
    assert report.unsupported == [("Active", "required", "bool"), ("Tags", "lte=3", "[]string")]
    assert report.unknown_types == [("Tags", "[]string")]
    assert any("Unsupported rules" in w for w in report.warnings)
    assert any("Unknown field types" in w for w in report.warnings)


def test_contradictory_bounds():
    structure = Structure(
        name="Range",
        fields=[
            Field(name="Low", type="int", rules=[MinBound(10), MaxBound(5)]),
            Field(name="Ok", type="int", rules=[MinBound(5), MaxBound(5)]),
        ],
        has_validate_tag=True,
    )

    report = analyze_structure(structure)

    assert report.contradictory_bounds == ["Low"]
    assert any("Contradictory bounds" in w for w in report.warnings)


def test_repeated_rules_and_fields():
    structure = Structure(
        name="Dup",
        fields=[
            Field(name="A", type="string", rules=[Required(), Required()]),
            Field(name="A", type="string"),
        ],
        has_validate_tag=True,
    )

    report = analyze_structure(structure)

    assert report.duplicate_rules == [("A", "required")]
    assert report.duplicate_fields == ["A"]
    assert report.generatable


def test_rules_without_flag():
    """Rules are authoritative; an unset flag is only reported."""
    structure = Structure(
        name="User",
        fields=[Field(name="Age", type="uint8", rules=[Required()])],
        has_validate_tag=False,
    )

    report = analyze_structure(structure)

    assert report.validate_flag_mismatch
    assert report.generatable
    assert "User has rules but is not marked as declaring validation" in report.warnings


def test_flag_without_rules():
    structure = Structure(name="Empty", fields=[Field(name="A", type="string")], has_validate_tag=True)

    report = analyze_structure(structure)

    assert report.validate_flag_mismatch
    assert "Empty is marked as declaring validation but has no rules" in report.warnings


def test_empty_structure():
    report = analyze_structure(Structure(name="Nothing"))

    assert report.total_fields == 0
    assert report.coverage_percent == 0.0
    assert report.warnings == []


def test_analysis_does_not_mutate():
    structure = Structure(
        name="User",
        fields=[Field(name="A", type="bool", rules=[Required()])],
    )
    before = repr(structure)
    analyze_structure(structure)
    assert repr(structure) == before


def test_non_rule_entries_reported():
    """Unparsed rule tokens are reported instead of crashing the analysis."""
    structure = Structure(
        name="User",
        fields=[Field(name="FirstName", type="string", rules=["required"])],
        has_validate_tag=True,
    )

    report = analyze_structure(structure)

    assert not report.generatable
    assert report.unsupported == [("FirstName", "'required'", "string")]
    assert report.rule_usage == {}


def test_invalid_names():
    """Names that cannot appear in Go source make the structure ungeneratable."""
    structure = Structure(
        name="User",
        fields=[
            Field(name="First Name", type="string", rules=[Required()]),
            Field(name="Odd Name", type="string"),
        ],
        has_validate_tag=True,
        package="my-pkg",
    )

    report = analyze_structure(structure)

    assert not report.generatable
    assert report.unsupported == []
    assert report.invalid_names == ["package 'my-pkg'", "field name 'First Name'"]
    assert any("not Go identifiers" in w for w in report.warnings)
