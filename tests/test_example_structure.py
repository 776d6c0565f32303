"""
Test the example User structure and the validator generated from it.
"""

from valgen.analyzer import analyze_structure
from valgen.assembler import assemble
from valgen.examples import build_example_unvalidated_structure, build_example_user_structure
from valgen.rules import MaxBound, MinBound, Required


def test_example_user_structure():
    structure = build_example_user_structure()

    assert structure.name == "User"
    assert structure.has_validate_tag
    assert [f.name for f in structure.fields] == ["FirstName", "LastName", "MyAge", "Score"]

    first_name = structure.get_field("FirstName")
    assert first_name is not None
    assert first_name.rules == [Required(), MinBound(2), MaxBound(50)]

    assert structure.get_field("LastName").rules == []
    assert structure.get_field("Missing") is None
    assert [f.name for f in structure.validated_fields()] == ["FirstName", "MyAge", "Score"]
    assert structure.rule_count() == 7


def test_example_user_generates():
    source = assemble(build_example_user_structure())

    assert source.count("\tif ") == 7
    assert 'if obj.FirstName == "" {' in source
    assert "if len(obj.FirstName) < 2 {" in source
    assert "if len(obj.FirstName) > 50 {" in source
    assert "LastName" not in source
    assert "if obj.MyAge > 130 {" in source
    assert "if obj.Score < 0 {" in source


def test_example_user_is_clean():
    report = analyze_structure(build_example_user_structure())
    assert report.warnings == []
    assert report.generatable


def test_example_unvalidated_structure():
    structure = build_example_unvalidated_structure(package="store")
    assert not structure.has_validate_tag
    source = assemble(structure)
    assert source.startswith("package store\n")
    assert "\tif " not in source
