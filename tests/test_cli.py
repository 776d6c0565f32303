"""
Tests for the valgen command line.
"""

import json

import pytest
from valgen.cli import main


USER_YAML = """\
name: User
fields:
  - name: FirstName
    type: string
    tag: 'validate:"required"'
  - name: MyAge
    type: uint8
    rules: [required]
"""


@pytest.fixture
def user_description(tmp_path):
    path = tmp_path / "user.yaml"
    path.write_text(USER_YAML)
    return path


def test_generates_to_stdout(user_description, capsys):
    assert main([str(user_description)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("package main\n")
    assert 'if obj.FirstName == "" {' in out
    assert "if obj.MyAge == 0 {" in out


def test_generates_to_file(user_description, tmp_path):
    target = tmp_path / "user_validator.go"
    assert main([str(user_description), "-o", str(target)]) == 0
    assert "func UserValidate(obj *User) []error {" in target.read_text()


def test_overrides(user_description, capsys):
    args = [str(user_description), "--package", "models", "--sentinel", "ErrBad", "--receiver", "u"]
    assert main(args) == 0
    out = capsys.readouterr().out
    assert out.startswith("package models\n")
    assert "func UserValidate(u *User) []error {" in out
    assert "ErrBad))" in out


def test_unsupported_rule_fails(tmp_path, capsys):
    path = tmp_path / "flags.json"
    path.write_text(json.dumps({
        "name": "Flags",
        "fields": [{"name": "Active", "type": "bool", "rules": ["required"]}],
    }))
    target = tmp_path / "out.go"
    assert main([str(path), "-o", str(target)]) == 1
    captured = capsys.readouterr()
    assert "Active" in captured.err
    assert captured.out == ""
    assert not target.exists()


def test_check_mode(user_description, capsys):
    assert main([str(user_description), "--check"]) == 0
    assert "User: 2 rules on 2 fields" in capsys.readouterr().out


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.yaml")]) == 1
    assert "Error loading description" in capsys.readouterr().err


def test_bad_rule_in_description(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("name: User\nfields:\n  - {name: A, type: string, rules: [gte=x]}\n")
    assert main([str(path)]) == 1
    assert "Error loading description" in capsys.readouterr().err


def test_invalid_sentinel(user_description, capsys):
    assert main([str(user_description), "--sentinel", "not valid"]) == 1
    assert "Error generating validator" in capsys.readouterr().err


@pytest.mark.parametrize("field", [
    "{name: A, rules: [required]}",
    "{name: A, type: string, rules: [5]}",
    "{name: A, type: string, rules: required}",
    "FirstName",
])
def test_malformed_description(tmp_path, capsys, field):
    path = tmp_path / "bad.yaml"
    path.write_text(f"name: User\nfields:\n  - {field}\n")
    assert main([str(path)]) == 1
    captured = capsys.readouterr()
    assert "Error loading description" in captured.err
    assert "field 0 of User" in captured.err
    assert captured.out == ""


def test_missing_type_message(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("name: User\nfields:\n  - {name: A, rules: [required]}\n")
    assert main([str(path)]) == 1
    assert "field 0 of User missing 'type'" in capsys.readouterr().err


def test_field_name_not_identifier(tmp_path, capsys):
    path = tmp_path / "user.json"
    path.write_text(json.dumps({
        "name": "User",
        "fields": [{"name": "First Name", "type": "string", "rules": ["required"]}],
    }))
    target = tmp_path / "out.go"
    assert main([str(path), "-o", str(target)]) == 1
    assert "Error generating validator" in capsys.readouterr().err
    assert not target.exists()


def test_check_mode_flags_bad_names(tmp_path, capsys):
    path = tmp_path / "user.yaml"
    path.write_text("name: User\npackage: my-pkg\nfields:\n  - {name: A, type: string, rules: [required]}\n")
    assert main([str(path), "--check"]) == 1


def test_bad_package_override(user_description, capsys):
    assert main([str(user_description), "--package", "my-pkg"]) == 1
    assert "Error generating validator" in capsys.readouterr().err
