"""
Serialization helpers for structure descriptions (Structure, Field, Rule).

Provides JSON/YAML round-trip via an intermediate dict representation.
Rules are stored as their clause text ("gte=5") so descriptions stay
readable and can be written by hand:

    name: User
    package: main
    fields:
      - name: FirstName
        type: string
        tag: 'validate:"required,gte=5"'
      - name: MyAge
        type: uint8
        rules: [required]
"""
from __future__ import annotations

import json
import os
from typing import Any, Dict, List

import yaml

from valgen.errors import DescriptionError, GenerationError
from valgen.model import Field, Structure
from valgen.rules import format_rule, parse_rule
from valgen.tags import has_validate_key, parse_validate_tag


def field_to_dict(f: Field) -> Dict[str, Any]:
    return {
        "name": f.name,
        "type": f.type,
        "tag": f.tag,
        "rules": [format_rule(r) for r in f.rules],
    }


def _require(d: Any, key: str, where: str) -> str:
    if not isinstance(d, dict):
        raise DescriptionError(f"{where} must be a mapping, got {type(d).__name__}")
    value = d.get(key)
    if value is None:
        raise DescriptionError(f"{where} missing {key!r}")
    if not isinstance(value, str):
        raise DescriptionError(f"{where}: {key!r} must be a string, got {value!r}")
    return value


def field_from_dict(d: Dict[str, Any], where: str = "field") -> Field:
    name = _require(d, "name", where)
    type_name = _require(d, "type", where)
    tag = d.get("tag", "") or ""
    if not isinstance(tag, str):
        raise DescriptionError(f"{where}: 'tag' must be a string, got {tag!r}")

    if d.get("rules") is not None:
        tokens = d["rules"]
        if not isinstance(tokens, list):
            raise DescriptionError(f"{where}: 'rules' must be a list, got {tokens!r}")
        for token in tokens:
            if not isinstance(token, str):
                raise DescriptionError(f"{where}: rule {token!r} must be a string")
        rules = [parse_rule(token) for token in tokens]
    else:
        rules = parse_validate_tag(tag)
    return Field(name=name, type=type_name, tag=tag, rules=rules)


def structure_to_dict(s: Structure) -> Dict[str, Any]:
    return {
        "name": s.name,
        "package": s.package,
        "has_validate_tag": s.has_validate_tag,
        "fields": [field_to_dict(f) for f in s.fields],
    }


def structure_from_dict(d: Dict[str, Any]) -> Structure:
    name = _require(d, "name", "structure")
    package = d.get("package", "main")
    if not isinstance(package, str):
        raise DescriptionError(f"structure {name}: 'package' must be a string, got {package!r}")

    raw_fields = d.get("fields") or []
    if not isinstance(raw_fields, list):
        raise DescriptionError(f"structure {name}: 'fields' must be a list")
    fields = [
        field_from_dict(f, where=f"field {i} of {name}")
        for i, f in enumerate(raw_fields)
    ]
    if "has_validate_tag" in d:
        has_validate_tag = bool(d["has_validate_tag"])
    else:
        has_validate_tag = any(f.rules or has_validate_key(f.tag) for f in fields)
    return Structure(
        name=name,
        fields=fields,
        has_validate_tag=has_validate_tag,
        package=package,
    )


def structure_to_json(s: Structure) -> str:
    return json.dumps(structure_to_dict(s), sort_keys=True)


def structure_from_json(s: str) -> Structure:
    d = json.loads(s)
    return structure_from_dict(d)


def structure_to_yaml(s: Structure) -> str:
    return yaml.safe_dump(structure_to_dict(s), sort_keys=False)


def structure_from_yaml(s: str) -> Structure:
    d = yaml.safe_load(s)
    return structure_from_dict(d)


def structures_from_document(doc: Any) -> List[Structure]:
    """
    Read one structure or a `structures:` list from a loaded document.

    Raises:
        GenerationError: If the document holds neither
    """
    if isinstance(doc, dict) and "structures" in doc:
        structures = doc["structures"] or []
        if not isinstance(structures, list):
            raise DescriptionError("'structures' must be a list")
        return [structure_from_dict(d) for d in structures]
    if isinstance(doc, dict) and "name" in doc:
        return [structure_from_dict(doc)]
    raise GenerationError("Description must be a structure or hold a 'structures' list")


def load_structures(filepath: str) -> List[Structure]:
    """
    Load structure descriptions from a YAML or JSON file.

    Files ending in .json are read as JSON, everything else as YAML.
    """
    if not os.path.exists(filepath):
        raise FileNotFoundError(f"Description file not found: {filepath}")

    with open(filepath) as fh:
        text = fh.read()

    if filepath.endswith(".json"):
        doc = json.loads(text)
    else:
        doc = yaml.safe_load(text)
    return structures_from_document(doc)
