"""
Command line entry point.

    valgen user.yaml -o user_validator.go
    valgen models.json --package models --sentinel ErrInvalid
    valgen user.yaml --check

Reads structure descriptions (YAML or JSON), reports analyzer warnings on
stderr and writes the generated Go source to stdout or a file.
"""

import argparse
import dataclasses
import json
import logging
import sys
from typing import List, Optional

import yaml

from valgen.analyzer import analyze_structure
from valgen.assembler import assemble_file
from valgen.backends.go_renderer import GoRenderer
from valgen.errors import GenerationError
from valgen.serialization import load_structures

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="valgen",
        description="Generate Go validation functions from annotated structure descriptions",
    )
    parser.add_argument("description", help="Path to a YAML or JSON structure description")
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--package", help="Override the Go package of every structure")
    parser.add_argument("--sentinel", default="ErrValidation",
                        help="Error value every failure wraps (default: ErrValidation)")
    parser.add_argument("--receiver", default="obj",
                        help="Parameter name of the validated instance (default: obj)")
    parser.add_argument("--check", action="store_true",
                        help="Only analyze the descriptions, do not generate")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        structures = load_structures(args.description)
    except (GenerationError, FileNotFoundError, yaml.YAMLError, json.JSONDecodeError) as e:
        print(f"Error loading description: {e}", file=sys.stderr)
        return 1

    if args.package:
        structures = [dataclasses.replace(s, package=args.package) for s in structures]

    generatable = True
    for structure in structures:
        report = analyze_structure(structure)
        generatable = generatable and report.generatable
        for warning in report.warnings:
            logger.warning("%s: %s", structure.name, warning)

    if args.check:
        for structure in structures:
            print(f"{structure.name}: {structure.rule_count()} rules on {len(structure.fields)} fields")
        return 0 if generatable else 1

    try:
        renderer = GoRenderer(receiver=args.receiver, sentinel=args.sentinel)
        source = assemble_file(structures, renderer=renderer)
    except GenerationError as e:
        print(f"Error generating validator: {e}", file=sys.stderr)
        return 1

    if args.output:
        with open(args.output, "w") as f:
            f.write(source)
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(source)

    return 0


if __name__ == "__main__":
    sys.exit(main())
