#!/usr/bin/env python3
"""
Demo: Generate a Go validator from the example User structure.

Shows the analyzer report, the generated source, and writes it next to
a notional models/user.go.
"""

from valgen.analyzer import analyze_structure
from valgen.assembler import assemble, save_validator_file, validator_filename
from valgen.examples import build_example_user_structure


def main():
    structure = build_example_user_structure()

    print("=" * 80)
    print("VALIDATOR GENERATOR DEMO")
    print("=" * 80)

    report = analyze_structure(structure)
    print(f"\nStructure: {report.structure_name}")
    print(f"Fields: {report.total_fields} ({len(report.validated_fields)} validated)")
    print(f"Rules: {report.total_rules} {report.rule_usage}")
    for warning in report.warnings:
        print(f"  - {warning}")

    print("\nGENERATED SOURCE:")
    print("-" * 80)
    print(assemble(structure))

    filename = validator_filename("user.go")
    save_validator_file(structure, filename)
    print(f"Saved to: {filename}")
    print("=" * 80)


if __name__ == "__main__":
    main()
