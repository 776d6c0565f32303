"""
Function Assembler

Drives the synthesizer over a Structure and hands the resulting checks to
a renderer, producing one compilable Go unit:

    Structure  ->  [CheckExpression, ...]  ->  package + <Name>Validate()

Checks appear in field declaration order, then rule order within each
field. Any synthesis error aborts the call before anything is rendered,
so a caller gets either the whole unit or an exception.
"""

import logging
import os
from typing import List, Optional, Tuple

from valgen.backends.go_renderer import GoRenderer, check_identifier
from valgen.errors import GenerationError
from valgen.expressions import CheckExpression
from valgen.model import Field, Structure
from valgen.synthesizer import synthesize

logger = logging.getLogger(__name__)


FUNCTION_SUFFIX = "Validate"
GENERATED_FILE_SUFFIX = "_validator.go"


def function_name(structure_name: str) -> str:
    """Name of the generated validator ("User" -> "UserValidate")."""
    return structure_name + FUNCTION_SUFFIX


def collect_checks(structure: Structure) -> List[Tuple[Field, CheckExpression]]:
    """
    Synthesize every check of a structure, in emission order.

    Raises:
        InvalidIdentifierError: If the package, the struct name, or the
            name of a field carrying rules cannot appear in Go source
        UnsupportedCombinationError: On the first rule that has no check
            shape for its field's type
    """
    check_identifier("package", structure.package)
    check_identifier("struct name", structure.name)
    checks: List[Tuple[Field, CheckExpression]] = []
    for f in structure.fields:
        if f.rules:
            check_identifier("field name", f.name)
        for rule in f.rules:
            checks.append((f, synthesize(f.name, rule, f.type)))
    return checks


def assemble(structure: Structure, renderer: Optional[GoRenderer] = None) -> str:
    """
    Generate the validator source for one structure.

    A structure without any rules still yields a valid function that
    returns an empty error list.

    Args:
        structure: Structure description with parsed rules
        renderer: Output template (defaults to GoRenderer())

    Returns:
        Complete Go source text (preamble + one function)

    Raises:
        InvalidIdentifierError: If a name in the structure is not a Go
            identifier
        UnsupportedCombinationError: If any rule cannot be applied to
            its field's type. No partial text is returned.
    """
    if renderer is None:
        renderer = GoRenderer()

    checks = [check for _, check in collect_checks(structure)]
    logger.debug("Assembling %s with %d checks", structure.name, len(checks))

    return renderer.render_unit(
        package=structure.package,
        function_name=function_name(structure.name),
        struct_name=structure.name,
        checks=checks,
    )


def assemble_file(structures: List[Structure],
                  renderer: Optional[GoRenderer] = None) -> str:
    """
    Generate one Go file holding the validators of several structures.

    The preamble is emitted once; functions follow in input order,
    separated by a blank line. All structures must share a package.

    Raises:
        GenerationError: If the structures span several packages or
            the list is empty
        UnsupportedCombinationError: As for assemble()
    """
    if renderer is None:
        renderer = GoRenderer()
    if not structures:
        raise GenerationError("No structures to generate")
    for s in structures:
        check_identifier("package", s.package)

    packages = {s.package for s in structures}
    if len(packages) > 1:
        raise GenerationError(
            f"Structures belong to different packages: {sorted(packages)}"
        )

    # synthesize everything before rendering anything
    planned = [
        (s, [check for _, check in collect_checks(s)]) for s in structures
    ]
    functions = [
        renderer.render_function(function_name(s.name), s.name, checks)
        for s, checks in planned
    ]
    return renderer.render_preamble(structures[0].package) + "\n" + "\n".join(functions)


def validator_filename(source_filename: str) -> str:
    """
    Path of the generated file next to its struct's source file.

    Example:
        "models/user.go" -> "models/user_validator.go"
    """
    stem, _ = os.path.splitext(source_filename)
    return stem + GENERATED_FILE_SUFFIX


def save_validator_file(structure: Structure, filename: str,
                        renderer: Optional[GoRenderer] = None) -> None:
    """
    Generate the validator and write it to a file.

    Nothing is written when generation fails.
    """
    source = assemble(structure, renderer=renderer)
    with open(filename, "w") as f:
        f.write(source)
    logger.info("Wrote %s", filename)
