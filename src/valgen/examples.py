"""
Example structures for demos and tests.

Mirrors a typical annotated Go model:

    type User struct {
        FirstName string `json:"first_name" validate:"required,gte=2,lte=50"`
        LastName  string `json:"last_name"`
        MyAge     uint8  `json:"age" validate:"required,lte=130"`
        Score     int32  `validate:"gte=0,lte=100"`
    }
"""
from valgen.model import Structure
from valgen.tags import field_from_tag, structure_from_fields


def build_example_user_structure(package: str = "main") -> Structure:
    fields = [
        field_from_tag("FirstName", "string", '`json:"first_name" validate:"required,gte=2,lte=50"`'),
        field_from_tag("LastName", "string", '`json:"last_name"`'),
        field_from_tag("MyAge", "uint8", '`json:"age" validate:"required,lte=130"`'),
        field_from_tag("Score", "int32", '`validate:"gte=0,lte=100"`'),
    ]
    return structure_from_fields("User", fields, package=package)


def build_example_unvalidated_structure(package: str = "main") -> Structure:
    fields = [
        field_from_tag("ID", "uint64", '`json:"id"`'),
        field_from_tag("Label", "string"),
    ]
    return structure_from_fields("Record", fields, package=package)
