"""JSON Schema validation of transliteration schema definitions."""

import json
from pathlib import Path
from typing import Any, cast

from jsonschema import Draft7Validator


SCHEMA_DIR = Path(__file__).parent.parent / "etc" / "schemas"


def load_schema(schema_path: Path) -> dict[str, Any]:
    """
    Load JSON schema from file.

    Args:
        schema_path: Path to schema file

    Returns:
        Parsed schema dict
    """
    with schema_path.open("r", encoding="utf-8") as f:
        return cast(dict[str, Any], json.load(f))


def validate_against_schema(
    data: Any,
    schema: dict[str, Any],
) -> list[str]:
    """
    Validate data against JSON schema.

    Args:
        data: Data to validate
        schema: JSON schema

    Returns:
        List of validation error messages (empty if valid)
    """
    validator = Draft7Validator(schema)
    errors = []

    for error in sorted(validator.iter_errors(data), key=str):
        # Format error message with path
        path = ".".join(str(p) for p in error.path) if error.path else "root"
        errors.append(f"{path}: {error.message}")

    return errors


def validate_definition(data: Any, schema_dir: Path | None = None) -> list[str]:
    """Validate a transliteration schema definition against its structure."""
    schema = load_schema((schema_dir or SCHEMA_DIR) / "definition.schema.json")
    return validate_against_schema(data, schema)
