"""JSON Schema validation for mod metadata documents.

This module loads the packaged JSON Schema and validates metadata
documents before they are written to disk.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import ValidationError

from .types import MetadataDocument

# src/mod_manager_ingestion/core/validator.py -> src/mod_manager_ingestion/schemas/
SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "metadata.schema.json"


@lru_cache(maxsize=1)
def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def validate_metadata(document: MetadataDocument) -> None:
    """Validate a metadata document against the JSON Schema.

    Args:
        document: The metadata dictionary to validate

    Raises:
        ValidationError: If the document doesn't conform to the schema
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    jsonschema.validate(instance=document, schema=load_schema())


def format_validation_error(error: ValidationError) -> str:
    """Build a readable message naming the offending field."""
    error_path = " -> ".join(str(p) for p in error.path) if error.path else "root"
    return f"Validation error at {error_path}: {error.message}"


def validate_metadata_with_error_details(document: MetadataDocument) -> tuple[bool, str | None]:
    """Validate a metadata document and return detailed error information.

    Args:
        document: The metadata dictionary to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_metadata(document)
        return True, None
    except ValidationError as e:
        return False, format_validation_error(e)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
