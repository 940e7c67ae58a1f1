"""Tests for metadata schema validation."""

import uuid

import pytest
from jsonschema import ValidationError

from mod_manager_ingestion import (
    FinishedMetadata,
    ModCategory,
    PreviewImage,
    build_metadata_document,
    validate_metadata,
    validate_metadata_with_error_details,
)
from mod_manager_ingestion.core.validator import load_schema


@pytest.fixture
def document():
    return build_metadata_document(
        f"local-{uuid.uuid4()}",
        FinishedMetadata(name="Red Armor"),
        ModCategory.SKINS,
        created_at="2026-10-17T12:00:00.000Z",
    )


class TestValidateMetadata:
    """Test validate_metadata()."""

    def test_schema_loads(self) -> None:
        """Test that the packaged schema is valid JSON."""
        schema = load_schema()

        assert schema["properties"]["_schema"]["type"] == "integer"

    def test_built_document_is_valid(self, document) -> None:
        """Test that build_metadata_document output passes validation."""
        validate_metadata(document)  # Should not raise

    def test_category_values_match_enum(self) -> None:
        """Test that the schema's category list matches ModCategory."""
        schema_categories = load_schema()["properties"]["category"]["enum"]

        assert schema_categories == [c.value for c in ModCategory]

    def test_rejects_remote_id(self, document) -> None:
        """Test that non-local ids are rejected."""
        document["id"] = "gb-12345"

        with pytest.raises(ValidationError):
            validate_metadata(document)

    def test_rejects_extra_fields(self, document) -> None:
        """Test that unknown fields are rejected."""
        document["extra"] = True  # type: ignore[typeddict-unknown-key]

        with pytest.raises(ValidationError):
            validate_metadata(document)

    def test_preview_name_follows_image(self) -> None:
        """Test that the preview field tracks the supplied image."""
        doc = build_metadata_document(
            f"local-{uuid.uuid4()}",
            FinishedMetadata(name="Mod", image=PreviewImage(data=b"x", name="c.webp")),
            "Misc",
        )

        assert doc["preview"] == "preview.webp"


class TestValidateWithErrorDetails:
    """Test validate_metadata_with_error_details()."""

    def test_valid(self, document) -> None:
        """Test that a valid document reports no error."""
        assert validate_metadata_with_error_details(document) == (True, None)

    def test_error_names_field(self, document) -> None:
        """Test that the error message names the offending field."""
        document["author"] = ""

        is_valid, message = validate_metadata_with_error_details(document)

        assert not is_valid
        assert message is not None
        assert "author" in message
