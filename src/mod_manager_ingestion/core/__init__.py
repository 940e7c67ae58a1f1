"""Core utilities shared by the classifier and the stager.

This package contains name matching, filesystem safety helpers,
type definitions and metadata schema validation.
"""

from .matching import (
    ARCHIVE_EXTENSIONS,
    PACKED_ASSET_EXTENSION,
    is_archive,
    is_packed_asset,
)
from .paths import sanitize_filename, validate_path_safety, validate_url
from .types import (
    FinishedMetadata,
    MetadataDocument,
    ModCategory,
    PreviewImage,
    StagedMod,
    StageWarning,
)
from .validator import validate_metadata, validate_metadata_with_error_details

__all__ = [
    "ARCHIVE_EXTENSIONS",
    "PACKED_ASSET_EXTENSION",
    "FinishedMetadata",
    "MetadataDocument",
    "ModCategory",
    "PreviewImage",
    "StagedMod",
    "StageWarning",
    "is_archive",
    "is_packed_asset",
    "sanitize_filename",
    "validate_metadata",
    "validate_metadata_with_error_details",
    "validate_path_safety",
    "validate_url",
]
