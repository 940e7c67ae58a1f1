"""Mod Manager - Local Mod Ingestion.

This package turns a user's drop (a single .vpk, a single archive, or a
folder containing .vpk files) into a self-contained mod directory with
a preview image and a metadata document.
"""

# Core library interface
from .classifier import classify
from .pipeline import IngestionPipeline
from .registry import ExtractorRegistry
from .stager import Stager, build_metadata_document
from .storage import ModLayout, ModStorage
from .config import Settings

# Inputs and results
from .sources import (
    ClassifiedSource,
    DroppedEntry,
    FolderWithPackedAssets,
    SingleArchive,
    SinglePackedAsset,
    Unrecognized,
    describe_source,
    suggest_mod_name,
)
from .core import (
    FinishedMetadata,
    MetadataDocument,
    ModCategory,
    PreviewImage,
    StagedMod,
    StageWarning,
    validate_metadata,
    validate_metadata_with_error_details,
)
from .errors import MetadataValidationError, NoSourceError, StageError, StageIOError
from .library import build_library_record
from .scanner import scan_drop

__version__ = "0.1.0"

# Auto-discover and register all archive extractors
ExtractorRegistry.discover_extractors()

__all__ = [
    # Primary library interface
    "IngestionPipeline",
    "Stager",
    "classify",
    "build_metadata_document",
    "ExtractorRegistry",
    "ModStorage",
    "ModLayout",
    "Settings",
    # Sources
    "ClassifiedSource",
    "DroppedEntry",
    "FolderWithPackedAssets",
    "SingleArchive",
    "SinglePackedAsset",
    "Unrecognized",
    "describe_source",
    "suggest_mod_name",
    "scan_drop",
    # Metadata and results
    "FinishedMetadata",
    "MetadataDocument",
    "ModCategory",
    "PreviewImage",
    "StagedMod",
    "StageWarning",
    "build_library_record",
    "validate_metadata",
    "validate_metadata_with_error_details",
    # Errors
    "StageError",
    "NoSourceError",
    "StageIOError",
    "MetadataValidationError",
]
