"""Dropped entries and classified source shapes.

This package contains the input type for the ingestion pipeline and
the closed set of shapes a drop can be classified into.
"""

from .base import (
    ClassifiedSource,
    DroppedEntry,
    FolderWithPackedAssets,
    SingleArchive,
    SinglePackedAsset,
    Unrecognized,
)
from .summary import describe_source, suggest_mod_name

__all__ = [
    "ClassifiedSource",
    "DroppedEntry",
    "FolderWithPackedAssets",
    "SingleArchive",
    "SinglePackedAsset",
    "Unrecognized",
    "describe_source",
    "suggest_mod_name",
]
