"""Human-facing helpers for classified sources.

Used to prefill the metadata form and to show what was detected
before the user confirms.
"""

from ..core.matching import strip_known_extension
from .base import (
    ClassifiedSource,
    FolderWithPackedAssets,
    SingleArchive,
    SinglePackedAsset,
    Unrecognized,
)


def suggest_mod_name(source: ClassifiedSource) -> str:
    """Suggest a default display name for a detected source.

    Single files use their stem; folders use the folder name, falling
    back to the first payload's stem.

    Args:
        source: Classified drop

    Returns:
        Suggested name, or an empty string when nothing fits
    """
    if isinstance(source, (SinglePackedAsset, SingleArchive)):
        return strip_known_extension(source.entry.name)
    if isinstance(source, FolderWithPackedAssets):
        if source.folder_name:
            return source.folder_name
        return strip_known_extension(source.entries[0].name)
    return ""


def describe_source(source: ClassifiedSource) -> str:
    """One-line summary of a detected source."""
    if isinstance(source, SingleArchive):
        return f"Archive -> {source.entry.name}"
    if isinstance(source, SinglePackedAsset):
        return f"VPK -> {source.entry.display_path}"
    if isinstance(source, FolderWithPackedAssets):
        summary = f"Folder with {len(source.entries)} VPK file(s)"
        if source.folder_name:
            summary += f" -> {source.folder_name}"
        return summary
    if isinstance(source, Unrecognized):
        return "Unsupported file(s)"
    raise TypeError(f"Unknown source type: {type(source).__name__}")
