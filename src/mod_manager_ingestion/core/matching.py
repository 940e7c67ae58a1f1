"""File name matching shared by the classifier and the stager.

Payloads are recognized purely by extension. Nothing here reads
file contents.
"""

# Packed-asset payload extension (Valve pak files)
PACKED_ASSET_EXTENSION = ".vpk"

# Archive suffixes accepted as a single-file drop
ARCHIVE_EXTENSIONS = (".zip", ".rar", ".7z")


def _has_suffix(name: str, suffixes: tuple[str, ...]) -> bool:
    return name.lower().endswith(suffixes)


def is_packed_asset(name: str) -> bool:
    """Return True if ``name`` ends with the packed-asset extension (any case)."""
    return _has_suffix(name, (PACKED_ASSET_EXTENSION,))


def is_archive(name: str) -> bool:
    """Return True if ``name`` ends with a recognized archive extension."""
    return _has_suffix(name, ARCHIVE_EXTENSIONS)


def strip_known_extension(name: str) -> str:
    """Remove a trailing payload or archive extension from a file name.

    Example:
        "SkinPack.VPK" -> "SkinPack", "bundle.zip" -> "bundle",
        "notes.txt" -> "notes.txt"
    """
    lowered = name.lower()
    for suffix in (PACKED_ASSET_EXTENSION, *ARCHIVE_EXTENSIONS):
        if lowered.endswith(suffix):
            return name[: -len(suffix)]
    return name


def split_relative_path(relative_path: str) -> list[str]:
    """Split a drop-relative path on either separator, dropping empty parts."""
    return [part for part in relative_path.replace("\\", "/").split("/") if part]


def folder_name_from_relative_path(relative_path: str | None) -> str | None:
    """Derive the dropped folder's name from an entry's relative path.

    Example:
        "a/b.vpk" -> "a"; "b.vpk" -> None (entry was not inside a folder)

    Args:
        relative_path: Path fragment recorded for a folder drop, or None

    Returns:
        First path segment, or None if the path has no folder component
    """
    if not relative_path:
        return None
    parts = split_relative_path(relative_path)
    return parts[0] if len(parts) > 1 else None


def base_name(member_path: str) -> str:
    """Return the last segment of an archive member path."""
    parts = split_relative_path(member_path)
    return parts[-1] if parts else ""
