"""Type definitions for staged mods and their metadata documents.

``MetadataDocument`` mirrors the JSON schema in
schemas/metadata.schema.json; its keys are written verbatim to
``metadata.json`` (hence the camelCase ``createdAt``).
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal, TypedDict

# Version of the metadata.json layout
METADATA_SCHEMA_VERSION = 1

# Prefix marking mods added from local files rather than a remote catalog
LOCAL_ID_PREFIX = "local-"

DEFAULT_AUTHOR = "Unknown"


class ModCategory(str, Enum):
    """Fixed set of library categories a mod can be filed under."""

    SKINS = "Skins"
    GAMEPLAY = "Gameplay"
    HUD = "HUD"
    MODELS = "Models"
    SOUNDS = "Sounds"
    MISC = "Misc"


class StageWarning(str, Enum):
    """Recoverable conditions reported alongside a successful staging."""

    PAYLOAD_NOT_FOUND_IN_ARCHIVE = "payload_not_found_in_archive"
    ARCHIVE_NOT_EXTRACTABLE = "archive_not_extractable"
    ARCHIVE_UNREADABLE = "archive_unreadable"
    PREVIEW_WRITE_FAILED = "preview_write_failed"


WARNING_MESSAGES = {
    StageWarning.PAYLOAD_NOT_FOUND_IN_ARCHIVE: (
        "No payload found inside archive; archive stored as-is for manual handling"
    ),
    StageWarning.ARCHIVE_NOT_EXTRACTABLE: (
        "Archive format cannot be unpacked; archive stored as-is for manual handling"
    ),
    StageWarning.ARCHIVE_UNREADABLE: (
        "Failed to read archive; archive stored as-is for manual handling"
    ),
    StageWarning.PREVIEW_WRITE_FAILED: "Preview image could not be written",
}


@dataclass(frozen=True)
class PreviewImage:
    """Image chosen for a mod preview.

    Attributes:
        data: Raw image bytes
        name: Original file name; only its extension is used
    """

    data: bytes
    name: str | None = None


@dataclass(frozen=True)
class FinishedMetadata:
    """Metadata collected for a mod before staging.

    Only ``name`` is required; empty strings count as absent.
    """

    name: str
    author: str | None = None
    link: str | None = None
    description: str | None = None
    image: PreviewImage | None = None


class MetadataDocument(TypedDict):
    """Contents of a mod's metadata.json."""

    id: str  # "local-" followed by a UUID4
    kind: Literal["local"]
    name: str  # Trimmed display name
    author: str  # "Unknown" when not supplied
    link: str | None
    description: str | None
    category: str  # ModCategory value
    createdAt: str  # ISO-8601 UTC timestamp
    preview: str  # Preview file name inside the mod directory
    _schema: int


@dataclass(frozen=True)
class StagedMod:
    """Result of staging one mod.

    Attributes:
        id: Generated mod identifier
        root_dir: Absolute mod directory
        payload_path: Staged payload under ``files/``, or None when the
            archive had to be stored whole
        preview_path: Preview image inside ``root_dir``
        metadata: Document written to metadata.json
        warnings: Recoverable conditions hit while staging
    """

    id: str
    root_dir: Path
    payload_path: Path | None
    preview_path: Path
    metadata: MetadataDocument
    warnings: tuple[StageWarning, ...] = field(default_factory=tuple)

    @property
    def has_warnings(self) -> bool:
        return bool(self.warnings)

    def warning_messages(self) -> list[str]:
        return [WARNING_MESSAGES[w] for w in self.warnings]
