"""Staging of classified sources into the on-disk mod layout.

Produces, for each ingestion:

    mods/<id>/
      files/<payload>          the packed-asset payload
      preview.<ext>            supplied image or placeholder SVG
      metadata.json            metadata document
      [<archive name>]         only when an archive could not be unpacked

Partial state is not rolled back on a fatal error; the caller owns the
mod directory from the moment it is created.
"""

import json
import logging
import shutil
from datetime import datetime, timezone
from pathlib import Path

from jsonschema import ValidationError

from .core.matching import is_packed_asset
from .core.paths import safe_child, validate_url
from .core.types import (
    DEFAULT_AUTHOR,
    METADATA_SCHEMA_VERSION,
    FinishedMetadata,
    MetadataDocument,
    ModCategory,
    StagedMod,
    StageWarning,
    WARNING_MESSAGES,
)
from .core.validator import format_validation_error, validate_metadata
from .errors import ArchiveReadError, MetadataValidationError, NoSourceError, StageError, StageIOError
from .preview import preview_file_name, write_preview
from .registry import ExtractorRegistry
from .sources.base import (
    ClassifiedSource,
    DroppedEntry,
    FolderWithPackedAssets,
    SingleArchive,
    SinglePackedAsset,
    Unrecognized,
)
from .storage import ModLayout, ModStorage

logger = logging.getLogger(__name__)


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a 'Z' suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _optional(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


def build_metadata_document(
    mod_id: str,
    meta: FinishedMetadata,
    category: ModCategory | str,
    created_at: str | None = None,
) -> MetadataDocument:
    """Build and validate the metadata document for a mod.

    Args:
        mod_id: Generated mod identifier
        meta: Metadata collected from the user
        category: Library category
        created_at: Timestamp override; defaults to now

    Returns:
        Metadata document conforming to the JSON schema

    Raises:
        MetadataValidationError: If any field is invalid
    """
    try:
        category_value = ModCategory(category).value
    except ValueError as e:
        raise MetadataValidationError(f"Unknown category: {category!r}") from e

    link = _optional(meta.link)
    if link:
        try:
            validate_url(link)
        except ValueError as e:
            raise MetadataValidationError(str(e)) from e

    document: MetadataDocument = {
        "id": mod_id,
        "kind": "local",
        "name": meta.name.strip(),
        "author": _optional(meta.author) or DEFAULT_AUTHOR,
        "link": link,
        "description": _optional(meta.description),
        "category": category_value,
        "createdAt": created_at or utc_timestamp(),
        "preview": preview_file_name(meta.image),
        "_schema": METADATA_SCHEMA_VERSION,
    }

    try:
        validate_metadata(document)
    except ValidationError as e:
        raise MetadataValidationError(format_validation_error(e)) from e

    return document


class Stager:
    """Writes classified sources into a mod storage root.

    Example:
        >>> stager = Stager(ModStorage(Path('/data/mods')))
        >>> staged = stager.stage(source, FinishedMetadata(name='Red Armor'), ModCategory.SKINS)
        >>> staged.payload_path
        PosixPath('/data/mods/local-.../files/SkinPack.vpk')
    """

    def __init__(self, storage: ModStorage):
        self.storage = storage

    def stage(
        self,
        source: ClassifiedSource,
        meta: FinishedMetadata,
        category: ModCategory | str = ModCategory.SKINS,
    ) -> StagedMod:
        """Stage a classified source with its metadata.

        Args:
            source: Result of classify()
            meta: Finished metadata record
            category: Library category

        Returns:
            StagedMod describing the written mod directory

        Raises:
            NoSourceError: If the source is Unrecognized (nothing is written)
            MetadataValidationError: If the metadata is invalid (nothing is written)
            StageIOError: If creating directories or writing files fails
        """
        if isinstance(source, Unrecognized) or (
            isinstance(source, FolderWithPackedAssets) and not source.entries
        ):
            raise NoSourceError()

        mod_id = self.storage.new_mod_id()
        document = build_metadata_document(mod_id, meta, category)
        layout = self.storage.layout_for(mod_id)
        warnings: list[StageWarning] = []

        logger.info("Staging %s source into %s", source.kind, layout.root_dir)

        try:
            self.storage.create(layout)
        except OSError as e:
            raise StageIOError("Failed to create mod directory", e, layout.root_dir) from e

        preview_path, preview_ok = write_preview(layout.root_dir, meta.image)
        if not preview_ok:
            warnings.append(StageWarning.PREVIEW_WRITE_FAILED)

        try:
            payload_path = self._stage_payload(source, layout, warnings)

            if isinstance(source, SingleArchive) and not self._has_payload(layout.files_dir):
                self._store_archive(source.entry, layout)

            layout.metadata_path.write_text(json.dumps(document, indent=2), encoding="utf-8")
        except OSError as e:
            raise StageIOError("Failed to write mod files", e, layout.root_dir) from e

        for warning in warnings:
            logger.warning("%s: %s", mod_id, WARNING_MESSAGES[warning])

        return StagedMod(
            id=mod_id,
            root_dir=layout.root_dir,
            payload_path=payload_path,
            preview_path=preview_path,
            metadata=document,
            warnings=tuple(warnings),
        )

    def _stage_payload(
        self,
        source: ClassifiedSource,
        layout: ModLayout,
        warnings: list[StageWarning],
    ) -> Path | None:
        """Copy or extract the payload; returns its path, or None if the archive was stored whole."""
        if isinstance(source, SinglePackedAsset):
            return self._copy_entry(source.entry, layout.files_dir)

        if isinstance(source, FolderWithPackedAssets):
            first = sorted(source.entries, key=lambda entry: entry.name)[0]
            if len(source.entries) > 1:
                logger.info(
                    "Folder holds %d payloads; staging only %s",
                    len(source.entries),
                    first.name,
                )
            return self._copy_entry(first, layout.files_dir)

        if isinstance(source, SingleArchive):
            return self._extract_archive(source.entry, layout, warnings)

        raise TypeError(f"Unknown source type: {type(source).__name__}")

    def _extract_archive(
        self,
        entry: DroppedEntry,
        layout: ModLayout,
        warnings: list[StageWarning],
    ) -> Path | None:
        extractor = ExtractorRegistry.get_extractor(entry.name)
        if extractor is None:
            warnings.append(StageWarning.ARCHIVE_NOT_EXTRACTABLE)
            self._store_archive(entry, layout)
            return None

        try:
            with entry.open() as stream:
                payload = extractor.extract_payload(
                    stream, lambda name: self._target(layout.files_dir, name)
                )
        except ArchiveReadError as e:
            logger.error("Failed to process archive %s: %s", entry.name, e)
            warnings.append(StageWarning.ARCHIVE_UNREADABLE)
            self._store_archive(entry, layout)
            return None

        if payload is None:
            warnings.append(StageWarning.PAYLOAD_NOT_FOUND_IN_ARCHIVE)
            self._store_archive(entry, layout)
            return None

        logger.debug("Extracted %s -> %s", payload.member_path, payload.path)
        return payload.path

    def _copy_entry(self, entry: DroppedEntry, directory: Path) -> Path:
        target = self._target(directory, entry.name)
        with entry.open() as src, target.open("wb") as dst:
            shutil.copyfileobj(src, dst)
        logger.debug("Copied %s -> %s", entry.display_path, target)
        return target

    def _store_archive(self, entry: DroppedEntry, layout: ModLayout) -> Path:
        """Store an archive unmodified at the mod root; skipped if already there."""
        target = self._target(layout.root_dir, entry.name)
        if target.exists():
            return target
        return self._copy_entry(entry, layout.root_dir)

    @staticmethod
    def _has_payload(files_dir: Path) -> bool:
        return any(child.is_file() and is_packed_asset(child.name) for child in files_dir.iterdir())

    @staticmethod
    def _target(directory: Path, filename: str) -> Path:
        try:
            return safe_child(directory, filename)
        except ValueError as e:
            raise StageError(f"Refusing to write {filename!r}: {e}") from e
