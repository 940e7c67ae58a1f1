"""Ingestion pipeline: classify a drop, then stage it.

This module provides the main interface used by the application when
the user confirms an "add mod" dialog.
"""

import logging
from collections.abc import Sequence

from .classifier import classify
from .config import Settings
from .core.types import FinishedMetadata, ModCategory, StagedMod
from .sources.base import ClassifiedSource, DroppedEntry
from .stager import Stager
from .storage import ModStorage

logger = logging.getLogger(__name__)


class IngestionPipeline:
    """Main interface for adding local mods.

    Calls are independent: each ingestion writes under its own freshly
    generated mod directory, so one pipeline can serve concurrent calls.

    Example:
        >>> pipeline = IngestionPipeline.from_settings()
        >>> source = pipeline.classify(entries)
        >>> staged = pipeline.stage(source, FinishedMetadata(name="Red Armor"))
        >>> # or both steps at once
        >>> staged = pipeline.ingest(entries, FinishedMetadata(name="Red Armor"))
    """

    def __init__(self, storage: ModStorage):
        """Initialize the pipeline.

        Args:
            storage: Root directory mods are written under
        """
        self.storage = storage
        self.stager = Stager(storage)

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "IngestionPipeline":
        """Create a pipeline writing to the configured mods root."""
        settings = settings or Settings.from_env()
        return cls(ModStorage(settings.mods_root))

    def classify(self, entries: Sequence[DroppedEntry]) -> ClassifiedSource:
        source = classify(entries)
        logger.debug("Classified %d entries as %s", len(entries), source.kind)
        return source

    def stage(
        self,
        source: ClassifiedSource,
        metadata: FinishedMetadata,
        category: ModCategory | str = ModCategory.SKINS,
    ) -> StagedMod:
        return self.stager.stage(source, metadata, category)

    def ingest(
        self,
        entries: Sequence[DroppedEntry],
        metadata: FinishedMetadata,
        category: ModCategory | str = ModCategory.SKINS,
    ) -> StagedMod:
        """Classify and stage a drop in one call.

        Args:
            entries: Flattened dropped files
            metadata: Finished metadata record
            category: Library category

        Returns:
            StagedMod for the written mod directory

        Raises:
            NoSourceError: If the drop has no recognized shape
            MetadataValidationError: If the metadata is invalid
            StageIOError: If writing to disk fails
        """
        return self.stage(self.classify(entries), metadata, category)
