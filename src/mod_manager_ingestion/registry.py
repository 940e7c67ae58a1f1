"""Extractor registry keyed by archive suffix.

This module provides a central registry for archive extractor
factories. Extractors register themselves when the extractors package
is imported; a suffix without a registered factory means the archive
is stored whole instead of unpacked.
"""

import importlib
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .extractors.base import ArchiveExtractor


class ExtractorRegistry:
    """Central registry for archive extractor factories.

    Example:
        >>> ExtractorRegistry.register_factory('.zip', ZipExtractor)
        >>> ExtractorRegistry.get_extractor('bundle.ZIP')
        <ZipExtractor ...>
    """

    _factories: dict[str, Callable[[], "ArchiveExtractor"]] = {}

    @classmethod
    def register_factory(cls, suffix: str, factory: Callable[[], "ArchiveExtractor"]) -> None:
        """Register a factory for archives ending in ``suffix``.

        Args:
            suffix: File suffix including the dot (e.g. '.zip')
            factory: Callable that creates an ArchiveExtractor
        """
        cls._factories[suffix.lower()] = factory

    @classmethod
    def unregister_factory(cls, suffix: str) -> None:
        cls._factories.pop(suffix.lower(), None)

    @classmethod
    def get_extractor(cls, filename: str) -> "ArchiveExtractor | None":
        """Create the extractor matching a file name, if any.

        Args:
            filename: Archive file name

        Returns:
            A new extractor, or None when the format is not extractable
        """
        lowered = filename.lower()
        for suffix, factory in cls._factories.items():
            if lowered.endswith(suffix):
                return factory()
        return None

    @classmethod
    def list_suffixes(cls) -> list[str]:
        """List all registered suffixes.

        Example:
            >>> ExtractorRegistry.list_suffixes()
            ['.zip']
        """
        return list(cls._factories.keys())

    @classmethod
    def discover_extractors(cls) -> None:
        """Import the extractors package, triggering auto-registration."""
        importlib.import_module(".extractors", package="mod_manager_ingestion")
