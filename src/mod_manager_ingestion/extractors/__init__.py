"""Archive extractors for the ingestion pipeline.

Each extractor auto-registers with the ExtractorRegistry on import.
Only ZIP is extractable; .rar and .7z drops are stored whole.
"""

from ..registry import ExtractorRegistry
from .base import ArchiveExtractor, ExtractedPayload
from .zip import ZipExtractor

# Auto-register at module import
ExtractorRegistry.register_factory(".zip", ZipExtractor)

__all__ = ["ArchiveExtractor", "ExtractedPayload", "ZipExtractor"]
