"""Base abstractions for archive extractors.

An extractor looks inside one archive format for the packed-asset
payload and streams it to disk. Formats without an extractor are stored
whole by the stager.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO


@dataclass(frozen=True)
class ExtractedPayload:
    """Payload written out of an archive.

    Attributes:
        member_path: Full path of the member inside the archive
        path: Where the payload was written
    """

    member_path: str
    path: Path


class ArchiveExtractor(ABC):
    """Abstract base class for archive extractors."""

    @abstractmethod
    def extract_payload(
        self,
        stream: BinaryIO,
        target_for: Callable[[str], Path],
    ) -> ExtractedPayload | None:
        """Find the payload member of an archive and stream it to disk.

        Args:
            stream: Seekable binary stream positioned at the archive start
            target_for: Maps the member's base name to the output path

        Returns:
            The extracted payload, or None if the archive holds no payload

        Raises:
            ArchiveReadError: If the archive is corrupt, encrypted or
                otherwise unreadable; no partial output is left behind
            OSError: If writing the output file fails
        """
        pass
