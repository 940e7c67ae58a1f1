"""ZIP archive extractor.

Scans members in archive order and streams out the first file whose
name has the packed-asset extension. Nested folders inside the archive
are discarded: only the member's base name is kept.
"""

import logging
import shutil
import zipfile
import zlib
from collections.abc import Callable
from pathlib import Path
from typing import BinaryIO

from ..core.matching import base_name, is_packed_asset
from ..errors import ArchiveReadError
from .base import ArchiveExtractor, ExtractedPayload

logger = logging.getLogger(__name__)

# NotImplementedError: unsupported compression method
# RuntimeError: encrypted member and no password
ZIP_READ_ERRORS = (
    zipfile.BadZipFile,
    zipfile.LargeZipFile,
    zlib.error,
    NotImplementedError,
    EOFError,
    RuntimeError,
)


def _first_payload(archive: zipfile.ZipFile) -> zipfile.ZipInfo | None:
    for info in archive.infolist():
        if info.is_dir() or not is_packed_asset(info.filename):
            continue
        if base_name(info.filename):
            return info
    return None


class ZipExtractor(ArchiveExtractor):
    """Extractor for .zip archives (stdlib zipfile)."""

    def extract_payload(
        self,
        stream: BinaryIO,
        target_for: Callable[[str], Path],
    ) -> ExtractedPayload | None:
        try:
            with zipfile.ZipFile(stream) as archive:
                info = _first_payload(archive)
                if info is None:
                    return None

                logger.debug("Found payload %s in archive", info.filename)
                target = target_for(base_name(info.filename))
                try:
                    with archive.open(info) as src, target.open("wb") as dst:
                        shutil.copyfileobj(src, dst)
                except Exception:
                    target.unlink(missing_ok=True)
                    raise
                return ExtractedPayload(member_path=info.filename, path=target)
        except ZIP_READ_ERRORS as e:
            raise ArchiveReadError(f"Cannot read zip archive: {e}") from e
