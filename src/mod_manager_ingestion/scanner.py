"""Flatten local paths into dropped entries.

A dropped file becomes one entry. A dropped directory is walked
recursively and every file in it becomes an entry whose relative path
starts with the directory's own name, the way a browser reports a
folder drop ("MyMod/sub/file.vpk").
"""

import logging
import os
from collections.abc import Iterable
from pathlib import Path

from .sources.base import DroppedEntry

logger = logging.getLogger(__name__)


def scan_directory(root_path: Path) -> list[DroppedEntry]:
    """Recursively collect the files of a dropped folder.

    Hidden files are skipped. The walk is sorted so the same folder
    always yields the same entry order.

    Args:
        root_path: Dropped directory

    Returns:
        Entries with relative paths rooted at ``root_path.name``
    """
    entries: list[DroppedEntry] = []
    root_path = root_path.resolve()

    for dirpath, dirnames, filenames in os.walk(root_path):
        dirnames[:] = sorted(d for d in dirnames if not d.startswith("."))
        for filename in sorted(filenames):
            # Skip hidden files and system files
            if filename.startswith("."):
                continue

            file_path = Path(dirpath) / filename
            if not file_path.is_file():
                logger.debug("Skipping non-regular file %s", file_path)
                continue

            relative = file_path.relative_to(root_path.parent)
            entries.append(DroppedEntry.from_path(file_path, relative_path=relative.as_posix()))

    return entries


def scan_drop(paths: Iterable[Path]) -> list[DroppedEntry]:
    """Turn dropped filesystem paths into a flat entry list.

    Args:
        paths: Files and/or directories, as dropped

    Returns:
        Flat list of entries in drop order

    Raises:
        FileNotFoundError: If a path does not exist
    """
    entries: list[DroppedEntry] = []
    for path in paths:
        if path.is_dir():
            entries.extend(scan_directory(path))
        elif path.is_file():
            entries.append(DroppedEntry.from_path(path.resolve()))
        else:
            raise FileNotFoundError(f"Path does not exist: {path}")
    return entries
