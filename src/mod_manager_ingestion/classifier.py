"""Drop classification.

Decides which recognized shape a flat list of dropped entries has.
Pure and total: no I/O, never raises for any list of valid entries.
"""

from collections.abc import Sequence

from .core.matching import is_archive, is_packed_asset
from .sources.base import (
    ClassifiedSource,
    DroppedEntry,
    FolderWithPackedAssets,
    SingleArchive,
    SinglePackedAsset,
    Unrecognized,
)


def classify(entries: Sequence[DroppedEntry]) -> ClassifiedSource:
    """Classify a drop into one source shape.

    Rules are checked in order, first match wins:

    1. Empty drop -> ``Unrecognized``
    2. One entry with the payload extension -> ``SinglePackedAsset``
    3. One entry with an archive extension -> ``SingleArchive``
    4. Any payload entries among several -> ``FolderWithPackedAssets``
       holding only those entries; other files are ignored
    5. Otherwise -> ``Unrecognized``

    Args:
        entries: Flattened dropped files

    Returns:
        The matching ClassifiedSource variant
    """
    if not entries:
        return Unrecognized()

    if len(entries) == 1:
        entry = entries[0]
        if is_packed_asset(entry.name):
            return SinglePackedAsset(entry)
        if is_archive(entry.name):
            return SingleArchive(entry)

    matches = [entry for entry in entries if is_packed_asset(entry.name)]
    if matches:
        return FolderWithPackedAssets.from_matches(matches)

    return Unrecognized()
