"""Hand-off record for the mod library.

The library (registry of installed mods) stores remote catalog mods and
local mods in one shape. This module maps a StagedMod onto that shape.
"""

from typing import Any

from .core.types import PreviewImage, StagedMod
from .preview import preview_data_uri

# Placeholder URL for mods that have no remote page
LOCAL_MOD_URL = "local://manual"

# Library status of a mod whose files are already on disk
STATUS_DOWNLOADED = "downloaded"


def build_library_record(staged: StagedMod, image: PreviewImage | None = None) -> dict[str, Any]:
    """Build the library entry for a freshly staged mod.

    Args:
        staged: Result of Stager.stage()
        image: Preview image supplied with the metadata, if any;
            embedded as a data URI so the library can show it without
            touching the mod directory

    Returns:
        Dictionary with the library's mod fields plus ``path`` and ``status``
    """
    metadata = staged.metadata
    return {
        "remoteId": staged.id,
        "name": metadata["name"],
        "description": metadata["description"] or "",
        "remoteUrl": metadata["link"] or LOCAL_MOD_URL,
        "author": metadata["author"],
        "downloadable": False,
        "remoteAddedAt": metadata["createdAt"],
        "remoteUpdatedAt": metadata["createdAt"],
        "tags": [],
        "images": [preview_data_uri(image)],
        "hero": None,
        "downloadCount": 0,
        "likes": 0,
        "category": metadata["category"],
        "path": str(staged.root_dir),
        "status": STATUS_DOWNLOADED,
    }
