"""Mod storage root and per-mod directory layout.

Every ingestion writes strictly under its own ``<mods_root>/<id>/``
directory, so concurrent ingestions never touch the same files.
"""

import uuid
from dataclasses import dataclass
from pathlib import Path

from .core.types import LOCAL_ID_PREFIX

FILES_DIR_NAME = "files"
METADATA_FILE_NAME = "metadata.json"


@dataclass(frozen=True)
class ModLayout:
    """Directory layout of one staged mod.

    Attributes:
        mod_id: Mod identifier (also the directory name)
        root_dir: ``<mods_root>/<mod_id>``
        files_dir: ``<root_dir>/files``, holding the payload
        metadata_path: ``<root_dir>/metadata.json``
    """

    mod_id: str
    root_dir: Path
    files_dir: Path
    metadata_path: Path


class ModStorage:
    """Root directory that staged mods are written under.

    Example:
        >>> storage = ModStorage(Path('/data/mods'))
        >>> layout = storage.layout_for(storage.new_mod_id())
        >>> storage.create(layout)
    """

    def __init__(self, mods_root: Path):
        self.mods_root = mods_root.resolve()

    def new_mod_id(self) -> str:
        """Generate a fresh identifier marked as locally sourced."""
        return f"{LOCAL_ID_PREFIX}{uuid.uuid4()}"

    def layout_for(self, mod_id: str) -> ModLayout:
        root_dir = self.mods_root / mod_id
        return ModLayout(
            mod_id=mod_id,
            root_dir=root_dir,
            files_dir=root_dir / FILES_DIR_NAME,
            metadata_path=root_dir / METADATA_FILE_NAME,
        )

    def create(self, layout: ModLayout) -> None:
        """Create the mod and files directories; existing ones are fine.

        Raises:
            OSError: If a directory cannot be created
        """
        layout.files_dir.mkdir(parents=True, exist_ok=True)
