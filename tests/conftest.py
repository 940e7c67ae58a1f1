"""Shared fixtures for ingestion tests."""

import io
import zipfile
from pathlib import Path

import pytest

from mod_manager_ingestion import DroppedEntry, IngestionPipeline, ModStorage, Stager


def make_zip(members: dict[str, bytes]) -> bytes:
    """Build an in-memory zip archive from member path -> content."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
        for member_path, content in members.items():
            archive.writestr(member_path, content)
    return buffer.getvalue()


def entry(name: str, data: bytes = b"", relative_path: str | None = None) -> DroppedEntry:
    return DroppedEntry.from_bytes(name, data, relative_path=relative_path)


@pytest.fixture
def mods_root(tmp_path: Path) -> Path:
    return tmp_path / "data" / "mods"


@pytest.fixture
def storage(mods_root: Path) -> ModStorage:
    return ModStorage(mods_root)


@pytest.fixture
def stager(storage: ModStorage) -> Stager:
    return Stager(storage)


@pytest.fixture
def pipeline(storage: ModStorage) -> IngestionPipeline:
    return IngestionPipeline(storage)
