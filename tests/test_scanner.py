"""Tests for flattening dropped paths into entries."""

from pathlib import Path

import pytest

from mod_manager_ingestion import FolderWithPackedAssets, SinglePackedAsset, classify, scan_drop


@pytest.fixture
def mod_folder(tmp_path: Path) -> Path:
    folder = tmp_path / "MyMod"
    (folder / "sub").mkdir(parents=True)
    (folder / "readme.txt").write_text("hello")
    (folder / "b.vpk").write_bytes(b"b")
    (folder / "sub" / "c.vpk").write_bytes(b"c")
    (folder / ".DS_Store").write_bytes(b"junk")
    return folder


class TestScanDrop:
    """Test scan_drop()."""

    def test_single_file(self, tmp_path: Path) -> None:
        """Test that a dropped file becomes one entry without relative path."""
        payload = tmp_path / "SkinPack.vpk"
        payload.write_bytes(b"payload")

        entries = scan_drop([payload])

        assert len(entries) == 1
        assert entries[0].name == "SkinPack.vpk"
        assert entries[0].relative_path is None
        assert entries[0].read_bytes() == b"payload"

    def test_folder_relative_paths(self, mod_folder: Path) -> None:
        """Test that folder entries are rooted at the folder name."""
        entries = scan_drop([mod_folder])

        assert [e.relative_path for e in entries] == [
            "MyMod/b.vpk",
            "MyMod/readme.txt",
            "MyMod/sub/c.vpk",
        ]

    def test_hidden_files_skipped(self, mod_folder: Path) -> None:
        """Test that hidden files are not included."""
        names = {e.name for e in scan_drop([mod_folder])}

        assert ".DS_Store" not in names

    def test_folder_classifies_with_folder_name(self, mod_folder: Path) -> None:
        """Test that a scanned folder classifies as a folder drop named after it."""
        source = classify(scan_drop([mod_folder]))

        assert isinstance(source, FolderWithPackedAssets)
        assert source.folder_name == "MyMod"
        assert [e.name for e in source.entries] == ["b.vpk", "c.vpk"]

    def test_folder_with_single_payload(self, tmp_path: Path) -> None:
        """Test that a folder holding only one payload is a single-entry drop."""
        folder = tmp_path / "Solo"
        folder.mkdir()
        (folder / "solo.vpk").write_bytes(b"s")

        assert isinstance(classify(scan_drop([folder])), SinglePackedAsset)

    def test_missing_path(self, tmp_path: Path) -> None:
        """Test that a missing path raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError, match="does not exist"):
            scan_drop([tmp_path / "missing.vpk"])
