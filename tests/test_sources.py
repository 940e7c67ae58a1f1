"""Tests for dropped entries, the extractor registry and source summaries."""

import pytest

from mod_manager_ingestion import (
    DroppedEntry,
    ExtractorRegistry,
    FolderWithPackedAssets,
    SingleArchive,
    SinglePackedAsset,
    Unrecognized,
    describe_source,
    suggest_mod_name,
)
from mod_manager_ingestion.extractors import ZipExtractor

from conftest import entry


class TestDroppedEntry:
    """Test DroppedEntry invariants."""

    def test_empty_name_rejected(self) -> None:
        """Test that an empty name is rejected."""
        with pytest.raises(ValueError, match="must not be empty"):
            DroppedEntry.from_bytes("", b"")

    def test_relative_path_must_end_with_name(self) -> None:
        """Test that relative_path has to end with the entry name."""
        with pytest.raises(ValueError, match="does not end with"):
            DroppedEntry.from_bytes("b.vpk", b"", relative_path="a/c.vpk")

    def test_streams_are_fresh(self) -> None:
        """Test that each read gets the full content."""
        dropped = entry("a.vpk", b"content")

        assert dropped.read_bytes() == b"content"
        assert dropped.read_bytes() == b"content"


class TestSuggestModName:
    """Test default names offered in the metadata form."""

    def test_single_payload(self) -> None:
        assert suggest_mod_name(SinglePackedAsset(entry("SkinPack.VPK"))) == "SkinPack"

    def test_single_archive(self) -> None:
        assert suggest_mod_name(SingleArchive(entry("bundle.zip"))) == "bundle"

    def test_folder_name_preferred(self) -> None:
        source = FolderWithPackedAssets((entry("b.vpk", relative_path="a/b.vpk"),), "a")

        assert suggest_mod_name(source) == "a"

    def test_folder_without_name(self) -> None:
        source = FolderWithPackedAssets((entry("b.vpk"), entry("c.vpk")))

        assert suggest_mod_name(source) == "b"

    def test_unrecognized(self) -> None:
        assert suggest_mod_name(Unrecognized()) == ""


class TestDescribeSource:
    """Test one-line source summaries."""

    def test_descriptions(self) -> None:
        assert describe_source(SingleArchive(entry("x.zip"))) == "Archive -> x.zip"
        assert describe_source(SinglePackedAsset(entry("x.vpk"))) == "VPK -> x.vpk"
        folder = FolderWithPackedAssets(
            (entry("b.vpk", relative_path="a/b.vpk"), entry("c.vpk", relative_path="a/c.vpk")),
            "a",
        )
        assert describe_source(folder) == "Folder with 2 VPK file(s) -> a"


class TestExtractorRegistry:
    """Test archive extractor registration."""

    def test_zip_registered_on_import(self) -> None:
        """Test that importing the package registers the zip extractor."""
        assert ".zip" in ExtractorRegistry.list_suffixes()
        assert isinstance(ExtractorRegistry.get_extractor("Bundle.ZIP"), ZipExtractor)

    @pytest.mark.parametrize("name", ["bundle.rar", "bundle.7z", "bundle.tar"])
    def test_other_formats_have_no_extractor(self, name: str) -> None:
        """Test that only zip archives are extractable."""
        assert ExtractorRegistry.get_extractor(name) is None
