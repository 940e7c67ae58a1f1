"""Tests for the ingest-mod command."""

import json
from pathlib import Path

import pytest

from mod_manager_ingestion.cli import main

from conftest import make_zip


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    return tmp_path / "appdata"


def run_cli(capsys: pytest.CaptureFixture[str], *argv: str) -> tuple[dict, str]:
    main(list(argv))
    captured = capsys.readouterr()
    return json.loads(captured.out), captured.err


class TestCli:
    """Test main()."""

    def test_single_payload(self, tmp_path: Path, data_dir: Path, capsys) -> None:
        """Test adding a .vpk prints its metadata document."""
        payload = tmp_path / "SkinPack.vpk"
        payload.write_bytes(b"vpk")

        metadata, err = run_cli(
            capsys, str(payload), "--name", "Red Armor", "--data-dir", str(data_dir)
        )

        mod_dir = data_dir.resolve() / "mods" / metadata["id"]
        assert metadata["name"] == "Red Armor"
        assert metadata["author"] == "Unknown"
        assert (mod_dir / "files" / "SkinPack.vpk").read_bytes() == b"vpk"
        assert "Source: VPK -> SkinPack.vpk" in err

    def test_name_defaults_to_folder(self, tmp_path: Path, data_dir: Path, capsys) -> None:
        """Test that the folder name is used when --name is omitted."""
        folder = tmp_path / "Cool HUD"
        folder.mkdir()
        (folder / "hud.vpk").write_bytes(b"h")
        (folder / "readme.txt").write_text("x")

        metadata, _ = run_cli(
            capsys, str(folder), "--category", "HUD", "--data-dir", str(data_dir)
        )

        assert metadata["name"] == "Cool HUD"
        assert metadata["category"] == "HUD"

    def test_image_option(self, tmp_path: Path, data_dir: Path, capsys) -> None:
        """Test that --image is written as the preview."""
        payload = tmp_path / "a.vpk"
        payload.write_bytes(b"a")
        image = tmp_path / "cover.gif"
        image.write_bytes(b"GIF89a")

        metadata, _ = run_cli(
            capsys, str(payload), "--image", str(image), "--data-dir", str(data_dir)
        )

        mod_dir = data_dir.resolve() / "mods" / metadata["id"]
        assert metadata["preview"] == "preview.gif"
        assert (mod_dir / "preview.gif").read_bytes() == b"GIF89a"

    def test_archive_warning(self, tmp_path: Path, data_dir: Path, capsys) -> None:
        """Test that the archive fallback is reported on stderr but succeeds."""
        archive = tmp_path / "bundle.zip"
        archive.write_bytes(make_zip({"readme.txt": b"x"}))

        metadata, err = run_cli(capsys, str(archive), "--data-dir", str(data_dir))

        assert metadata["name"] == "bundle"
        assert "Warning: No payload found inside archive" in err

    def test_unsupported_files(self, tmp_path: Path, data_dir: Path, capsys) -> None:
        """Test that an unsupported drop exits with status 1."""
        notes = tmp_path / "notes.txt"
        notes.write_text("x")

        with pytest.raises(SystemExit) as exc_info:
            main([str(notes), "--data-dir", str(data_dir)])

        assert exc_info.value.code == 1
        assert "Unsupported file(s)" in capsys.readouterr().err
        assert not data_dir.exists()

    def test_missing_path(self, tmp_path: Path, data_dir: Path, capsys) -> None:
        """Test that a missing path exits with status 1."""
        with pytest.raises(SystemExit) as exc_info:
            main([str(tmp_path / "missing.vpk"), "--data-dir", str(data_dir)])

        assert exc_info.value.code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_invalid_link(self, tmp_path: Path, data_dir: Path, capsys) -> None:
        """Test that metadata errors exit with status 1."""
        payload = tmp_path / "a.vpk"
        payload.write_bytes(b"a")

        with pytest.raises(SystemExit) as exc_info:
            main([str(payload), "--link", "ftp://example.com", "--data-dir", str(data_dir)])

        assert exc_info.value.code == 1
        assert "Invalid URL scheme" in capsys.readouterr().err
