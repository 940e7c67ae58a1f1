"""Command-line interface for adding local mods.

This module provides the ``ingest-mod`` entry point: it treats its path
arguments as a drop, stages the mod and prints the metadata document.
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from .config import Settings
from .core.types import FinishedMetadata, ModCategory, PreviewImage
from .errors import StageError
from .pipeline import IngestionPipeline
from .scanner import scan_drop
from .sources import Unrecognized, describe_source, suggest_mod_name


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ingest-mod",
        description="Add a local mod (.vpk, folder with .vpk, or .zip/.rar/.7z) to the mod library",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Single payload
  ingest-mod SkinPack.vpk --name "Red Armor"

  # Folder drop, filed under HUD
  ingest-mod ./MyHud --category HUD --author "someone"

  # Archive with a preview image, into a custom data directory
  ingest-mod bundle.zip --image cover.png --data-dir /tmp/mods-data
        """,
    )

    parser.add_argument("paths", nargs="+", type=Path, help="Dropped files and/or folders")

    parser.add_argument(
        "--name", help="Display name of the mod (default: derived from the dropped files)"
    )

    parser.add_argument("--author", help="Mod author (default: Unknown)")

    parser.add_argument("--link", help="URL of the mod's page")

    parser.add_argument("--description", help="Free-form description")

    parser.add_argument("--image", type=Path, help="Preview image file")

    parser.add_argument(
        "--category",
        choices=[c.value for c in ModCategory],
        default=ModCategory.SKINS.value,
        help="Library category (default: %(default)s)",
    )

    parser.add_argument(
        "--data-dir",
        type=Path,
        help="Application data directory (default: $MOD_MANAGER_DATA_DIR or the OS local data dir)",
    )

    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the ingest-mod command."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        entries = scan_drop(args.paths)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    pipeline = IngestionPipeline.from_settings(Settings.from_env(args.data_dir))
    source = pipeline.classify(entries)
    if isinstance(source, Unrecognized):
        print("Error: Unsupported file(s).", file=sys.stderr)
        sys.exit(1)

    print(f"Source: {describe_source(source)}", file=sys.stderr)

    image = None
    if args.image:
        try:
            image = PreviewImage(data=args.image.read_bytes(), name=args.image.name)
        except OSError as e:
            print(f"Error: Cannot read image {args.image}: {e}", file=sys.stderr)
            sys.exit(1)

    metadata = FinishedMetadata(
        name=args.name or suggest_mod_name(source),
        author=args.author,
        link=args.link,
        description=args.description,
        image=image,
    )

    try:
        staged = pipeline.stage(source, metadata, args.category)
    except StageError as e:
        print(f"Error: Failed to add mod: {e}", file=sys.stderr)
        sys.exit(1)

    for message in staged.warning_messages():
        print(f"Warning: {message}", file=sys.stderr)

    print(f"Added: {staged.metadata['name']} -> {staged.root_dir}", file=sys.stderr)

    # Output JSON to stdout
    json.dump(staged.metadata, sys.stdout, indent=2)
    print()  # Add newline at end


if __name__ == "__main__":
    main()
