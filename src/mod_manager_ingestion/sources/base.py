"""Dropped entries and the source shapes they classify into.

A drop (file picker selection or drag-and-drop) arrives as a flat list
of ``DroppedEntry`` objects. The classifier turns that list into exactly
one ``ClassifiedSource`` variant, which the stager branches on.
"""

import io
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path
from typing import BinaryIO, ClassVar, Union

from ..core.matching import folder_name_from_relative_path, split_relative_path


@dataclass(frozen=True)
class DroppedEntry:
    """One file as presented by a drop or a folder selection.

    Content is read lazily: ``opener`` returns a fresh binary stream each
    time it is called, so a large payload is only read when staged.

    Attributes:
        name: Base file name (never empty)
        relative_path: Path inside the dropped folder, ending with ``name``;
            only present for folder drops
        opener: Callable returning a readable, seekable binary stream
    """

    name: str
    opener: Callable[[], BinaryIO] = field(repr=False, compare=False)
    relative_path: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Dropped entry name must not be empty")
        if self.relative_path is not None:
            parts = split_relative_path(self.relative_path)
            if not parts or parts[-1] != self.name:
                raise ValueError(
                    f"Relative path {self.relative_path!r} does not end with {self.name!r}"
                )

    @classmethod
    def from_path(cls, path: Path, relative_path: str | None = None) -> "DroppedEntry":
        """Create an entry backed by a file on disk."""
        return cls(name=path.name, opener=lambda: path.open("rb"), relative_path=relative_path)

    @classmethod
    def from_bytes(
        cls, name: str, data: bytes, relative_path: str | None = None
    ) -> "DroppedEntry":
        """Create an entry backed by in-memory bytes."""
        return cls(name=name, opener=lambda: io.BytesIO(data), relative_path=relative_path)

    def open(self) -> BinaryIO:
        return self.opener()

    def read_bytes(self) -> bytes:
        with self.open() as stream:
            return stream.read()

    @property
    def display_path(self) -> str:
        """Relative path when known, else the bare name."""
        return self.relative_path or self.name


@dataclass(frozen=True)
class SinglePackedAsset:
    """A drop of exactly one payload file."""

    entry: DroppedEntry
    kind: ClassVar[str] = "vpk"


@dataclass(frozen=True)
class SingleArchive:
    """A drop of exactly one archive file."""

    entry: DroppedEntry
    kind: ClassVar[str] = "archive"


@dataclass(frozen=True)
class FolderWithPackedAssets:
    """A multi-entry drop containing one or more payload files.

    Attributes:
        entries: Only the payload entries, in drop order
        folder_name: Top-level folder name, when the drop came from a folder
    """

    entries: tuple[DroppedEntry, ...]
    folder_name: str | None = None
    kind: ClassVar[str] = "folder-vpk"

    @classmethod
    def from_matches(cls, matches: list[DroppedEntry]) -> "FolderWithPackedAssets":
        return cls(
            entries=tuple(matches),
            folder_name=folder_name_from_relative_path(matches[0].relative_path),
        )


@dataclass(frozen=True)
class Unrecognized:
    """None of the recognized shapes matched."""

    kind: ClassVar[str] = "unrecognized"


ClassifiedSource = Union[SinglePackedAsset, SingleArchive, FolderWithPackedAssets, Unrecognized]
