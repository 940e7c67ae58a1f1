"""Exceptions raised while staging a mod.

Classification never fails; staging failures are all ``StageError``
subclasses so callers can catch one type, report it and let the user
retry.
"""

from pathlib import Path


class StageError(Exception):
    """Base class for fatal staging failures."""


class NoSourceError(StageError):
    """The dropped entries did not match any recognized source shape.

    Raised before anything is written to disk.
    """

    def __init__(self, message: str = "No supported files in drop") -> None:
        super().__init__(message)


class StageIOError(StageError):
    """Creating a directory or writing the payload failed.

    Partially written state is left on disk at ``root_dir`` for the
    caller to inspect or remove.
    """

    def __init__(self, message: str, cause: OSError, root_dir: Path | None = None) -> None:
        super().__init__(f"{message}: {cause}")
        self.cause = cause
        self.root_dir = root_dir


class MetadataValidationError(StageError):
    """The metadata document does not conform to the schema."""


class ArchiveReadError(Exception):
    """An archive could not be opened or decompressed."""
