"""Filesystem safety helpers.

Dropped file names and archive member names end up as on-disk file
names inside a mod directory. They keep their original spelling; only
control characters and path separators are removed, and the result is
checked against path traversal before anything is written.
"""

import re
from pathlib import Path
from urllib.parse import urlparse

# Characters that can never be part of a single path component
UNSAFE_FILENAME_CHARS = r"[\x00-\x1f/\\]"


def sanitize_filename(filename: str) -> str:
    """Sanitize filename by removing control characters and path separators.

    Characters such as ``:`` or ``|`` are legal on POSIX filesystems and
    are kept as-is.

    Args:
        filename: Original filename

    Returns:
        Sanitized filename safe for storage
    """
    sanitized = re.sub(UNSAFE_FILENAME_CHARS, "", filename)
    # A name made only of dots would point at a directory
    if sanitized.strip(".") == "":
        raise ValueError(f"Unusable file name: {filename!r}")
    return sanitized


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


def safe_child(base_dir: Path, filename: str) -> Path:
    """Join a sanitized file name onto ``base_dir`` and check it stays inside."""
    target = base_dir / sanitize_filename(filename)
    validate_path_safety(target, base_dir)
    return target


def validate_url(url: str) -> None:
    """Validate URL format and scheme.

    Only allows http:// and https:// schemes.

    Args:
        url: URL to validate

    Raises:
        ValueError: If URL has invalid format or dangerous scheme
    """
    if not url:  # Empty string is allowed
        return

    parsed = urlparse(url)

    if parsed.scheme not in ("http", "https", ""):
        raise ValueError(f"Invalid URL scheme: {parsed.scheme}. Only http and https are allowed.")
