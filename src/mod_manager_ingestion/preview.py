"""Preview image handling for staged mods.

A supplied image is written as ``preview.<ext>``; without one, a fixed
SVG placeholder is written as ``preview.svg``.
"""

import base64
import logging
import re
from pathlib import Path
from urllib.parse import quote

from .core.types import PreviewImage

logger = logging.getLogger(__name__)

PLACEHOLDER_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" width="640" height="360">'
    '<defs><linearGradient id="g" x1="0" x2="1" y1="0" y2="1">'
    '<stop stop-color="#1f2937" offset="0"/><stop stop-color="#111827" offset="1"/>'
    "</linearGradient></defs>"
    '<rect width="100%" height="100%" fill="url(#g)"/>'
    '<g font-family="Inter, Arial, sans-serif" fill="#E5E7EB" text-anchor="middle">'
    '<text x="50%" y="48%" font-size="36" font-weight="700">MOD</text>'
    '<text x="50%" y="62%" font-size="14" fill="#9CA3AF">No image provided</text>'
    "</g></svg>"
)

PLACEHOLDER_NAME = "preview.svg"

# Image extensions kept as-is; anything else is written as .png
IMAGE_EXTENSION_PATTERN = re.compile(r"\.(png|jpe?g|webp|gif|svg)$", re.IGNORECASE)

MIME_TYPES = {
    ".png": "image/png",
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".webp": "image/webp",
    ".gif": "image/gif",
    ".svg": "image/svg+xml",
}


def preview_file_name(image: PreviewImage | None) -> str:
    """Pick the preview file name for an image.

    Example:
        "Cover.JPEG" -> "preview.jpeg", "cover.bmp" -> "preview.png",
        no image -> "preview.svg"
    """
    if image is None:
        return PLACEHOLDER_NAME
    match = IMAGE_EXTENSION_PATTERN.search(image.name or "")
    return f"preview{match.group(0).lower() if match else '.png'}"


def write_preview(root_dir: Path, image: PreviewImage | None) -> tuple[Path, bool]:
    """Write the preview image into a mod directory.

    Errors are logged and reported through the return value; a missing
    preview never aborts staging.

    Args:
        root_dir: Mod directory
        image: Supplied image, or None for the placeholder

    Returns:
        Tuple of (preview path, written successfully)
    """
    preview_path = root_dir / preview_file_name(image)
    try:
        if image is None:
            preview_path.write_text(PLACEHOLDER_SVG, encoding="utf-8")
        else:
            preview_path.write_bytes(image.data)
    except OSError as e:
        logger.warning("Failed to write preview %s: %s", preview_path, e)
        return preview_path, False
    return preview_path, True


def preview_data_uri(image: PreviewImage | None) -> str:
    """Encode a preview image (or the placeholder) as a data URI."""
    if image is None:
        return "data:image/svg+xml;utf8," + quote(PLACEHOLDER_SVG, safe="")
    suffix = preview_file_name(image)[len("preview"):]
    encoded = base64.b64encode(image.data).decode("ascii")
    return f"data:{MIME_TYPES[suffix]};base64,{encoded}"
