"""Raster dimension lookup for ``<img>`` width/height hints."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

logger = logging.getLogger(__name__)

RASTER_EXTENSIONS: frozenset[str] = frozenset(
    {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".tiff", ".tif", ".webp"}
)


def image_size(path: str | Path) -> tuple[int, int] | None:
    """Return ``(width, height)`` for a raster image, else None.

    Vector files (SVG) and unknown extensions are not opened.  Files
    Pillow cannot read are logged and reported as having no size.
    """
    path = Path(path)
    if path.suffix.lower() not in RASTER_EXTENSIONS:
        return None
    try:
        with Image.open(path) as img:
            return img.width, img.height
    except (UnidentifiedImageError, OSError) as exc:
        logger.warning("Could not read image size of %s: %s", path, exc)
        return None
