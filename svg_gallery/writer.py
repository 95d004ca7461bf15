"""Gallery file output."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def write_gallery(output_path: str | Path, html_content: str) -> Path:
    """Write *html_content* to *output_path*, creating parent folders.

    The file is overwritten.  ``OSError`` propagates when the destination
    cannot be written (occupied by a directory, permission denied).
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(html_content, encoding="utf-8")
    logger.debug("Wrote %d characters to %s", len(html_content), output_path)
    return output_path
