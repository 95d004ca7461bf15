"""Directory walk with a pattern filter."""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


def collect_files(
    base_dir: str | Path,
    matcher: Callable[[str], bool],
    recursive: bool = False,
    prefix: str = "",
) -> list[Path]:
    """Collect files under *base_dir* whose relative path passes *matcher*.

    Args:
        base_dir:  Directory to list.
        matcher:   Predicate over root-relative paths with ``/`` separators.
        recursive: Descend into subdirectories.
        prefix:    Relative path of *base_dir* from the walk root
                   (empty at the root).

    Returns:
        Absolute paths in enumeration order. Listing errors propagate.
    """
    base_dir = Path(base_dir).absolute()
    logger.debug("Scanning %s", base_dir)

    results: list[Path] = []
    with os.scandir(base_dir) as entries:
        for entry in entries:
            rel_path = f"{prefix}/{entry.name}" if prefix else entry.name

            if entry.is_dir(follow_symlinks=False):
                if recursive:
                    results.extend(
                        collect_files(entry.path, matcher, True, rel_path),
                    )
                continue

            if entry.is_file(follow_symlinks=False) and matcher(rel_path):
                results.append(Path(entry.path))
    return results
