"""Centralised configuration via a frozen dataclass."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


class GalleryError(Exception):
    """Raised when the gallery options are unusable."""


@dataclass(frozen=True)
class GalleryConfig:
    """All options for a single gallery run.

    Attributes:
        source:       Directory to scan (relative paths resolve against *project_root*).
        output:       Gallery HTML path (None = ``<source>/gallery.html``).
        pattern:      Glob filter applied to root-relative paths.
        recursive:    Descend into subdirectories.
        title:        Page ``<title>`` and heading text.
        tile_size:    Base tile edge in CSS pixels.
        output_name:  File name used when *output* is unset.
        project_root: Anchor for relative *source* / *output* paths.
    """

    source: Path | None = None
    output: Path | None = None

    # Filtering
    pattern: str = "*.svg"
    recursive: bool = False

    # Page
    title: str = "PATH SVG Gallery"
    tile_size: int = 160  # shrinks to 140 / 120 on narrow viewports
    output_name: str = "gallery.html"

    project_root: Path = field(default_factory=Path.cwd)

    MIN_TILE_SIZE: int = 16

    def resolve_path(self, value: str | Path) -> Path:
        path = Path(value)
        if not path.is_absolute():
            path = self.project_root / path
        return Path(os.path.abspath(path))

    @property
    def source_dir(self) -> Path:
        if self.source is None:
            raise GalleryError("Missing required <source> argument.")
        return self.resolve_path(self.source)

    @property
    def output_path(self) -> Path:
        if self.output is not None:
            return self.resolve_path(self.output)
        return self.source_dir / self.output_name

    def validate(self) -> None:
        """Check the source directory exists and the tile size is sane."""
        source_dir = self.source_dir
        if not source_dir.is_dir():
            raise GalleryError(f"{source_dir} is not a directory.")
        if self.tile_size < self.MIN_TILE_SIZE:
            raise GalleryError(
                f"Tile size must be at least {self.MIN_TILE_SIZE}px "
                f"(got {self.tile_size}).",
            )
