"""Tile and gallery-document HTML generation."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from svg_gallery.image_io import image_size

EMPTY_MESSAGE = "No files matched the provided pattern."

_HTML_ESCAPES = (
    ("&", "&amp;"),  # must come first
    ("<", "&lt;"),
    (">", "&gt;"),
    ('"', "&quot;"),
    ("'", "&#039;"),
)


@dataclass(frozen=True)
class Tile:
    """One gallery entry.

    Attributes:
        label:  File name without extension.
        src:    Path from the gallery's folder to the image, ``/``-separated.
        width:  Intrinsic width for raster images, else None.
        height: Intrinsic height for raster images, else None.
    """

    label: str
    src: str
    width: int | None = None
    height: int | None = None


def escape_html(value: str) -> str:
    for char, entity in _HTML_ESCAPES:
        value = value.replace(char, entity)
    return value


def make_tiles(files: Iterable[str | Path], output_path: str | Path) -> list[Tile]:
    """Sort *files* and turn each into a :class:`Tile` relative to *output_path*."""
    output_dir = os.path.dirname(os.path.abspath(output_path))
    tiles = []
    for file_path in sorted(str(f) for f in files):
        rel = os.path.relpath(file_path, output_dir).replace(os.sep, "/")
        size = image_size(file_path)
        width, height = size if size else (None, None)
        tiles.append(Tile(Path(file_path).stem, rel, width, height))
    return tiles


def build_tile(tile: Tile) -> str:
    safe_label = escape_html(tile.label)
    safe_src = escape_html(tile.src)
    dims = ""
    if tile.width and tile.height:
        dims = f' width="{tile.width}" height="{tile.height}"'
    return (
        '      <figure class="tile">\n'
        '        <div class="thumb">\n'
        f'          <img src="{safe_src}" loading="lazy" alt="{safe_label}"{dims}>\n'
        "        </div>\n"
        f"        <figcaption>{safe_label}</figcaption>\n"
        "      </figure>\n"
    )


_STYLE = """\
      :root {{
        --tile-size: {tile}px;
        color-scheme: dark;
        font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
        background: #050505;
        color: #ececec;
      }}
      body {{
        margin: 0;
      }}
      header {{
        padding: 18px 24px;
        border-bottom: 1px solid #1b1b1b;
      }}
      h1 {{
        margin: 0;
        font-size: 1.1rem;
        font-weight: 600;
      }}
      main {{
        padding: 16px;
        display: flex;
        justify-content: center;
      }}
      .grid {{
        display: grid;
        grid-template-columns: repeat(auto-fit, minmax(var(--tile-size), var(--tile-size)));
        gap: 12px;
        margin: 0 auto;
        justify-content: center;
        width: fit-content;
        max-width: 100%;
        padding: 12px;
      }}
      .tile {{
        position: relative;
        aspect-ratio: 1 / 1;
        margin: 0;
        transition: transform 0.2s ease;
        transform-origin: center;
      }}
      .thumb {{
        position: absolute;
        inset: 0;
        background: #000;
        display: flex;
        align-items: center;
        justify-content: center;
        overflow: hidden;
        border-radius: 8px;
      }}
      .thumb img {{
        width: 100%;
        height: 100%;
        object-fit: contain;
        display: block;
        transition: transform 0.25s ease;
      }}
      .tile:hover {{
        transform: scale(1.15);
        z-index: 2;
      }}
      .tile:hover .thumb img {{
        transform: scale(1.15);
      }}
      figcaption {{
        position: absolute;
        left: 0;
        right: 0;
        bottom: 0;
        text-align: center;
        font-size: 0.8rem;
        letter-spacing: 0.03em;
        color: #f0f0f0;
        padding: 6px 10px;
        background: linear-gradient(180deg, rgba(5,5,5,0) 0%, rgba(5,5,5,0.85) 100%);
        opacity: 0;
        transition: opacity 0.2s ease;
      }}
      .tile:hover figcaption {{
        opacity: 1;
      }}
      @media (max-width: 900px) {{
        :root {{ --tile-size: {tile_md}px; }}
      }}
      @media (max-width: 600px) {{
        :root {{ --tile-size: {tile_sm}px; }}
      }}
      .empty {{
        grid-column: 1 / -1;
        text-align: center;
        opacity: 0.75;
      }}
"""


def build_html(title: str, tiles: Iterable[Tile], tile_size: int = 160) -> str:
    """Render the full, self-contained gallery document.

    Args:
        title:     Page title and heading (escaped).
        tiles:     Tiles in display order.
        tile_size: Base tile edge in pixels; narrow viewports get
                   7/8 and 3/4 of it.

    Returns:
        The HTML document. With no tiles the grid holds a single
        placeholder paragraph instead.
    """
    markup = "".join(build_tile(t) for t in tiles)
    if not markup:
        markup = f'      <p class="empty">{escape_html(EMPTY_MESSAGE)}</p>\n'

    style = _STYLE.format(
        tile=tile_size,
        tile_md=tile_size * 7 // 8,
        tile_sm=tile_size * 3 // 4,
    )
    safe_title = escape_html(title)
    return (
        "<!doctype html>\n"
        '<html lang="en">\n'
        "  <head>\n"
        '    <meta charset="utf-8">\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1">\n'
        f"    <title>{safe_title}</title>\n"
        "    <style>\n"
        f"{style}"
        "    </style>\n"
        "  </head>\n"
        "  <body>\n"
        "    <header>\n"
        f"      <h1>{safe_title}</h1>\n"
        "    </header>\n"
        "    <main>\n"
        '      <div class="grid">\n'
        f"{markup}"
        "      </div>\n"
        "    </main>\n"
        "  </body>\n"
        "</html>\n"
    )
