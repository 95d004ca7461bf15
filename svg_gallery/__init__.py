"""
SVG Gallery
===========

Walk a folder for files matching a glob pattern and write one static,
self-contained HTML page that shows each match as a tile in a
responsive grid.  Handy when the OS thumbnailer does not render SVG
filters or blend modes.
"""

__version__ = "1.0.0"

from svg_gallery.collector import collect_files
from svg_gallery.config import GalleryConfig, GalleryError
from svg_gallery.image_io import image_size
from svg_gallery.matcher import compile_pattern, glob_to_regex
from svg_gallery.render import Tile, build_html, build_tile, escape_html, make_tiles
from svg_gallery.writer import write_gallery

__all__ = [
    "GalleryConfig",
    "GalleryError",
    "Tile",
    "build_html",
    "build_tile",
    "collect_files",
    "compile_pattern",
    "escape_html",
    "glob_to_regex",
    "image_size",
    "make_tiles",
    "write_gallery",
]
