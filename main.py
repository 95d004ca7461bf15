#!/usr/bin/env python3
"""
main.py — Quick-start entry point.

    python main.py exports/ --recursive

Or use the installed CLI:

    svg-gallery exports/ -o out/gallery.html --title "Exports"
"""

from svg_gallery.cli import main

if __name__ == "__main__":
    main()
