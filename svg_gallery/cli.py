"""Rich command-line interface powered by Typer."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel

from svg_gallery.collector import collect_files
from svg_gallery.config import GalleryConfig, GalleryError
from svg_gallery.matcher import compile_pattern
from svg_gallery.render import build_html, make_tiles
from svg_gallery.writer import write_gallery

logger = logging.getLogger("svg_gallery")

app = typer.Typer(
    name="svg-gallery",
    help="Build a static HTML gallery for a folder of SVG exports.",
    add_completion=False,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()
err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )
    logging.getLogger("svg_gallery").setLevel(level)


def build_gallery(cfg: GalleryConfig) -> tuple[Path, int]:
    """Run one collect -> render -> write pass.

    Returns:
        The written gallery path and the number of tiles in it.

    Raises:
        GalleryError: the source is missing or not a directory.
        OSError:      the walk or the write failed.
    """
    cfg.validate()
    source_dir = cfg.source_dir
    output_path = cfg.output_path

    matcher = compile_pattern(cfg.pattern)
    files = collect_files(source_dir, matcher, cfg.recursive)
    logger.info(
        "Matched %d file(s) for %r in %s%s",
        len(files), cfg.pattern, source_dir,
        " (recursive)" if cfg.recursive else "",
    )

    tiles = make_tiles(files, output_path)
    html_content = build_html(cfg.title, tiles, cfg.tile_size)
    write_gallery(output_path, html_content)
    return output_path, len(tiles)


# Defaults come from GalleryConfig - single source of truth
_DEFAULTS = GalleryConfig()


@app.command()
def build(
    source: Path = typer.Argument(..., help="Directory to scan for images"),
    output: Path | None = typer.Option(
        None, "--output", "-o",
        help="Gallery HTML file (default: <source>/gallery.html)",
    ),
    pattern: str = typer.Option(
        _DEFAULTS.pattern, "--pattern", help="Glob filter for file names",
    ),
    recursive: bool = typer.Option(
        _DEFAULTS.recursive, "--recursive", help="Search directories recursively",
    ),
    title: str = typer.Option(
        _DEFAULTS.title, "--title", help="Title for the generated page",
    ),
    tile_size: int = typer.Option(
        _DEFAULTS.tile_size, "--tile-size", help="Tile edge in pixels",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Write an HTML grid of every file in SOURCE matching the pattern."""
    _setup_logging(verbose)

    cfg = GalleryConfig(
        source=source,
        output=output,
        pattern=pattern,
        recursive=recursive,
        title=title,
        tile_size=tile_size,
    )

    try:
        output_path, count = build_gallery(cfg)
    except (GalleryError, OSError) as exc:
        err_console.print(f"Error: {exc}", style="red", markup=False, soft_wrap=True)
        raise typer.Exit(1) from exc

    logger.debug("%d tile(s) rendered", count)
    console.print(f"Gallery written to {output_path}", markup=False, soft_wrap=True)
    console.print(Panel.fit(
        f"[bold green]GALLERY BUILT[/bold green]\n"
        f"Source: {escape(str(cfg.source_dir))}\n"
        f"Pattern: {escape(cfg.pattern)}  |  Recursive: {cfg.recursive}\n"
        f"Tiles: {count}  |  Output: {escape(str(output_path))}",
        border_style="green",
    ))


def main() -> None:
    """Console-script entry point. Usage errors exit with status 1."""
    try:
        app()
    except SystemExit as exc:
        # Click reports usage errors with status 2
        if exc.code == 2:
            raise SystemExit(1) from exc
        raise


if __name__ == "__main__":
    main()
