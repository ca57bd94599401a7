# Copyright (C) 2025 Torsten Knodt and contributors
# GNU General Public License
# SPDX-License-Identifier: GPL-3.0-or-later
"""CLI interface for the CCFOLIA log to blog HTML converter."""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .aggregator import ChannelStore
from .colormap import load_color_map, parse_color_map
from .loader import BatchResult, load_batch
from .renderer import render_html

LOGGER = logging.getLogger(__name__)

app = typer.Typer(
    name="ccfolia-log-to-blog-html",
    help="Convert CCFOLIA chat-log HTML exports into inline-styled HTML for blog editors.",
    no_args_is_help=True,
)

console = Console()
# diagnostics stay off stdout, which may carry the rendered HTML
err_console = Console(stderr=True)

_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
}


def _parse_log_level(log_level_str: str) -> int:
    """Parse a log level name (``DEBUG``) or non-negative integer (``10``)."""
    try:
        level_int = int(log_level_str)
    except ValueError:
        level_int = None
    if level_int is not None:
        if level_int < 0:
            raise ValueError("Log level must be non-negative")
        return level_int

    level = _LEVELS.get(log_level_str.upper())
    if level is None:
        raise ValueError(
            f"Invalid log level '{log_level_str}'. "
            f"Use log level names (CRITICAL, ERROR, WARNING, INFO, DEBUG) "
            f"or non-negative integers."
        )
    return level


def _setup_logging(verbose: int, quiet: int, log_level: Optional[str]) -> int:
    """Configure the root logger; each -v/-q moves the level by 10."""
    base_level = _parse_log_level(log_level) if log_level is not None else logging.WARNING
    level = max(0, base_level - (verbose - quiet) * 10)

    logging.basicConfig(level=level, format="%(levelname)s: %(message)s", force=True)
    LOGGER.info("Log level set to %d (%s)", level, logging.getLevelName(level))
    return level


def _load(files: List[Path], jobs: int) -> tuple[ChannelStore, BatchResult]:
    store = ChannelStore()
    result = load_batch(store, files, jobs)
    for path, reason in result.failures.items():
        err_console.print(f"[red]Error reading {escape(path.name)}: {escape(reason)}[/red]")
    if not result.loaded:
        err_console.print("[red]No log files could be loaded[/red]")
        raise typer.Exit(1)
    return store, result


@app.callback()
def main(
    verbose: int = typer.Option(0, "-v", "--verbose", count=True, help="Increase verbosity (-v: INFO, -vv: DEBUG)."),
    quiet: int = typer.Option(0, "-q", "--quiet", count=True, help="Decrease verbosity (-q: ERROR, -qq: CRITICAL)."),
    log_level: Optional[str] = typer.Option(
        None, "-l", "--log-level", help="Log level name (CRITICAL ... DEBUG) or non-negative integer."
    ),
) -> None:
    """Convert CCFOLIA chat-log exports into HTML for pasting into a blog."""
    try:
        _setup_logging(verbose, quiet, log_level)
    except ValueError as exc:
        err_console.print(f"[red]Error: {escape(str(exc))}[/red]")
        raise typer.Exit(1)


@app.command()
def tabs(
    files: List[Path] = typer.Argument(..., help="CCFOLIA log exports (.htm/.html). Shell globs allowed."),
    jobs: int = typer.Option(0, "-j", "--jobs", help="Parallel file reads (default: auto)."),
) -> None:
    """List the channels (tabs) found in the given logs."""
    store, _ = _load(files, jobs)

    table = Table("Tab", "Included", "Messages")
    for name, included, count in store.summary():
        table.add_row(escape(name), "yes" if included else "no", f"{count:,}")
    console.print(table)


@app.command()
def render(
    files: List[Path] = typer.Argument(..., help="CCFOLIA log exports (.htm/.html). Shell globs allowed."),
    only: List[str] = typer.Option([], "--only", help="Render only these tabs (repeatable)."),
    exclude: List[str] = typer.Option([], "--exclude", help="Leave these tabs out (repeatable)."),
    colors: Optional[Path] = typer.Option(None, "--colors", help="JSON file mapping speaker names to colors."),
    color_map: Optional[str] = typer.Option(None, "--color-map", help='Inline JSON, e.g. \'{"Alice": "#ff9"}\'.'),
    output: Optional[Path] = typer.Option(None, "-o", "--output", help="Write HTML here instead of stdout."),
    jobs: int = typer.Option(0, "-j", "--jobs", help="Parallel file reads (default: auto)."),
) -> None:
    """Render the selected tabs as one inline-styled HTML snippet."""
    store, _ = _load(files, jobs)

    try:
        if only:
            store.include_only(only)
        if exclude:
            store.exclude(exclude)
    except KeyError as exc:
        raise typer.BadParameter(exc.args[0]) from exc

    palette = load_color_map(colors) if colors is not None else {}
    palette.update(parse_color_map(color_map))

    selected = store.flatten()
    LOGGER.info("Rendering %d message(s) from %d tab(s)", len(selected), sum(c.included for c in store))
    html = render_html(selected, palette)

    if output is None:
        typer.echo(html)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(html, encoding="utf-8")
    console.print(f"[green]✓[/green] {len(selected)} message(s) → {escape(str(output))}")


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"ccfolia-log-to-blog-html {__version__}")


if __name__ == "__main__":
    app()
