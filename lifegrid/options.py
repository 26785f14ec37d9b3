"""Command-line options and the help text."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from dataclasses import dataclass

from lifegrid.board import parse_int, parse_size
from lifegrid.render import (
    DEFAULT_CELL_OFFSET,
    DEFAULT_CELL_SIZE,
    DEFAULT_WINDOW_HEIGHT,
    DEFAULT_WINDOW_WIDTH,
)

DEFAULT_BLANK_CELL = 100
DEFAULT_TARGET_FPS = 10
DEFAULT_DISPLAY_GRID = True
PROGRAM = "lifegrid"

OPTIONS = (
    ("--help", "Display this help message"),
    ("--random", "Fill the grid randomly"),
    ("--heatmap", "Color cells based on neighbor count"),
    ("--no-grid", "Hide the grid overlay"),
    ("--window-width", "Set window width in pixels"),
    ("--window-height", "Set window height in pixels"),
    ("--cell-size", "Set size of each cell in pixels"),
    ("--blank-cell", "Set padding around the map"),
    ("--cell-offset", "Set inner padding inside each cell"),
    ("--target-fps", "Set target frames per second"),
    ("[size]", "Create a square grid of the given size"),
    ("<file>", "Load map from a text file"),
)

_INT_OPTIONS = {
    "--window-width": "window_width",
    "--window-height": "window_height",
    "--cell-size": "cell_size",
    "--blank-cell": "blank_cell",
    "--cell-offset": "cell_offset",
    "--target-fps": "target_fps",
}

_FLAG_OPTIONS = {
    "--no-grid": ("display_grid", False),
    "--random": ("random", True),
    "--heatmap": ("heatmap", True),
}


class UsageError(ValueError):
    """The command line could not be understood."""


@dataclass
class Config:
    """Settings taken from the command line."""

    window_width: int = DEFAULT_WINDOW_WIDTH
    window_height: int = DEFAULT_WINDOW_HEIGHT
    cell_size: int = DEFAULT_CELL_SIZE
    blank_cell: int = DEFAULT_BLANK_CELL
    cell_offset: int = DEFAULT_CELL_OFFSET
    target_fps: int = DEFAULT_TARGET_FPS
    display_grid: bool = DEFAULT_DISPLAY_GRID
    random: bool = False
    heatmap: bool = False
    size: int | None = None
    map_path: str | None = None
    show_help: bool = False


def help_text() -> str:
    """Return the usage and option summary."""
    lines = [
        "Conway's Game of Life - Available Options",
        "Usage:",
        f"  {PROGRAM} map_file.txt [OPTIONS...]",
        f"  {PROGRAM} size [OPTIONS...]",
        "",
        "Examples:",
        f"  {PROGRAM} 50 --random --heatmap",
        f"  {PROGRAM} pattern.txt --no-grid --cell-size 8",
        "",
        "Options:",
    ]
    lines.extend(f"  {name:<20} {description}" for name, description in OPTIONS)
    return "\n".join(lines) + "\n"


def parse_args(argv: Sequence[str] | None = None) -> Config:
    """Parse command-line arguments (without the program name).

    The first positional argument is a grid size if it is a number and a map
    file otherwise; later positionals are ignored. ``show_help`` is set when
    nothing is given, when --help appears, or when no grid source is named.
    """
    args = list(sys.argv[1:] if argv is None else argv)
    if not args or "--help" in args:
        return Config(show_help=True)

    config = Config()
    source: str | None = None
    remaining = iter(args)
    for arg in remaining:
        if not arg.startswith("-"):
            if source is None:
                source = arg
            continue
        name, has_inline, inline_value = arg.partition("=")
        if name in _INT_OPTIONS:
            if has_inline:
                value = inline_value
            else:
                value = next(remaining, None)
                if value is None:
                    raise UsageError(f"option {name} needs a value")
            try:
                setattr(config, _INT_OPTIONS[name], parse_int(value))
            except ValueError as exc:
                raise UsageError(f"option {name} needs an integer, got {value!r}") from exc
        elif name in _FLAG_OPTIONS and not has_inline:
            field, flag_value = _FLAG_OPTIONS[name]
            setattr(config, field, flag_value)
        else:
            raise UsageError(f"unknown option: {arg}")

    if source is None:
        config.show_help = True
        return config
    try:
        config.size = parse_size(source)
    except ValueError:
        config.map_path = source
    return config