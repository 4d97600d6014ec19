"""Helpers for writing coloured symbols into a character grid."""

from __future__ import annotations

from .pixel import Color

RESET = "\x1b[0m"

Grid = list[list[str]]


def fg_rgb(color: Color, symbol: str) -> str:
    """Prefix ``symbol`` with a true-colour foreground escape sequence."""
    return f"\x1b[38;2;{color.r};{color.g};{color.b}m{symbol}"


def isset(grid: Grid, first: int, second: int) -> bool:
    """Tell whether row ``first``, column ``second`` is a drawable cell.

    Row 0 and column 0 are never drawable.
    """
    return 0 < first < len(grid) and 0 < second < len(grid[first])


def set_by_keys(x: int, y: int, value: str, color: Color, grid: Grid) -> Grid:
    """Write ``value`` in ``color`` at column ``x``, row ``y`` if the cell is drawable."""
    if isset(grid, y, x):
        grid[y][x] = fg_rgb(color, value)
    return grid


def draw_string(x: int, y: int, text: str, color: Color, grid: Grid) -> Grid:
    """Write ``text`` one character per cell, starting at column ``x`` of row ``y``."""
    for offset, symbol in enumerate(text):
        set_by_keys(x + offset, y, symbol, color, grid)
    return grid