"""Turning a click with the current brush into pixels on the canvas."""

from __future__ import annotations

from typing import Protocol

from .cursor import Brush, Cursor, circle_offsets
from .menu import MenuState, MenuType
from .pixel import Coord, Pixel
from .utils import fg_rgb


class Canvas(Protocol):
    """What drawing needs from the screen."""

    width: int

    def get_pixel(self, y: int, x: int) -> str: ...

    def add_pixels(self, *pixels: Pixel) -> None: ...


_LINE_SYMBOLS = {
    "": "─",
    "u": "│",
    "d": "│",
    "l": "─",
    "r": "─",
    "ud": "│",
    "lr": "─",
    "ul": "┘",
    "ur": "└",
    "dl": "┐",
    "dr": "┌",
    "udl": "┤",
    "udr": "├",
    "ulr": "┴",
    "dlr": "┬",
    "udlr": "┼",
}


def _pixel(cursor: Cursor, x: int, y: int) -> Pixel:
    return Pixel(Coord(x, y), cursor.color, cursor.symbol)


def line_symbol(up: bool, down: bool, left: bool, right: bool) -> str:
    """The box-drawing character joining the given neighbours."""
    key = "".join(
        letter for letter, present in zip("udlr", (up, down, left, right)) if present
    )
    return _LINE_SYMBOLS[key]


def continuous_line(canvas: Canvas, cursor: Cursor, x: int, y: int) -> Pixel:
    """Place a line piece that connects to every non-blank neighbour."""
    symbol = line_symbol(
        canvas.get_pixel(y - 1, x) != " ",
        canvas.get_pixel(y + 1, x) != " ",
        canvas.get_pixel(y, x - 1) != " ",
        canvas.get_pixel(y, x + 1) != " ",
    )
    pixel = Pixel(Coord(x, y), cursor.color, fg_rgb(cursor.color, symbol))
    canvas.add_pixels(pixel)
    return pixel


def fill(canvas: Canvas, cursor: Cursor, x: int, y: int) -> set[Coord]:
    """Flood the area of cells equal to the one at ``x``, ``y``.

    The flood spreads one step per round for at most ``canvas.width`` rounds.
    Returns every cell painted.
    """
    target = canvas.get_pixel(y, x)
    frontier = {Coord(x, y)}
    painted: set[Coord] = set()
    rounds = canvas.width
    while frontier and rounds > 0:
        found = {
            Coord(nx, ny)
            for p in frontier
            for nx, ny in ((p.x, p.y + 1), (p.x, p.y - 1), (p.x + 1, p.y), (p.x - 1, p.y))
            if canvas.get_pixel(ny, nx) == target
        }
        if not found:
            break
        canvas.add_pixels(*(_pixel(cursor, p.x, p.y) for p in found))
        painted |= found
        rounds -= 1
        frontier = found
    return painted


def _shape_pixels(cursor: Cursor, x: int, y: int) -> list[Pixel]:
    brush = cursor.brush
    if brush == Brush.DOT:
        return [_pixel(cursor, x, y)]
    if brush == Brush.G_LINE:
        return [_pixel(cursor, x + i, y) for i in range(cursor.width)]
    if brush == Brush.V_LINE:
        return [_pixel(cursor, x, y + i) for i in range(cursor.width)]
    if brush in (Brush.E_SQUARE, Brush.F_SQUARE):
        return [
            _pixel(cursor, x + dx, y + dy)
            for dy in range(cursor.height)
            for dx in range(cursor.width)
            if brush == Brush.F_SQUARE
            or not (0 < dx < cursor.width - 1 and 0 < dy < cursor.height - 1)
        ]
    if brush == Brush.E_CIRCLE:
        return [
            _pixel(cursor, x + sign * dx, y + dy)
            for dx, dy in circle_offsets(cursor.width)
            for sign in (1, -1)
        ]
    if brush == Brush.F_CIRCLE:
        return [
            _pixel(cursor, x + i, y + dy)
            for dx, dy in circle_offsets(cursor.width)
            for i in range(-dx, dx + 1)
        ]
    return []


_CONTINUOUS = {
    Brush.CONTINUOUS_LINE,
    Brush.SMOOTH_CONTINUOUS_LINE,
    Brush.FAT_CONTINUOUS_LINE,
    Brush.DOUBLE_CONTINUOUS_LINE,
}


def draw(canvas: Canvas, cursor: Cursor, menu: MenuState, x: int, y: int) -> None:
    """Apply the cursor's brush at column ``x``, row ``y``."""
    brush = cursor.brush
    if brush == Brush.FILL:
        menu.type = MenuType.NONE
        fill(canvas, cursor, x, y)
    elif brush in _CONTINUOUS:
        continuous_line(canvas, cursor, x, y)
    else:
        pixels = _shape_pixels(cursor, x, y)
        if pixels:
            canvas.add_pixels(*pixels)