"""The brush under the mouse pointer and its preview on the canvas."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import IntEnum

from .config import Config
from .pixel import RATIO, Color, Coord
from .utils import Grid, isset, set_by_keys


class Brush(IntEnum):
    """Kinds of brush, in the order the menus rely on."""

    EMPTY = 0
    POINTER = 1
    DOT = 2
    G_LINE = 3
    V_LINE = 4
    E_SQUARE = 5
    F_SQUARE = 6
    E_CIRCLE = 7
    F_CIRCLE = 8
    CONTINUOUS_LINE = 9
    SMOOTH_CONTINUOUS_LINE = 10
    FAT_CONTINUOUS_LINE = 11
    DOUBLE_CONTINUOUS_LINE = 12
    FILL = 13


_SINGLE_CELL = {
    Brush.DOT,
    Brush.CONTINUOUS_LINE,
    Brush.SMOOTH_CONTINUOUS_LINE,
    Brush.FAT_CONTINUOUS_LINE,
    Brush.DOUBLE_CONTINUOUS_LINE,
}


@dataclass
class Store:
    """The symbol and brush to restore when leaving a menu."""

    symbol: str = ""
    brush: Brush = Brush.DOT


def _round_half_away(value: float) -> int:
    return math.floor(value + 0.5) if value >= 0 else -math.floor(-value + 0.5)


def circle_offsets(width: int) -> list[tuple[int, int]]:
    """Half-widths and row offsets of a circle of diameter ``width``.

    Each pair ``(dx, dy)`` marks the cells ``x - dx`` and ``x + dx`` on row ``y + dy``.
    """
    radius = width // 2
    steps = 5
    offsets = []
    for y in range(-radius * steps, radius * steps + 1):
        dx = int(math.sqrt(radius**2 - (y / steps) ** 2) / RATIO)
        offsets.append((dx, _round_half_away(y / steps)))
    return offsets


def _mapping_color(channels: dict[str, int]) -> Color:
    return Color(channels.get("r", 0), channels.get("g", 0), channels.get("b", 0))


@dataclass
class Cursor:
    """Position, brush, size, symbol and colour of the drawing cursor."""

    x: int = 0
    y: int = 0
    brush: Brush = Brush.DOT
    width: int = 4
    height: int = 4
    symbol: str = ""
    color: Color = field(default_factory=Color)
    store: Store = field(default_factory=Store)

    @classmethod
    def from_config(cls, config: Config) -> Cursor:
        """A dot cursor with the configured symbol and colour."""
        return cls(
            symbol=config.default_cursor,
            color=config.color(),
            brush=Brush.DOT,
            width=4,
            height=4,
            store=Store(symbol=config.default_cursor, brush=Brush.DOT),
        )

    def set_symbol(self, symbol: str) -> None:
        """Use ``symbol`` now and after leaving menus."""
        self.symbol = symbol
        self.store.symbol = symbol

    def draw(self, grid: Grid, config: Config) -> Grid:
        """Draw a preview of the brush into ``grid`` at the cursor position."""
        brush = self.brush
        color = self.color
        if brush == Brush.POINTER:
            self.x = 1
            set_by_keys(1, self.y, config.pointer, _mapping_color(config.pointer_color), grid)
        elif brush == Brush.FILL:
            self._draw_fill(grid)
        elif brush in _SINGLE_CELL:
            set_by_keys(self.x, self.y, self.symbol, color, grid)
        elif brush == Brush.G_LINE:
            for i in range(self.width):
                set_by_keys(self.x + i, self.y, self.symbol, color, grid)
        elif brush == Brush.V_LINE:
            for i in range(self.width):
                set_by_keys(self.x, self.y + i, self.symbol, color, grid)
        elif brush in (Brush.E_SQUARE, Brush.F_SQUARE):
            for dy in range(self.height):
                for dx in range(self.width):
                    inside = 0 < dx < self.width - 1 and 0 < dy < self.height - 1
                    if brush == Brush.E_SQUARE and inside:
                        continue
                    set_by_keys(self.x + dx, self.y + dy, self.symbol, color, grid)
        elif brush == Brush.E_CIRCLE:
            for dx, dy in circle_offsets(self.width):
                set_by_keys(self.x + dx, self.y + dy, self.symbol, color, grid)
                set_by_keys(self.x - dx, self.y + dy, self.symbol, color, grid)
        elif brush == Brush.F_CIRCLE:
            for dx, dy in circle_offsets(self.width):
                for i in range(-dx, dx + 1):
                    set_by_keys(self.x + i, self.y + dy, self.symbol, color, grid)
        return grid

    def _draw_fill(self, grid: Grid) -> None:
        if not (0 <= self.y < len(grid) and 0 <= self.x < len(grid[self.y])):
            return
        target = grid[self.y][self.x]
        rounds = len(grid[0]) if grid else 0
        frontier = {Coord(self.x, self.y)}
        while frontier and rounds > 0:
            found = set()
            for p in frontier:
                for nx, ny in ((p.x, p.y + 1), (p.x, p.y - 1), (p.x + 1, p.y), (p.x - 1, p.y)):
                    if isset(grid, ny, nx) and grid[ny][nx] == target:
                        found.add(Coord(nx, ny))
            if not found:
                break
            for p in found:
                set_by_keys(p.x, p.y, self.symbol, self.color, grid)
            rounds -= 1
            frontier = found