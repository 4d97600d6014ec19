"""Menu state: which panel is open, its items, widths and the blinking input cursor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from .cursor import Brush
from .pixel import const_color
from .utils import Grid, set_by_keys

SYMBOL_COLOR_WIDTH = 15
HELP_WIDTH = 40
SHAPE_WIDTH = 12
LINE_WIDTH = 10
CONFIG_WIDTH = 65

DEFAULT_BLINK_TIME = 50

# Rows of the colour menu and the channel each one controls.
COLORS: dict[int, str] = {17: "r", 19: "g", 21: "b"}


class MenuType(IntEnum):
    """The side panels that can be open."""

    NONE = 0
    SYMBOL_COLOR = 1
    FILE = 2
    HELP = 3
    SHAPE = 4
    LINE = 5
    CONFIG = 6


@dataclass
class InputState:
    """Text typed into the save prompt or a colour channel field."""

    lock: bool = False
    value: str = ""
    color: str = ""


@dataclass
class Blinker:
    """Alternates the text cursor between a bar and a blank."""

    cursor: str = ""
    phase: bool = False
    time: int = DEFAULT_BLINK_TIME

    def tick(self) -> str:
        """Advance one tick and return the cursor to show."""
        self.cursor = "|" if self.phase else " "
        self.time -= 1
        if self.time == 0:
            self.phase = not self.phase
            self.time = DEFAULT_BLINK_TIME
        return self.cursor


@dataclass(frozen=True)
class LineItem:
    """An entry of the line menu."""

    line_type: Brush
    menu: str
    cursor: str = ""


@dataclass(frozen=True)
class ShapeItem:
    """An entry of the shape menu."""

    shape_type: Brush
    symbol: str


LINE_LIST: dict[int, LineItem] = {
    3: LineItem(Brush.DOT, "•"),
    5: LineItem(Brush.SMOOTH_CONTINUOUS_LINE, "╭─╯", "─"),
    7: LineItem(Brush.CONTINUOUS_LINE, "┌─┘", "─"),
    9: LineItem(Brush.FAT_CONTINUOUS_LINE, "┏━┛", "━"),
    11: LineItem(Brush.DOUBLE_CONTINUOUS_LINE, "╔═╝", "═"),
}

SHAPE_LIST: dict[int, ShapeItem] = {
    3: ShapeItem(Brush.DOT, "\uf444"),
    5: ShapeItem(Brush.G_LINE, "━━"),
    7: ShapeItem(Brush.V_LINE, "┃"),
    9: ShapeItem(Brush.E_SQUARE, "\uea72"),
    11: ShapeItem(Brush.F_SQUARE, "\U000f0764"),
    13: ShapeItem(Brush.E_CIRCLE, "\ueabc"),
    15: ShapeItem(Brush.F_CIRCLE, "\uf111"),
    17: ShapeItem(Brush.FILL, "\U000f0266"),
}


@dataclass
class MenuState:
    """Everything the menus remember between frames."""

    type: MenuType = MenuType.NONE
    input: InputState = field(default_factory=InputState)
    file_path: str = ""
    file_list: dict[int, str] = field(default_factory=dict)
    file_list_width: int = 0
    blinker: Blinker = field(default_factory=Blinker)

    def toggle(self, menu_type: MenuType) -> MenuType:
        """Open ``menu_type``, or close it if it is already open."""
        self.type = MenuType.NONE if self.type == menu_type else menu_type
        return self.type


def clear_menu(grid: Grid, height: int, width: int) -> Grid:
    """Blank the panel area of ``width`` columns and draw its right border."""
    white = const_color("white")
    gray = const_color("gray")
    for y in range(height):
        for x in range(width):
            set_by_keys(x, y, " ", white, grid)
        set_by_keys(width, y, "│", gray, grid)
    return grid