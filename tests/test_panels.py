import re
from dataclasses import dataclass, field

from termpaint.config import Config
from termpaint.cursor import Brush, Cursor, Store
from termpaint.menu import MenuState, MenuType, HELP_WIDTH, SHAPE_WIDTH
from termpaint.message import MessageBoard
from termpaint.panels import (
    draw_config_menu,
    draw_help_menu,
    draw_line_menu,
    draw_menu,
    draw_shape_menu,
    draw_symbol_color_menu,
)
from termpaint.pixel import Color, const_color
from termpaint.utils import fg_rgb

_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


def plain(cell):
    return _ESCAPE.sub("", cell)


def blank(width, height):
    return [[" "] * width for _ in range(height)]


def row_text(grid, y, x, length):
    return "".join(plain(cell) for cell in grid[y][x : x + length])


@dataclass
class FakeScreen:
    width: int = 80
    height: int = 40
    config: Config = field(default_factory=Config)
    menu: MenuState = field(default_factory=MenuState)
    cursor: Cursor = field(default_factory=Cursor)
    messages: MessageBoard = field(default_factory=MessageBoard)
    pixels: list = None

    def __post_init__(self):
        if self.pixels is None:
            self.pixels = blank(self.width, self.height)


def test_help_menu_sections():
    screen = FakeScreen()
    grid = draw_help_menu(screen)
    assert row_text(grid, 1, 1, 4) == "Keys"
    assert grid[1][1] == fg_rgb(const_color("yellow"), "K")
    assert row_text(grid, 3, 3, 3) == "ESC"
    assert row_text(grid, 3, 16, 4) == "Exit"
    assert row_text(grid, 10, 1, 5) == "Mouse"
    assert plain(grid[1][HELP_WIDTH - 1]) == "┐"
    assert plain(grid[10][HELP_WIDTH - 1]) == "┤"
    assert plain(grid[5][HELP_WIDTH]) == "│"


def test_help_symbol_section_has_no_key():
    screen = FakeScreen()
    grid = draw_help_menu(screen)
    assert row_text(grid, 18, 3, 3) == "   "
    assert row_text(grid, 18, 16, len("Click to select Symbol")) == "Click to select Symbol"


def test_shape_menu_square_sizes():
    cursor = Cursor(width=4, height=3, store=Store(brush=Brush.E_SQUARE))
    screen = FakeScreen(cursor=cursor)
    grid = draw_shape_menu(screen)
    assert row_text(grid, 19, 1, len("Width: 4")) == "Width: 4"
    assert row_text(grid, 20, 1, len("Height: 3")) == "Height: 3"
    assert grid[19][len("Width:") + 2] == fg_rgb(const_color("white"), "4")
    assert row_text(grid, 5, 3, 2) == "━━"
    assert plain(grid[2][SHAPE_WIDTH]) == "│"


def test_shape_menu_circle_radius():
    cursor = Cursor(width=6, store=Store(brush=Brush.F_CIRCLE))
    screen = FakeScreen(cursor=cursor)
    grid = draw_shape_menu(screen)
    assert row_text(grid, 19, 1, len("Radius: 6")) == "Radius: 6"


def test_shape_menu_dot_has_no_size():
    screen = FakeScreen(cursor=Cursor(store=Store(brush=Brush.DOT)))
    grid = draw_shape_menu(screen)
    assert row_text(grid, 19, 1, 8) == " " * 8


def test_line_menu():
    screen = FakeScreen()
    grid = draw_line_menu(screen)
    assert row_text(grid, 1, 1, 5) == "Line "
    assert row_text(grid, 7, 3, 3) == "┌─┘"
    assert row_text(grid, 11, 3, 3) == "╔═╝"
    assert plain(grid[4][SHAPE_WIDTH]) == "│"


def test_symbol_color_menu():
    config = Config(symbols={3: {3: "A", 5: "B"}})
    cursor = Cursor(color=Color(10, 20, 30))
    screen = FakeScreen(config=config, cursor=cursor)
    grid = draw_symbol_color_menu(screen)
    white = const_color("white")
    assert grid[3][3] == fg_rgb(white, "A")
    assert grid[3][5] == fg_rgb(white, "B")
    assert row_text(grid, 17, 5, 2) == "10"
    assert row_text(grid, 19, 5, 2) == "20"
    assert row_text(grid, 21, 5, 2) == "30"
    assert grid[17][3] == fg_rgb(white, fg_rgb(Color(r=10), "█"))
    assert grid[23][4] == fg_rgb(Color(10, 20, 30), "█")
    assert row_text(grid, screen.height - 1, 8, 6) == "Ctrl+H"
    assert row_text(grid, 15, 1, 5) == "Color"


def test_config_menu_layout():
    config = Config(
        background=True,
        background_color={"r": 1, "g": 2, "b": 3},
        default_cursor="#",
        show_folder=False,
    )
    screen = FakeScreen(config=config)
    grid = draw_config_menu(screen)
    assert row_text(grid, 3, 3, len("Background")) == "Background"
    assert row_text(grid, 3, 31, 4) == "true"
    assert grid[3][31] == fg_rgb(const_color("green"), "t")
    assert row_text(grid, 4, 3, len("BackgroundColor")) == "BackgroundColor"
    assert row_text(grid, 5, 10, 1) == "R"
    assert row_text(grid, 7, 31, 1) == "3"
    assert row_text(grid, 8, 3, len("DefaultCursor")) == "DefaultCursor"
    assert row_text(grid, 8, 31, 1) == "#"


def test_config_menu_false_is_red_and_note_drawn():
    config = Config(show_folder=False)
    screen = FakeScreen(config=config)
    grid = draw_config_menu(screen)
    labels = [row_text(grid, y, 3, len("ShowFolder")) for y in range(screen.height)]
    row = labels.index("ShowFolder")
    assert grid[row][31] == fg_rgb(const_color("red"), "f")
    assert row_text(grid, screen.height - 4, 1, 4) == "Note"
    assert row_text(grid, screen.height - 1, 3, len("stored in")) == "stored in"


def test_config_menu_stops_above_note():
    screen = FakeScreen(height=14)
    grid = draw_config_menu(screen)
    limit = screen.height - 6
    assert all(row_text(grid, y, 3, 20).strip() == "" for y in range(limit, screen.height - 4))


def test_draw_menu_none_leaves_grid():
    screen = FakeScreen()
    before = [row[:] for row in screen.pixels]
    assert draw_menu(screen) == before


def test_draw_menu_dispatches_to_help():
    screen = FakeScreen(menu=MenuState(type=MenuType.HELP))
    expected = draw_help_menu(FakeScreen())
    assert draw_menu(screen) == expected