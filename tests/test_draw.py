import pytest

from termpaint.cursor import Brush, Cursor, circle_offsets
from termpaint.draw import continuous_line, draw, fill, line_symbol
from termpaint.menu import MenuState, MenuType
from termpaint.pixel import Color, Coord
from termpaint.utils import fg_rgb, isset


class FakeCanvas:
    def __init__(self, width, height):
        self.width = width
        self.grid = [[" "] * width for _ in range(height)]
        self.pixels = {}

    def get_pixel(self, y, x):
        return self.grid[y][x] if isset(self.grid, y, x) else ""

    def add_pixels(self, *pixels):
        for p in pixels:
            self.pixels[(p.coord.y, p.coord.x)] = p

    def coords(self):
        return {Coord(x, y) for y, x in self.pixels}


def _cursor(brush, **kwargs):
    return Cursor(brush=brush, symbol="#", color=Color(1, 2, 3), **kwargs)


def test_line_symbol_cross_and_empty():
    assert line_symbol(True, True, True, True) == "┼"
    assert line_symbol(False, False, False, False) == "─"
    assert line_symbol(True, False, False, False) == "│"


@pytest.mark.parametrize(
    "flags",
    [(u, d, l, r) for u in (0, 1) for d in (0, 1) for l in (0, 1) for r in (0, 1)],
)
def test_line_symbol_defined_for_every_combination(flags):
    assert line_symbol(*map(bool, flags)) in "─│┘└┐┌┤├┴┬┼"


def test_dot_adds_single_pixel():
    canvas = FakeCanvas(10, 10)
    cursor = _cursor(Brush.DOT)
    draw(canvas, cursor, MenuState(), 4, 5)
    assert list(canvas.pixels) == [(5, 4)]
    pixel = canvas.pixels[(5, 4)]
    assert pixel.symbol == "#"
    assert pixel.color == cursor.color


def test_horizontal_and_vertical_lines():
    canvas = FakeCanvas(20, 20)
    draw(canvas, _cursor(Brush.G_LINE, width=4), MenuState(), 2, 3)
    assert canvas.coords() == {Coord(2 + i, 3) for i in range(4)}
    canvas = FakeCanvas(20, 20)
    draw(canvas, _cursor(Brush.V_LINE, width=4), MenuState(), 2, 3)
    assert canvas.coords() == {Coord(2, 3 + i) for i in range(4)}


def test_empty_square_is_outline_of_filled_square():
    empty = FakeCanvas(30, 30)
    filled = FakeCanvas(30, 30)
    draw(empty, _cursor(Brush.E_SQUARE, width=5, height=4), MenuState(), 3, 3)
    draw(filled, _cursor(Brush.F_SQUARE, width=5, height=4), MenuState(), 3, 3)
    assert len(filled.coords()) == 5 * 4
    inner = {Coord(x, y) for x in range(4, 7) for y in range(4, 6)}
    assert empty.coords() == filled.coords() - inner


def test_circles_are_symmetric_and_filled_contains_outline():
    outline = FakeCanvas(60, 60)
    disc = FakeCanvas(60, 60)
    draw(outline, _cursor(Brush.E_CIRCLE, width=6), MenuState(), 30, 30)
    draw(disc, _cursor(Brush.F_CIRCLE, width=6), MenuState(), 30, 30)
    assert outline.coords() <= disc.coords()
    for c in disc.coords():
        assert Coord(60 - c.x, c.y) in disc.coords()
    rows = {dy for _, dy in circle_offsets(6)}
    assert {c.y - 30 for c in disc.coords()} == rows


def test_empty_and_pointer_draw_nothing():
    canvas = FakeCanvas(10, 10)
    draw(canvas, _cursor(Brush.EMPTY), MenuState(), 3, 3)
    draw(canvas, _cursor(Brush.POINTER), MenuState(), 3, 3)
    assert canvas.pixels == {}


def test_fill_covers_open_area():
    canvas = FakeCanvas(6, 6)
    painted = fill(canvas, _cursor(Brush.FILL), 2, 2)
    drawable = {Coord(x, y) for x in range(1, 6) for y in range(1, 6)}
    assert painted == drawable
    assert canvas.coords() == drawable


def test_fill_stops_at_wall():
    canvas = FakeCanvas(8, 6)
    for row in canvas.grid:
        row[3] = "@"
    painted = fill(canvas, _cursor(Brush.FILL), 1, 1)
    assert painted
    assert all(c.x < 3 for c in painted)


def test_fill_limited_by_width_rounds():
    canvas = FakeCanvas(2, 30)
    painted = fill(canvas, _cursor(Brush.FILL), 1, 1)
    assert max(c.y for c in painted) == 1 + canvas.width


def test_draw_fill_closes_menu():
    canvas = FakeCanvas(6, 6)
    menu = MenuState(type=MenuType.SHAPE)
    draw(canvas, _cursor(Brush.FILL), menu, 2, 2)
    assert menu.type == MenuType.NONE
    assert Coord(1, 1) in canvas.coords()


def test_continuous_line_isolated_is_horizontal():
    canvas = FakeCanvas(10, 10)
    cursor = _cursor(Brush.CONTINUOUS_LINE)
    pixel = continuous_line(canvas, cursor, 4, 4)
    assert pixel.symbol == fg_rgb(cursor.color, "─")
    assert canvas.pixels[(4, 4)] == pixel


def test_continuous_line_joins_neighbour_above():
    canvas = FakeCanvas(10, 10)
    canvas.grid[3][4] = "x"
    cursor = _cursor(Brush.CONTINUOUS_LINE)
    pixel = continuous_line(canvas, cursor, 4, 4)
    assert pixel.symbol == fg_rgb(cursor.color, "│")


def test_continuous_line_treats_edges_as_neighbours():
    canvas = FakeCanvas(10, 10)
    cursor = _cursor(Brush.FAT_CONTINUOUS_LINE)
    draw(canvas, cursor, MenuState(), 1, 1)
    assert canvas.pixels[(1, 1)].symbol == fg_rgb(cursor.color, "┘")