import pytest

from termpaint.cursor import Brush
from termpaint.menu import (
    COLORS,
    DEFAULT_BLINK_TIME,
    LINE_LIST,
    SHAPE_LIST,
    Blinker,
    InputState,
    MenuState,
    MenuType,
    clear_menu,
)
from termpaint.pixel import const_color
from termpaint.utils import fg_rgb


def _grid(width, height, fill="x"):
    return [[fill] * width for _ in range(height)]


@pytest.mark.parametrize("menu_type", list(MenuType)[1:])
def test_toggle_opens_then_closes(menu_type):
    state = MenuState()
    assert state.toggle(menu_type) == menu_type
    assert state.type == menu_type
    assert state.toggle(menu_type) == MenuType.NONE
    assert state.type == MenuType.NONE


def test_toggle_switches_between_menus():
    state = MenuState(type=MenuType.HELP)
    state.toggle(MenuType.FILE)
    assert state.type == MenuType.FILE


def test_blinker_first_tick_shows_blank():
    blinker = Blinker()
    assert blinker.tick() == " "
    assert blinker.time == DEFAULT_BLINK_TIME - 1


def test_blinker_flips_phase_after_full_period():
    blinker = Blinker()
    shown = [blinker.tick() for _ in range(DEFAULT_BLINK_TIME)]
    assert set(shown) == {" "}
    assert blinker.phase is True
    assert blinker.time == DEFAULT_BLINK_TIME
    assert blinker.tick() == "|"


def test_blinker_alternates_over_two_periods():
    blinker = Blinker()
    shown = [blinker.tick() for _ in range(2 * DEFAULT_BLINK_TIME)]
    assert shown[:DEFAULT_BLINK_TIME] == [" "] * DEFAULT_BLINK_TIME
    assert shown[DEFAULT_BLINK_TIME:] == ["|"] * DEFAULT_BLINK_TIME
    assert blinker.phase is False


def test_clear_menu_blanks_area_and_draws_border():
    grid = _grid(10, 5)
    clear_menu(grid, 5, 4)
    white_space = fg_rgb(const_color("white"), " ")
    border = fg_rgb(const_color("gray"), "│")
    for y in range(1, 5):
        assert grid[y][1:4] == [white_space] * 3
        assert grid[y][4] == border
        assert grid[y][5:] == ["x"] * 5
    # row 0 and column 0 are never drawable
    assert grid[0] == ["x"] * 10
    assert all(row[0] == "x" for row in grid)


def test_clear_menu_respects_height():
    grid = _grid(6, 6)
    clear_menu(grid, 3, 2)
    assert grid[3] == ["x"] * 6
    assert grid[2][2] == fg_rgb(const_color("gray"), "│")


def test_line_list_entries():
    assert LINE_LIST[3].line_type is Brush(2)
    assert LINE_LIST[7].menu == "┌─┘"
    assert LINE_LIST[9].cursor == "━"
    assert LINE_LIST[11].line_type is Brush(len(Brush) - 2)


def test_shape_list_covers_drawing_brushes_in_order():
    rows = sorted(SHAPE_LIST)
    brushes = [Brush(SHAPE_LIST[row].shape_type) for row in rows]
    assert brushes[0] is Brush(2)
    assert brushes[-1] is Brush(len(Brush) - 1)
    assert brushes == sorted(brushes)
    assert SHAPE_LIST[5].symbol == "━━"


def test_color_rows_lie_inside_cleared_menu():
    assert COLORS == {17: "r", 19: "g", 21: "b"}
    grid = _grid(20, 25)
    clear_menu(grid, 25, 15)
    white_space = fg_rgb(const_color("white"), " ")
    assert all(grid[row][3] == white_space for row in COLORS)
    assert all(grid[row][15] == fg_rgb(const_color("gray"), "│") for row in COLORS)


def test_input_state_defaults_and_independence():
    first = MenuState()
    second = MenuState()
    first.input.value = "abc"
    assert second.input == InputState()
    assert first.input.value == "abc"