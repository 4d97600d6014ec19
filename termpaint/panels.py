"""The side panels: help, shapes, lines, symbols and colours, and settings."""

from __future__ import annotations

from dataclasses import dataclass, fields, is_dataclass
from typing import Any

from .cursor import Brush
from .files import MenuScreen, draw_file_menu
from .menu import (
    COLORS,
    CONFIG_WIDTH,
    HELP_WIDTH,
    LINE_LIST,
    LINE_WIDTH,
    SHAPE_LIST,
    SHAPE_WIDTH,
    SYMBOL_COLOR_WIDTH,
    MenuType,
    clear_menu,
)
from .pixel import Color, const_color
from .utils import Grid, draw_string, fg_rgb, set_by_keys

COLOR_X = 3
FIRST_LEVEL_X = 3
SECOND_LEVEL_X = 10
VALUE_X = 31

_CONFIG_FIELDS = {
    "background",
    "background_color",
    "default_cursor",
    "default_color",
    "pointer",
    "pointer_color",
    "show_folder",
    "show_hidden_folder",
    "image_save_directory",
    "image_save_name_format",
    "notification_time",
    "notifications",
}


@dataclass(frozen=True)
class _HelpSection:
    y: int
    title: str
    end: str
    items: tuple[tuple[str, str], ...]


_HELP_SECTIONS = (
    _HelpSection(
        1,
        "Keys",
        "┐",
        (
            ("ESC     ", "Exit"),
            ("Tab     ", "Menu"),
            ("Ctrl+S  ", "Save in txt file"),
            ("Ctrl+O  ", "Load Image"),
            ("Ctrl+H  ", "Show this help menu"),
            ("Any char", "Set as a Symbol"),
        ),
    ),
    _HelpSection(
        10,
        "Mouse",
        "┤",
        (("Left  ", "Draw"), ("Right ", "Erase"), ("Middle", "Clear Screen")),
    ),
    _HelpSection(16, "Symbol", "┤", (("", "Click to select Symbol"),)),
    _HelpSection(
        20,
        "Color",
        "┤",
        (
            ("Scroll     ", "Decrease/increase"),
            ("Click      ", "Set 0/255"),
            ("Press [0-9]", "Set color"),
        ),
    ),
    _HelpSection(
        26,
        "FilePath",
        "┤",
        (("Left  ", "Click to select file"), ("Delete", "Press to delete file")),
    ),
)


def _draw_title(grid: Grid, y: int, title: str, end: str, width: int) -> None:
    draw_string(1, y, title, const_color("yellow"), grid)
    rule = "─" * (width - len(title) - 2) + end
    draw_string(len(title) + 2, y, rule, const_color("gray"), grid)


def draw_help_menu(screen: MenuScreen) -> Grid:
    """Draw the key and mouse reference."""
    grid = screen.pixels
    clear_menu(grid, screen.height, HELP_WIDTH)
    green = const_color("green")
    white = const_color("white")
    for section in _HELP_SECTIONS:
        _draw_title(grid, section.y, section.title, section.end, HELP_WIDTH)
        for row, (key, text) in enumerate(section.items, start=section.y + 2):
            if key:
                draw_string(3, row, key, green, grid)
            draw_string(16, row, text, white, grid)
    return grid


def draw_shape_menu(screen: MenuScreen) -> Grid:
    """Draw the shape list and the size of the selected shape."""
    grid = screen.pixels
    cursor = screen.cursor
    white = const_color("white")
    green = const_color("green")
    clear_menu(grid, screen.height, SHAPE_WIDTH)
    _draw_title(grid, 1, "Shape", "┐", SHAPE_WIDTH)

    for y, shape in SHAPE_LIST.items():
        draw_string(3, y, shape.symbol, white, grid)

    brush = cursor.store.brush
    width = str(cursor.width)
    height = str(cursor.height)
    if brush in (Brush.G_LINE, Brush.V_LINE):
        draw_string(1, 19, "Length: " + width, green, grid)
        draw_string(len("Length:") + 2, 19, width, white, grid)
    elif brush in (Brush.E_SQUARE, Brush.F_SQUARE):
        draw_string(1, 19, "Width: " + width, green, grid)
        draw_string(1, 20, "Height: " + height, green, grid)
        draw_string(len("Width:") + 2, 19, width, white, grid)
        draw_string(len("Height:") + 2, 20, height, white, grid)
    elif brush in (Brush.E_CIRCLE, Brush.F_CIRCLE):
        draw_string(1, 19, "Radius: ", green, grid)
        draw_string(len("Radius:") + 2, 19, width, white, grid)
    return grid


def draw_line_menu(screen: MenuScreen) -> Grid:
    """Draw the list of line styles."""
    grid = screen.pixels
    white = const_color("white")
    clear_menu(grid, screen.height, SHAPE_WIDTH)
    header = "Line " + "─" * (LINE_WIDTH - len("Line")) + "┐"
    draw_string(1, 1, header, white, grid)
    for y, line in LINE_LIST.items():
        draw_string(3, y, line.menu, white, grid)
    return grid


def _draw_symbols(screen: MenuScreen, grid: Grid) -> None:
    white = const_color("white")
    _draw_title(grid, 1, "Symbol", "┐", SYMBOL_COLOR_WIDTH)
    for y, line in screen.config.symbols.items():
        for x, symbol in line.items():
            set_by_keys(x, y, symbol, white, grid)


def _draw_colors(screen: MenuScreen, grid: Grid) -> None:
    white = const_color("white")
    color = screen.cursor.color
    _draw_title(grid, 15, "Color", "┤", SYMBOL_COLOR_WIDTH)
    channels = {
        "r": (color.r, Color(r=color.r)),
        "g": (color.g, Color(g=color.g)),
        "b": (color.b, Color(b=color.b)),
    }
    for y, channel in COLORS.items():
        value, swatch = channels[channel]
        draw_string(COLOR_X + 2, y, str(value), white, grid)
        set_by_keys(COLOR_X, y, fg_rgb(swatch, "█"), white, grid)
    for y in (23, 24):
        for x in (3, 4, 5):
            set_by_keys(x, y, "█", color, grid)


def draw_symbol_color_menu(screen: MenuScreen) -> Grid:
    """Draw the symbol palette, the colour channels and a help hint."""
    grid = screen.pixels
    height = screen.height
    clear_menu(grid, height, SYMBOL_COLOR_WIDTH)
    _draw_symbols(screen, grid)
    _draw_colors(screen, grid)

    _draw_title(grid, height - 3, "Help", "┤", SYMBOL_COLOR_WIDTH)
    draw_string(2, height - 1, "Press", const_color("white"), grid)
    draw_string(len("Press") + 3, height - 1, "Ctrl+H", const_color("green"), grid)
    return grid


def _label(name: str) -> str:
    return "".join(part.capitalize() for part in name.split("_"))


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _value_color(value: Any, default: Color) -> Color:
    if isinstance(value, bool):
        return const_color("green") if value else const_color("red")
    return default


def draw_config_menu(screen: MenuScreen) -> Grid:
    """Draw the current settings, as many as fit above the note."""
    grid = screen.pixels
    height = screen.height
    config = screen.config
    white = const_color("white")
    green = const_color("green")
    clear_menu(grid, height, CONFIG_WIDTH)
    _draw_title(grid, 1, "Config", "┐", CONFIG_WIDTH)

    row = 3
    limit = height - 6
    for item in fields(config):
        if item.name not in _CONFIG_FIELDS:
            continue
        value = getattr(config, item.name)
        draw_string(FIRST_LEVEL_X, row, _label(item.name), white, grid)
        color = _value_color(value, white)

        if is_dataclass(value):
            row += 1
            for sub in fields(value):
                sub_value = getattr(value, sub.name)
                color = _value_color(sub_value, color)
                draw_string(SECOND_LEVEL_X, row, _label(sub.name), white, grid)
                draw_string(VALUE_X, row, _format(sub_value), color, grid)
                row += 1
                if row >= limit:
                    break
        elif isinstance(value, dict):
            row += 1
            for channel in "rgb":
                if channel in value:
                    draw_string(SECOND_LEVEL_X, row, channel.upper(), color, grid)
                    draw_string(VALUE_X, row, _format(value[channel]), color, grid)
                    row += 1
        else:
            draw_string(VALUE_X, row, _format(value), color, grid)
            row += 1

        if row >= limit:
            break

    _draw_title(grid, height - 4, "Note", "┤", CONFIG_WIDTH)
    draw_string(FIRST_LEVEL_X, height - 2, "All configuration parameters are", white, grid)
    draw_string(FIRST_LEVEL_X, height - 1, "stored in", white, grid)
    draw_string(len("stored in") + 4, height - 1, "~/.config/termPaint", green, grid)
    return grid


def draw_menu(screen: MenuScreen) -> Grid:
    """Draw whichever panel is open."""
    panels = {
        MenuType.SYMBOL_COLOR: draw_symbol_color_menu,
        MenuType.FILE: draw_file_menu,
        MenuType.HELP: draw_help_menu,
        MenuType.SHAPE: draw_shape_menu,
        MenuType.LINE: draw_line_menu,
        MenuType.CONFIG: draw_config_menu,
    }
    panel = panels.get(screen.menu.type)
    if panel is None:
        return screen.pixels
    return panel(screen)