"""Keyboard and mouse bindings: what each key press and mouse action does."""

from __future__ import annotations

import os
import re
import stat
from dataclasses import dataclass, replace
from enum import Enum, auto
from pathlib import Path
from typing import Callable, Protocol

from .config import Config
from .cursor import Brush, Cursor
from .draw import draw
from .menu import (
    COLORS,
    CONFIG_WIDTH,
    HELP_WIDTH,
    LINE_LIST,
    LINE_WIDTH,
    SHAPE_LIST,
    SHAPE_WIDTH,
    SYMBOL_COLOR_WIDTH,
    MenuState,
    MenuType,
)
from .message import MessageBoard
from .pixel import Coord, Pixel, decrease, increase, min_max_color, set_color
from .utils import Grid

_INTEGER = re.compile(r"[+-]?[0-9]+")


class Key(Enum):
    """Keys the editor reacts to; printable input arrives as ``RUNES``."""

    CTRL_C = auto()
    ESC = auto()
    CTRL_H = auto()
    F1 = auto()
    TAB = auto()
    F2 = auto()
    CTRL_O = auto()
    F3 = auto()
    F4 = auto()
    F6 = auto()
    CTRL_K = auto()
    CTRL_F = auto()
    CTRL_S = auto()
    DELETE = auto()
    BACKSPACE = auto()
    ENTER = auto()
    SPACE = auto()
    RUNES = auto()


class MouseAction(Enum):
    """Mouse actions the editor reacts to."""

    MOTION = auto()
    LEFT = auto()
    RIGHT = auto()
    MIDDLE = auto()
    WHEEL_DOWN = auto()
    WHEEL_UP = auto()
    RELEASE = auto()
    UNKNOWN = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A key press; ``runes`` holds the typed text for ``Key.RUNES``."""

    key: Key
    runes: str = ""


@dataclass(frozen=True)
class MouseEvent:
    """A mouse action at column ``x``, row ``y``."""

    action: MouseAction
    x: int = 0
    y: int = 0
    ctrl: bool = False


class BindScreen(Protocol):
    """What the bindings need from the screen."""

    width: int
    height: int
    save: bool
    show_input_save: bool
    pixels: Grid
    config: Config
    cursor: Cursor
    menu: MenuState
    messages: MessageBoard
    directory: str

    def get_pixel(self, y: int, x: int) -> str: ...

    def add_pixels(self, *pixels: Pixel) -> None: ...

    def clear_unsaved_pixels(self) -> None: ...


_MENU_KEYS = {
    Key.CTRL_H: MenuType.HELP,
    Key.F1: MenuType.HELP,
    Key.TAB: MenuType.SYMBOL_COLOR,
    Key.F2: MenuType.SYMBOL_COLOR,
    Key.CTRL_O: MenuType.FILE,
    Key.F3: MenuType.FILE,
    Key.F4: MenuType.SHAPE,
    Key.F6: MenuType.CONFIG,
    Key.CTRL_K: MenuType.CONFIG,
}


def _set_channel(cursor: Cursor, channel: str, change: Callable[[int], int]) -> None:
    current = getattr(cursor.color, channel)
    cursor.color = replace(cursor.color, **{channel: change(current)})


def _typed_digits(screen: BindScreen, runes: str) -> None:
    menu_input = screen.menu.input
    if not _INTEGER.fullmatch(runes):
        screen.messages.add(f"invalid number {runes!r}")
        return
    menu_input.value += runes
    if _INTEGER.fullmatch(menu_input.value):
        value = int(menu_input.value)
    else:
        screen.messages.add(f"invalid number {menu_input.value!r}")
        value = 0
    if menu_input.color in ("r", "g", "b"):
        _set_channel(screen.cursor, menu_input.color, lambda _: set_color(value))


def key_bind(event: KeyEvent, screen: BindScreen) -> bool:
    """React to a key press. Returns ``True`` when the program should exit."""
    key = event.key
    cursor = screen.cursor
    menu = screen.menu

    if key in (Key.CTRL_C, Key.ESC):
        return True
    if key in _MENU_KEYS:
        menu.toggle(_MENU_KEYS[key])
    elif key == Key.CTRL_F:
        cursor.store.brush = Brush.DOT if cursor.brush == Brush.FILL else Brush.FILL
    elif key == Key.CTRL_S:
        screen.save = True
        screen.show_input_save = True
        menu.type = MenuType.NONE
        screen.messages.clear()
    elif key == Key.DELETE:
        if menu.file_path:
            try:
                os.remove(menu.file_path)
            except OSError:
                pass
    elif key == Key.BACKSPACE:
        menu.input.value = menu.input.value[:-1]
    elif key == Key.ENTER:
        screen.show_input_save = False
    elif key == Key.SPACE:
        cursor.set_symbol(" ")
    elif key == Key.RUNES:
        if menu.type == MenuType.SYMBOL_COLOR and menu.input.lock:
            _typed_digits(screen, event.runes)
        elif screen.show_input_save:
            menu.input.value += event.runes
        else:
            cursor.set_symbol(event.runes)
    return False


def _wheel(event: MouseEvent, screen: BindScreen, change: Callable[[int], int]) -> None:
    cursor = screen.cursor
    channel = COLORS.get(event.y)
    if channel is not None and cursor.brush == Brush.POINTER:
        _set_channel(cursor, channel, change)

    if cursor.brush > Brush.DOT and cursor.symbol != screen.config.pointer:
        grow = change is increase
        if event.ctrl:
            if cursor.store.brush in (Brush.E_SQUARE, Brush.F_SQUARE):
                if grow:
                    cursor.height += 1
                elif cursor.height > 1:
                    cursor.height -= 1
        elif grow:
            cursor.width += 1
        elif cursor.width > 1:
            cursor.width -= 1


def mouse_bind(event: MouseEvent, screen: BindScreen) -> None:
    """React to a mouse action."""
    action = event.action
    if action == MouseAction.MOTION:
        _mouse_motion(event, screen)
    elif action == MouseAction.LEFT:
        _mouse_left(event.x, event.y, screen)
    elif action == MouseAction.RIGHT:
        screen.add_pixels(Pixel(Coord(event.x, event.y), symbol=" "))
    elif action == MouseAction.MIDDLE:
        screen.clear_unsaved_pixels()
    elif action == MouseAction.WHEEL_DOWN:
        _wheel(event, screen, decrease)
    elif action == MouseAction.WHEEL_UP:
        _wheel(event, screen, increase)


def _mouse_left(x: int, y: int, screen: BindScreen) -> None:
    menu = screen.menu
    if menu.type == MenuType.SYMBOL_COLOR and x < SYMBOL_COLOR_WIDTH:
        _select_color(screen, y)
        _select_symbol(screen, x, y)
    elif menu.type == MenuType.FILE and x < menu.file_list_width:
        _select_file(screen, y)
    elif menu.type == MenuType.SHAPE and x < SHAPE_WIDTH:
        shape = SHAPE_LIST.get(y)
        if shape is not None:
            screen.cursor.store.brush = shape.shape_type
    elif menu.type == MenuType.LINE and x < LINE_WIDTH:
        _select_line(screen, y)
    else:
        draw(screen, screen.cursor, menu, x, y)


def _select_line(screen: BindScreen, y: int) -> None:
    line = LINE_LIST.get(y)
    if line is None:
        return
    screen.cursor.store.brush = line.line_type
    if line.line_type == Brush.DOT:
        screen.cursor.set_symbol(screen.config.default_cursor)
    else:
        screen.cursor.set_symbol(line.cursor)


def _select_symbol(screen: BindScreen, x: int, y: int) -> None:
    symbol = screen.config.symbols.get(y, {}).get(x)
    if symbol is None:
        return
    screen.cursor.set_symbol(symbol)
    if screen.config.notifications.set_symbol:
        screen.messages.add("Set " + symbol)


def _select_color(screen: BindScreen, y: int) -> None:
    channel = COLORS.get(y)
    if channel is not None:
        _set_channel(screen.cursor, channel, min_max_color)


def _select_file(screen: BindScreen, y: int) -> None:
    name = screen.menu.file_list.get(y)
    if name is None:
        return
    path = screen.directory + name
    try:
        mode = Path(path).stat().st_mode
    except OSError as exc:
        screen.messages.add(str(exc))
        return
    if stat.S_ISDIR(mode):
        screen.directory = path
    else:
        screen.menu.type = MenuType.NONE


def _menu_edge(menu: MenuState) -> int:
    widths = {
        MenuType.SYMBOL_COLOR: SYMBOL_COLOR_WIDTH,
        MenuType.FILE: menu.file_list_width,
        MenuType.HELP: HELP_WIDTH,
        MenuType.SHAPE: SHAPE_WIDTH,
        MenuType.LINE: LINE_WIDTH,
        MenuType.CONFIG: CONFIG_WIDTH,
    }
    return widths.get(menu.type, 0)


def _mouse_motion(event: MouseEvent, screen: BindScreen) -> None:
    cursor = screen.cursor
    menu = screen.menu
    x_min = _menu_edge(menu)

    if event.x <= x_min:
        if menu.type == MenuType.SYMBOL_COLOR:
            _on_symbol_color(screen, event)
        elif menu.type == MenuType.FILE:
            name = menu.file_list.get(event.y)
            cursor.brush = Brush.EMPTY if name is None else Brush.POINTER
            menu.file_path = name or ""
        elif menu.type == MenuType.SHAPE:
            cursor.brush = Brush.POINTER if event.y in SHAPE_LIST else Brush.EMPTY
        elif menu.type == MenuType.LINE:
            cursor.brush = Brush.POINTER if event.y in LINE_LIST else Brush.EMPTY
        else:
            cursor.brush = Brush.EMPTY
    else:
        cursor.symbol = cursor.store.symbol
        cursor.brush = cursor.store.brush

    if x_min <= event.x < screen.width:
        cursor.x = event.x
    if 0 <= event.y < screen.height:
        cursor.y = event.y


def _on_symbol_color(screen: BindScreen, event: MouseEvent) -> None:
    cursor = screen.cursor
    menu_input = screen.menu.input
    cursor.brush = Brush.EMPTY
    on_symbol = event.x in screen.config.symbols.get(event.y, {})
    channel = COLORS.get(event.y)
    if channel is not None and event.x < SYMBOL_COLOR_WIDTH:
        menu_input.lock = True
        menu_input.color = channel
        cursor.brush = Brush.POINTER
    else:
        menu_input.lock = False
        menu_input.value = ""
    if not on_symbol and channel is None:
        cursor.x = SYMBOL_COLOR_WIDTH + 1