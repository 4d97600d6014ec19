"""Command entry point: help, version and the interactive terminal loop."""

from __future__ import annotations

import codecs
import os
import re
import subprocess
import sys
import time
from pathlib import Path
from typing import TextIO

from .bind import Key, KeyEvent, MouseAction, MouseEvent
from .config import ConfigError, init_config
from .pixel import Color, const_color
from .screen import Screen
from .utils import RESET, fg_rgb

TICK_SECONDS = 0.01

_ENTER_TERMINAL = "\x1b[?1049h\x1b[?25l\x1b[?1003h\x1b[?1006h\x1b[2J"
_LEAVE_TERMINAL = "\x1b[0m\x1b[?1006l\x1b[?1003l\x1b[?25h\x1b[?1049l"

_MOUSE = re.compile(r"\x1b\[<(\d+);(\d+);(\d+)([Mm])")
_ESCAPE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*[@-~]|O.)")
_INCOMPLETE = re.compile(r"\x1b(?:\[[0-?]*[ -/]*|O)?\Z")

_KEY_SEQUENCES = {
    "\x1bOP": Key.F1,
    "\x1b[11~": Key.F1,
    "\x1bOQ": Key.F2,
    "\x1b[12~": Key.F2,
    "\x1bOR": Key.F3,
    "\x1b[13~": Key.F3,
    "\x1bOS": Key.F4,
    "\x1b[14~": Key.F4,
    "\x1b[17~": Key.F6,
    "\x1b[3~": Key.DELETE,
}

_CONTROL_KEYS = {
    "\x03": Key.CTRL_C,
    "\x08": Key.CTRL_H,
    "\t": Key.TAB,
    "\x0f": Key.CTRL_O,
    "\x0b": Key.CTRL_K,
    "\x06": Key.CTRL_F,
    "\x13": Key.CTRL_S,
    "\x7f": Key.BACKSPACE,
    "\r": Key.ENTER,
    "\n": Key.ENTER,
    " ": Key.SPACE,
}

_BUTTONS = {0: MouseAction.LEFT, 1: MouseAction.MIDDLE, 2: MouseAction.RIGHT}


def help_text() -> str:
    """The usage summary printed by ``--help``."""
    green = const_color("green")
    yellow = const_color("yellow")
    white = const_color("white")

    def paint(color: Color, text: str) -> str:
        return fg_rgb(color, text)

    comma = paint(white, ",") + paint(green, " ")
    key = paint(green, "      ")
    desc = paint(white, "")

    lines = [
        "\n",
        "Drawing in the terminal\n\n",
        paint(yellow, "KEYS\n"),
        key + "ESC" + comma + "Ctrl+C         " + desc + "Exit\n",
        key + "Tab" + comma + "F2             " + desc + "Menu\n",
        key + "Ctrl+S              " + desc + "Save in txt file\n",
        key + "Ctrl+O" + comma + "F3          " + desc + "Load Image\n",
        key + "Ctrl-H" + comma + "F1          " + desc + "Help menu\n",
        key + "Any char            " + desc + "Set as a Symbol\n",
        key + "F3                  " + desc + "Shape menu\n",
        "\n",
        paint(yellow, "MOUSE\n"),
        key + "Left                " + desc + "Draw\n",
        key + "Right               " + desc + "Erase\n",
        key + "Middle              " + desc + "Clear Screen",
        "\n",
    ]
    return "".join(lines)


def version() -> str:
    """The output of ``git describe --tags``, or an empty string if git cannot run."""
    try:
        result = subprocess.run(
            ["git", "describe", "--tags"],
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            check=False,
        )
    except OSError:
        return ""
    return result.stdout or ""


def _mouse_event(code: int, column: int, row: int, released: bool) -> MouseEvent:
    x, y = column - 1, row - 1
    ctrl = bool(code & 16)
    button = code & 3
    if code & 64:
        action = {0: MouseAction.WHEEL_UP, 1: MouseAction.WHEEL_DOWN}.get(
            button, MouseAction.UNKNOWN
        )
    elif released:
        action = MouseAction.RELEASE
    elif button == 3:
        action = MouseAction.MOTION if code & 32 else MouseAction.RELEASE
    else:
        action = _BUTTONS[button]
    return MouseEvent(action, x, y, ctrl)


def _parse_input(
    data: str, final: bool = False
) -> tuple[list[KeyEvent | MouseEvent], str]:
    """Split terminal input into events.

    Returns the events and any trailing escape sequence that is not yet
    complete; with ``final`` such a tail is read as a lone Escape key.
    """
    events: list[KeyEvent | MouseEvent] = []
    runes: list[str] = []

    def flush_runes() -> None:
        if runes:
            events.append(KeyEvent(Key.RUNES, "".join(runes)))
            runes.clear()

    i = 0
    while i < len(data):
        char = data[i]
        if char == "\x1b":
            flush_runes()
            mouse = _MOUSE.match(data, i)
            if mouse:
                code, column, row, kind = mouse.groups()
                events.append(_mouse_event(int(code), int(column), int(row), kind == "m"))
                i = mouse.end()
                continue
            escape = _ESCAPE.match(data, i)
            if escape:
                key = _KEY_SEQUENCES.get(escape.group())
                if key is not None:
                    events.append(KeyEvent(key))
                i = escape.end()
                continue
            rest = data[i:]
            if not final and len(rest) > 1 and _INCOMPLETE.match(rest):
                return events, rest
            events.append(KeyEvent(Key.ESC))
            i += 1
            continue
        if char in _CONTROL_KEYS:
            flush_runes()
            events.append(KeyEvent(_CONTROL_KEYS[char]))
        elif char.isprintable():
            runes.append(char)
        else:
            flush_runes()
        i += 1
    flush_runes()
    return events, ""


def _dispatch(screen: Screen, events: list[KeyEvent | MouseEvent]) -> bool:
    return any(screen.handle(event) for event in events)


def _serve(screen: Screen, fd_in: int, out: TextIO) -> None:
    import select

    decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
    size = None
    pending = ""
    last_frame = None
    next_tick = time.monotonic()
    while True:
        current = os.get_terminal_size(out.fileno())
        if current != size:
            size = current
            screen.resize(current.columns, current.lines)
            last_frame = None

        timeout = max(0.0, next_tick - time.monotonic())
        ready, _, _ = select.select([fd_in], [], [], timeout)
        if ready:
            chunk = os.read(fd_in, 4096)
            if not chunk:
                return
            events, pending = _parse_input(pending + decoder.decode(chunk))
            if _dispatch(screen, events):
                return
        elif pending:
            events, pending = _parse_input(pending, final=True)
            if _dispatch(screen, events):
                return

        now = time.monotonic()
        if now >= next_tick:
            screen.tick()
            next_tick = now + TICK_SECONDS

        frame = screen.view()
        if frame != last_frame:
            out.write("\x1b[H" + frame.replace("\n", "\r\n") + RESET)
            out.flush()
            last_frame = frame


def run(screen: Screen) -> None:
    """Run the editor in the terminal until the user quits."""
    import termios
    import tty

    fd_in = sys.stdin.fileno()
    out = sys.stdout
    saved = termios.tcgetattr(fd_in)
    try:
        tty.setraw(fd_in)
        out.write(_ENTER_TERMINAL)
        out.flush()
        _serve(screen, fd_in, out)
    finally:
        out.write(_LEAVE_TERMINAL)
        out.flush()
        termios.tcsetattr(fd_in, termios.TCSADRAIN, saved)


def _ensure_save_directory(screen: Screen) -> None:
    directory = screen.config.image_save_directory
    if not directory or Path(directory).exists():
        return
    try:
        Path(directory).mkdir(mode=0o755, parents=True, exist_ok=True)
    except OSError as exc:
        screen.messages.add(str(exc))
        return
    screen.messages.add("Directory " + directory + " successfully created.")


def main(argv: list[str] | None = None) -> int:
    """Start the editor, or print help or the version."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        if args[0] in ("-h", "--help"):
            print(help_text())
            return 0
        if args[0] in ("-v", "--version"):
            print(version())
            return 0

    try:
        config = init_config()
    except (ConfigError, OSError) as exc:
        print(f"unable to load config: {exc}", file=sys.stderr)
        return 1

    screen = Screen(config)
    _ensure_save_directory(screen)
    try:
        run(screen)
    except OSError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0