"""The file browser panel, saving the canvas as text and the save prompt."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Protocol

from .config import Config
from .cursor import Cursor
from .menu import MenuState, clear_menu
from .message import MessageBoard
from .pixel import const_color
from .utils import Grid, draw_string, set_by_keys

FILE_X = 3
DEFAULT_NAME_FORMAT = "%Y-%m-%d %H:%M:%S.txt"
IMAGE_EXTENSIONS = (".txt", ".jpg", ".png")

_EXT_ICONS = {
    ".txt": "\uf15c",
    ".png": "",
    ".jpg": "",
}
_DIR_ICON = "\ue5ff"


class MenuScreen(Protocol):
    """What the panels need from the screen."""

    pixels: Grid
    width: int
    height: int
    config: Config
    menu: MenuState
    cursor: Cursor
    messages: MessageBoard


@dataclass
class Listing:
    """Directories and image files found in a directory, in name order."""

    directories: list[str] = field(default_factory=list)
    files: list[str] = field(default_factory=list)
    width: int = 0


def _extension(name: str) -> str:
    """The suffix from the last dot of the final path element, dot included."""
    base = name.rsplit("/", 1)[-1]
    dot = base.rfind(".")
    return base[dot:] if dot >= 0 else ""


def list_directory(directory: str | os.PathLike, show_hidden: bool) -> Listing:
    """List the sub-directories and loadable images of ``directory``.

    Hidden directories are left out unless ``show_hidden`` is set.
    ``width`` is the length of the longest name of any entry.
    Raises ``OSError`` when the directory cannot be read.
    """
    listing = Listing()
    entries = sorted(os.scandir(directory), key=lambda entry: entry.name)
    for entry in entries:
        name = entry.name
        listing.width = max(listing.width, len(name))
        if entry.is_dir() and (show_hidden or not name.startswith(".")):
            listing.directories.append(name)
            continue
        if _extension(name) in IMAGE_EXTENSIONS:
            listing.files.append(name)
    return listing


def draw_file_menu(screen: MenuScreen) -> Grid:
    """Draw the file browser and record which row holds which entry."""
    grid = screen.pixels
    config = screen.config
    menu = screen.menu
    white = const_color("white")

    try:
        listing = list_directory(config.image_save_directory, config.show_hidden_folder)
    except OSError as exc:
        screen.messages.add(str(exc))
        listing = Listing()

    menu.file_list_width = listing.width + 10
    clear_menu(grid, screen.height, menu.file_list_width)

    title = "FilePath"
    rule = "─" * (menu.file_list_width - len(title) - 2) + "┐"
    draw_string(1, 1, title, const_color("yellow"), grid)
    draw_string(len(title) + 2, 1, rule, const_color("gray"), grid)

    row = 3
    file_list: dict[int, str] = {}
    if config.show_folder:
        cian = const_color("cian")
        file_list[2] = "../"
        draw_string(FILE_X, 2, "..", white, grid)
        for name in listing.directories:
            draw_string(FILE_X, row, f"{_DIR_ICON}  {name}", cian, grid)
            file_list[row] = name + "/"
            row += 1

    for offset, name in enumerate(listing.files):
        icon = _EXT_ICONS.get(_extension(name), "")
        draw_string(FILE_X, row + offset, f"{icon}  {name}", white, grid)
        file_list[row + offset] = name

    menu.file_list = file_list
    return grid


def save_image(
    messages: MessageBoard, directory: str, input_value: str, image: str
) -> Path | None:
    """Write the canvas text to a file and report where it went.

    The file is named after ``input_value`` when one was typed, otherwise
    after the current time inside ``directory``. The outer column on each
    side of every line is dropped. Returns the path, or ``None`` on failure.
    """
    if input_value:
        file_name = input_value + ".txt"
    else:
        file_name = directory + datetime.now().strftime(DEFAULT_NAME_FORMAT)

    content = "".join(line[1:-1] + "\n" for line in image.split("\n"))
    path = Path(file_name)
    try:
        with path.open("w", encoding="utf-8") as handle:
            handle.write(content)
    except OSError as exc:
        messages.add(str(exc))
        return None

    messages.add("Saved as " + file_name)
    return path


def draw_save_input(grid: Grid, value: str, blink_cursor: str) -> Grid:
    """Draw the file-name prompt box in the top left corner."""
    white = const_color("white")
    text = value + blink_cursor + ".txt"
    width = 20
    if len(text) >= width:
        width = len(text) + 2

    height = 3
    for y in range(-1, height):
        for x in range(-1, width):
            set_by_keys(x, y, " ", white, grid)
        set_by_keys(width, y, "│", white, grid)
    draw_string(0, height, "─" * width + "┘", white, grid)
    draw_string(1, 1, text, white, grid)
    return grid