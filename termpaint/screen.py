"""The editor screen: canvas state, event dispatch and rendering."""

from __future__ import annotations

from .bind import KeyEvent, MouseEvent, key_bind, mouse_bind
from .config import Config
from .cursor import Cursor
from .files import draw_save_input, save_image
from .menu import MenuState
from .message import MessageBoard
from .panels import draw_menu
from .pixel import Pixel
from .utils import Grid, isset, set_by_keys


class Screen:
    """The drawing, its pending pixels and everything shown around it."""

    def __init__(
        self,
        config: Config,
        cursor: Cursor | None = None,
        menu: MenuState | None = None,
        messages: MessageBoard | None = None,
    ) -> None:
        self.config = config
        self.cursor = cursor if cursor is not None else Cursor.from_config(config)
        self.menu = menu if menu is not None else MenuState()
        self.messages = (
            messages if messages is not None else MessageBoard(config.notification_time)
        )
        self.width = 0
        self.height = 0
        self.show_input_save = False
        self.save = False
        self.pixels: Grid = []
        self.unsaved_pixels: dict[tuple[int, int], Pixel] = {}

    @property
    def directory(self) -> str:
        """The directory the file browser shows and images are saved in."""
        return self.config.image_save_directory

    @directory.setter
    def directory(self, value: str) -> None:
        self.config.image_save_directory = value

    def resize(self, width: int, height: int) -> None:
        """Adopt a new terminal size and centre the cursor."""
        self.cursor.x = width // 2
        self.cursor.y = height // 2
        self.width = width
        self.height = height

    def tick(self) -> None:
        """Age notifications and advance the blinking prompt cursor."""
        self.messages.tick()
        self.menu.blinker.tick()

    def handle(self, event: KeyEvent | MouseEvent) -> bool:
        """Dispatch an input event. Returns ``True`` when the program should exit."""
        if isinstance(event, KeyEvent):
            return key_bind(event, self)
        if isinstance(event, MouseEvent):
            mouse_bind(event, self)
        return False

    def view(self) -> str:
        """Render the whole screen as text with colour escapes."""
        if self.height == 0:
            return ""
        self.pixels = [[" "] * self.width for _ in range(self.height)]
        for p in self.unsaved_pixels.values():
            set_by_keys(p.coord.x, p.coord.y, p.symbol, p.color, self.pixels)
        draw_menu(self)
        self.messages.draw(self.pixels)
        if not self.save:
            self.cursor.draw(self.pixels, self.config)
        if self.show_input_save:
            draw_save_input(self.pixels, self.menu.input.value, self.menu.blinker.cursor)

        text = "\n".join("".join(line) for line in self.pixels)
        if self.save and not self.show_input_save:
            self.save = False
            save_image(self.messages, self.directory, self.menu.input.value, text)

        if self.config.background:
            color = self.config.background_color
            text = (
                f"\x1b[48;2;{color.get('r', 0)};{color.get('g', 0)};{color.get('b', 0)}m"
                + text
            )
        return text

    def get_pixel(self, y: int, x: int) -> str:
        """The rendered cell at row ``y``, column ``x``, or ``""`` outside the canvas."""
        if not isset(self.pixels, y, x):
            return ""
        return self.pixels[y][x]

    def add_pixels(self, *args: Pixel) -> None:
        """Queue pixels for drawing; a later pixel replaces one at the same cell."""
        for p in args:
            self.unsaved_pixels[(p.coord.y, p.coord.x)] = p

    def clear_unsaved_pixels(self) -> None:
        """Forget every drawn pixel."""
        self.unsaved_pixels = {}