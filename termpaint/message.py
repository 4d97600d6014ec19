"""Short-lived notifications shown in a box at the top left."""

from __future__ import annotations

from dataclasses import dataclass, field

from .pixel import const_color
from .utils import Grid, draw_string, set_by_keys


@dataclass
class Message:
    """A notification and the ticks it has left to live."""

    text: str
    live_time: int = 0


@dataclass
class MessageBoard:
    """The queue of notifications and the width of their box."""

    live_time: int = 0
    messages: list[Message] = field(default_factory=list)
    width: int = 0

    def add(self, text: str) -> None:
        """Queue a notification; the box widens to fit it."""
        self.messages.append(Message(text, self.live_time))
        self.width = max(self.width, len(text))

    def tick(self) -> None:
        """Age every notification by one tick and drop the expired ones."""
        expired = 0
        for message in self.messages:
            if message.live_time > 0:
                message.live_time -= 1
            else:
                expired += 1
        del self.messages[:expired]

    def clear(self) -> None:
        """Drop every notification."""
        self.messages.clear()

    def draw(self, grid: Grid) -> Grid:
        """Draw the notification box into ``grid`` when there is anything to show."""
        if not self.messages:
            return grid
        white = const_color("white")
        width = self.width + 5
        height = len(self.messages) + 2
        for y in range(height):
            for x in range(width):
                set_by_keys(x, y, " ", white, grid)
            set_by_keys(width, y, "│", white, grid)
        draw_string(0, height, "─" * width + "┘", white, grid)
        for row, message in enumerate(self.messages, start=1):
            draw_string(1, row, message.text, white, grid)
        return grid