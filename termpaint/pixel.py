"""Colours, coordinates and the pixels placed on the canvas."""

from __future__ import annotations

from dataclasses import dataclass, field

MIN_COLOR = 0
MAX_COLOR = 255

# Width-to-height ratio of a terminal cell, used to keep circles round.
RATIO = 0.4583333333333333


@dataclass(frozen=True)
class Color:
    """An RGB colour with channels in the range 0..255."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass(frozen=True)
class Coord:
    """A cell position: column ``x`` and row ``y``."""

    x: int = 0
    y: int = 0


@dataclass(frozen=True)
class Pixel:
    """A symbol drawn in a colour at a position."""

    coord: Coord
    color: Color = field(default_factory=Color)
    symbol: str = ""


_NAMED_COLORS = {
    "white": Color(MAX_COLOR, MAX_COLOR, MAX_COLOR),
    "green": Color(2, 186, 31),
    "yellow": Color(190, 175, MIN_COLOR),
    "gray": Color(150, 150, 150),
    "cian": Color(MIN_COLOR, 200, 200),
    "red": Color(250, MIN_COLOR, MIN_COLOR),
}


def const_color(name: str) -> Color:
    """Return one of the interface colours; unknown names give white."""
    return _NAMED_COLORS.get(name, _NAMED_COLORS["white"])


def set_color(color: int) -> int:
    """Clamp a typed channel value to the maximum."""
    return color if color < MAX_COLOR else MAX_COLOR


def decrease(color: int) -> int:
    """Lower a channel by one, not below the minimum."""
    return color - 1 if color > MIN_COLOR else color


def increase(color: int) -> int:
    """Raise a channel by one, not above the maximum."""
    return color + 1 if color < MAX_COLOR else color


def min_max_color(color: int) -> int:
    """Toggle a channel: any lit value goes to the minimum, the minimum to the maximum."""
    return MIN_COLOR if color > MIN_COLOR else MAX_COLOR