"""Settings: the config dataclasses, their YAML file and where it lives."""

from __future__ import annotations

import os
import shutil
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from .pixel import Color

CONFIG_FILE_NAME = "config.yaml"
CONFIG_DIR_NAME = "termPaint"

DEFAULT_SETTINGS: dict[str, Any] = {
    "background": False,
    "background_color": {"r": 0, "g": 0, "b": 0},
    "default_cursor": "█",
    "default_color": {"r": 255, "g": 255, "b": 255},
    "pointer": "▶",
    "pointer_color": {"r": 2, "g": 186, "b": 31},
    "symbols": {
        3: {3: "█", 5: "▓", 7: "▒", 9: "░", 11: "▚"},
        5: {3: "●", 5: "○", 7: "◆", 9: "◇", 11: "◉"},
        7: {3: "■", 5: "□", 7: "▲", 9: "△", 11: "▼"},
        9: {3: "*", 5: "+", 7: "#", 9: "@", 11: "~"},
        11: {3: "─", 5: "│", 7: "┼", 9: "═", 11: "║"},
    },
    "show_folder": True,
    "show_hidden_folder": False,
    "image_save_directory": str(Path.home() / "termPaint") + os.sep,
    "image_save_name_format": "%Y-%m-%d %H:%M:%S.txt",
    "notification_time": 300,
    "notifications": {
        "set_symbol": True,
        "error": True,
        "save_image": True,
        "load_image_size_errors": True,
    },
}


class ConfigError(Exception):
    """Raised when settings cannot be read or decoded."""


def _as_bool(value: Any, name: str) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        return value != 0
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "t", "true", ""):
            return lowered != ""
        if lowered in ("0", "f", "false"):
            return False
    raise ConfigError(f"{name}: expected a boolean, got {value!r}")


def _as_int(value: Any, name: str) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name}: expected an integer, got {value!r}") from exc


def _as_str(value: Any, name: str) -> str:
    if value is None:
        return ""
    if isinstance(value, (Mapping, list)):
        raise ConfigError(f"{name}: expected a string, got {value!r}")
    return str(value)


def _as_mapping(value: Any, name: str) -> Mapping:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigError(f"{name}: expected a mapping, got {value!r}")
    return value


def _as_channels(value: Any, name: str) -> dict[str, int]:
    return {
        str(key).lower(): _as_int(item, f"{name}.{key}")
        for key, item in _as_mapping(value, name).items()
    }


def _as_symbols(value: Any) -> dict[int, dict[int, str]]:
    return {
        _as_int(row, "symbols"): {
            _as_int(col, f"symbols.{row}"): _as_str(symbol, f"symbols.{row}.{col}")
            for col, symbol in _as_mapping(line, f"symbols.{row}").items()
        }
        for row, line in _as_mapping(value, "symbols").items()
    }


def _lower_keys(data: Mapping) -> dict[str, Any]:
    return {str(key).lower(): value for key, value in data.items()}


@dataclass
class Notifications:
    """Which kinds of notification are shown."""

    set_symbol: bool = False
    error: bool = False
    save_image: bool = False
    load_image_size_errors: bool = False


@dataclass
class Config:
    """All user settings."""

    background: bool = False
    background_color: dict[str, int] = field(default_factory=dict)
    default_cursor: str = ""
    default_color: dict[str, int] = field(default_factory=dict)
    pointer: str = ""
    pointer_color: dict[str, int] = field(default_factory=dict)
    symbols: dict[int, dict[int, str]] = field(default_factory=dict)
    show_folder: bool = False
    show_hidden_folder: bool = False
    image_save_directory: str = ""
    image_save_name_format: str = ""
    notification_time: int = 0
    notifications: Notifications = field(default_factory=Notifications)

    @classmethod
    def from_mapping(cls, data: Mapping | None) -> Config:
        """Build settings from parsed YAML; missing keys take zero values."""
        values = _lower_keys(_as_mapping(data, "config"))
        notes = _lower_keys(_as_mapping(values.get("notifications"), "notifications"))
        return cls(
            background=_as_bool(values.get("background"), "background"),
            background_color=_as_channels(values.get("background_color"), "background_color"),
            default_cursor=_as_str(values.get("default_cursor"), "default_cursor"),
            default_color=_as_channels(values.get("default_color"), "default_color"),
            pointer=_as_str(values.get("pointer"), "pointer"),
            pointer_color=_as_channels(values.get("pointer_color"), "pointer_color"),
            symbols=_as_symbols(values.get("symbols")),
            show_folder=_as_bool(values.get("show_folder"), "show_folder"),
            show_hidden_folder=_as_bool(values.get("show_hidden_folder"), "show_hidden_folder"),
            image_save_directory=_as_str(
                values.get("image_save_directory"), "image_save_directory"
            ),
            image_save_name_format=_as_str(
                values.get("image_save_name_format"), "image_save_name_format"
            ),
            notification_time=_as_int(values.get("notification_time"), "notification_time"),
            notifications=Notifications(
                set_symbol=_as_bool(notes.get("set_symbol"), "notifications.set_symbol"),
                error=_as_bool(notes.get("error"), "notifications.error"),
                save_image=_as_bool(notes.get("save_image"), "notifications.save_image"),
                load_image_size_errors=_as_bool(
                    notes.get("load_image_size_errors"),
                    "notifications.load_image_size_errors",
                ),
            ),
        )

    def color(self) -> Color:
        """The default drawing colour."""
        return Color(
            self.default_color.get("r", 0),
            self.default_color.get("g", 0),
            self.default_color.get("b", 0),
        )


def _user_config_dir() -> Path:
    if sys.platform == "win32":
        appdata = os.environ.get("APPDATA")
        return Path(appdata) if appdata else Path.home() / "AppData" / "Roaming"
    if sys.platform == "darwin":
        return Path.home() / "Library" / "Application Support"
    xdg = os.environ.get("XDG_CONFIG_HOME")
    return Path(xdg) if xdg else Path.home() / ".config"


def default_config_path(dev: bool) -> Path:
    """The settings file: beside the working directory in development, else per user."""
    if dev:
        return Path(CONFIG_FILE_NAME)
    return _user_config_dir() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def _read_settings(path: Path) -> Any:
    return yaml.safe_load(Path(path).read_text(encoding="utf-8"))


def load_config(path: str | os.PathLike) -> Config:
    """Read and decode a settings file."""
    try:
        data = _read_settings(Path(path))
    except yaml.YAMLError as exc:
        raise ConfigError(f"cannot parse {path}: {exc}") from exc
    return Config.from_mapping(data)


def create_config_file(directory: str | os.PathLike) -> Path:
    """Create ``directory`` and a settings file in it.

    A ``config.yaml`` in the working directory is copied when present;
    otherwise the built-in defaults are written.
    """
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    target = directory / CONFIG_FILE_NAME
    local = Path(CONFIG_FILE_NAME)
    if local.is_file() and local.resolve() != target.resolve():
        shutil.copyfile(local, target)
    else:
        target.write_text(
            yaml.safe_dump(DEFAULT_SETTINGS, allow_unicode=True, sort_keys=False),
            encoding="utf-8",
        )
    return target


def init_config(dev: bool | None = None) -> Config:
    """Load the settings, creating the per-user file first if it cannot be read.

    ``dev`` defaults to whether the ``ENV`` variable is ``dev``.
    """
    if dev is None:
        dev = os.environ.get("ENV") == "dev"
    path = default_config_path(dev)
    try:
        data = _read_settings(path)
    except (OSError, yaml.YAMLError):
        create_config_file(default_config_path(False).parent)
        data = _read_settings(path)
    return Config.from_mapping(data)