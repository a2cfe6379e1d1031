"""Core data types for themepal - plain value objects.

Theme color keys are snake_case in Python (``bright_black``); the theme
manifest stores them camelCase (``brightBlack``). ``from_dict`` accepts
either spelling and ``to_dict`` writes the manifest spelling.
"""

from __future__ import annotations

import enum
import re
from dataclasses import dataclass, fields, replace
from typing import Any, Iterator, Mapping, Optional

from themepal import defaults
from themepal.colorspace.hexcolor import require_hex
from themepal.colorspace.oklch import OKLCH
from themepal.errors import MissingColorError, UnknownColorKeyError

__all__ = [
    'OKLCH',
    'SwatchInput',
    'AnsiHueSlot',
    'ANSI_HUE_SLOTS',
    'ThemeColors',
    'ColorLockState',
    'BASE_COLOR_KEYS',
    'BRIGHT_COLOR_KEYS',
    'BRIGHT_TO_BASE',
    'DERIVED_COLOR_KEYS',
    'THEME_COLOR_KEYS',
    'canonical_key',
    'manifest_key',
]


BASE_COLOR_KEYS: tuple[str, ...] = (
    "background", "foreground", "black", "red", "green",
    "yellow", "blue", "magenta", "cyan", "white",
)

BRIGHT_TO_BASE: dict[str, str] = {
    "bright_black": "black",
    "bright_red": "red",
    "bright_green": "green",
    "bright_yellow": "yellow",
    "bright_blue": "blue",
    "bright_magenta": "magenta",
    "bright_cyan": "cyan",
    "bright_white": "white",
}

BRIGHT_COLOR_KEYS: tuple[str, ...] = tuple(BRIGHT_TO_BASE)

DERIVED_COLOR_KEYS: tuple[str, ...] = BRIGHT_COLOR_KEYS + (
    "cursor", "selection", "border", "accent",
)

THEME_COLOR_KEYS: tuple[str, ...] = BASE_COLOR_KEYS + DERIVED_COLOR_KEYS

_CAMEL_BOUNDARY_RE = re.compile(r"(?<!^)(?=[A-Z])")


def manifest_key(key: str) -> str:
    """snake_case theme key -> manifest camelCase (``bright_red`` -> ``brightRed``)."""
    head, *rest = key.split("_")
    return head + "".join(part.capitalize() for part in rest)


def canonical_key(key: object) -> Optional[str]:
    """Map a theme color key in either spelling to snake_case, or None if unknown."""
    if not isinstance(key, str):
        return None
    snake = _CAMEL_BOUNDARY_RE.sub("_", key).lower()
    return snake if snake in THEME_COLOR_KEYS else None


@dataclass(frozen=True)
class SwatchInput:
    """A candidate color with a prominence weight (e.g. pixel count)."""
    hex: str
    population: int = 0

    def __post_init__(self):
        if self.population < 0:
            raise ValueError(f"Swatch population must be non-negative, got {self.population}")


class AnsiHueSlot(enum.Enum):
    """The six hue-bearing ANSI terminal colors."""

    RED = "red"
    YELLOW = "yellow"
    GREEN = "green"
    CYAN = "cyan"
    BLUE = "blue"
    MAGENTA = "magenta"

    @property
    def target_hue(self) -> float:
        """Canonical OKLCH hue angle for this slot."""
        return defaults.ANSI_HUE_TARGETS[self.value]


ANSI_HUE_SLOTS: tuple[AnsiHueSlot, ...] = tuple(AnsiHueSlot)


@dataclass(frozen=True)
class ThemeColors:
    """The full 22-color theme palette, every value canonical ``#rrggbb``."""

    # Base colors
    background: str
    foreground: str
    black: str
    red: str
    green: str
    yellow: str
    blue: str
    magenta: str
    cyan: str
    white: str
    # Derived colors
    bright_black: str
    bright_red: str
    bright_green: str
    bright_yellow: str
    bright_blue: str
    bright_magenta: str
    bright_cyan: str
    bright_white: str
    cursor: str
    selection: str
    border: str
    accent: str

    def __getitem__(self, key: str) -> str:
        snake = canonical_key(key)
        if snake is None:
            raise UnknownColorKeyError(key)
        return getattr(self, snake)

    def __iter__(self) -> Iterator[str]:
        return iter(THEME_COLOR_KEYS)

    def items(self) -> Iterator[tuple[str, str]]:
        for key in THEME_COLOR_KEYS:
            yield key, getattr(self, key)

    def replace(self, **changes: str) -> ThemeColors:
        """Copy with some colors changed (values are normalized)."""
        normalized = {key: require_hex(value, key) for key, value in changes.items()}
        return replace(self, **normalized)

    def to_dict(self) -> dict[str, str]:
        """Manifest form: camelCase keys."""
        return {manifest_key(key): value for key, value in self.items()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ThemeColors:
        """Build from a mapping with camelCase or snake_case keys.

        Unknown keys are ignored.

        Raises:
            MissingColorError: If any of the 22 colors is absent
            InvalidColorError: If any value is not a ``#rrggbb`` string
        """
        values: dict[str, str] = {}
        for raw_key, value in data.items():
            key = canonical_key(raw_key)
            if key is None:
                continue
            values[key] = require_hex(value, raw_key)

        missing = [manifest_key(k) for k in THEME_COLOR_KEYS if k not in values]
        if missing:
            raise MissingColorError(f"Theme colors missing: {', '.join(missing)}")
        return cls(**values)


@dataclass(frozen=True)
class ColorLockState:
    """Which derived colors are locked (True = keep the existing value)."""

    bright_black: bool = False
    bright_red: bool = False
    bright_green: bool = False
    bright_yellow: bool = False
    bright_blue: bool = False
    bright_magenta: bool = False
    bright_cyan: bool = False
    bright_white: bool = False
    cursor: bool = False
    selection: bool = False
    border: bool = False
    accent: bool = False

    def is_locked(self, key: str) -> bool:
        snake = canonical_key(key)
        if snake is None or snake not in DERIVED_COLOR_KEYS:
            raise UnknownColorKeyError(f"Not a derived color key: {key!r}")
        return getattr(self, snake)

    def locked_keys(self) -> tuple[str, ...]:
        return tuple(key for key in DERIVED_COLOR_KEYS if getattr(self, key))

    def with_lock(self, key: str, locked: bool = True) -> ColorLockState:
        self.is_locked(key)  # validates key
        return replace(self, **{canonical_key(key): locked})

    def to_dict(self) -> dict[str, bool]:
        return {manifest_key(f.name): getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> ColorLockState:
        """Missing keys are unlocked; keys that are not derived colors are ignored.

        Only a real ``True`` locks a key, so strings such as ``"false"`` do not.
        """
        if not data:
            return cls()
        locks: dict[str, bool] = {}
        for raw_key, value in data.items():
            key = canonical_key(raw_key)
            if key in DERIVED_COLOR_KEYS:
                locks[key] = value is True
        return cls(**locks)
