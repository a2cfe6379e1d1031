"""Derive a full 22-color theme from its 10 base colors.

Derived colors are recomputed on every call unless locked, in which case
the value from the current theme is kept. Computation order matters:
``selection`` is built from ``accent``, so accent is resolved first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from themepal import defaults
from themepal.colorspace import adjust_lightness, blend_colors, hex_to_oklch, normalize_hex
from themepal.errors import UnknownColorKeyError
from themepal.types import (
    BASE_COLOR_KEYS,
    BRIGHT_TO_BASE,
    ColorLockState,
    ThemeColors,
    canonical_key,
)

logger = logging.getLogger(__name__)

ColorSource = Union[ThemeColors, Mapping[str, Any]]


@dataclass(frozen=True)
class DerivationConfig:
    """Amounts used to derive colors from the base palette."""
    bright_lightness_boost: float = defaults.BRIGHT_LIGHTNESS_BOOST
    selection_blend_factor: float = defaults.SELECTION_BLEND_FACTOR
    border_shift_factor: float = defaults.BORDER_SHIFT_FACTOR


_DEFAULT_CONFIG = DerivationConfig()


# === Single-color rules ===

def derive_bright_color(base_hex: str, config: DerivationConfig = _DEFAULT_CONFIG) -> str:
    """Bright variant: OKLCH lightness raised, chroma and hue kept."""
    return adjust_lightness(base_hex, config.bright_lightness_boost)


def derive_selection(accent: str, background: str, config: DerivationConfig = _DEFAULT_CONFIG) -> str:
    """Selection: background blended toward accent."""
    return blend_colors(background, accent, config.selection_blend_factor)


def derive_border(background: str, foreground: str, config: DerivationConfig = _DEFAULT_CONFIG) -> str:
    """Border: background shifted toward foreground."""
    return blend_colors(background, foreground, config.border_shift_factor)


def derive_cursor(foreground: str) -> str:
    return foreground


def derive_accent(blue: str) -> str:
    return blue


# === Helpers ===

def default_lock_state() -> ColorLockState:
    """All derived colors unlocked."""
    return ColorLockState()


def is_light_theme(background: str, foreground: str) -> bool:
    """True when the background is lighter (OKLCH L) than the foreground."""
    bg = hex_to_oklch(background)
    fg = hex_to_oklch(foreground)
    if bg is None or fg is None:
        return False
    return bg.l > fg.l


def extract_base_colors(colors: ThemeColors) -> dict[str, str]:
    """The 10 base colors of a theme."""
    return {key: getattr(colors, key) for key in BASE_COLOR_KEYS}


def is_base_color(key: str) -> bool:
    return canonical_key(key) in BASE_COLOR_KEYS


def is_derived_color(key: str) -> bool:
    snake = canonical_key(key)
    return snake is not None and snake not in BASE_COLOR_KEYS


def derivation_description(key: str, config: DerivationConfig = _DEFAULT_CONFIG) -> str:
    """Human-readable rule for a derived color key.

    Raises:
        UnknownColorKeyError: If *key* is not a derived color
    """
    snake = canonical_key(key)
    if snake == "cursor":
        return "Same as foreground"
    if snake == "accent":
        return "Same as blue"
    if snake == "selection":
        return f"Background blended {config.selection_blend_factor:.0%} toward accent"
    if snake == "border":
        return f"Background shifted {config.border_shift_factor:.0%} toward foreground"
    if snake in BRIGHT_TO_BASE:
        return f"{BRIGHT_TO_BASE[snake]} + {config.bright_lightness_boost:.0%} lightness"
    raise UnknownColorKeyError(f"Not a derived color key: {key!r}")


def _lookup(colors: Optional[ColorSource], key: str) -> Optional[str]:
    """Fetch *key* from a ThemeColors or a mapping in either key spelling."""
    if colors is None:
        return None
    if isinstance(colors, ThemeColors):
        return getattr(colors, key)
    for raw_key, value in colors.items():
        if canonical_key(raw_key) == key and value:
            return value
    return None


def _resolve_base(base_colors: ColorSource, key: str) -> str:
    value = _lookup(base_colors, key)
    default = defaults.DEFAULT_BASE_COLORS[key]
    if value is None:
        return default
    normalized = normalize_hex(value)
    if normalized is None:
        logger.warning("Invalid base color %s=%r, using default %s", key, value, default)
        return default
    return normalized


def _locked_value(
    key: str,
    locks: ColorLockState,
    current_colors: Optional[ColorSource],
) -> Optional[str]:
    """Current value for a locked key, or None when it must be recomputed."""
    if not locks.is_locked(key):
        return None
    value = _lookup(current_colors, key)
    if value is None:
        return None
    normalized = normalize_hex(value)
    if normalized is None:
        logger.warning("Locked color %s has invalid value %r, recomputing", key, value)
    return normalized


# === Main entry point ===

def derive_all_colors(
    base_colors: ColorSource,
    locks: Optional[Union[ColorLockState, Mapping[str, Any]]] = None,
    current_colors: Optional[ColorSource] = None,
    config: Optional[DerivationConfig] = None,
) -> ThemeColors:
    """Calculate all 22 theme colors from the base colors.

    Args:
        base_colors: Partial base colors (mapping or ThemeColors); missing or
            invalid entries fall back to the built-in default palette
        locks: Derived colors to keep from *current_colors*, as a
            ColorLockState or a mapping of key -> bool (default: none)
        current_colors: The theme currently being edited, source of locked values
        config: Derivation amounts (default: DerivationConfig())

    Returns:
        Complete ThemeColors
    """
    if locks is None:
        locks = default_lock_state()
    elif not isinstance(locks, ColorLockState):
        locks = ColorLockState.from_dict(locks)
    config = config if config is not None else _DEFAULT_CONFIG

    result: dict[str, str] = {key: _resolve_base(base_colors, key) for key in BASE_COLOR_KEYS}

    def resolve(key: str, compute) -> None:
        kept = _locked_value(key, locks, current_colors)
        result[key] = kept if kept is not None else compute()

    resolve("accent", lambda: derive_accent(result["blue"]))
    for bright_key, base_key in BRIGHT_TO_BASE.items():
        resolve(bright_key, lambda base_key=base_key: derive_bright_color(result[base_key], config))
    resolve("cursor", lambda: derive_cursor(result["foreground"]))
    resolve("selection", lambda: derive_selection(result["accent"], result["background"], config))
    resolve("border", lambda: derive_border(result["background"], result["foreground"], config))

    return ThemeColors(**result)
