"""Hex color strings and the other color-string formats users paste in.

Theme colors are always stored as canonical lowercase ``#rrggbb``. The
lenient parsers here return ``None`` for anything they cannot read; use
:func:`require_hex` where an invalid color should be an error.
"""

from __future__ import annotations

import colorsys
import re
from typing import Literal, Optional

from themepal.errors import InvalidColorError

_HEX6_RE = re.compile(r"#([0-9a-fA-F]{6})")
_HEX_ANY_RE = re.compile(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})")
_RGB_WRAPPER_RE = re.compile(r"rgb\s*\(\s*|\s*\)", re.IGNORECASE)
_HSL_WRAPPER_RE = re.compile(r"hsl\s*\(\s*|\s*\)", re.IGNORECASE)
_SEPARATOR_RE = re.compile(r"[,\s]+")
_NUMBER_RE = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")

ColorFormat = Literal["hex", "rgb", "hsl", "invalid"]


# === Strict 6-digit hex ===

def parse_hex(value: object) -> Optional[tuple[int, int, int]]:
    """Parse ``#rrggbb`` (any case) into 0-255 channels, or None.

    The whole string must match; surrounding whitespace is rejected.
    """
    if not isinstance(value, str):
        return None
    match = _HEX6_RE.fullmatch(value)
    if match is None:
        return None
    digits = match.group(1)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def is_valid_hex(value: object) -> bool:
    """True for ``#rrggbb`` strings."""
    return parse_hex(value) is not None


def normalize_hex(value: object) -> Optional[str]:
    """Canonical lowercase ``#rrggbb``, or None if *value* is not a 6-digit hex."""
    rgb = parse_hex(value)
    if rgb is None:
        return None
    return rgb_to_hex(*rgb)


def require_hex(value: object, key: Optional[str] = None) -> str:
    """Like :func:`normalize_hex` but raises InvalidColorError."""
    normalized = normalize_hex(value)
    if normalized is None:
        where = f" for '{key}'" if key else ""
        raise InvalidColorError(f"Invalid hex color{where}: {value!r} (expected #rrggbb)")
    return normalized


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """0-255 channels (rounded and clamped) -> ``#rrggbb``."""
    channels = (max(0, min(255, int(round(v)))) for v in (r, g, b))
    return "#" + "".join(f"{v:02x}" for v in channels)


# === Shorthand hex ===

def is_valid_hex_color(value: object) -> bool:
    """True for ``#rgb`` or ``#rrggbb`` strings."""
    return isinstance(value, str) and _HEX_ANY_RE.fullmatch(value) is not None


def expand_hex(value: object) -> Optional[str]:
    """Expand ``#rgb`` to canonical ``#rrggbb``; ``#rrggbb`` is just normalized."""
    if not is_valid_hex_color(value):
        return None
    digits = value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return "#" + digits.lower()


# === rgb() / hsl() strings ===

def _split_parts(cleaned: str) -> list[str]:
    return [p for p in _SEPARATOR_RE.split(cleaned.strip()) if p]


def parse_rgb_string(value: str) -> Optional[tuple[int, int, int]]:
    """Parse ``rgb(255, 128, 0)``, ``255, 128, 0`` or ``255 128 0``."""
    parts = _split_parts(_RGB_WRAPPER_RE.sub("", value))
    if len(parts) != 3 or not all(p.isdigit() for p in parts):
        return None
    channels = tuple(int(p) for p in parts)
    if not all(0 <= c <= 255 for c in channels):
        return None
    return channels  # type: ignore[return-value]


def parse_hsl_string(value: str) -> Optional[tuple[float, float, float]]:
    """Parse ``hsl(210, 50%, 40%)``, ``210, 50%, 40%`` or ``210 50% 40%``.

    Without an ``hsl(`` wrapper or a ``%`` sign the triplet is ambiguous
    with rgb, so the hue must then be above 255 or written with a decimal
    point.
    """
    original = value.strip()
    parts = _split_parts(_HSL_WRAPPER_RE.sub("", original))
    if len(parts) != 3:
        return None

    h_part, s_part, l_part = parts
    s_part = s_part.replace("%", "")
    l_part = l_part.replace("%", "")
    if not all(_NUMBER_RE.match(p) for p in (h_part, s_part, l_part)):
        return None

    h, s, l = float(h_part), float(s_part), float(l_part)
    if not (0 <= h <= 360 and 0 <= s <= 100 and 0 <= l <= 100):
        return None

    if "hsl(" not in original.lower() and "%" not in original:
        if h <= 255 and "." not in h_part:
            return None

    return (h, s, l)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """HSL (degrees, percent, percent) -> ``#rrggbb``."""
    r, g, b = colorsys.hls_to_rgb((h % 360) / 360, l / 100, s / 100)
    return rgb_to_hex(r * 255, g * 255, b * 255)


def detect_color_format(value: str) -> ColorFormat:
    """Classify a color string as hex, rgb, hsl or invalid."""
    trimmed = value.strip()
    if is_valid_hex_color(trimmed):
        return "hex"
    if parse_rgb_string(trimmed) is not None:
        return "rgb"
    if parse_hsl_string(trimmed) is not None:
        return "hsl"
    return "invalid"


def to_hex(value: str) -> Optional[str]:
    """Convert any supported color string to canonical ``#rrggbb``."""
    fmt = detect_color_format(value)
    trimmed = value.strip()
    if fmt == "hex":
        return expand_hex(trimmed)
    if fmt == "rgb":
        rgb = parse_rgb_string(trimmed)
        return rgb_to_hex(*rgb) if rgb is not None else None
    if fmt == "hsl":
        hsl = parse_hsl_string(trimmed)
        return hsl_to_hex(*hsl) if hsl is not None else None
    return None
