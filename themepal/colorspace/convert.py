"""Hex <-> OKLCH / OKLab conversion for single colors and swatch batches.

Parsing failures come back as ``None``; nothing here raises on bad input.
Output hex is always canonical lowercase ``#rrggbb``.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np

from .gamut import gamut_clip, gamut_clip_oklab
from .hexcolor import parse_hex, rgb_to_hex
from .oklch import OKLCH, srgb_to_oklab, srgb_to_oklch


def _srgb_to_hex(rgb: np.ndarray) -> str:
    """sRGB (3,) in [0,1] -> hex, rounding to 8 bits."""
    channels = np.round(np.clip(rgb, 0.0, 1.0) * 255)
    return rgb_to_hex(*(int(v) for v in channels))


def hex_to_oklch(hex_color: str) -> Optional[OKLCH]:
    """Convert ``#rrggbb`` to OKLCH, or None if the string is malformed."""
    rgb = parse_hex(hex_color)
    if rgb is None:
        return None
    L, C, H = srgb_to_oklch(np.array(rgb, dtype=np.float64) / 255.0)
    return OKLCH(l=float(np.clip(L, 0.0, 1.0)), c=float(C), h=float(H))


def hexes_to_oklch(hex_colors: Iterable[str]) -> list[Optional[OKLCH]]:
    """Batch :func:`hex_to_oklch`; entries that fail to parse stay None."""
    parsed = [parse_hex(h) for h in hex_colors]
    valid_idx = [i for i, rgb in enumerate(parsed) if rgb is not None]
    results: list[Optional[OKLCH]] = [None] * len(parsed)
    if not valid_idx:
        return results

    rgb = np.array([parsed[i] for i in valid_idx], dtype=np.float64) / 255.0
    L, C, H = srgb_to_oklch(rgb)
    L = np.clip(L, 0.0, 1.0)
    for j, i in enumerate(valid_idx):
        results[i] = OKLCH(l=float(L[j]), c=float(C[j]), h=float(H[j]))
    return results


def oklch_to_hex(color: OKLCH) -> str:
    """Convert OKLCH to hex. Always succeeds.

    Lightness is clamped to [0,1], chroma to >= 0 and hue wrapped; any sRGB
    channel still outside [0,1] is clipped (see :mod:`.gamut`).
    """
    L = min(1.0, max(0.0, color.l))
    C = max(0.0, color.c)
    H = color.h % 360
    return _srgb_to_hex(gamut_clip(L, C, H))


def hex_to_oklab(hex_color: str) -> Optional[tuple[float, float, float]]:
    """Convert ``#rrggbb`` to Cartesian OKLab (L, a, b), or None."""
    rgb = parse_hex(hex_color)
    if rgb is None:
        return None
    L, a, b = srgb_to_oklab(np.array(rgb, dtype=np.float64) / 255.0)
    return float(L), float(a), float(b)


def oklab_to_hex(L: float, a: float, b: float) -> str:
    """Convert OKLab to hex with gamut clipping."""
    return _srgb_to_hex(gamut_clip_oklab(L, a, b))
