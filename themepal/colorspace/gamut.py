"""Gamut handling for out-of-gamut OKLCH values.

Not all (L, C, H) combinations produce valid sRGB. High chroma at
extreme lightness is particularly problematic.

Theme colors use hard clipping: each sRGB channel is clamped to [0,1]
after conversion. This can shift hue and lightness slightly for colors far
outside the gamut, but never moves a color that is already displayable.
"""

import numpy as np

from .oklch import Array, oklch_to_srgb, oklab_to_srgb


def is_in_gamut(L: Array, C: Array, H: Array, tolerance: float = 1e-4) -> np.ndarray:
    """Check if OKLCH values produce valid sRGB (all channels in [0,1])."""
    rgb = oklch_to_srgb(L, C, H)
    in_range = (rgb >= -tolerance) & (rgb <= 1 + tolerance)
    return np.all(in_range, axis=-1)


def gamut_clip(L: Array, C: Array, H: Array) -> np.ndarray:
    """Convert OKLCH to sRGB and hard-clip to [0,1].

    Returns:
        RGB array (..., 3) with values clamped to [0,1]
    """
    rgb = oklch_to_srgb(L, C, H)
    return np.clip(rgb, 0.0, 1.0)


def gamut_clip_oklab(L: Array, a: Array, b: Array) -> np.ndarray:
    """Convert OKLab to sRGB and hard-clip to [0,1]."""
    rgb = oklab_to_srgb(L, a, b)
    return np.clip(rgb, 0.0, 1.0)
