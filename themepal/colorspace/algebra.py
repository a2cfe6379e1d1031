"""Lightness adjustment and blending on hex colors.

Both operations hand back an input unchanged when it cannot be parsed, so
a bad color never aborts a larger derivation.
"""

from __future__ import annotations

from .convert import hex_to_oklab, hex_to_oklch, oklab_to_hex, oklch_to_hex


def adjust_lightness(hex_color: str, delta: float) -> str:
    """Shift OKLCH lightness by *delta* (clamped to [0,1]), keeping C and H.

    Returns *hex_color* unchanged if it is not a valid hex color.
    """
    lch = hex_to_oklch(hex_color)
    if lch is None:
        return hex_color
    return oklch_to_hex(lch.with_lightness(lch.l + delta))


def blend_colors(hex_a: str, hex_b: str, t: float) -> str:
    """Blend two colors by fraction *t* (0 -> a, 1 -> b) in OKLab.

    Interpolates the a/b axes, not hue, so complementary colors pass
    through gray instead of sweeping around the wheel. Returns *hex_a*
    unchanged if either input is not a valid hex color.
    """
    lab_a = hex_to_oklab(hex_a)
    lab_b = hex_to_oklab(hex_b)
    if lab_a is None or lab_b is None:
        return hex_a

    t = min(1.0, max(0.0, t))
    L = lab_a[0] + (lab_b[0] - lab_a[0]) * t
    a = lab_a[1] + (lab_b[1] - lab_a[1]) * t
    b = lab_a[2] + (lab_b[2] - lab_a[2]) * t
    return oklab_to_hex(L, a, b)
