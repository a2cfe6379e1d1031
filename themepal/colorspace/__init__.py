"""OKLCH color space conversions, gamut clipping and hex color algebra.

This module provides:
- OKLCH <-> sRGB conversions (numpy, batch-friendly)
- Gamut clipping to displayable sRGB
- Hex parsing plus rgb()/hsl() color-string formats
- Hex <-> OKLCH helpers and lightness/blend operations on hex colors

Example:
    from themepal.colorspace import hex_to_oklch, oklch_to_hex, blend_colors

    lch = hex_to_oklch("#7aa2f7")          # OKLCH(l=0.72, c=0.13, h=264.2)
    lighter = oklch_to_hex(lch.with_lightness(lch.l + 0.1))
    selection = blend_colors("#1a1b26", "#7aa2f7", 0.3)
"""

from .oklch import (
    OKLCH,
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    linear_to_srgb,
    srgb_to_linear,
    oklch_to_srgb,
    srgb_to_oklch,
    srgb_to_oklab,
    oklab_to_srgb,
)

from .gamut import (
    is_in_gamut,
    gamut_clip,
    gamut_clip_oklab,
)

from .hexcolor import (
    parse_hex,
    is_valid_hex,
    normalize_hex,
    require_hex,
    rgb_to_hex,
    is_valid_hex_color,
    expand_hex,
    parse_rgb_string,
    parse_hsl_string,
    hsl_to_hex,
    detect_color_format,
    to_hex,
)

from .convert import (
    hex_to_oklch,
    hexes_to_oklch,
    oklch_to_hex,
    hex_to_oklab,
    oklab_to_hex,
)

from .algebra import adjust_lightness, blend_colors

__all__ = [
    # Hex-level API
    'OKLCH',
    'hex_to_oklch',
    'hexes_to_oklch',
    'oklch_to_hex',
    'hex_to_oklab',
    'oklab_to_hex',
    'adjust_lightness',
    'blend_colors',
    # Color strings
    'parse_hex',
    'is_valid_hex',
    'normalize_hex',
    'require_hex',
    'rgb_to_hex',
    'is_valid_hex_color',
    'expand_hex',
    'parse_rgb_string',
    'parse_hsl_string',
    'hsl_to_hex',
    'detect_color_format',
    'to_hex',
    # OKLCH array conversions
    'oklch_to_oklab',
    'oklab_to_oklch',
    'oklab_to_linear_rgb',
    'linear_rgb_to_oklab',
    'linear_to_srgb',
    'srgb_to_linear',
    'oklch_to_srgb',
    'srgb_to_oklch',
    'srgb_to_oklab',
    'oklab_to_srgb',
    # Gamut
    'is_in_gamut',
    'gamut_clip',
    'gamut_clip_oklab',
]
