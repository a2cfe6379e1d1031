"""Derive desktop theme palettes in OKLCH.

This package provides:
- derive_all_colors: the full 22-color theme from 10 base colors, honoring locks
- assign_swatches_to_ansi_slots: wallpaper swatches -> red/yellow/green/cyan/blue/magenta
- OKLCH conversion and hex color algebra (see themepal.colorspace)
- validate_color_json: checks pasted theme color JSON

Example:
    from themepal import SwatchInput, assign_swatches_to_ansi_slots, derive_all_colors
    from themepal import ansi_slots_to_base_colors

    slots = assign_swatches_to_ansi_slots([
        SwatchInput("#4a7bd0", population=1200),
        SwatchInput("#c9584a", population=300),
    ])
    theme = derive_all_colors({
        "background": "#1a1b26",
        "foreground": "#c0caf5",
        **ansi_slots_to_base_colors(slots),
    })
"""

from .colorspace import (
    OKLCH,
    hex_to_oklch,
    oklch_to_hex,
    adjust_lightness,
    blend_colors,
)

from .errors import (
    ThemeColorError,
    InvalidColorError,
    MissingColorError,
    UnknownColorKeyError,
)

from .types import (
    SwatchInput,
    AnsiHueSlot,
    ANSI_HUE_SLOTS,
    ThemeColors,
    ColorLockState,
    BASE_COLOR_KEYS,
    DERIVED_COLOR_KEYS,
    THEME_COLOR_KEYS,
)

from .derivation import (
    DerivationConfig,
    derive_all_colors,
    derive_bright_color,
    derive_selection,
    derive_border,
    derive_cursor,
    derive_accent,
    default_lock_state,
    is_light_theme,
    extract_base_colors,
    is_base_color,
    is_derived_color,
    derivation_description,
)

from .hue_mapping import (
    HueMappingConfig,
    hue_distance,
    synthesize_color,
    assign_swatches_to_ansi_slots,
    ansi_slots_to_base_colors,
)

from .validation import ValidationResult, InvalidColorEntry, validate_color_json

__all__ = [
    # Converter / algebra
    'OKLCH',
    'hex_to_oklch',
    'oklch_to_hex',
    'adjust_lightness',
    'blend_colors',
    # Errors
    'ThemeColorError',
    'InvalidColorError',
    'MissingColorError',
    'UnknownColorKeyError',
    # Types
    'SwatchInput',
    'AnsiHueSlot',
    'ANSI_HUE_SLOTS',
    'ThemeColors',
    'ColorLockState',
    'BASE_COLOR_KEYS',
    'DERIVED_COLOR_KEYS',
    'THEME_COLOR_KEYS',
    # Derivation
    'DerivationConfig',
    'derive_all_colors',
    'derive_bright_color',
    'derive_selection',
    'derive_border',
    'derive_cursor',
    'derive_accent',
    'default_lock_state',
    'is_light_theme',
    'extract_base_colors',
    'is_base_color',
    'is_derived_color',
    'derivation_description',
    # Hue mapping
    'HueMappingConfig',
    'hue_distance',
    'synthesize_color',
    'assign_swatches_to_ansi_slots',
    'ansi_slots_to_base_colors',
    # Validation
    'ValidationResult',
    'InvalidColorEntry',
    'validate_color_json',
]
