"""Tests for deriving the 22-color theme from base colors."""

import logging

import pytest

from themepal import (
    ColorLockState,
    DERIVED_COLOR_KEYS,
    DerivationConfig,
    ThemeColors,
    THEME_COLOR_KEYS,
    UnknownColorKeyError,
    adjust_lightness,
    blend_colors,
    default_lock_state,
    derivation_description,
    derive_all_colors,
    extract_base_colors,
    hex_to_oklch,
    is_base_color,
    is_derived_color,
    is_light_theme,
)
from themepal import defaults
from themepal.colorspace import is_valid_hex


class TestDeriveAll:
    """derive_all_colors with no locks."""

    def test_all_keys_valid_hex(self, theme):
        assert isinstance(theme, ThemeColors)
        for key in THEME_COLOR_KEYS:
            assert is_valid_hex(getattr(theme, key)), key

    def test_base_colors_pass_through(self, theme, base_colors):
        assert extract_base_colors(theme) == base_colors

    def test_rules(self, theme):
        assert theme.accent == theme.blue
        assert theme.cursor == theme.foreground
        assert theme.bright_red == adjust_lightness(theme.red, 0.18)
        assert theme.bright_black == adjust_lightness(theme.black, 0.18)
        assert theme.selection == blend_colors(theme.background, theme.accent, 0.30)
        assert theme.border == blend_colors(theme.background, theme.foreground, 0.12)

    def test_brights_are_lighter(self, theme):
        for base in ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white"):
            assert hex_to_oklch(theme[f"bright_{base}"]).l > hex_to_oklch(theme[base]).l

    def test_selection_between_background_and_accent(self, theme):
        bg = hex_to_oklch(theme.background).l
        sel = hex_to_oklch(theme.selection).l
        accent = hex_to_oklch(theme.accent).l
        assert bg < sel < accent

    def test_missing_base_uses_default(self):
        theme = derive_all_colors({"blue": "#ff0000"})

        assert theme.blue == "#ff0000"
        assert theme.accent == "#ff0000"
        assert theme.background == defaults.DEFAULT_BASE_COLORS["background"]

    def test_empty_base_is_default_theme(self, theme):
        assert derive_all_colors({}) == theme

    def test_invalid_base_falls_back_with_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="themepal.derivation"):
            theme = derive_all_colors({"red": "not-a-color"})

        assert theme.red == defaults.DEFAULT_BASE_COLORS["red"]
        assert "red" in caplog.text

    def test_base_values_normalized(self):
        theme = derive_all_colors({"background": "#FFFFFF"})
        assert theme.background == "#ffffff"

    def test_padded_base_is_invalid(self, caplog):
        """Whitespace around a hex color is not trimmed away."""
        with caplog.at_level(logging.WARNING, logger="themepal.derivation"):
            theme = derive_all_colors({"background": " #ffffff "})

        assert theme.background == defaults.DEFAULT_BASE_COLORS["background"]
        assert "background" in caplog.text

    def test_accepts_theme_colors(self, theme):
        assert derive_all_colors(theme) == theme

    def test_unknown_keys_ignored(self, theme):
        assert derive_all_colors({"purple": "#ff00ff", "notes": "hi"}) == theme

    def test_non_string_keys_ignored(self, theme):
        assert derive_all_colors({1: "#ffffff", None: "#000000"}) == theme
        assert derive_all_colors({}, current_colors={2: "#ffffff"}, locks={"accent": True}) == theme

    def test_cursor_follows_foreground(self):
        theme = derive_all_colors({"foreground": "#eeeeee"})
        assert theme.cursor == "#eeeeee"

    def test_config(self, base_colors):
        config = DerivationConfig(selection_blend_factor=0.0, border_shift_factor=1.0, bright_lightness_boost=0.0)

        theme = derive_all_colors(base_colors, config=config)

        assert theme.selection == theme.background
        assert theme.border == theme.foreground
        assert theme.bright_red == theme.red


class TestLocks:
    """Locked derived colors keep their current value."""

    def test_locked_value_kept(self, theme, base_colors):
        current = theme.replace(selection="#123456")
        locks = ColorLockState(selection=True)

        result = derive_all_colors(base_colors, locks, current)

        assert result.selection == "#123456"
        assert result.border == theme.border

    def test_unlocked_value_recomputed(self, theme, base_colors):
        current = theme.replace(selection="#123456")

        result = derive_all_colors(base_colors, ColorLockState(), current)

        assert result.selection == theme.selection

    def test_locked_without_current_recomputes(self, theme, base_colors):
        result = derive_all_colors(base_colors, ColorLockState(accent=True))
        assert result.accent == theme.accent

    def test_locked_accent_drives_selection(self, base_colors):
        """Selection is derived after accent, so it follows a locked accent."""
        locks = ColorLockState(accent=True)

        result = derive_all_colors(base_colors, locks, {"accent": "#ff0000"})

        assert result.accent == "#ff0000"
        assert result.selection == blend_colors(result.background, "#ff0000", 0.30)

    def test_current_colors_mapping_in_manifest_spelling(self, base_colors):
        locks = ColorLockState().with_lock("brightRed")

        result = derive_all_colors(base_colors, locks, {"brightRed": "#ABCDEF"})

        assert result.bright_red == "#abcdef"

    def test_invalid_locked_value_recomputed(self, theme, base_colors, caplog):
        locks = ColorLockState(border=True)

        with caplog.at_level(logging.WARNING, logger="themepal.derivation"):
            result = derive_all_colors(base_colors, locks, {"border": "#zzz"})

        assert result.border == theme.border
        assert "border" in caplog.text

    def test_fully_locked_is_stable(self, theme):
        """Re-deriving with every derived color locked returns the same theme."""
        locks = ColorLockState(**{key: True for key in DERIVED_COLOR_KEYS})

        assert derive_all_colors(extract_base_colors(theme), locks, theme) == theme

    def test_locks_as_plain_mapping(self, theme, base_colors):
        """A persisted lock dictionary works in place of ColorLockState."""
        result = derive_all_colors(base_colors, {"accent": True, "brightRed": True},
                                   {"accent": "#123456", "brightRed": "#abcdef"})

        assert result.accent == "#123456"
        assert result.bright_red == "#abcdef"
        assert result.selection == blend_colors(result.background, "#123456", 0.30)
        assert result.border == theme.border

    def test_lock_mapping_string_false_does_not_lock(self, theme, base_colors):
        result = derive_all_colors(base_colors, {"accent": "false"}, {"accent": "#123456"})
        assert result.accent == theme.accent

    def test_default_lock_state(self):
        assert default_lock_state() == ColorLockState()
        assert default_lock_state().locked_keys() == ()


class TestHelpers:
    """Light theme detection and key classification."""

    def test_is_light_theme(self):
        assert is_light_theme("#ffffff", "#000000")
        assert not is_light_theme("#1a1b26", "#c0caf5")
        assert not is_light_theme("#808080", "#808080")

    def test_is_light_theme_invalid(self):
        assert not is_light_theme("bogus", "#000000")
        assert not is_light_theme("#ffffff", "bogus")

    @pytest.mark.parametrize("key", ["background", "red", "white"])
    def test_base_keys(self, key):
        assert is_base_color(key)
        assert not is_derived_color(key)

    @pytest.mark.parametrize("key", ["bright_red", "brightRed", "accent", "selection"])
    def test_derived_keys(self, key):
        assert is_derived_color(key)
        assert not is_base_color(key)

    def test_unknown_key(self):
        assert not is_base_color("purple")
        assert not is_derived_color("purple")


class TestDescriptions:

    @pytest.mark.parametrize("key, text", [
        ("cursor", "Same as foreground"),
        ("accent", "Same as blue"),
        ("selection", "Background blended 30% toward accent"),
        ("border", "Background shifted 12% toward foreground"),
        ("brightRed", "red + 18% lightness"),
        ("bright_white", "white + 18% lightness"),
    ])
    def test_descriptions(self, key, text):
        assert derivation_description(key) == text

    def test_follows_config(self):
        config = DerivationConfig(selection_blend_factor=0.5)
        assert derivation_description("selection", config) == "Background blended 50% toward accent"

    @pytest.mark.parametrize("key", ["red", "background", "nope"])
    def test_not_derived(self, key):
        with pytest.raises(UnknownColorKeyError):
            derivation_description(key)
