"""Test configuration for themepal."""

import pytest

from themepal import OKLCH, SwatchInput, derive_all_colors, oklch_to_hex
from themepal import defaults


@pytest.fixture
def base_colors():
    """The built-in 10-color base palette (Tokyo Night)."""
    return dict(defaults.DEFAULT_BASE_COLORS)


@pytest.fixture
def theme(base_colors):
    """A fully derived theme from the default base palette."""
    return derive_all_colors(base_colors)


@pytest.fixture
def make_swatch():
    """Factory for swatches at a given OKLCH hue.

    The default L=0.7, C=0.08 keeps every hue inside sRGB, so the hex
    color reads back with nearly the same hue.
    """
    def _make(hue, population=100, l=0.7, c=0.08):
        return SwatchInput(oklch_to_hex(OKLCH(l, c, hue)), population)
    return _make
