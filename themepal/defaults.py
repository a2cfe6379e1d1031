"""Central place for themepal default settings."""

# Base palette used when a base color is missing (Tokyo Night)
DEFAULT_BASE_COLORS: dict[str, str] = {
    "background": "#1a1b26",
    "foreground": "#c0caf5",
    "black": "#15161e",
    "red": "#f7768e",
    "green": "#9ece6a",
    "yellow": "#e0af68",
    "blue": "#7aa2f7",
    "magenta": "#bb9af7",
    "cyan": "#7dcfff",
    "white": "#a9b1d6",
}

# Derivation amounts
BRIGHT_LIGHTNESS_BOOST: float = 0.18  # OKLCH L added for bright variants
SELECTION_BLEND_FACTOR: float = 0.30  # Fraction of accent blended into background
BORDER_SHIFT_FACTOR: float = 0.12     # Fraction of foreground blended into background

# OKLCH hue angle targets for the hue-bearing ANSI slots
ANSI_HUE_TARGETS: dict[str, float] = {
    "red": 29.0,
    "yellow": 110.0,
    "green": 142.0,
    "cyan": 195.0,
    "blue": 264.0,
    "magenta": 328.0,
}

# Swatch-to-slot assignment
MIN_RELIABLE_CHROMA: float = 0.03      # Below this a swatch is near-gray; hue unreliable
MAX_HUE_DISTANCE: float = 60.0         # Widest hue gap (degrees) for a natural match
SYNTHESIS_CHROMA_FACTOR: float = 0.6   # Chroma scale for synthesized slot colors
NEUTRAL_DONOR_OKLCH: tuple[float, float, float] = (0.6, 0.05, 0.0)  # Zero-input fallback

# Colors with chroma below this report hue 0
ACHROMATIC_CHROMA_EPSILON: float = 1e-4
