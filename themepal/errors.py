"""Theme color errors."""


class ThemeColorError(Exception):
    """Base class for themepal errors."""
    pass


class InvalidColorError(ThemeColorError, ValueError):
    """Color string is not a valid #rrggbb hex color."""
    pass


class MissingColorError(ThemeColorError, KeyError):
    """Required theme color key is absent."""
    pass


class UnknownColorKeyError(ThemeColorError, KeyError):
    """Key does not name a theme color slot of the expected kind."""
    pass
