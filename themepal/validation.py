"""Validation for pasted theme color JSON."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Literal

from themepal.colorspace import expand_hex
from themepal.types import THEME_COLOR_KEYS, manifest_key

logger = logging.getLogger(__name__)

ValidationStatus = Literal["empty", "valid", "warning", "error"]


@dataclass(frozen=True)
class InvalidColorEntry:
    key: str
    value: str
    reason: str


@dataclass
class ValidationResult:
    """Outcome of validating a theme color JSON document.

    Attributes:
        is_valid: True when at least one color can be applied
        valid_colors: snake_case key -> canonical #rrggbb
        invalid_colors: Rejected entries with the reason
        message: Short summary for display
        status: 'empty', 'valid', 'warning' (some rejected) or 'error'
    """
    is_valid: bool = False
    valid_colors: dict[str, str] = field(default_factory=dict)
    invalid_colors: list[InvalidColorEntry] = field(default_factory=list)
    message: str = ""
    status: ValidationStatus = "empty"


def _error(message: str, invalid: list[InvalidColorEntry] | None = None) -> ValidationResult:
    return ValidationResult(
        is_valid=False,
        invalid_colors=invalid or [],
        message=message,
        status="error",
    )


def validate_color_json(text: str) -> ValidationResult:
    """Validate a JSON string containing theme colors.

    Accepts either an object of color keys or a theme manifest object whose
    ``colors`` property holds them. Keys use the manifest's camelCase
    spelling; ``#rgb`` shorthand is accepted and expanded.
    """
    trimmed = text.strip()
    if not trimmed:
        return ValidationResult()

    try:
        parsed = json.loads(trimmed)
    except json.JSONDecodeError as e:
        logger.debug("Rejected color JSON: %s", e)
        return _error("Invalid JSON syntax")

    if not isinstance(parsed, dict):
        return _error("Expected a JSON object")

    colors = parsed.get("colors")
    source = colors if isinstance(colors, dict) else parsed

    valid: dict[str, str] = {}
    invalid: list[InvalidColorEntry] = []

    for key in THEME_COLOR_KEYS:
        json_key = manifest_key(key)
        if json_key not in source:
            continue
        value = source[json_key]

        if not isinstance(value, str):
            invalid.append(InvalidColorEntry(json_key, json.dumps(value), "Must be a string"))
            continue

        normalized = expand_hex(value)
        if normalized is None:
            invalid.append(InvalidColorEntry(json_key, value, "Invalid hex color (use #RGB or #RRGGBB)"))
            continue

        valid[key] = normalized

    n_valid, n_invalid = len(valid), len(invalid)

    if n_valid == 0 and n_invalid == 0:
        return _error("No color keys found")

    if n_valid == 0:
        return _error(f"All {n_invalid} colors are invalid", invalid)

    if n_invalid > 0:
        return ValidationResult(
            is_valid=True,
            valid_colors=valid,
            invalid_colors=invalid,
            message=f"{n_valid} valid, {n_invalid} invalid",
            status="warning",
        )

    return ValidationResult(
        is_valid=True,
        valid_colors=valid,
        message=f"{n_valid} color{'' if n_valid == 1 else 's'} found",
        status="valid",
    )
