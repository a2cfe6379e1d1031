"""Tests for pasted theme color JSON validation."""

import json

from themepal import InvalidColorEntry, validate_color_json


def test_blank_is_empty():
    for text in ("", "   \n"):
        result = validate_color_json(text)
        assert result.status == "empty"
        assert not result.is_valid
        assert result.message == ""


def test_syntax_error():
    result = validate_color_json("{not json")

    assert result.status == "error"
    assert result.message == "Invalid JSON syntax"
    assert not result.is_valid


def test_non_object():
    for text in ("[1, 2]", '"#ffffff"', "42", "null"):
        result = validate_color_json(text)
        assert result.status == "error"
        assert result.message == "Expected a JSON object"


def test_all_valid():
    result = validate_color_json(json.dumps({"background": "#1A1B26", "brightRed": "#f00"}))

    assert result.status == "valid"
    assert result.is_valid
    assert result.valid_colors == {"background": "#1a1b26", "bright_red": "#ff0000"}
    assert result.invalid_colors == []
    assert result.message == "2 colors found"


def test_single_color_message():
    result = validate_color_json('{"red": "#ff0000"}')
    assert result.message == "1 color found"


def test_manifest_with_colors_property():
    manifest = {"name": "Night", "colors": {"accent": "#7aa2f7", "cursor": "#c0caf5"}}

    result = validate_color_json(json.dumps(manifest))

    assert result.valid_colors == {"cursor": "#c0caf5", "accent": "#7aa2f7"}


def test_mixed_valid_and_invalid():
    result = validate_color_json(json.dumps({"red": "#ff0000", "blue": "blue", "green": 12}))

    assert result.status == "warning"
    assert result.is_valid
    assert result.valid_colors == {"red": "#ff0000"}
    assert result.message == "1 valid, 2 invalid"
    assert InvalidColorEntry("blue", "blue", "Invalid hex color (use #RGB or #RRGGBB)") in result.invalid_colors
    assert InvalidColorEntry("green", "12", "Must be a string") in result.invalid_colors


def test_all_invalid():
    result = validate_color_json('{"red": "nope", "blue": null}')

    assert result.status == "error"
    assert not result.is_valid
    assert result.message == "All 2 colors are invalid"
    assert len(result.invalid_colors) == 2


def test_no_color_keys():
    result = validate_color_json('{"name": "Night", "bright_red": "#ff0000"}')

    assert result.status == "error"
    assert result.message == "No color keys found"


def test_invalid_entries_in_key_order():
    result = validate_color_json('{"accent": 1, "background": 2}')
    assert [e.key for e in result.invalid_colors] == ["background", "accent"]
