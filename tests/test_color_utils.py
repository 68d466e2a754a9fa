# tests/test_color_utils.py


from __future__ import annotations

import importlib

import pytest

"""
hex_rgb tests
=============

Does: Validate hex normalization, rgb()/rgba() conversion and named-color lookup,
      including the "no match → None, never raise" contract.
"""

hr = importlib.import_module("customizer_style_parser.extraction.color.utils.hex_rgb")
from customizer_style_parser.extraction.color.vocab import default_color_catalog


# ──────────────────────────────────────────────────────────────────────────────
# normalize_hex
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "raw,expect",
    [
        ("#fff", "#FFFFFF"),
        ("#09c", "#0099CC"),
        ("ABC", "#AABBCC"),
        ("#ff0000", "#FF0000"),
        ("  #1a2B3c ", "#1A2B3C"),
        ("00ff00", "#00FF00"),
    ],
)
def test_normalize_hex_ok(raw, expect):
    assert hr.normalize_hex(raw) == expect


@pytest.mark.parametrize("raw", ["", None, "#ff00", "#gggggg", "#ff0000ff", "red", "#", "# fff"])
def test_normalize_hex_no_match(raw):
    assert hr.normalize_hex(raw) is None


# ──────────────────────────────────────────────────────────────────────────────
# rgb_to_hex
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize(
    "raw,expect",
    [
        ("rgb(255, 0, 0)", "#FF0000"),
        ("rgb(1,2,3)", "#010203"),
        ("RGB( 1 , 2 , 3 )", "#010203"),
        ("rgba(0, 128, 255, 0.5)", "#0080FF"),
        ("rgba(0,128,255,.25)", "#0080FF"),
        ("rgba(10, 20, 30, 1)", "#0A141E"),
        ("rgb(300, 0, 999)", "#FF00FF"),  # channels clamp to 255
    ],
)
def test_rgb_to_hex_ok(raw, expect):
    assert hr.rgb_to_hex(raw) == expect


@pytest.mark.parametrize(
    "raw",
    [
        "rgb(1, 2)",
        "rgb(-1, 0, 0)",
        "rgb(1, 2, 3, 0.5)",
        "rgba(1, 2, 3)",
        "rgba(0, 0, 0, 2)",
        "rgb(1000, 0, 0)",
        "rgb(a, b, c)",
        "",
        None,
    ],
)
def test_rgb_to_hex_no_match(raw):
    assert hr.rgb_to_hex(raw) is None


# ──────────────────────────────────────────────────────────────────────────────
# resolve_named_color
# ──────────────────────────────────────────────────────────────────────────────
def test_resolve_named_color_normalizes_case_and_spacing():
    colors = default_color_catalog()
    assert hr.resolve_named_color("  Light   Blue ", colors) == "#60A5FA"
    assert hr.resolve_named_color("GREY", colors) == "#808080"


@pytest.mark.parametrize("phrase", ["galaxy", "", None, "light"])
def test_resolve_named_color_absent(phrase):
    assert hr.resolve_named_color(phrase, default_color_catalog()) is None


def test_is_canonical_hex():
    assert hr.is_canonical_hex("#A1B2C3") is True
    assert hr.is_canonical_hex("#a1b2c3") is False
    assert hr.is_canonical_hex("#FFF") is False
    assert hr.is_canonical_hex(None) is False
