# tests/test_general_token_split.py
from __future__ import annotations

import pytest

# Module under test
from customizer_style_parser.extraction.general.token.split import split_core as S

# ─────────────────────────────────────────────────────────────────────────────
# split_segments
# ─────────────────────────────────────────────────────────────────────────────


@pytest.mark.parametrize(
    "text,expected",
    [
        ("laces black, mesh white", ["laces black", "mesh white"]),
        ("a, b;c\nd", ["a", "b", "c", "d"]),
        ("laces black then mesh white", ["laces black", "mesh white"]),
        ("laces black THEN mesh white Also sole red", ["laces black", "mesh white", "sole red"]),
        ("authentic red, thence blue", ["authentic red", "thence blue"]),  # words containing then
        ("laces red,,, ;; \n mesh blue", ["laces red", "mesh blue"]),
        (",,, ;; \n", []),
        ("", []),
        ("   ", []),
    ],
)
def test_split_segments(text, expected):
    assert S.split_segments(text) == expected


def test_rgb_notation_keeps_its_commas():
    assert S.split_segments("laces rgb(1, 2, 3), mesh rgba(0,0,0,0.5)") == [
        "laces rgb(1, 2, 3)",
        "mesh rgba(0,0,0,0.5)",
    ]


def test_unclosed_rgb_still_splits():
    assert S.split_segments("laces rgb(1, 2") == ["laces rgb(1", "2"]


@pytest.mark.parametrize(
    "text,expected",
    [
        ("mesh rgb(1, laces red)", ["mesh rgb(1", "laces red)"]),
        ("bands rgb( inner then rgb(1 2 3) deep", ["bands rgb( inner", "rgb(1 2 3) deep"]),
        ("laces rgb(1, 2, then) mesh", ["laces rgb(1", "2", ") mesh"]),
        ("sole rgb(1000, 0, 0)", ["sole rgb(1000", "0", "0)"]),
        ("caps rgba(1, 2, 3, 2), mesh red", ["caps rgba(1", "2", "3", "2)", "mesh red"]),
        ("mesh rgb(1, laces red then sole rgb(1, 2, 3)",
         ["mesh rgb(1", "laces red", "sole rgb(1, 2, 3)"]),
    ],
)
def test_malformed_rgb_does_not_shield_separators(text, expected):
    assert S.split_segments(text) == expected


def test_clean_segment_collapses_whitespace():
    assert S.clean_segment("  laces \t  black  ") == "laces black"
