"""
hex_rgb.py
==========

Does: Normalize raw color tokens (hex literals, rgb()/rgba() notation, named
      colors) to canonical uppercase "#RRGGBB".
Used By: Color extraction, color catalogs, and the color state.
Returns: Canonical hex strings, or None when the token does not resolve.
         Nothing here raises on bad input.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Optional

import webcolors

from customizer_style_parser.extraction.general.token.normalize import normalize_phrase

# Public surface
__all__ = [
    "HEX_RE",
    "is_canonical_hex",
    "normalize_hex",
    "rgb_to_hex",
    "resolve_named_color",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

HEX_RE = re.compile(r"^#[0-9A-F]{6}$")

_RGB_RE = re.compile(
    r"rgb\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*\)",
    re.ASCII,
)
_RGBA_RE = re.compile(
    r"rgba\(\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(\d{1,3})\s*,\s*(0|1|0?\.\d+)\s*\)",
    re.ASCII,
)


def is_canonical_hex(value: object) -> bool:
    """Does: Check the "#RRGGBB" uppercase invariant."""
    return isinstance(value, str) and HEX_RE.match(value) is not None


def normalize_hex(raw: object) -> Optional[str]:
    """
    Does: Accept "#rgb" / "#rrggbb" (or the same without '#'), any case,
          surrounding whitespace ignored; expand shorthand to 6 digits.
    Returns: "#RRGGBB" or None.
    """
    if not raw:
        return None
    v = str(raw).strip().lower()
    if not v.startswith("#"):
        v = f"#{v}"
    try:
        return webcolors.normalize_hex(v).upper()
    except ValueError:
        return None


def rgb_to_hex(raw: object) -> Optional[str]:
    """
    Does: Convert "rgb(r, g, b)" / "rgba(r, g, b, a)" to hex. Components are
          1-3 digit integers clamped to 0-255; alpha must be 0, 1 or a
          decimal fraction and is otherwise ignored.
    Returns: "#RRGGBB" or None on malformed syntax.
    """
    s = str(raw if raw is not None else "").strip().lower()
    m = _RGB_RE.fullmatch(s) or _RGBA_RE.fullmatch(s)
    if m is None:
        return None
    r, g, b = (int(m.group(i)) for i in (1, 2, 3))
    # webcolors clips each channel into 0..255
    return webcolors.rgb_to_hex((r, g, b)).upper()


def resolve_named_color(phrase: object, colors: Mapping[str, str]) -> Optional[str]:
    """
    Does: Case/whitespace-normalize a color phrase and look it up.
    Returns: Catalog hex, or None when the phrase is not a known color.
    """
    key = normalize_phrase(phrase)
    if not key:
        return None
    return colors.get(key)
