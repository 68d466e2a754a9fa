"""
color_pipeline.py
=================

Pipeline logic for pulling color tokens out of one lower-cased clause.

Order of precedence (all hits merged, then sorted by offset):
1. rgb()/rgba() functional notation
2. hex literals ("#f00" needs the '#'; "ff0000" may omit it when token-separated)
3. named colors from the catalog, longest phrase first

Used By:
--------
- The orchestrator, once per clause, after part extraction
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection

from customizer_style_parser.extraction.color.recovery.unknown_guard import (
    mask_unknown_color_phrases,
)
from customizer_style_parser.extraction.color.utils.hex_rgb import (
    normalize_hex,
    resolve_named_color,
    rgb_to_hex,
)
from customizer_style_parser.extraction.color.vocab import ColorCatalog
from customizer_style_parser.extraction.general.token.phrase_match import find_all_phrases
from customizer_style_parser.extraction.general.types import ColorToken

__all__ = [
    "extract_colors",
    "extract_rgb_tokens",
    "extract_hex_tokens",
    "extract_named_tokens",
]

log = logging.getLogger(__name__)

_RGB_FUNC_RE = re.compile(r"\brgba?\([^)]+\)", re.IGNORECASE | re.ASCII)
# 3-digit shorthand only with '#', so word fragments never read as colors
_HEX3_RE = re.compile(r"#([0-9a-f]{3})\b", re.IGNORECASE | re.ASCII)
_HEX6_RE = re.compile(
    r"(^|[\s,;()\[\]{}])(#?[0-9a-f]{6})(?=$|[\s,;()\[\]{}.!?])",
    re.IGNORECASE | re.ASCII,
)


# =============================================================================
# Individual token forms
# =============================================================================


def extract_rgb_tokens(text: str) -> list[ColorToken]:
    out: list[ColorToken] = []
    for m in _RGB_FUNC_RE.finditer(text):
        hex_value = rgb_to_hex(m.group(0))
        if hex_value:
            out.append(ColorToken(hex=hex_value, start=m.start(), raw=m.group(0)))
    return out


def extract_hex_tokens(text: str) -> list[ColorToken]:
    out: list[ColorToken] = []
    for m in _HEX3_RE.finditer(text):
        raw = f"#{m.group(1)}"
        hex_value = normalize_hex(raw)
        if hex_value:
            out.append(ColorToken(hex=hex_value, start=m.start(), raw=raw))

    for m in _HEX6_RE.finditer(text):
        raw = m.group(2)
        hex_value = normalize_hex(raw)
        if hex_value:
            out.append(ColorToken(hex=hex_value, start=m.start(2), raw=raw))
    return out


def extract_named_tokens(text: str, colors: ColorCatalog) -> list[ColorToken]:
    candidates = [(name, name) for name in colors.phrases_longest_first()]
    out: list[ColorToken] = []
    for hit in find_all_phrases(text, candidates):
        hex_value = resolve_named_color(hit.value, colors)
        if hex_value:
            out.append(ColorToken(hex=hex_value, start=hit.start, raw=hit.value))
    return out


# =============================================================================
# Clause pipeline
# =============================================================================


def extract_colors(
    segment: str,
    colors: ColorCatalog,
    unknown_colors: dict[str, None],
    *,
    has_known_parts: bool = False,
    part_words: Collection[str] = frozenset(),
) -> list[ColorToken]:
    """
    Does: Mask unknown "<adjective> <base color>" phrases, then collect rgb,
          hex and named color tokens from the masked clause.
    Returns: ColorTokens sorted by start offset (stable across forms).
             The same literal may appear twice; pairing works on offsets.
    """
    text = mask_unknown_color_phrases(
        segment,
        colors,
        unknown_colors,
        has_known_parts=has_known_parts,
        part_words=part_words,
    )

    tokens = extract_rgb_tokens(text) + extract_hex_tokens(text) + extract_named_tokens(text, colors)
    tokens.sort(key=lambda t: t.start)
    log.debug("clause %r → %d color token(s)", segment, len(tokens))
    return tokens
