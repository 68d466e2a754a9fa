"""
unknown_guard.py
================

Does: Detect "<word> <base color>" bigrams whose leading word is neither a
      known color phrase, a modifier, a part name nor a stop word
      ("galaxy purple"), report them as unknown colors and blank them out so the
      trailing base color cannot be picked up on its own.
Used By: Color extraction, only for clauses that already mention a part.
Returns: The clause text with offsets preserved (masked spans become spaces).
"""

from __future__ import annotations

import logging
import re
from collections.abc import Collection, Iterable, Mapping
from functools import lru_cache

from customizer_style_parser.extraction.color.constants import BASE_COLOR_WORDS, COLOR_MODIFIERS
from customizer_style_parser.extraction.general.token.normalize import collapse_whitespace
from customizer_style_parser.extraction.general.vocab.stop_words import STOP_WORDS

__all__ = ["mask_unknown_color_phrases"]

log = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _bigram_pattern(base_words: tuple[str, ...]) -> re.Pattern[str]:
    group = "|".join(re.escape(w) for w in base_words)
    return re.compile(rf"\b([a-z]+)\s+({group})\b", re.IGNORECASE | re.ASCII)


def mask_unknown_color_phrases(
    segment: str,
    colors: Mapping[str, str],
    unknown_colors: dict[str, None],
    *,
    has_known_parts: bool,
    part_words: Collection[str] = frozenset(),
    base_words: Iterable[str] = BASE_COLOR_WORDS,
) -> str:
    """
    Does: Scan non-overlapping bigrams left to right; record unrecognized ones
          in `unknown_colors` (an insertion-ordered set) and mask them.
    Returns: Masked clause, or the clause untouched when it has no known part.
    """
    if not has_known_parts:
        return segment

    def _replace(m: re.Match[str]) -> str:
        full = m.group(0)
        adj = m.group(1).lower()
        phrase = collapse_whitespace(f"{adj} {m.group(2).lower()}")
        if phrase in colors:
            return full
        if adj in COLOR_MODIFIERS or adj in part_words or adj in STOP_WORDS:
            return full
        log.debug("unknown color phrase %r masked", phrase)
        unknown_colors.setdefault(phrase, None)
        return " " * len(full)

    return _bigram_pattern(tuple(base_words)).sub(_replace, segment)
