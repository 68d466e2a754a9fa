# extraction/general/token/phrase_match.py
"""
phrase_match.

Does: Find non-overlapping, word-boundary phrase occurrences in a text with
      longest-match precedence (e.g. "inner lining" wins over "inner").
Returns: Offset-ordered PhraseMatch lists.
Used by: Part/alias extraction and named-color extraction.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from functools import lru_cache

from customizer_style_parser.extraction.general.types import PhraseMatch

__all__ = [
    "find_all_phrases",
    "matched_phrases",
]


@lru_cache(maxsize=2048)
def _phrase_pattern(phrase: str) -> re.Pattern[str]:
    # ASCII \b: accented letters next to a phrase still count as a boundary
    return re.compile(rf"\b{re.escape(phrase)}\b", re.ASCII)


def find_all_phrases(
    text: str, candidates: Iterable[tuple[str, str]]
) -> list[PhraseMatch]:
    """
    Does: Collect case-insensitive, word-bounded hits for every (phrase, value)
          candidate, sort by start (longer phrase first on ties) and drop any hit
          starting before the previous kept hit's end.
    Returns: Filtered matches in offset order; [] when nothing matches.
    """
    lower = (text or "").lower()
    hits: list[PhraseMatch] = []

    for raw_phrase, value in candidates:
        if not raw_phrase:
            continue
        phrase = str(raw_phrase).lower()
        for m in _phrase_pattern(phrase).finditer(lower):
            hits.append(PhraseMatch(value=value, phrase=phrase, start=m.start(), end=m.end()))

    hits.sort(key=lambda h: (h.start, -len(h.phrase)))

    filtered: list[PhraseMatch] = []
    last_end = -1
    for h in hits:
        if h.start < last_end:
            continue
        filtered.append(h)
        last_end = h.end
    return filtered


def matched_phrases(matches: Iterable[PhraseMatch]) -> frozenset[str]:
    """Does: Return the literal (lower-cased) phrases behind a match list."""
    return frozenset(m.phrase for m in matches)
