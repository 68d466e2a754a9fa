"""
part_pipeline.py
================

Does: Find part mentions (canonical keys and aliases) in one clause.
Returns: PartTokens in order of appearance, first mention per key only,
         plus every literal phrase that matched (for the unknown-color guard).
"""

from __future__ import annotations

from customizer_style_parser.extraction.general.token.phrase_match import (
    find_all_phrases,
    matched_phrases,
)
from customizer_style_parser.extraction.general.types import PartToken
from customizer_style_parser.extraction.part.catalog import PartCatalog

__all__ = ["extract_parts"]


def extract_parts(segment: str, catalog: PartCatalog) -> tuple[list[PartToken], frozenset[str]]:
    hits = find_all_phrases(segment, catalog.phrase_candidates())

    seen: set[str] = set()
    parts: list[PartToken] = []
    for h in hits:
        if h.value in seen:
            continue
        seen.add(h.value)
        parts.append(PartToken(key=h.value, start=h.start, phrase=h.phrase))
    return parts, matched_phrases(hits)
