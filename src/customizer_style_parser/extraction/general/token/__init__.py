# extraction/general/token/__init__.py
"""
token.
=====

Does: Provide base token utilities for normalization, phrase matching, and clause splitting.
Exports: normalize_phrase, to_key, collapse_whitespace, find_all_phrases,
         matched_phrases, split_segments, clean_segment
Used by: Color and part extraction pipelines, diagnostics and the orchestrator.
"""

from __future__ import annotations

from .normalize import (
    collapse_whitespace,
    normalize_phrase,
    to_key,
)
from .phrase_match import (
    find_all_phrases,
    matched_phrases,
)
from .split.split_core import (
    clean_segment,
    split_segments,
)

__all__ = [
    # normalize
    "normalize_phrase",
    "to_key",
    "collapse_whitespace",
    # phrase matching
    "find_all_phrases",
    "matched_phrases",
    # split
    "split_segments",
    "clean_segment",
]
