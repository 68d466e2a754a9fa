# extraction/general/token/normalize.py
# ──────────────────────────────────────────────────────────────
# Shared utilities for phrase and word normalization
# ──────────────────────────────────────────────────────────────
"""
normalize.

Does: Provide deterministic phrase normalization (lowercasing, whitespace
      collapsing) for catalog lookups and the word-key normalization used
      when guessing diagnostic phrases.
Returns: normalize_phrase(), to_key(), collapse_whitespace().
Used by: Color/part catalogs, the segment splitter and diagnostics.
"""

from __future__ import annotations

import re

__all__ = [
    "collapse_whitespace",
    "normalize_phrase",
    "to_key",
]

_WS_RE = re.compile(r"\s+")
_APOSTROPHES_RE = re.compile(r"[’']")
_NON_KEY_CHARS_RE = re.compile(r"[^a-z0-9\s-]")


def collapse_whitespace(s: str) -> str:
    """Does: Collapse whitespace runs to one space and trim."""
    return _WS_RE.sub(" ", s).strip()


def normalize_phrase(phrase: object) -> str:
    """
    Does: Trim, lowercase, and collapse internal whitespace.
    Returns: Lookup key for catalog phrases ("Light  Blue" → "light blue").
    """
    if phrase is None:
        return ""
    return collapse_whitespace(str(phrase).lower())


def to_key(word: object) -> str:
    """
    Does: Normalize a free-text word for diagnostics:
          - lowercase + trim
          - drop straight/curly apostrophes ("user's" → "users")
          - anything outside [a-z0-9 whitespace -] becomes a space
          - collapse whitespace
    Returns: Cleaned word; may be "" or contain a space.
    """
    if word is None:
        return ""
    s = str(word).strip().lower()
    s = _APOSTROPHES_RE.sub("", s)
    s = _NON_KEY_CHARS_RE.sub(" ", s)
    return collapse_whitespace(s)
