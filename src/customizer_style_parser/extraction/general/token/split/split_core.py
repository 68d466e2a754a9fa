# extraction/general/token/split/split_core.py

"""
split_core.py.

Does: Split a free-text instruction into independent clauses on newlines,
      semicolons, commas and the standalone words "then" / "also".
      Commas inside well-formed rgb()/rgba() notation do not split.
Returns: List of trimmed, non-empty clause strings.
Used by: The orchestrator; each clause is parsed on its own.
"""
from __future__ import annotations

import logging
import re

from customizer_style_parser.extraction.general.token.normalize import collapse_whitespace

__all__ = [
    "split_segments",
    "clean_segment",
]

# ── Logging ──────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)

# Same grammar rgb_to_hex accepts: three 1-3 digit channels, optional alpha
_CHANNELS = r"\s*\d{1,3}\s*,\s*\d{1,3}\s*,\s*\d{1,3}\s*"
_RGB_NOTATION = rf"\brgb\({_CHANNELS}\)|\brgba\({_CHANNELS},\s*(?:0|1|0?\.\d+)\s*\)"

# Well-formed rgb()/rgba() groups match first and are skipped, so their commas
# survive; a malformed "rgb(" never shields separators after it.
_SEGMENT_SPLIT_RE = re.compile(
    rf"(?P<rgb>{_RGB_NOTATION})|[\n;,]+|\bthen\b|\balso\b",
    re.IGNORECASE | re.ASCII,
)


def split_segments(text: str) -> list[str]:
    """
    Does: Split on separator runs and conjunction words, trim, drop empties.
    Returns: Clauses in input order. Cross-clause references are not resolved.
    """
    text = text or ""
    parts: list[str] = []
    last = 0
    for m in _SEGMENT_SPLIT_RE.finditer(text):
        if m.group("rgb"):
            continue
        parts.append(text[last : m.start()])
        last = m.end()
    parts.append(text[last:])

    segments = [p.strip() for p in parts if p.strip()]
    log.debug("split %d clause(s) from %r", len(segments), text)
    return segments


def clean_segment(segment: str) -> str:
    """Does: Collapse inner whitespace of a clause so offsets are stable."""
    return collapse_whitespace(segment)
