# customizer_style_parser/extraction/general/diagnostics.py
"""
diagnostics.py.

Does: Guess the part or color phrase a user meant when a clause produced no
      assignment, for advisory messages ("Ignored parts: tongue").
Returns: Phrases added to insertion-ordered sets (dict[str, None]).
"""

from __future__ import annotations

from collections.abc import Sequence

from customizer_style_parser.extraction.general.token.normalize import to_key
from customizer_style_parser.extraction.general.types import ColorToken, PartToken
from customizer_style_parser.extraction.general.vocab.stop_words import STOP_WORDS

__all__ = [
    "content_words",
    "guess_unknown_part",
    "guess_unknown_color",
]

MAX_PART_WORDS = 3
MAX_COLOR_WORDS = 2


def content_words(text: str) -> list[str]:
    """Does: Split on whitespace, key-normalize each word, drop empties and stop words."""
    words = (to_key(w) for w in text.split())
    return [w for w in words if w and w not in STOP_WORDS]


def guess_unknown_part(
    segment: str, colors: Sequence[ColorToken], unknown_parts: dict[str, None]
) -> None:
    """Does: Record the last few words before the first color of a part-less clause."""
    if not colors:
        return
    before = segment[: colors[0].start].strip()
    if not before:
        return
    phrase = " ".join(content_words(before)[-MAX_PART_WORDS:]).strip()
    if phrase:
        unknown_parts.setdefault(phrase, None)


def guess_unknown_color(
    segment: str,
    parts: Sequence[PartToken],
    colors: Sequence[ColorToken],
    unknown_colors: dict[str, None],
) -> None:
    """Does: Record the tail after the last part of a clause without any color."""
    if not parts or colors:
        return
    tail = segment[parts[-1].start :].strip()
    phrase = " ".join(content_words(tail)[-MAX_COLOR_WORDS:]).strip()
    if phrase:
        unknown_colors.setdefault(phrase, None)
