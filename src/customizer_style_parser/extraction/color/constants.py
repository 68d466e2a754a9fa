# constants.py
# ============

"""
constants.
=========

Does: Define the fixed color-domain word lists behind the unknown-color guard:
      base color words ("purple") and the modifiers allowed in front of them
      ("dark", "matte", ...).
Used By: Unknown-color guard, color extraction.
Returns: Pure data loaded once from data/ (no side effects beyond the config cache).
"""

from __future__ import annotations

from customizer_style_parser.extraction.general.utils.load_config import load_config

# Ordered: the guard builds its alternation from this tuple
BASE_COLOR_WORDS: tuple[str, ...] = tuple(
    str(w).lower() for w in load_config("base_color_words", mode="raw")
)

# Words that may precede a base color without making it an unknown color
COLOR_MODIFIERS: frozenset[str] = frozenset(
    w.lower() for w in load_config("color_modifiers", mode="set")
)

__all__ = ["BASE_COLOR_WORDS", "COLOR_MODIFIERS"]
