"""
stop_words.py.
=============

Does: Load the closed stop-word list that diagnostics and the unknown-color
guard ignore ("make", "the", "please", ...).
Returns: STOP_WORDS → frozenset[str] for quick lookup.
"""

from __future__ import annotations

from customizer_style_parser.extraction.general.utils.load_config import load_config

STOP_WORDS: frozenset[str] = load_config("stop_words", mode="set")
