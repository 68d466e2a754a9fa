"""
vocab.
=====

Does: Expose general (non-color) word lists shared by the parser.
"""

from .stop_words import STOP_WORDS

__all__ = ["STOP_WORDS"]
