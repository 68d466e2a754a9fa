"""
split.

Does: Expose clause splitting helpers for free-text instructions.
"""

from __future__ import annotations

from .split_core import clean_segment, split_segments

__all__ = [
    "split_segments",
    "clean_segment",
]
