"""
logic
=====

Does: Per-clause color extraction pipeline (guard, rgb()/rgba(), hex, named colors).
"""

from .color_pipeline import extract_colors

__all__ = ["extract_colors"]
