"""
recovery.
========

Does: Guard against partial color matches inside unrecognized color phrases.
"""

from .unknown_guard import mask_unknown_color_phrases

__all__ = ["mask_unknown_color_phrases"]
