"""
utils package.
=============

Does: Provide color token normalization helpers (hex, rgb()/rgba(), named colors).
"""

from .hex_rgb import (
    HEX_RE,
    is_canonical_hex,
    normalize_hex,
    resolve_named_color,
    rgb_to_hex,
)

__all__ = [
    "HEX_RE",
    "is_canonical_hex",
    "normalize_hex",
    "rgb_to_hex",
    "resolve_named_color",
]

__docformat__ = "google"
