"""
color.
=====

Does: Aggregate color-domain definitions (word lists, catalogs) shared by the
      unknown-color guard and the color extraction pipeline.
Used By: Orchestrator, color extraction, model configuration.
Returns: Pure data structures and accessor functions.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import BASE_COLOR_WORDS, COLOR_MODIFIERS

# ── Vocabulary ───────────────────────────────────────────────────────────────
from .vocab import ColorCatalog, css_color_catalog, default_color_catalog

__all__ = [
    # constants
    "BASE_COLOR_WORDS",
    "COLOR_MODIFIERS",
    # vocab
    "ColorCatalog",
    "default_color_catalog",
    "css_color_catalog",
]
