# customizer_style_parser/extraction/__init__.py

"""
extraction.
==========

Does: Expose the free-text style parser (parse_style_text / parse_for_model)
      and the catalog types it consumes.
Returns: ParseResult records; never raises on text input.
Used by: The color store apply step, the CLI demo, and integrations.
"""
from __future__ import annotations

from .color.vocab import ColorCatalog, css_color_catalog, default_color_catalog
from .general.types import CatalogError, ParseResult
from .orchestrator import parse_for_model, parse_style_text
from .part.catalog import PartCatalog, get_default_colors, get_model_catalog, model_names

__all__ = [
    "parse_style_text",
    "parse_for_model",
    "ParseResult",
    "PartCatalog",
    "ColorCatalog",
    "CatalogError",
    "default_color_catalog",
    "css_color_catalog",
    "get_model_catalog",
    "get_default_colors",
    "model_names",
]
__docformat__ = "google"
