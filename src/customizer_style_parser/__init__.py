"""
customizer_style_parser
=======================

Does: Root package initializer for the product-customizer style parser.
Returns: Re-exports the parse entry points and the color store apply API.
Used by: All higher-level imports starting from `customizer_style_parser.*`.
"""

from .extraction import (
    CatalogError,
    ColorCatalog,
    ParseResult,
    PartCatalog,
    parse_for_model,
    parse_style_text,
)
from .store import ApplyOutcome, ColorStore, ModelColorState, apply_assignments, apply_style_text
from .status import format_status

__all__ = [
    "parse_style_text",
    "parse_for_model",
    "ParseResult",
    "PartCatalog",
    "ColorCatalog",
    "CatalogError",
    "ColorStore",
    "ModelColorState",
    "ApplyOutcome",
    "apply_assignments",
    "apply_style_text",
    "format_status",
]
__docformat__ = "google"
