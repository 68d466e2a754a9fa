"""
part.
====

Does: Part catalogs, part extraction and part↔color pairing for one clause.
"""

from .catalog import PartCatalog, get_default_colors, get_model_catalog, model_names
from .pairing import choose_color_for_part, pair_parts_with_colors
from .part_pipeline import extract_parts

__all__ = [
    "PartCatalog",
    "model_names",
    "get_model_catalog",
    "get_default_colors",
    "extract_parts",
    "pair_parts_with_colors",
    "choose_color_for_part",
]
