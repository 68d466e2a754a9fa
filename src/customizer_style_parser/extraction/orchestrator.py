# orchestrator.py
from __future__ import annotations

"""
orchestrator.py
===============

Does: Turn a free-text styling instruction ("laces black, mesh white") into a
      ParseResult: part → "#RRGGBB" assignments plus advisory diagnostics.
Returns:
  - parse_style_text(text, parts, aliases, colors) -> ParseResult
  - parse_for_model(text, model_name, colors) -> ParseResult
Used by: The color store apply step, the CLI demo, and tests.

The parse is a pure function of its arguments: every call builds fresh local
state and never raises for any text input.
"""

import logging
from collections.abc import Iterable, Mapping
from typing import Optional, Union

from customizer_style_parser.extraction.color.logic.color_pipeline import extract_colors
from customizer_style_parser.extraction.color.vocab import ColorCatalog, default_color_catalog
from customizer_style_parser.extraction.general.diagnostics import (
    guess_unknown_color,
    guess_unknown_part,
)
from customizer_style_parser.extraction.general.token.split.split_core import (
    clean_segment,
    split_segments,
)
from customizer_style_parser.extraction.general.types import ParseResult
from customizer_style_parser.extraction.general.utils.log import debug, is_enabled
from customizer_style_parser.extraction.part.catalog import PartCatalog, get_model_catalog
from customizer_style_parser.extraction.part.pairing import pair_parts_with_colors
from customizer_style_parser.extraction.part.part_pipeline import extract_parts

logger = logging.getLogger(__name__)

PartsArg = Union[PartCatalog, Iterable[str], None]
ColorsArg = Union[ColorCatalog, Mapping[str, str], None]

__all__ = [
    "parse_style_text",
    "parse_for_model",
    "coerce_part_catalog",
    "coerce_color_catalog",
]


# =============================================================================
# Helpers
# =============================================================================


def coerce_part_catalog(parts: PartsArg, aliases: Optional[Mapping[str, str]] = None) -> PartCatalog:
    """Lenient catalog building: bad aliases and malformed arguments are dropped."""
    alias_map = aliases if isinstance(aliases, Mapping) else {}
    if isinstance(parts, PartCatalog):
        if not alias_map:
            return parts
        return PartCatalog.from_config(parts.parts, {**parts.aliases, **alias_map})
    if isinstance(parts, str):
        parts = (parts,)
    elif not isinstance(parts, Iterable):
        parts = ()
    return PartCatalog.from_config(parts, alias_map)


def coerce_color_catalog(colors: ColorsArg) -> ColorCatalog:
    if isinstance(colors, ColorCatalog):
        return colors
    if isinstance(colors, Mapping):
        return ColorCatalog.from_mapping(colors)
    return default_color_catalog()


# =============================================================================
# Public API
# =============================================================================


def parse_style_text(
    text: object,
    parts: PartsArg = (),
    aliases: Optional[Mapping[str, str]] = None,
    colors: ColorsArg = None,
) -> ParseResult:
    """
    Does: Lower-case the input once, split it into clauses and, per clause,
          extract parts, mask unknown color phrases, extract colors, record
          diagnostics and pair parts with colors. Later clauses win on the
          same part key.
    Returns: ParseResult; empty for empty/whitespace-only input.
    """
    result = ParseResult()
    raw = "" if text is None else str(text)
    if not raw.strip():
        return result

    catalog = coerce_part_catalog(parts, aliases)
    color_catalog = coerce_color_catalog(colors)

    unknown_parts: dict[str, None] = {}
    unknown_colors: dict[str, None] = {}

    for seg in split_segments(raw.lower()):
        segment = clean_segment(seg)
        if not segment:
            continue

        part_tokens, part_words = extract_parts(segment, catalog)
        color_tokens = extract_colors(
            segment,
            color_catalog,
            unknown_colors,
            has_known_parts=bool(part_tokens),
            part_words=part_words,
        )

        if not part_tokens:
            guess_unknown_part(segment, color_tokens, unknown_parts)
        guess_unknown_color(segment, part_tokens, color_tokens, unknown_colors)

        pairs = pair_parts_with_colors(part_tokens, color_tokens)
        if is_enabled("parse"):
            debug(
                f"clause={segment!r} parts={[p.key for p in part_tokens]} "
                f"colors={[c.hex for c in color_tokens]} pairs={pairs}",
                topic="parse",
            )
        for key, hex_value in pairs:
            result.assignments[key] = hex_value
            result.matched_parts_in_order.append(key)

    result.unknown_parts = list(unknown_parts)
    result.unknown_colors = list(unknown_colors)
    logger.debug(
        "parsed %d assignment(s), %d unknown part(s), %d unknown color(s)",
        len(result.assignments),
        len(result.unknown_parts),
        len(result.unknown_colors),
    )
    return result


def parse_for_model(text: object, model_name: str, colors: ColorsArg = None) -> ParseResult:
    """Does: Parse against a configured model's catalog (empty catalog if unknown)."""
    return parse_style_text(text, get_model_catalog(model_name), colors=colors)
