"""
pairing.py
==========

Does: Decide which color token belongs to which part token inside one clause.

Rules:
- Broadcast: exactly one color → every part gets it ("laces and mesh black").
- Region: otherwise each part looks, in order, for
    1. the last color inside [its start, next part's start)  ("laces black, mesh white")
    2. the first color at or after its start
    3. the nearest color before its start                    ("black laces")
  and is skipped when none exists.

Returns: Ordered (part_key, hex) pairs in resolution order.
Used by: The orchestrator.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Optional

from customizer_style_parser.extraction.general.types import ColorToken, PartToken

__all__ = ["pair_parts_with_colors", "choose_color_for_part"]

log = logging.getLogger(__name__)


def choose_color_for_part(
    index: int, parts: Sequence[PartToken], colors: Sequence[ColorToken]
) -> Optional[ColorToken]:
    """Does: Apply the three-tier region rule for parts[index]."""
    start = parts[index].start
    next_start = parts[index + 1].start if index + 1 < len(parts) else None

    in_region = [
        c for c in colors if c.start >= start and (next_start is None or c.start < next_start)
    ]
    if in_region:
        return in_region[-1]

    after = next((c for c in colors if c.start >= start), None)
    if after is not None:
        return after

    return next((c for c in reversed(colors) if c.start < start), None)


def pair_parts_with_colors(
    parts: Sequence[PartToken], colors: Sequence[ColorToken]
) -> list[tuple[str, str]]:
    if not parts or not colors:
        return []

    if len(colors) == 1:
        return [(p.key, colors[0].hex) for p in parts]

    pairs: list[tuple[str, str]] = []
    for i, part in enumerate(parts):
        chosen = choose_color_for_part(i, parts, colors)
        if chosen is None:
            log.debug("no color for part %r", part.key)
            continue
        pairs.append((part.key, chosen.hex))
    return pairs
