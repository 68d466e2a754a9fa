"""
status.py
=========

Does: Render a ParseResult as the one-line advisory status shown after a
      style instruction ("Applied: laces, mesh • Unknown colors: galaxy purple").
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Optional

from customizer_style_parser.extraction.general.types import ParseResult

__all__ = ["format_status", "format_warnings", "SEPARATOR"]

SEPARATOR = " • "


def format_warnings(result: ParseResult) -> list[str]:
    warnings: list[str] = []
    if result.unknown_parts:
        warnings.append(f"Ignored parts: {', '.join(result.unknown_parts)}")
    if result.unknown_colors:
        warnings.append(f"Unknown colors: {', '.join(result.unknown_colors)}")
    return warnings


def format_status(result: ParseResult, applied: Optional[Sequence[str]] = None) -> str:
    """
    Does: Build the status line. `applied` defaults to the parsed assignment keys.
    Returns: "Applied: …" or a "No …" base message, followed by any warnings.
    """
    keys = list(result.assignments) if applied is None else list(applied)
    warnings = format_warnings(result)

    if keys:
        base = f"Applied: {', '.join(keys)}"
    elif result.unknown_parts or not result.unknown_colors:
        base = "No recognized parts found."
    else:
        base = "No assignments applied."

    return SEPARATOR.join([base, *warnings])
