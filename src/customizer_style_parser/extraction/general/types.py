# customizer_style_parser/extraction/general/types.py
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

"""
types.py.

Does: Define the transient tokens produced while parsing one clause and the
      ParseResult record handed to the apply step.
"""


class CatalogError(ValueError):
    """Raise when a part/color catalog is built from inconsistent config."""


@dataclass(frozen=True)
class PhraseMatch:
    value: str
    phrase: str
    start: int
    end: int


@dataclass(frozen=True)
class ColorToken:
    hex: str
    start: int
    raw: str


@dataclass(frozen=True)
class PartToken:
    key: str
    start: int
    phrase: str


@dataclass
class ParseResult:
    """Outcome of one parse call.

    `unknown_parts` / `unknown_colors` hold distinct phrases in first-seen order;
    `matched_parts_in_order` may repeat keys and its last element is the part
    the apply step selects.
    """

    assignments: dict[str, str] = field(default_factory=dict)
    unknown_parts: list[str] = field(default_factory=list)
    unknown_colors: list[str] = field(default_factory=list)
    matched_parts_in_order: list[str] = field(default_factory=list)

    @property
    def last_matched_part(self) -> str | None:
        return self.matched_parts_in_order[-1] if self.matched_parts_in_order else None

    def as_dict(self) -> dict[str, Any]:
        return asdict(self)


__all__ = [
    "CatalogError",
    "PhraseMatch",
    "ColorToken",
    "PartToken",
    "ParseResult",
]

__docformat__ = "google"
