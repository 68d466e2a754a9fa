"""
vocab
=====

Does: Define the named-color catalog (phrase → canonical hex) shipped with the
      project, plus an opt-in catalog extended with CSS3 named colors.
Used By: Color extraction, the unknown-color guard, the orchestrator.
Returns: Immutable ColorCatalog instances and cached accessors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

import webcolors

from customizer_style_parser.extraction.color.utils.hex_rgb import normalize_hex
from customizer_style_parser.extraction.general.token.normalize import normalize_phrase
from customizer_style_parser.extraction.general.types import CatalogError
from customizer_style_parser.extraction.general.utils.load_config import load_config

log = logging.getLogger(__name__)

__all__ = [
    "ColorCatalog",
    "default_color_catalog",
    "css_color_catalog",
]


@dataclass(frozen=True)
class ColorCatalog(Mapping[str, str]):
    """Read-only mapping of normalized color phrase → "#RRGGBB"."""

    entries: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, object], *, strict: bool = False) -> ColorCatalog:
        """
        Does: Normalize phrases and hex values. Invalid entries raise CatalogError
              when strict, otherwise they are dropped with a debug log.
        """
        entries: dict[str, str] = {}
        for raw_phrase, raw_hex in (mapping or {}).items():
            phrase = normalize_phrase(raw_phrase)
            hex_value = normalize_hex(raw_hex) if isinstance(raw_hex, str) else None
            if not phrase or hex_value is None:
                if strict:
                    raise CatalogError(f"Invalid color entry: {raw_phrase!r} → {raw_hex!r}")
                log.debug("Dropping invalid color entry %r → %r", raw_phrase, raw_hex)
                continue
            entries[phrase] = hex_value
        return cls(entries)

    def merged_over(self, base: Mapping[str, str]) -> ColorCatalog:
        """Does: Return a catalog with `base` entries overridden by this one."""
        return ColorCatalog({**dict(base), **dict(self.entries)})

    def phrases_longest_first(self) -> list[str]:
        return sorted(self.entries, key=len, reverse=True)

    def __getitem__(self, key: str) -> str:
        return self.entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


def _check_color_map(table: dict[str, object]) -> dict[str, str]:
    """Validator for data/color_map.json: phrases normalized, hex canonical."""
    return dict(ColorCatalog.from_mapping(table, strict=True))


@lru_cache(maxsize=1)
def default_color_catalog() -> ColorCatalog:
    """Does: Build the shipped catalog from data/color_map.json."""
    return ColorCatalog(load_config("color_map", mode="validated_dict", validator=_check_color_map))


@lru_cache(maxsize=1)
def css_color_catalog() -> ColorCatalog:
    """
    Does: Default catalog plus every CSS3 named color ("tomato", "slategray", ...).
          Project entries win on collisions ("green", "navy", ...).
    """
    css = {name: webcolors.name_to_hex(name, spec=webcolors.CSS3) for name in webcolors.names(webcolors.CSS3)}
    return default_color_catalog().merged_over(ColorCatalog.from_mapping(css))
