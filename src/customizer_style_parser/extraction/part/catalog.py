"""
catalog.py
==========

Does: Model the per-product part catalog (ordered canonical keys + alias
      phrases) and load the shipped model configuration from data/.
Used By: Part extraction, the orchestrator, the color store and the CLI.
Returns: Immutable PartCatalog instances and config accessors.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from customizer_style_parser.extraction.color.utils.hex_rgb import normalize_hex
from customizer_style_parser.extraction.general.token.normalize import normalize_phrase
from customizer_style_parser.extraction.general.types import CatalogError
from customizer_style_parser.extraction.general.utils.load_config import load_config

log = logging.getLogger(__name__)

__all__ = [
    "PartCatalog",
    "model_names",
    "get_model_catalog",
    "get_default_colors",
]


@dataclass(frozen=True)
class PartCatalog:
    """Canonical part keys of one product model plus its alias phrases.

    Every alias must point at a key of `parts`; construction raises
    CatalogError otherwise. Use `from_config` for lenient construction.
    """

    parts: tuple[str, ...] = ()
    aliases: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        parts = tuple(dict.fromkeys(str(p) for p in self.parts if p))
        object.__setattr__(self, "parts", parts)
        known = frozenset(parts)
        bad = {a: k for a, k in dict(self.aliases).items() if k not in known}
        if bad:
            raise CatalogError(f"Aliases target unknown parts: {bad}")
        object.__setattr__(self, "aliases", MappingProxyType(dict(self.aliases)))

    @classmethod
    def from_config(
        cls,
        valid_parts: Iterable[str] | None,
        alias_map: Mapping[str, str] | None = None,
    ) -> PartCatalog:
        """Does: Build a catalog, dropping aliases whose target is not a valid part."""
        parts = tuple(str(p) for p in (valid_parts or ()) if p)
        known = set(parts)
        aliases: dict[str, str] = {}
        for alias, key in (alias_map or {}).items():
            phrase = normalize_phrase(alias)
            if not phrase:
                continue
            if key not in known:
                log.debug("Dropping alias %r → %r (not a valid part)", alias, key)
                continue
            aliases[phrase] = key
        return cls(parts, aliases)

    def __contains__(self, key: object) -> bool:
        return key in self.parts

    def __iter__(self) -> Iterator[str]:
        return iter(self.parts)

    def __len__(self) -> int:
        return len(self.parts)

    def phrase_candidates(self) -> list[tuple[str, str]]:
        """
        Does: List (phrase, key) pairs for canonical keys and aliases, longest
              phrase first so "inner lining" is tried before "inner".
        """
        candidates = [(p, p) for p in self.parts]
        candidates.extend(self.aliases.items())
        candidates.sort(key=lambda c: len(c[0]), reverse=True)
        return candidates


# =============================================================================
# Shipped model configuration
# =============================================================================


def _check_model_parts(table: dict[str, Any]) -> dict[str, list[str]]:
    """Validator for data/model_parts.json: model → list of part keys."""
    checked: dict[str, list[str]] = {}
    for model, parts in table.items():
        if not isinstance(parts, list) or not all(isinstance(p, str) and p for p in parts):
            raise TypeError(f"{model}: parts must be a list of non-empty strings")
        checked[model] = list(dict.fromkeys(parts))
    return checked


def _check_model_aliases(table: dict[str, Any]) -> dict[str, dict[str, str]]:
    """Validator for data/model_aliases.json: model → {alias phrase: part key}."""
    for model, aliases in table.items():
        if not isinstance(aliases, dict) or not all(
            isinstance(a, str) and isinstance(k, str) for a, k in aliases.items()
        ):
            raise TypeError(f"{model}: aliases must map strings to strings")
    return table


def _check_default_colors(table: dict[str, Any]) -> dict[str, dict[str, str]]:
    """Validator for data/default_colors.json; hex values come back canonical."""
    checked: dict[str, dict[str, str]] = {}
    for model, colors in table.items():
        if not isinstance(colors, dict):
            raise TypeError(f"{model}: default colors must be an object")
        checked[model] = {}
        for part, raw in colors.items():
            hex_value = normalize_hex(raw) if isinstance(raw, str) else None
            if hex_value is None:
                raise ValueError(f"{model}.{part}: invalid hex color {raw!r}")
            checked[model][part] = hex_value
    return checked


def _model_parts_config() -> dict[str, list[str]]:
    return load_config("model_parts", mode="validated_dict", validator=_check_model_parts)


def model_names() -> list[str]:
    """Does: Return configured model names in file order (e.g. "Shoe", "Rocket")."""
    return list(_model_parts_config())


def get_model_catalog(model_name: str) -> PartCatalog:
    """
    Does: Build the PartCatalog for a configured model.
    Returns: Empty catalog for unknown names.
    """
    parts = _model_parts_config().get(model_name) or []
    aliases = load_config(
        "model_aliases", mode="validated_dict", validator=_check_model_aliases
    ).get(model_name) or {}
    return PartCatalog.from_config(parts, aliases)


def get_default_colors(model_name: str) -> dict[str, str]:
    """
    Does: Return a fresh copy of the model's default color table.
          Parts missing from the config default to white.
    Raises: KeyError for unknown models.
    """
    if model_name not in _model_parts_config():
        raise KeyError(model_name)
    defaults = load_config(
        "default_colors", mode="validated_dict", validator=_check_default_colors
    ).get(model_name) or {}
    return {part: defaults.get(part, "#FFFFFF") for part in get_model_catalog(model_name)}
