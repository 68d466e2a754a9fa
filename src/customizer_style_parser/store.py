"""
store.py
========

Does: Hold the per-model color tables the parser output is written into and
      expose the only ways to mutate them (set, reset, apply).
Returns: ColorStore / ModelColorState objects, applied part keys, ApplyOutcome.
Used by: The CLI demo and any UI integrating the parser.

Writes are serialized by a per-store lock, one mutation batch per apply call.
The parser itself never touches this module's state.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional

from customizer_style_parser.extraction.color.utils.hex_rgb import normalize_hex
from customizer_style_parser.extraction.color.vocab import ColorCatalog
from customizer_style_parser.extraction.general.types import ParseResult
from customizer_style_parser.extraction.orchestrator import parse_style_text
from customizer_style_parser.extraction.part.catalog import (
    PartCatalog,
    get_default_colors,
    get_model_catalog,
    model_names,
)
from customizer_style_parser.status import format_status

log = logging.getLogger(__name__)

__all__ = [
    "ModelColorState",
    "ColorStore",
    "ApplyOutcome",
    "apply_assignments",
    "apply_style_text",
]


@dataclass
class ModelColorState:
    """Color table of one model; its key set is fixed at construction."""

    model_name: str
    catalog: PartCatalog
    defaults: dict[str, str]
    colors: dict[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.colors:
            self.colors = dict(self.defaults)

    @classmethod
    def for_model(cls, model_name: str) -> ModelColorState:
        return cls(model_name, get_model_catalog(model_name), get_default_colors(model_name))

    def __contains__(self, part: object) -> bool:
        return part in self.colors

    def set_color(self, part: str, value: str) -> str:
        """
        Does: Write one part color after normalizing it.
        Raises: KeyError for parts outside the table, ValueError for bad colors.
        """
        if part not in self.colors:
            raise KeyError(part)
        hex_value = normalize_hex(value)
        if hex_value is None:
            raise ValueError(f"Invalid color for {part!r}: {value!r}")
        self.colors[part] = hex_value
        return hex_value

    def reset(self) -> None:
        self.colors = dict(self.defaults)


@dataclass
class ColorStore:
    """Per-model color states plus the current model/part selection."""

    states: dict[str, ModelColorState] = field(default_factory=dict)
    selected_model: Optional[str] = None
    selected_part: Optional[str] = None
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False, compare=False)

    @classmethod
    def from_config(cls) -> ColorStore:
        """Does: Build a store with one state per configured model, first model selected."""
        names = model_names()
        states = {name: ModelColorState.for_model(name) for name in names}
        return cls(states=states, selected_model=names[0] if names else None)

    def state(self, model_name: str) -> ModelColorState:
        """Raises: KeyError for unknown models."""
        return self.states[model_name]

    def select_model(self, model_name: str) -> None:
        if model_name not in self.states:
            raise KeyError(model_name)
        with self._lock:
            self.selected_model = model_name
            self.selected_part = None

    def reset_colors(self, model_name: Optional[str] = None) -> None:
        name = model_name or self.selected_model
        if name is None:
            return
        with self._lock:
            self.state(name).reset()

    @property
    def lock(self) -> threading.RLock:
        return self._lock


@dataclass
class ApplyOutcome:
    applied: list[str]
    result: ParseResult
    message: str


def apply_assignments(
    store: ColorStore,
    model_name: str,
    assignments: Mapping[str, str],
    select_part: Optional[str] = None,
) -> list[str]:
    """
    Does: Write parsed assignments into a model's table. Only keys already in
          the table are written; bad colors are skipped. `select_part`, when it
          is a part of the model, becomes the selected part.
    Returns: Applied part keys in assignment order ([] for unknown models).
    """
    state = store.states.get(model_name)
    if state is None or not assignments:
        log.debug("apply skipped (model=%r, %d assignment(s))", model_name, len(assignments or {}))
        return []

    applied: list[str] = []
    with store.lock:
        for part, value in assignments.items():
            if part not in state:
                log.debug("apply: %r is not a part of %s", part, model_name)
                continue
            try:
                state.set_color(part, value)
            except ValueError:
                log.warning("apply: invalid color %r for %s.%s", value, model_name, part)
                continue
            applied.append(part)

        if select_part and select_part in state:
            store.selected_part = select_part
    return applied


def apply_style_text(
    store: ColorStore,
    text: str,
    colors: Optional[ColorCatalog] = None,
) -> ApplyOutcome:
    """
    Does: Parse `text` for the selected model, apply the assignments, select
          the last matched part and build the status message.
    """
    model_name = store.selected_model or ""
    state = store.states.get(model_name)
    catalog = state.catalog if state is not None else PartCatalog()
    result = parse_style_text(text, catalog, colors=colors)

    if not result.assignments:
        return ApplyOutcome(applied=[], result=result, message=format_status(result, []))

    applied = apply_assignments(
        store,
        model_name,
        result.assignments,
        select_part=result.last_matched_part,
    )
    return ApplyOutcome(applied=applied, result=result, message=format_status(result))
