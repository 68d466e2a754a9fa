# src/customizer_style_parser/extraction/general/utils/load_config.py

"""
load_config.py.

Does: Read the JSON tables shipped in data/ (colors, word lists, model parts,
      aliases and default colors) and hand them out in one of three shapes:
        - "raw"            → parsed JSON unchanged (ordered word lists)
        - "set"            → frozenset[str] of a flat list
        - "validated_dict" → dict after an optional validator rewrote/checked it
      Results are cached per (file, mtime, mode, validator), so editing a file
      invalidates its entries and each validator sees the raw table only once.
Used by: color constants/vocab, stop words, the model catalog, tests.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Literal

# ── Public surface ────────────────────────────────────────────────────────────
Mode = Literal["raw", "set", "validated_dict"]
Validator = Callable[[dict[str, Any]], dict[str, Any]]
DATA_DIR_ENV = "STYLE_PARSER_DATA_DIR"
_MODES = ("raw", "set", "validated_dict")

__all__ = [
    "Mode",
    "Validator",
    "DATA_DIR_ENV",
    "load_config",
    "resolve_data_dir",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """No data/ directory: not passed, not in the env, not found upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Requested table is missing, unreadable or outside the data dir."""


class ConfigParseError(ValueError):
    """Table is not valid JSON, or its validator rejected it."""


class ConfigTypeError(TypeError):
    """Table parsed but has the wrong shape for the requested mode."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_lock = threading.RLock()
_cache: dict[tuple[Path, float, str, Validator | None], Any] = {}


def clear_config_cache() -> None:
    """Does: Forget every cached table (tests, data-dir switches)."""
    with _lock:
        _cache.clear()
    log.debug("config cache cleared")


# ── Data directory ───────────────────────────────────────────────────────────
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    here = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in (here, *here.parents)]


def resolve_data_dir(base_dir: str | os.PathLike[str] | None = None) -> Path:
    """
    Does: Pick the data dir: explicit `base_dir`, then $STYLE_PARSER_DATA_DIR,
          then the first data/ directory found walking up from this module.
    Raises: DataDirNotFound when discovery finds nothing.
    """
    if base_dir is not None:
        return Path(base_dir).resolve()
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env).expanduser().resolve()
    candidates = _candidate_data_dirs()
    for cand in candidates:
        if cand.is_dir():
            return cand
    raise DataDirNotFound("no data/ directory; tried " + ", ".join(map(str, candidates)))


def _table_path(file: str | os.PathLike[str], data_dir: Path) -> Path:
    name = os.fspath(file)
    if not name.endswith(".json"):
        name += ".json"
    path = (data_dir / name).resolve()
    if data_dir not in path.parents:
        raise ConfigFileNotFound(f"{path} is outside data dir {data_dir}")
    if not path.is_file():
        raise ConfigFileNotFound(f"config file not found: {path}")
    return path


# ── Shape coercion ───────────────────────────────────────────────────────────
def _as_set(data: Any, name: str) -> frozenset[str]:
    if not isinstance(data, list):
        raise ConfigTypeError(f"{name}: 'set' needs a JSON list, got {type(data).__name__}")
    bad = [type(x).__name__ for x in data if isinstance(x, (list, dict)) or x is None]
    if bad:
        raise ConfigTypeError(f"{name}: 'set' needs scalar items, found {', '.join(bad[:3])}")
    return frozenset(str(x) for x in data)


def _as_dict(data: Any, name: str, validator: Validator | None) -> dict[str, Any]:
    if not isinstance(data, dict):
        raise ConfigTypeError(
            f"{name}: 'validated_dict' needs a JSON object, got {type(data).__name__}"
        )
    if validator is None:
        return data
    try:
        return validator(data)
    except (TypeError, ValueError, KeyError) as e:
        raise ConfigParseError(f"{name}: validation failed: {e}") from e


# ── Loader ───────────────────────────────────────────────────────────────────
def load_config(
    file: str | os.PathLike[str],
    mode: Mode = "raw",
    *,
    base_dir: str | os.PathLike[str] | None = None,
    validator: Validator | None = None,
) -> Any:
    """
    Does: Load <data dir>/<file>.json and coerce it to `mode`.
    Returns: Cached object; callers must treat it as read-only.
    Raises: ValueError for an unknown mode, plus the Config* errors above.
    """
    if mode not in _MODES:
        raise ValueError(f"unknown mode {mode!r}; expected one of {_MODES}")
    path = _table_path(file, resolve_data_dir(base_dir))
    try:
        key = (path, path.stat().st_mtime, mode, validator)
    except OSError as e:
        raise ConfigFileNotFound(f"cannot stat {path}: {e}") from e

    with _lock:
        if key in _cache:
            return _cache[key]

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"invalid JSON in {path.name}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"cannot read {path}: {e}") from e

    if mode == "set":
        result: Any = _as_set(data, path.name)
    elif mode == "validated_dict":
        result = _as_dict(data, path.name, validator)
    else:
        result = data

    with _lock:
        result = _cache.setdefault(key, result)
    log.debug("loaded %s (mode=%s)", path.name, mode)
    return result


@contextmanager
def temp_data_dir(path: str | os.PathLike[str]) -> Iterator[Path]:
    """Does: Point $STYLE_PARSER_DATA_DIR at `path` for the block, then restore it."""
    previous = os.environ.get(DATA_DIR_ENV)
    os.environ[DATA_DIR_ENV] = os.fspath(path)
    clear_config_cache()
    try:
        yield Path(path)
    finally:
        if previous is None:
            os.environ.pop(DATA_DIR_ENV, None)
        else:
            os.environ[DATA_DIR_ENV] = previous
        clear_config_cache()
