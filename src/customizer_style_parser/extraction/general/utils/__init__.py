# customizer_style_parser/extraction/general/utils/__init__.py
"""

Does: Provide config loading and lightweight debug logging utilities for the parser.
Returns: Public API via load_config/clear_config_cache/temp_data_dir and debug/is_enabled/reload_topics.
Used by: Vocab loaders, model catalogs, the orchestrator, and tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import (
    debug,
    is_enabled,
    reload_topics,
)

__all__ = [
    # Config loading
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "debug",
    "is_enabled",
    "reload_topics",
]
