"""
log.py.

Does: Topic-gated trace printer. STYLE_PARSER_DEBUG_TOPICS holds a comma list
      of topics ("parse", ...) or "all"; unset means silent.
Returns: Timestamped "[topic][LEVEL] msg" lines on stderr (or a given stream).
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "is_enabled", "reload_topics", "DEBUG_TOPICS_ENV"]

DEBUG_TOPICS_ENV = "STYLE_PARSER_DEBUG_TOPICS"


def _read_env() -> frozenset[str]:
    return frozenset(
        t.strip().lower() for t in os.environ.get(DEBUG_TOPICS_ENV, "").split(",") if t.strip()
    )


_topics = _read_env()


def reload_topics() -> None:
    """Does: Re-read STYLE_PARSER_DEBUG_TOPICS (after monkeypatching the env)."""
    global _topics
    _topics = _read_env()


def is_enabled(topic: str) -> bool:
    """Does: Tell callers whether building a trace message for `topic` is worth it."""
    return "all" in _topics or topic.strip().lower() in _topics


def debug(
    msg: str,
    topic: str = "parse",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print one trace line when `topic` is enabled."""
    if not is_enabled(topic):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(
        f"[{ts}] [{topic.strip().lower()}][{level.upper()}] {msg}",
        file=stream or sys.stderr,
    )
