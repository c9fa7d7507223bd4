"""
log.py.

Does: Topic-scoped debug printer for the matcher ("matcher") and catalog loader
      ("catalog"). PANTONE_TCX_DEBUG_TOPICS narrows the output to a comma-separated
      subset, or 'all'; unset means every package topic.
Returns: Timestamped "[ts] [topic][LEVEL] msg" lines on stderr, printed only for calls
         made with debug=True.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["TOPICS", "debug", "reload_topics", "topic_enabled"]

ENV_VAR = "PANTONE_TCX_DEBUG_TOPICS"

# Topics this package emits.
TOPICS = frozenset({"matcher", "catalog"})


def _normalize(topic: str) -> str:
    return topic.strip().lower()


def _load_topics() -> frozenset[str]:
    raw = os.getenv(ENV_VAR, "")
    chosen = {_normalize(t) for t in raw.split(",") if t.strip()}
    if not chosen:
        return TOPICS
    if "all" in chosen:
        return TOPICS | chosen
    return frozenset(chosen)


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read enabled topics from PANTONE_TCX_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def topic_enabled(topic: str) -> bool:
    key = _normalize(topic)
    return key in _DEBUG_TOPICS or "all" in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "matcher",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level when the topic is enabled."""
    if not topic_enabled(topic):
        return
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{_normalize(topic)}][{level.upper()}] {msg}", file=stream or sys.stderr)
