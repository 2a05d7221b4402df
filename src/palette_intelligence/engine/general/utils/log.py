"""
log.py.

Does: Lightweight debug tracer controlled by PALETTE_DEBUG_TOPICS (comma-sep or 'all').
Returns: Prints timestamped lines with topic + level. Used by scale generation,
format detection and the CLI --debug flag.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "reload_topics", "enable_topics"]

TOPICS_ENV = "PALETTE_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(TOPICS_ENV, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Reload topics from environment variable PALETTE_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def enable_topics(*topics: str) -> None:
    """Does: Switch tracing on for the given topics (or 'all') in-process."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _DEBUG_TOPICS | {t.strip().lower() for t in topics if t.strip()}


def debug(
    msg: str,
    topic: str = "engine",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped debug line with topic and level
    if the topic is enabled via PALETTE_DEBUG_TOPICS.
    """
    topic_key = topic.lower().strip()
    if not _DEBUG_TOPICS:
        return
    if "all" not in _DEBUG_TOPICS and topic_key not in _DEBUG_TOPICS:
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
