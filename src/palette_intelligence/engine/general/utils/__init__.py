"""
utils.
======

Does: Shared helpers for config loading, topic-gated debug tracing and
      pipeline observability.
Used by: Context rules, Ollama prompt builder, orchestrator, CLI.
"""

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    temp_data_dir,
)
from .log import debug, enable_topics, reload_topics
from .observability import (
    InMemoryCollector,
    NullCollector,
    ObservabilityCollector,
    ObservationEvent,
)

__all__ = [
    "load_config",
    "clear_config_cache",
    "temp_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    "debug",
    "enable_topics",
    "reload_topics",
    "ObservationEvent",
    "ObservabilityCollector",
    "NullCollector",
    "InMemoryCollector",
]
__docformat__ = "google"
