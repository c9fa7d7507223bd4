# src/pantone_tcx_matcher/utils/__init__.py
"""

Does: Provide catalog-file loading and lightweight debug logging for the matcher stack.
Returns: Public API via load_config/clear_config_cache/resolve_data_dir and debug/reload_topics.
Used by: Catalog loader, matcher, tests.
"""

from __future__ import annotations

from .load_config import (
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
    DataDirNotFound,
    clear_config_cache,
    load_config,
    resolve_data_dir,
)
from .log import (
    TOPICS,
    debug,
    reload_topics,
    topic_enabled,
)

__all__ = [
    # Data loading
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
    # Logging helpers
    "TOPICS",
    "debug",
    "reload_topics",
    "topic_enabled",
]
