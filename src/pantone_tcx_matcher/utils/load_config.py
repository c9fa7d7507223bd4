# src/pantone_tcx_matcher/utils/load_config.py

"""Locate and parse JSON catalog files under a <data/> directory, with an mtime cache.

The data directory is, in order: an explicit base_dir, $PANTONE_TCX_DATA_DIR or
$DATA_DIR, then the first "data/" found walking up from this package (the packaged
catalog). The top-level JSON value must be an object; its contents are checked by
the catalog loader.
"""

from __future__ import annotations

import json
import logging
import os
import threading
from pathlib import Path
from typing import Any

__all__ = [
    "DATA_DIR_ENV_VARS",
    "load_config",
    "clear_config_cache",
    "resolve_data_dir",
    "DataDirNotFound",
    "ConfigFileNotFound",
    "ConfigParseError",
    "ConfigTypeError",
]

# First match wins.
DATA_DIR_ENV_VARS = ("PANTONE_TCX_DATA_DIR", "DATA_DIR")


# ── Exceptions ───────────────────────────────────────────────────────────────
class DataDirNotFound(FileNotFoundError):
    """Raise when no 'data' directory is found while walking upwards."""


class ConfigFileNotFound(FileNotFoundError):
    """Raise when the requested data file is missing or outside the data dir."""


class ConfigParseError(ValueError):
    """Raise when a data file is not valid JSON."""


class ConfigTypeError(TypeError):
    """Raise when a data file's top-level value is not a JSON object."""


# ── Cache ────────────────────────────────────────────────────────────────────
log = logging.getLogger(__name__)
_CACHE_LOCK = threading.RLock()
# keyed by (path, mtime, encoding); an edited file gets a new key
_CONFIG_CACHE: dict[tuple[Path, float, str], dict[str, Any]] = {}


def clear_config_cache() -> None:
    """Empty the in-memory cache (tests, or after swapping catalog files in place)."""
    with _CACHE_LOCK:
        _CONFIG_CACHE.clear()
        log.debug("Config cache cleared.")


# ── Data directory ───────────────────────────────────────────────────────────
def _candidate_data_dirs(start: Path | None = None) -> list[Path]:
    start = (start or Path(__file__)).resolve()
    return [(p / "data").resolve() for p in [start, *start.parents]]


def _default_data_dir(start: Path | None = None) -> Path:
    for cand in _candidate_data_dirs(start):
        if cand.is_dir():
            return cand
    raise DataDirNotFound(
        "No 'data' directory found.\n"
        "Tried:\n  " + "\n  ".join(str(p) for p in _candidate_data_dirs(start))
    )


def resolve_data_dir(base_dir: str | os.PathLike[str] | None = None) -> Path:
    """Does: Pick the data directory: explicit > env override > discovery."""
    if base_dir is not None:
        return Path(base_dir).resolve()
    for var in DATA_DIR_ENV_VARS:
        v = os.environ.get(var)
        if v:
            return Path(os.path.expanduser(v)).resolve()
    return _default_data_dir()


# ── Loader ───────────────────────────────────────────────────────────────────
def load_config(
    file: str | os.PathLike[str],
    *,
    base_dir: str | os.PathLike[str] | None = None,
    encoding: str = "utf-8",
) -> dict[str, Any]:
    """Load <data>/<file>.json as a dict, reusing the parsed result until the file changes.

    Raises:
        ConfigFileNotFound: missing file, or a name that escapes the data dir.
        ConfigParseError: invalid JSON.
        ConfigTypeError: top-level value is not an object.
    """
    data_dir = resolve_data_dir(base_dir)

    file_str = os.fspath(file)
    file_name = file_str if file_str.endswith(".json") else f"{file_str}.json"
    path = (data_dir / file_name).resolve()
    try:
        path.relative_to(data_dir)
    except ValueError as e:
        raise ConfigFileNotFound(
            f"Refusing to access file outside data dir: {path} (base={data_dir})"
        ) from e

    try:
        mtime = path.stat().st_mtime
    except OSError as e:
        raise ConfigFileNotFound(f"Config file not found: {path}") from e

    cache_key = (path, mtime, encoding)
    with _CACHE_LOCK:
        if cache_key in _CONFIG_CACHE:
            log.debug("Config cache HIT: %s", path.name)
            return _CONFIG_CACHE[cache_key]

    try:
        with path.open("r", encoding=encoding, errors="strict", newline="") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigParseError(f"Invalid JSON in {path}: {e}") from e
    except OSError as e:
        raise ConfigFileNotFound(f"Cannot read {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigTypeError(f"{path.name}: expected a JSON object, got {type(data).__name__}")

    with _CACHE_LOCK:
        _CONFIG_CACHE[cache_key] = data
    log.debug("Config cache MISS → STORED: %s", path.name)
    return data
