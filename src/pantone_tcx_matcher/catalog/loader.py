"""
loader.py
=========

Does: Load a Pantone TCX catalog (<data>/pantone_tcx.json by default) through
      load_config, validate every record, and canonicalize hex to "#RRGGBB".
Used By: matcher (default catalog), name/code lookups, tests with scratch data dirs.
Returns: An ordered, immutable tuple of CatalogEntry.

Notes:
- The packaged pantone_tcx.json is a reference subset (83 colors), not the full
  Pantone TCX table. To match against a full export, drop it in a directory and set
  PANTONE_TCX_DATA_DIR to that directory and, if the file has another name,
  PANTONE_TCX_CATALOG to its name. The export must be {"colors": [{name, code, hex}]};
  exports that key the code as "tcx" are accepted.
- get_catalog() caches the first load; set the variables before the first match.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pantone_tcx_matcher.color.conversion import parse_hex, to_hex
from pantone_tcx_matcher.errors import CatalogDataError, InvalidHexError
from pantone_tcx_matcher.utils.load_config import load_config, resolve_data_dir
from pantone_tcx_matcher.utils.log import debug as _debug

from .types import Catalog, CatalogEntry

__all__ = ["CATALOG_FILE", "CATALOG_ENV_VAR", "load_catalog", "get_catalog"]

logger = logging.getLogger(__name__)

CATALOG_FILE = "pantone_tcx"
CATALOG_ENV_VAR = "PANTONE_TCX_CATALOG"

_FIELDS = ("name", "code", "hex")


def _entry_from_record(index: int, record: Any) -> CatalogEntry:
    """Does: Turn one raw JSON record into a CatalogEntry or raise CatalogDataError."""
    if not isinstance(record, dict):
        raise CatalogDataError(f"colors[{index}]: expected object, got {type(record).__name__}")

    # older exports key the code as "tcx"
    if "code" not in record and "tcx" in record:
        record = {**record, "code": record["tcx"]}

    missing = [k for k in _FIELDS if k not in record]
    if missing:
        raise CatalogDataError(f"colors[{index}]: missing field(s) {', '.join(missing)}")

    name, code, hx = record["name"], record["code"], record["hex"]
    if not isinstance(name, str) or not name.strip():
        raise CatalogDataError(f"colors[{index}]: name must be a non-empty string")
    if not isinstance(code, str):
        raise CatalogDataError(f"colors[{index}]: code must be a string, got {type(code).__name__}")
    try:
        rgb = parse_hex(hx)
    except InvalidHexError as e:
        raise CatalogDataError(f"colors[{index}] ({name}): {e}") from e

    return CatalogEntry(name=name, code=code, hex=to_hex(rgb))


def load_catalog(
    file: str | os.PathLike[str] | None = None,
    *,
    base_dir: Path | None = None,
    debug: bool = False,
) -> Catalog:
    """Load and validate a catalog file; order is preserved, duplicates are kept.

    Args:
        file: Data file name (".json" optional). Defaults to $PANTONE_TCX_CATALOG,
            then "pantone_tcx".
        base_dir: Data directory; see load_config for the fallback order.
        debug: Print a "catalog" topic line with the resolved file and entry count.

    Raises:
        CatalogDataError: if "colors" is not a list or a record is malformed.
        ConfigFileNotFound, ConfigParseError, ConfigTypeError: from load_config.
    """
    file = file or os.environ.get(CATALOG_ENV_VAR) or CATALOG_FILE
    data = load_config(file, base_dir=base_dir)

    colors = data.get("colors")
    if not isinstance(colors, list):
        raise CatalogDataError(f"{file}: 'colors' must be a list, got {type(colors).__name__}")

    catalog = tuple(_entry_from_record(i, rec) for i, rec in enumerate(colors))
    if not catalog:
        logger.warning("Catalog %s is empty; every match will fail.", file)
    logger.debug("Loaded %d catalog entries from %s", len(catalog), file)
    if debug:
        _debug(
            f"[LOAD] {os.fspath(file)} from {resolve_data_dir(base_dir)} -> {len(catalog)} entries",
            topic="catalog",
        )
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    """Does: Return the default catalog, loading it on first call."""
    return load_catalog()
