"""
search.py
=========

Does: Look catalog entries up by TCX code (exact) or by name (fuzzy, rapidfuzz WRatio).
Returns: CatalogEntry / None for codes; [(entry, score)] best-first for names.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable

from rapidfuzz import fuzz, process
from rapidfuzz import utils as rf_utils

from .loader import get_catalog
from .types import Catalog, CatalogEntry

__all__ = ["find_by_code", "search_by_name"]
__docformat__ = "google"

log = logging.getLogger(__name__)

# "17-1563 TCX", "17-1563-tcx", "17-1563tpx"
_CODE_SUFFIX_RE = re.compile(r"[\s-]*T[CP]X$")


def _resolve(catalog: Iterable[CatalogEntry] | None) -> Catalog:
    return get_catalog() if catalog is None else tuple(catalog)


def _normalize_code(code: str) -> str:
    return _CODE_SUFFIX_RE.sub("", code.strip().upper())


def find_by_code(
    code: str,
    catalog: Iterable[CatalogEntry] | None = None,
) -> CatalogEntry | None:
    """Does: Return the first entry whose code matches, ignoring case, spaces and a TCX/TPX suffix."""
    key = _normalize_code(code)
    if not key:
        return None
    for entry in _resolve(catalog):
        if _normalize_code(entry.code) == key:
            return entry
    return None


def search_by_name(
    query: str,
    catalog: Iterable[CatalogEntry] | None = None,
    *,
    limit: int = 5,
    score_cutoff: float = 80.0,
) -> list[tuple[CatalogEntry, float]]:
    """
    Does: Fuzzy-match `query` against entry names (case/punctuation-insensitive).
    Returns: Up to `limit` (entry, score) pairs, score in [0, 100], best first;
             equal scores keep catalog order.
    """
    if not query or not query.strip():
        return []
    entries = _resolve(catalog)
    hits = process.extract(
        query,
        [e.name for e in entries],
        scorer=fuzz.WRatio,
        processor=rf_utils.default_process,
        limit=None,
        score_cutoff=score_cutoff,
    )
    hits = sorted(hits, key=lambda h: (-h[1], h[2]))[:limit]
    log.debug("search_by_name(%r) -> %d hit(s)", query, len(hits))
    return [(entries[idx], float(score)) for _name, score, idx in hits]
