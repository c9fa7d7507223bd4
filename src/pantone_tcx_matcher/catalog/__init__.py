"""
catalog.
=======

Does: Expose the catalog record type, the packaged catalog loader, and code/name lookups.
Used By: Matcher and public package API.
Returns: Immutable tuples of CatalogEntry; nothing is loaded at import time.
"""

from .loader import CATALOG_ENV_VAR, CATALOG_FILE, get_catalog, load_catalog
from .search import find_by_code, search_by_name
from .types import Catalog, CatalogEntry

__all__ = [
    "Catalog",
    "CatalogEntry",
    "CATALOG_FILE",
    "CATALOG_ENV_VAR",
    "load_catalog",
    "get_catalog",
    "find_by_code",
    "search_by_name",
]
