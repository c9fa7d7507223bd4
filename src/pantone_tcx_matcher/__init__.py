"""
pantone_tcx_matcher
===================

Does: Match any hex color to its closest Pantone TCX reference color (CIE76 Delta-E in
      Lab) and list catalog colors near that match (Euclidean RGB distance).
Returns: CatalogEntry records (name, code, hex); see `matching` for the operations.
Used by: Library callers. Importing loads nothing; the catalog is read on first match.
"""

from .catalog import (
    CatalogEntry,
    find_by_code,
    get_catalog,
    load_catalog,
    search_by_name,
)
from .errors import (
    CatalogDataError,
    ColorMatchError,
    EmptyCatalogError,
    InvalidHexError,
    InvalidThresholdError,
)
from .matching import (
    DEFAULT_MAX_DISTANCE,
    ColorMatcher,
    nearest_match,
    nearest_match_code,
    nearest_match_name,
    similar_matches,
)

__all__ = [
    # matching
    "nearest_match",
    "nearest_match_name",
    "nearest_match_code",
    "similar_matches",
    "ColorMatcher",
    "DEFAULT_MAX_DISTANCE",
    # catalog
    "CatalogEntry",
    "load_catalog",
    "get_catalog",
    "find_by_code",
    "search_by_name",
    # errors
    "ColorMatchError",
    "InvalidHexError",
    "InvalidThresholdError",
    "EmptyCatalogError",
    "CatalogDataError",
]
__docformat__ = "google"
