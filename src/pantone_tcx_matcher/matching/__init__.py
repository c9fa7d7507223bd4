"""
matching.
========

Does: Expose nearest-match lookup, its name/code projections, and similarity grouping.
"""

from .matcher import (
    DEFAULT_MAX_DISTANCE,
    MAX_THRESHOLD,
    ColorMatcher,
    Threshold,
    coerce_threshold,
    get_default_matcher,
    nearest_match,
    nearest_match_code,
    nearest_match_name,
    similar_matches,
)

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "MAX_THRESHOLD",
    "Threshold",
    "ColorMatcher",
    "coerce_threshold",
    "get_default_matcher",
    "nearest_match",
    "nearest_match_name",
    "nearest_match_code",
    "similar_matches",
]
