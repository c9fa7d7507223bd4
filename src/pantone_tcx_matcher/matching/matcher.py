"""
matcher.py
==========

Does: Resolve a hex color to its nearest catalog entry by CIE76 Delta-E, project its
      name/code, and group catalog entries around that anchor by raw RGB distance.
Used By: Public package API (nearest_match, similar_matches, ...).
Returns: CatalogEntry, str, or list[CatalogEntry] (anchor first).

Notes:
- One scan routine (ColorMatcher.nearest); name/code lookups only project its result.
- Linear scan, no index: the catalog is small and static.
"""

from __future__ import annotations

import math
import numbers
import re
from functools import lru_cache
from typing import Iterable, Union

from pantone_tcx_matcher.catalog.loader import get_catalog
from pantone_tcx_matcher.catalog.types import Catalog, CatalogEntry
from pantone_tcx_matcher.color.conversion import parse_hex, rgb_to_lab
from pantone_tcx_matcher.color.distance import MAX_RGB_DISTANCE, delta_e, rgb_distance
from pantone_tcx_matcher.errors import EmptyCatalogError, InvalidThresholdError
from pantone_tcx_matcher.utils.log import debug as _debug

__all__ = [
    "DEFAULT_MAX_DISTANCE",
    "MAX_THRESHOLD",
    "Threshold",
    "coerce_threshold",
    "ColorMatcher",
    "get_default_matcher",
    "nearest_match",
    "nearest_match_name",
    "nearest_match_code",
    "similar_matches",
]
__docformat__ = "google"

# ── Tunables ─────────────────────────────────────────────────────────────────
DEFAULT_MAX_DISTANCE = 64

Threshold = Union[int, float, str]

# Any threshold at or above this already keeps every catalog entry.
MAX_THRESHOLD = math.ceil(MAX_RGB_DISTANCE)

# sign, whole digits, fraction digits
_NUMERIC_RE = re.compile(r"^([+-]?)(\d*)(?:\.(\d*))?$")


# =============================================================================
# 1) THRESHOLD COERCION
# =============================================================================

def _threshold_from_text(value: str) -> int:
    """Does: Parse a decimal string from its digits, without a float round-trip."""
    m = _NUMERIC_RE.match(value.strip())
    if m is None or not (m.group(2) or m.group(3)):
        raise InvalidThresholdError(f"Invalid threshold: {value!r} is not a number")
    sign, whole, frac = m.group(1), m.group(2).lstrip("0"), (m.group(3) or "").rstrip("0")
    if sign == "-" and (whole or frac):
        raise InvalidThresholdError(f"Invalid threshold: {value!r} is negative")
    if len(whole) > len(str(MAX_THRESHOLD)):
        return MAX_THRESHOLD
    return int(whole or "0")


def coerce_threshold(value: Threshold) -> int:
    """Does: Turn a max-distance argument into a non-negative int, truncating toward zero.

    Accepts real numbers and decimal strings ("12", " 12.9 "). Values past the largest
    possible RGB distance are clamped to MAX_THRESHOLD, so huge ints and long digit
    strings still mean "whole catalog". Booleans, non-numeric strings (including
    "inf"/"nan"), float NaN/inf and negative values raise InvalidThresholdError.
    """
    if isinstance(value, bool):
        raise InvalidThresholdError(f"Invalid threshold: {value!r}")
    if isinstance(value, str):
        return min(_threshold_from_text(value), MAX_THRESHOLD)
    if not isinstance(value, numbers.Real):
        raise InvalidThresholdError(
            f"Invalid threshold: expected number or numeric string, got {type(value).__name__}"
        )

    if isinstance(value, float) and not math.isfinite(value):
        raise InvalidThresholdError(f"Invalid threshold: {value!r} is not finite")
    if value < 0:
        raise InvalidThresholdError(f"Invalid threshold: {value!r} is negative")
    if value >= MAX_THRESHOLD:
        return MAX_THRESHOLD
    return math.trunc(value)


# =============================================================================
# 2) MATCHER
# =============================================================================

class ColorMatcher:
    """Nearest-match and similarity grouping over one read-only catalog."""

    def __init__(self, catalog: Iterable[CatalogEntry]):
        self._catalog: Catalog = tuple(catalog)

    @property
    def catalog(self) -> Catalog:
        return self._catalog

    def __len__(self) -> int:
        return len(self._catalog)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({len(self._catalog)} entries)"

    def nearest(self, hex_color: str, *, debug: bool = False) -> CatalogEntry:
        """Return the entry with the smallest Delta-E to `hex_color`.

        Ties keep the earliest entry in catalog order.

        Raises:
            InvalidHexError: if `hex_color` is malformed (before any scan).
            EmptyCatalogError: if the catalog has no entries.
        """
        target = rgb_to_lab(parse_hex(hex_color))

        best: CatalogEntry | None = None
        best_d = math.inf
        for entry in self._catalog:
            d = delta_e(target, rgb_to_lab(entry.rgb))
            if d < best_d:
                best, best_d = entry, d

        if best is None:
            raise EmptyCatalogError("No closest catalog color found: catalog is empty")

        if debug:
            _debug(
                f"[NEAREST] {hex_color!r} -> {best.name} {best.code} {best.hex} "
                f"(ΔE={best_d:.3f}, scanned={len(self._catalog)})",
                topic="matcher",
            )
        return best

    def nearest_name(self, hex_color: str) -> str:
        """Does: Name of the nearest entry."""
        return self.nearest(hex_color).name

    def nearest_code(self, hex_color: str) -> str:
        """Does: TCX code of the nearest entry."""
        return self.nearest(hex_color).code

    def similar(
        self,
        hex_color: str,
        max_distance: Threshold = DEFAULT_MAX_DISTANCE,
        *,
        debug: bool = False,
    ) -> list[CatalogEntry]:
        """Return the nearest entry followed by its RGB neighbours.

        Neighbours are entries within `max_distance` (raw RGB, truncated to int) of the
        anchor, excluding every entry with the anchor's hex, sorted ascending by
        distance; equal distances keep catalog order.

        Raises:
            InvalidThresholdError: if `max_distance` cannot be coerced.
            InvalidHexError, EmptyCatalogError: as for `nearest`.
        """
        threshold = coerce_threshold(max_distance)
        anchor = self.nearest(hex_color, debug=debug)
        anchor_rgb = anchor.rgb

        neighbours: list[tuple[float, CatalogEntry]] = []
        for entry in self._catalog:
            rgb = entry.rgb
            if rgb == anchor_rgb:
                continue
            d = rgb_distance(anchor_rgb, rgb)
            if d <= threshold:
                neighbours.append((d, entry))
        neighbours.sort(key=lambda pair: pair[0])

        if debug:
            _debug(
                f"[SIMILAR] anchor={anchor.name} threshold={threshold} "
                f"kept={len(neighbours)}/{len(self._catalog)}",
                topic="matcher",
            )
        return [anchor, *(entry for _, entry in neighbours)]


# =============================================================================
# 3) DEFAULT CATALOG API
# =============================================================================

@lru_cache(maxsize=1)
def get_default_matcher() -> ColorMatcher:
    """Does: Build (once) a matcher over the packaged catalog."""
    return ColorMatcher(get_catalog())


def nearest_match(hex_color: str, *, debug: bool = False) -> CatalogEntry:
    """Does: Nearest packaged catalog entry to `hex_color` by Delta-E (CIE76)."""
    return get_default_matcher().nearest(hex_color, debug=debug)


def nearest_match_name(hex_color: str) -> str:
    return nearest_match(hex_color).name


def nearest_match_code(hex_color: str) -> str:
    return nearest_match(hex_color).code


def similar_matches(
    hex_color: str,
    max_distance: Threshold = DEFAULT_MAX_DISTANCE,
    *,
    debug: bool = False,
) -> list[CatalogEntry]:
    """Does: Anchor (nearest match) plus packaged entries within `max_distance` RGB units."""
    return get_default_matcher().similar(hex_color, max_distance, debug=debug)
