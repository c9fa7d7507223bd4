"""
errors.py
=========

Does: Define the exception hierarchy raised by hex parsing, catalog loading and matching.
Used By: color.conversion, catalog.loader, matching.matcher, and callers that want to
         tell a caller mistake (bad hex, bad threshold) from a packaging failure
         (empty or malformed catalog).
"""

from __future__ import annotations

__all__ = [
    "ColorMatchError",
    "InvalidHexError",
    "InvalidThresholdError",
    "EmptyCatalogError",
    "CatalogDataError",
]


class ColorMatchError(Exception):
    """Base class for every error raised by this package."""


class InvalidHexError(ColorMatchError, ValueError):
    """Raise when a hex string is not 3 or 6 hex digits after stripping '#'."""


class InvalidThresholdError(ColorMatchError, ValueError):
    """Raise when a similarity threshold is negative, non-finite or not numeric."""


class EmptyCatalogError(ColorMatchError, LookupError):
    """Raise when a nearest-match scan has no catalog entries to compare against."""


class CatalogDataError(ColorMatchError, ValueError):
    """Raise when a catalog record is missing a field or carries an invalid value."""
