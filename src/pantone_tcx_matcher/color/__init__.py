"""
color.
=====

Does: Aggregate the color-space converter and the distance metrics.
Used By: Catalog loader (hex canonicalization) and the matcher.
Returns: Pure functions only; importing has no side effects.
"""

# ── Conversion ───────────────────────────────────────────────────────────────
from .conversion import (
    RGB,
    XYZ,
    Lab,
    parse_hex,
    rgb_to_lab,
    rgb_to_xyz,
    srgb_to_linear,
    to_hex,
    xyz_to_lab,
)

# ── Distances ────────────────────────────────────────────────────────────────
from .distance import (
    MAX_RGB_DISTANCE,
    delta_e,
    rgb_distance,
)

__all__ = [
    # types
    "RGB",
    "XYZ",
    "Lab",
    # conversion
    "parse_hex",
    "to_hex",
    "srgb_to_linear",
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
    # distances
    "MAX_RGB_DISTANCE",
    "delta_e",
    "rgb_distance",
]
