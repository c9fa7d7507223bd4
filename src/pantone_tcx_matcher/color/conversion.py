"""
conversion.py
=============

Does: Parse hex color strings and convert sRGB (0-255) through linear RGB and
      CIE XYZ (D65, 0-100 scale) into CIE Lab.
Used By: color.distance callers, catalog loader (hex canonicalization), matcher.
Returns: RGB triples (tuple[int,int,int]), XYZ/Lab triples (tuple[float,float,float]),
         canonical "#RRGGBB" strings.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from webcolors import hex_to_rgb

from pantone_tcx_matcher.errors import InvalidHexError

__all__ = [
    "RGB",
    "XYZ",
    "Lab",
    "parse_hex",
    "to_hex",
    "srgb_to_linear",
    "rgb_to_xyz",
    "xyz_to_lab",
    "rgb_to_lab",
]
__docformat__ = "google"


# ── Types ─────────────────────────────────────────────────────────────────────
RGB = Tuple[int, int, int]
XYZ = Tuple[float, float, float]
Lab = Tuple[float, float, float]

# ── Constants ─────────────────────────────────────────────────────────────────
# sRGB -> XYZ, D65, row-major over (R_lin, G_lin, B_lin)
_SRGB_TO_XYZ = (
    (0.4124564, 0.3575761, 0.1804375),
    (0.2126729, 0.7151522, 0.0721750),
    (0.0193339, 0.1191920, 0.9503041),
)
D65_WHITE: XYZ = (95.047, 100.0, 108.883)

_GAMMA_THRESHOLD = 0.04045
_LAB_EPSILON = 0.008856
_LAB_KAPPA = 903.3


# =============================================================================
# 1) HEX <-> RGB
# =============================================================================

def parse_hex(value: str) -> RGB:
    """Does: Decode "#RRGGBB", "RRGGBB", "#RGB" or "RGB" into an RGB triple.

    Only one leading '#' is stripped; 3-digit shorthand doubles each digit.

    Raises:
        InvalidHexError: if the value is not a string, or is not exactly six hex
            digits after stripping and expansion.
    """
    if not isinstance(value, str):
        raise InvalidHexError(f"Invalid hex format: expected str, got {type(value).__name__}")

    cleaned = value[1:] if value.startswith("#") else value
    if len(cleaned) == 3:
        cleaned = "".join(c * 2 for c in cleaned)
    if len(cleaned) != 6:
        raise InvalidHexError(f"Invalid hex format: {value!r}")

    try:
        r, g, b = hex_to_rgb(f"#{cleaned}")
    except ValueError as e:
        raise InvalidHexError(f"Invalid hex format: {value!r}") from e
    return (r, g, b)


def to_hex(rgb: RGB) -> str:
    """Does: Format an RGB triple as canonical uppercase "#RRGGBB"."""
    r, g, b = rgb
    for c in (r, g, b):
        if not 0 <= c <= 255:
            raise ValueError(f"RGB out of bounds: {rgb}")
    return f"#{r:02X}{g:02X}{b:02X}"


# =============================================================================
# 2) RGB -> XYZ -> Lab
# =============================================================================

def srgb_to_linear(v: float) -> float:
    """Does: Gamma-expand one 0-255 sRGB channel to linear light in [0, 1]."""
    v = v / 255.0
    return ((v + 0.055) / 1.055) ** 2.4 if v > _GAMMA_THRESHOLD else v / 12.92


def rgb_to_xyz(rgb: RGB) -> XYZ:
    """Does: Convert sRGB to CIE XYZ (D65), scaled so Y of white is 100."""
    lin = [srgb_to_linear(float(c)) for c in rgb]
    x, y, z = (sum(m * c for m, c in zip(row, lin)) * 100 for row in _SRGB_TO_XYZ)
    return x, y, z


def _f_lab(t: float) -> float:
    return t ** (1 / 3) if t > _LAB_EPSILON else (_LAB_KAPPA * t + 16) / 116


def xyz_to_lab(xyz: XYZ) -> Lab:
    """Does: Convert XYZ (0-100 scale) to CIE Lab against the D65 reference white."""
    xr, yr, zr = D65_WHITE
    x, y, z = xyz
    fx, fy, fz = _f_lab(x / xr), _f_lab(y / yr), _f_lab(z / zr)
    L = 116 * fy - 16
    a = 500 * (fx - fy)
    b = 200 * (fy - fz)
    return L, a, b


@lru_cache(maxsize=4096)
def rgb_to_lab(rgb: RGB) -> Lab:
    """Does: Convert sRGB to CIE Lab via XYZ (memoized)."""
    return xyz_to_lab(rgb_to_xyz(rgb))
