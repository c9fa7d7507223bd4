"""
distance.py
===========

Does: Scalar color distances: CIE76 Delta-E over Lab triples (perceptual, used for
      nearest-match) and Euclidean distance over raw RGB (used for similarity grouping).
Returns: Non-negative floats.
"""

from __future__ import annotations

import math

from .conversion import RGB, Lab

__all__ = ["MAX_RGB_DISTANCE", "delta_e", "rgb_distance"]

# Distance between black and white.
MAX_RGB_DISTANCE = math.sqrt(3 * 255 ** 2)


def _validate_rgb(rgb: RGB) -> None:
    r, g, b = rgb
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {rgb}")


def delta_e(lab1: Lab, lab2: Lab) -> float:
    """Does: CIE76 color difference, the Euclidean norm of (dL, da, db)."""
    L1, a1, b1 = lab1
    L2, a2, b2 = lab2
    return math.sqrt((L1 - L2) ** 2 + (a1 - a2) ** 2 + (b1 - b2) ** 2)


def rgb_distance(rgb1: RGB, rgb2: RGB) -> float:
    """Does: Compute Euclidean distance in sRGB space (0 to MAX_RGB_DISTANCE)."""
    _validate_rgb(rgb1); _validate_rgb(rgb2)
    return math.sqrt(sum((a - b) ** 2 for a, b in zip(rgb1, rgb2)))
