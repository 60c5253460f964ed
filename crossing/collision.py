"""Point-vs-rounded-rectangle collision between the player and a bug.

The player is a point (its centroid) with a radius, the bug is its body
box. The test runs in three stages and stops at the first hit:

1. vertical band: the point is within the box's horizontal span and close
   enough to the top or bottom edge;
2. horizontal band: the point is within the box's vertical span and close
   enough to the left or right edge;
3. corners: the nearest corner, padded by a tolerance for the sprite's
   rounded corners, is within the radius.

This is an approximation tuned to the sprites, not an exact circle/box
intersection. A point deep inside a box taller than ``2 * radius`` does
not collide.
"""

from __future__ import annotations

import math

from .constants import VERTEX_TOLERANCE
from .models import Box


def distance(p1: tuple[float, float], p2: tuple[float, float]) -> float:
    """Euclidean distance between two (x, y) points."""
    return math.hypot(p1[0] - p2[0], p1[1] - p2[1])


def hits_vertical_band(point: tuple[float, float], box: Box, radius: float) -> bool:
    x, y = point
    if not box.left <= x <= box.right:
        return False
    return min(abs(y - box.top), abs(y - box.bottom)) <= radius


def hits_horizontal_band(point: tuple[float, float], box: Box, radius: float) -> bool:
    x, y = point
    if not box.top <= y <= box.bottom:
        return False
    return min(abs(x - box.left), abs(x - box.right)) <= radius


def hits_corner(point: tuple[float, float], box: Box, radius: float,
                tolerance: float = VERTEX_TOLERANCE) -> bool:
    nearest = min(distance(point, corner) for corner in box.corners())
    return nearest + tolerance <= radius


def hits_rounded_box(point: tuple[float, float], box: Box, radius: float,
                     tolerance: float = VERTEX_TOLERANCE) -> bool:
    """
    Return True when a circle of ``radius`` around ``point`` touches ``box``.

    Parameters
    ----------
    point : tuple[float, float]
        Player centroid.
    box : Box
        Enemy body rectangle.
    radius : float
        Player collision radius.
    tolerance : float, optional
        Pixels added to the corner distance to follow the rounded corners.
    """
    return (
        hits_vertical_band(point, box, radius)
        or hits_horizontal_band(point, box, radius)
        or hits_corner(point, box, radius, tolerance)
    )
