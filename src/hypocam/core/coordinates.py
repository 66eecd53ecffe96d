"""
Polar and rectangular coordinate conversion.
"""

from math import atan2, cos, sin, sqrt
from typing import NamedTuple, Tuple


class Point2D(NamedTuple):
    """A point in the cam plane."""
    x: float
    y: float


def to_polar(x: float, y: float) -> Tuple[float, float]:
    """
    Convert rectangular coordinates to polar.

    Returns:
        Tuple of (radius, angle_rad). The angle is 0 at the origin.
    """
    return sqrt(x ** 2 + y ** 2), atan2(y, x)


def to_rect(r: float, a: float) -> Tuple[float, float]:
    """Convert polar coordinates (radius, angle_rad) to rectangular (x, y)."""
    return r * cos(a), r * sin(a)
