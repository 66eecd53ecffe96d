"""
Hypocam Core - Pure geometry engine.

Closed-form profile equations, pressure angle analysis and pin layout for
hypocycloid cams. No JSON or file handling - pure Python API on plain
numbers and Point2D tuples.

Example:
    >>> from hypocam.core import calc_pa_limit_circles, calc_cam_vertices
    >>>
    >>> limits = calc_pa_limit_circles(p=0.08, d=0.15, e=0.05, n=10, ang=50.0)
    >>> profile = calc_cam_vertices(0.08, 0.15, 0.05, 10, 1000, 50.0, limits=limits)
    >>> len(profile)
    1001
"""

from .coordinates import Point2D, to_polar, to_rect
from .profile import calc_yp, calc_x, calc_y, calc_profile_point
from .pressure_angle import (
    calc_pressure_angle,
    calc_pressure_limit,
    calc_pa_limit_circles,
)
from .radial_clamp import check_limit
from .cam import calc_cam_vertices
from .pins import calc_pin_locations

__all__ = [
    # Coordinates
    "Point2D",
    "to_polar",
    "to_rect",

    # Profile equations
    "calc_yp",
    "calc_x",
    "calc_y",
    "calc_profile_point",

    # Pressure angle analysis
    "calc_pressure_angle",
    "calc_pressure_limit",
    "calc_pa_limit_circles",

    # Radial correction
    "check_limit",

    # Generators
    "calc_cam_vertices",
    "calc_pin_locations",
]
