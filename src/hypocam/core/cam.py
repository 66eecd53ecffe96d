"""
Cam profile generation.

Samples the profile equations once around the full revolution, corrects
samples outside the pressure angle limit circles and shifts the result by
the eccentricity so the cam is centred on its own bore.
"""

import logging
from math import pi
from typing import Optional, Tuple

from ..enums import CorrectionMode
from ..io.loaders import PressureLimits
from .coordinates import Point2D
from .pressure_angle import calc_pa_limit_circles
from .profile import calc_x, calc_y
from .radial_clamp import check_limit

logger = logging.getLogger(__name__)


def calc_cam_vertices(
    p: float,
    d: float,
    e: float,
    n: int,
    s: int,
    ang: float,
    offset: float = 0.0,
    limits: Optional[PressureLimits] = None,
    mode: CorrectionMode = CorrectionMode.OFFSET,
) -> Tuple[Point2D, ...]:
    """
    Generate the cam profile.

    Args:
        p: Tooth pitch
        d: Pin diameter
        e: Eccentricity
        n: Number of teeth in the cam
        s: Number of line segments around the profile
        ang: Pressure angle limit (degrees), used when limits is None
        offset: Radial correction for samples outside the limit circles
        limits: Precomputed pressure limits; computed here if omitted
        mode: Radial correction mode

    Returns:
        s + 1 points tracing the cam boundary once; the last point repeats
        the first. Points are shifted in -x by the eccentricity.

        If either limit circle was not found no sample is corrected.
    """
    if limits is None:
        limits = calc_pa_limit_circles(p, d, e, n, ang)

    apply_limits = limits.bound_found
    if not apply_limits:
        logger.warning("Pressure angle bounds not found; generating profile without radial correction")

    q = 2 * pi / float(s)
    corrected = 0
    vertices = []
    for i in range(s + 1):
        x = calc_x(p, d, e, n, q * i)
        y = calc_y(p, d, e, n, q * i)
        if apply_limits:
            cx, cy = check_limit(x, y, limits.pa_rad_max, limits.pa_rad_min, offset, mode)
            if cx is not x or cy is not y:
                corrected += 1
            x, y = cx, cy
        vertices.append(Point2D(x - e, y))

    logger.debug(f"Generated {len(vertices)} profile points, {corrected} corrected ({mode.value})")
    return tuple(vertices)
