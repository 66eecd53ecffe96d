"""
Pressure angle analysis and limit circles.

The pressure angle between the pin force and the cam's direction of motion
varies along the profile. Where it exceeds the configured limit the pins do
little useful work, so the profile is corrected outside a pair of limit
circles. Formulas after:
    http://imtuoradea.ro/auo.fmte/files-2007/MECATRONICA_files/Anamaria_Dascalescu_1.pdf

The limit circles are located by a linear scan in whole degrees from 0 to
180, latching on the first crossing of +limit (minimum) and -limit
(maximum).
"""

import logging
from math import asin, cos, pi, sin
from typing import List

from ..constants import (
    PA_NOT_FOUND_DEG,
    PA_SCAN_START_DEG,
    PA_SCAN_END_DEG,
    PA_SCAN_STEP_DEG,
)
from ..exceptions import NumericDomainError
from ..io.loaders import PressureLimits

logger = logging.getLogger(__name__)


def calc_pressure_angle(p: float, d: float, n: int, a: float) -> float:
    """
    Pressure angle at roll angle a.

    Args:
        p: Tooth pitch
        d: Pin diameter
        n: Number of teeth in the cam
        a: Roll angle (radians)

    Returns:
        Pressure angle in degrees

    Raises:
        NumericDomainError: If the arcsine argument is outside [-1, 1]
    """
    ex = 2 ** 0.5
    r3 = p * n
    rg = r3 / ex
    pp = rg * (ex ** 2 + 1 - 2 * ex * cos(a)) ** 0.5 - d / 2

    denominator = pp + d / 2
    if denominator == 0:
        raise NumericDomainError(
            f"Pressure angle undefined at {a:.6f} rad: zero contact distance",
            angle_rad=a,
        )

    ratio = (r3 * cos(a) - rg) / denominator
    if not -1.0 <= ratio <= 1.0:
        raise NumericDomainError(
            f"Pressure angle undefined at {a:.6f} rad: asin argument {ratio!r} outside [-1, 1]",
            angle_rad=a,
            value=ratio,
        )

    return asin(ratio) * 180 / pi


def calc_pressure_limit(p: float, d: float, e: float, n: int, a: float) -> float:
    """Radius of the pressure angle limit circle for roll angle a (radians)."""
    ex = 2 ** 0.5
    r3 = p * n
    rg = r3 / ex
    q = (r3 ** 2 + rg ** 2 - 2 * r3 * rg * cos(a)) ** 0.5
    x = rg - e + (q - d / 2) * (r3 * cos(a) - rg) / q
    y = (q - d / 2) * r3 * sin(a) / q
    return (x ** 2 + y ** 2) ** 0.5


def calc_pa_limit_circles(p: float, d: float, e: float, n: int, ang: float) -> PressureLimits:
    """
    Find the pressure angle limit circles.

    Scans whole degrees 0..180. pa_min is the first degree whose pressure
    angle drops below +ang; pa_max is one degree before the first whose
    pressure angle drops below -ang. Later crossings are ignored.

    A degree where the pressure angle is undefined (NumericDomainError) is
    treated as not meeting either condition and recorded in
    skipped_degrees.

    Args:
        p: Tooth pitch
        d: Pin diameter
        e: Eccentricity
        n: Number of teeth in the cam
        ang: Pressure angle limit (degrees)

    Returns:
        PressureLimits. A bound that never triggers stays at -1.0 and its
        radius is None.
    """
    pa_min = PA_NOT_FOUND_DEG
    pa_max = PA_NOT_FOUND_DEG
    skipped: List[int] = []

    for i in range(PA_SCAN_START_DEG, PA_SCAN_END_DEG + 1, PA_SCAN_STEP_DEG):
        try:
            x = calc_pressure_angle(p, d, n, float(i) * pi / 180)
        except NumericDomainError as exc:
            logger.debug(f"Skipping {i}° in pressure angle scan: {exc}")
            skipped.append(i)
            continue

        if x < ang and pa_min < 0:
            pa_min = float(i)
        if x < -ang and pa_max < 0:
            pa_max = float(i - 1)

    pa_rad_min = calc_pressure_limit(p, d, e, n, pa_min * pi / 180) if pa_min >= 0 else None
    pa_rad_max = calc_pressure_limit(p, d, e, n, pa_max * pi / 180) if pa_max >= 0 else None

    if pa_rad_min is None or pa_rad_max is None:
        logger.warning(
            f"No pressure angle bound found for limit {ang}° "
            f"(pa_min={pa_min}, pa_max={pa_max})"
        )
    else:
        logger.debug(
            f"Pressure limits: {pa_min:.0f}°..{pa_max:.0f}°, "
            f"radius {pa_rad_min:.6f}..{pa_rad_max:.6f}"
        )

    return PressureLimits(
        pa_min_deg=pa_min,
        pa_max_deg=pa_max,
        pa_rad_min=pa_rad_min,
        pa_rad_max=pa_rad_max,
        skipped_degrees=tuple(skipped),
    )
