"""
Hypocycloid cam profile equations.

The profile is the path of a pin of diameter d rolling around a base circle
of radius n*p, offset by the eccentricity e. Formulas after:
    http://gears.ru/transmis/zaprogramata/2.139.pdf

Conjugate angle note:
    calc_yp() uses a single-argument arctangent of a ratio, not atan2. Where
    the denominator changes sign the angle jumps by pi, which can leave a
    visible kink in the profile for some parameter combinations. The formula
    is kept as-is; profiles match those of the SketchUp cam plug-in.
"""

from math import atan, cos, sin

from .coordinates import Point2D


def calc_yp(a: float, e: float, n: int, p: float) -> float:
    """
    Conjugate angle between the pin contact normal and the roll angle.

    Args:
        a: Roll angle (radians)
        e: Eccentricity
        n: Number of teeth in the cam
        p: Tooth pitch

    Returns:
        Conjugate angle in radians. With zero eccentricity the ratio term is
        unbounded and the angle is 0.
    """
    if e == 0:
        return 0.0
    return atan(sin(n * a) / (cos(n * a) + (n * p) / (e * (n + 1))))


def calc_x(p: float, d: float, e: float, n: int, a: float) -> float:
    """X coordinate of the unshifted profile at roll angle a."""
    return (n * p) * cos(a) + e * cos((n + 1) * a) - d / 2 * cos(calc_yp(a, e, n, p) + a)


def calc_y(p: float, d: float, e: float, n: int, a: float) -> float:
    """Y coordinate of the unshifted profile at roll angle a."""
    return (n * p) * sin(a) + e * sin((n + 1) * a) - d / 2 * sin(calc_yp(a, e, n, p) + a)


def calc_profile_point(p: float, d: float, e: float, n: int, a: float) -> Point2D:
    """Profile point at roll angle a, before limit correction and eccentricity shift."""
    return Point2D(calc_x(p, d, e, n, a), calc_y(p, d, e, n, a))
