"""Pin (roller) locations around the cam."""

from math import cos, pi, sin
from typing import Tuple

from .coordinates import Point2D


def calc_pin_locations(p: float, n: int) -> Tuple[Point2D, ...]:
    """
    Generate the pin locations.

    A cycloidal drive with an n-tooth cam runs against n + 1 pins on the bolt
    circle of radius p * n.

    Returns:
        n + 2 points: one per pin plus a closing point identical to the first.
    """
    radius = p * n
    step = 2 * pi / (n + 1)
    pins = []
    for i in range(n + 2):
        # The closing point reuses angle 0 so the ring closes exactly
        angle = step * (i % (n + 1))
        pins.append(Point2D(radius * cos(angle), radius * sin(angle)))
    return tuple(pins)
