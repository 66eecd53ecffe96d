"""
Radial correction of profile samples outside the pressure angle limit circles.

The reference correction is a fixed inward offset, not a clamp: a sample
further out than the offset stays outside the bound, and a sample inside the
minimum circle is pulled further in. CorrectionMode.CLAMP snaps the radius
onto the violated circle instead.
"""

from typing import Tuple

from ..enums import CorrectionMode
from .coordinates import to_polar, to_rect


def check_limit(
    x: float,
    y: float,
    maxrad: float,
    minrad: float,
    offset: float,
    mode: CorrectionMode = CorrectionMode.OFFSET,
) -> Tuple[float, float]:
    """
    Correct a profile sample whose radius falls outside [minrad, maxrad].

    Args:
        x, y: Sample in rectangular coordinates
        maxrad: Outer limit circle radius
        minrad: Inner limit circle radius
        offset: Radial correction subtracted in OFFSET mode
        mode: OFFSET (reference) or CLAMP

    Returns:
        Corrected (x, y). Samples within the bounds are returned unchanged.
    """
    r, a = to_polar(x, y)
    if (r > maxrad) or (r < minrad):
        if mode == CorrectionMode.CLAMP:
            r = maxrad if r > maxrad else minrad
        else:
            r = r - offset
        x, y = to_rect(r, a)
    return x, y
