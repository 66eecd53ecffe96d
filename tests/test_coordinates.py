"""
Tests for polar/rectangular conversion.
"""

import pytest
from math import pi

from hypocam.core import Point2D, to_polar, to_rect


class TestToPolar:

    def test_positive_x_axis(self):
        r, a = to_polar(2.0, 0.0)
        assert r == 2.0
        assert a == 0.0

    def test_origin_has_zero_angle(self):
        assert to_polar(0.0, 0.0) == (0.0, 0.0)

    def test_negative_x_axis(self):
        r, a = to_polar(-1.0, 0.0)
        assert r == 1.0
        assert a == pytest.approx(pi)

    def test_angle_in_lower_half_is_negative(self):
        """atan2 range is (-pi, pi]."""
        _, a = to_polar(0.0, -1.0)
        assert a == pytest.approx(-pi / 2)


class TestRoundTrip:

    @pytest.mark.parametrize("x,y", [
        (0.775, 0.0),
        (0.3, 0.4),
        (-0.5, 0.25),
        (-0.1, -0.7),
        (1e-6, -2.0),
    ])
    def test_rect_polar_rect(self, x, y):
        r, a = to_polar(x, y)
        x2, y2 = to_rect(r, a)
        assert x2 == pytest.approx(x, abs=1e-9)
        assert y2 == pytest.approx(y, abs=1e-9)

    def test_point2d_unpacks_like_tuple(self):
        pt = Point2D(0.3, 0.4)
        x, y = pt
        assert (x, y) == (0.3, 0.4)
        assert pt.x == 0.3
        assert pt.y == 0.4
