"""
Tests for the closed-form hypocycloid profile equations.
"""

import pytest
from math import pi, radians

from hypocam.core import calc_yp, calc_x, calc_y, calc_profile_point

from tests.helpers.reference import REF_P, REF_D, REF_E, REF_N


class TestCalcYp:

    def test_zero_at_zero_angle(self):
        assert calc_yp(0.0, REF_E, REF_N, REF_P) == 0.0

    def test_zero_eccentricity(self):
        """No eccentricity means no contact-angle correction."""
        for a in (0.0, 0.1, 1.0, 3.0):
            assert calc_yp(a, 0.0, REF_N, REF_P) == 0.0

    def test_single_argument_atan_jumps_when_denominator_changes_sign(self):
        """With large eccentricity the denominator crosses zero and atan flips by ~pi.

        p=0.08, n=10, e=0.1: n*p/(e*(n+1)) = 0.727, so cos(n*a) + 0.727
        changes sign between n*a = 136° and 137°.
        """
        before = calc_yp(radians(136) / 10, 0.1, 10, 0.08)
        after = calc_yp(radians(137) / 10, 0.1, 10, 0.08)
        assert before > 1.5
        assert after < -1.5

    def test_no_jump_for_reference_cam(self):
        """Reference cam: n*p/(e*(n+1)) > 1, denominator never reaches zero."""
        values = [calc_yp(2 * pi * i / 1000, REF_E, REF_N, REF_P) for i in range(1001)]
        assert all(abs(v) < pi / 2 for v in values)
        assert max(abs(b - a) for a, b in zip(values, values[1:])) < 0.5


class TestProfilePoint:

    def test_reference_point_at_zero(self):
        """x(0) = p*n + e - d/2, y(0) = 0."""
        assert calc_x(REF_P, REF_D, REF_E, REF_N, 0.0) == pytest.approx(0.775)
        assert calc_y(REF_P, REF_D, REF_E, REF_N, 0.0) == 0.0

    def test_calc_profile_point_matches_x_y(self):
        a = 0.37
        pt = calc_profile_point(REF_P, REF_D, REF_E, REF_N, a)
        assert pt.x == calc_x(REF_P, REF_D, REF_E, REF_N, a)
        assert pt.y == calc_y(REF_P, REF_D, REF_E, REF_N, a)

    def test_radius_between_lobes(self):
        """Halfway between lobes the radius is p*n - e - d/2."""
        pt = calc_profile_point(REF_P, REF_D, REF_E, REF_N, pi / REF_N)
        r = (pt.x ** 2 + pt.y ** 2) ** 0.5
        assert r == pytest.approx(REF_P * REF_N - REF_E - REF_D / 2)

    def test_periodic_over_full_turn(self):
        start = calc_profile_point(REF_P, REF_D, REF_E, REF_N, 0.0)
        end = calc_profile_point(REF_P, REF_D, REF_E, REF_N, 2 * pi)
        assert end.x == pytest.approx(start.x, abs=1e-9)
        assert end.y == pytest.approx(start.y, abs=1e-9)
