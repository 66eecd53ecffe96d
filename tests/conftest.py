"""
Shared test fixtures for hypocam.
"""

import json
import pytest

from hypocam.io import CamParameters

from tests.helpers.reference import REF_P, REF_D, REF_E, REF_N, REF_S, REF_ANG


# ─── Fixtures ─────────────────────────────────────────────────────────────


@pytest.fixture
def reference_params():
    """Default parameters of the reference cam."""
    return CamParameters()


@pytest.fixture(scope="module")
def reference_limits():
    """Module-scoped pressure limits for the reference cam."""
    from hypocam.core import calc_pa_limit_circles
    return calc_pa_limit_circles(REF_P, REF_D, REF_E, REF_N, REF_ANG)


@pytest.fixture(scope="module")
def reference_design():
    """Module-scoped complete design for the reference cam."""
    from hypocam.calculator import design_from_pitch
    return design_from_pitch(pitch=REF_P, pin_diameter=REF_D, eccentricity=REF_E, num_teeth=REF_N)


@pytest.fixture
def reference_params_dict():
    """Raw parameters dict as a host would send it."""
    return {
        "pitch": REF_P,
        "pin_diameter": REF_D,
        "eccentricity": REF_E,
        "num_teeth": REF_N,
        "num_samples": REF_S,
        "pressure_angle_limit_deg": REF_ANG,
        "pressure_angle_offset": 0.0,
        "circle_segments": 180,
    }


@pytest.fixture
def temp_params_file(tmp_path, reference_params_dict):
    """Bare parameters JSON file (no limits or points)."""
    path = tmp_path / "params.json"
    path.write_text(json.dumps(reference_params_dict))
    return path
