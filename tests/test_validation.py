"""
Unit tests for cam parameter validation.

Tests call the validators with minimal dict inputs as well as CamParameters
models. Only validate_design() runs the pressure angle scan.
"""

import pytest

from hypocam.calculator.validation import (
    _get,
    _validate_num_teeth,
    _validate_lengths,
    _validate_pressure_angle,
    _validate_samples,
    _validate_pressure_limits,
    validate_parameters,
    validate_design,
    Severity,
    ValidationMessage,
    ValidationResult,
)
from hypocam.io import CamParameters, PressureLimits


def _codes(messages):
    return [m.code for m in messages]


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class TestGet:

    def test_dict(self):
        assert _get({"pitch": 0.1}, "pitch") == 0.1

    def test_dict_default(self):
        assert _get({}, "pitch", 2.0) == 2.0

    def test_model(self, reference_params):
        assert _get(reference_params, "num_teeth") == 10

    def test_none(self):
        assert _get(None, "pitch", 1.5) == 1.5


class TestValidationResult:

    def test_filters_by_severity(self):
        result = ValidationResult(valid=False, messages=[
            ValidationMessage(Severity.ERROR, "A", "a"),
            ValidationMessage(Severity.WARNING, "B", "b"),
            ValidationMessage(Severity.INFO, "C", "c"),
        ])
        assert _codes(result.errors) == ["A"]
        assert _codes(result.warnings) == ["B"]
        assert _codes(result.infos) == ["C"]


# ---------------------------------------------------------------------------
# Individual rules
# ---------------------------------------------------------------------------


class TestValidateNumTeeth:

    @pytest.mark.parametrize("n", [None, 0, 1, 3])
    def test_too_few(self, n):
        messages = _validate_num_teeth({"num_teeth": n})
        assert _codes(messages) == ["TEETH_TOO_FEW"]
        assert messages[0].severity == Severity.ERROR

    @pytest.mark.parametrize("n", [4, 10, 100])
    def test_ok(self, n):
        assert _validate_num_teeth({"num_teeth": n}) == []


class TestValidateLengths:

    def test_all_ok(self):
        assert _validate_lengths({"pitch": 0.08, "pin_diameter": 0.15, "eccentricity": 0.05}) == []

    def test_zero_eccentricity_ok(self):
        assert _validate_lengths({"pitch": 0.08, "pin_diameter": 0.15, "eccentricity": 0.0}) == []

    def test_all_bad(self):
        messages = _validate_lengths({"pitch": 0.0, "pin_diameter": -1.0, "eccentricity": -0.1})
        assert _codes(messages) == ["PITCH_INVALID", "PIN_DIAMETER_INVALID", "ECCENTRICITY_NEGATIVE"]
        assert all(m.severity == Severity.ERROR for m in messages)

    def test_missing_fields(self):
        messages = _validate_lengths({})
        assert len(messages) == 3

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite(self, value):
        messages = _validate_lengths({"pitch": value, "pin_diameter": value, "eccentricity": value})
        assert _codes(messages) == ["PITCH_INVALID", "PIN_DIAMETER_INVALID", "ECCENTRICITY_NEGATIVE"]


class TestValidatePressureAngle:

    def test_positive_ok(self):
        assert _validate_pressure_angle({"pressure_angle_limit_deg": 50.0}) == []

    @pytest.mark.parametrize("ang", [0.0, -10.0, None, float("nan"), float("inf")])
    def test_not_positive(self, ang):
        assert _codes(_validate_pressure_angle({"pressure_angle_limit_deg": ang})) == ["PRESSURE_ANGLE_INVALID"]

    def test_offset_may_be_negative(self):
        assert _validate_pressure_angle({"pressure_angle_limit_deg": 50.0, "pressure_angle_offset": -0.01}) == []

    @pytest.mark.parametrize("offset", [float("nan"), float("inf")])
    def test_non_finite_offset(self, offset):
        messages = _validate_pressure_angle({"pressure_angle_limit_deg": 50.0, "pressure_angle_offset": offset})
        assert _codes(messages) == ["PRESSURE_OFFSET_INVALID"]
        assert messages[0].severity == Severity.ERROR


class TestValidateSamples:

    def test_recommended_density(self):
        assert _validate_samples({"num_samples": 1000, "num_teeth": 10}) == []

    def test_below_recommended_is_info(self):
        messages = _validate_samples({"num_samples": 500, "num_teeth": 10})
        assert _codes(messages) == ["SAMPLES_BELOW_RECOMMENDED"]
        assert messages[0].severity == Severity.INFO

    def test_under_sampled_is_warning(self):
        messages = _validate_samples({"num_samples": 99, "num_teeth": 10})
        assert _codes(messages) == ["UNDER_SAMPLED"]
        assert messages[0].severity == Severity.WARNING
        assert "100" in messages[0].suggestion

    def test_zero_samples_is_error(self):
        messages = _validate_samples({"num_samples": 0, "num_teeth": 10})
        assert _codes(messages) == ["SAMPLES_INVALID"]

    def test_density_skipped_when_teeth_invalid(self):
        assert _validate_samples({"num_samples": 5, "num_teeth": 2}) == []


class TestValidatePressureLimits:

    def test_found(self, reference_limits):
        assert _validate_pressure_limits({"pressure_angle_limit_deg": 50.0}, reference_limits) == []

    def test_not_found(self):
        messages = _validate_pressure_limits(
            {"pressure_angle_limit_deg": 95.0},
            PressureLimits(pa_min_deg=0.0, pa_rad_min=0.7),
        )
        assert _codes(messages) == ["NO_BOUND_FOUND"]
        assert "maximum" in messages[0].message
        assert "minimum" not in messages[0].message

    def test_inverted(self):
        limits = PressureLimits(pa_min_deg=120.0, pa_max_deg=100.0, pa_rad_min=0.7, pa_rad_max=0.75)
        messages = _validate_pressure_limits({"pressure_angle_limit_deg": 50.0}, limits)
        assert _codes(messages) == ["PRESSURE_BOUNDS_INVERTED"]

    def test_skipped_degrees_reported(self):
        limits = PressureLimits(
            pa_min_deg=13.0, pa_max_deg=112.0, pa_rad_min=0.68, pa_rad_max=0.75,
            skipped_degrees=(0, 180),
        )
        messages = _validate_pressure_limits({"pressure_angle_limit_deg": 50.0}, limits)
        assert _codes(messages) == ["PRESSURE_SCAN_SKIPPED"]
        assert messages[0].severity == Severity.INFO
        assert "0°" in messages[0].message
        assert "180°" in messages[0].message


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------


class TestValidateParameters:

    def test_reference_valid(self, reference_params):
        result = validate_parameters(reference_params)
        assert result.valid
        assert result.errors == []

    def test_dict_input(self, reference_params_dict):
        assert validate_parameters(reference_params_dict).valid

    def test_collects_all_errors(self):
        result = validate_parameters({"num_teeth": 2, "pitch": 0.0, "num_samples": 0})
        assert not result.valid
        codes = _codes(result.errors)
        assert "TEETH_TOO_FEW" in codes
        assert "PITCH_INVALID" in codes
        assert "SAMPLES_INVALID" in codes

    def test_warnings_do_not_invalidate(self):
        result = validate_parameters(CamParameters(num_samples=20))
        assert result.valid
        assert _codes(result.warnings) == ["UNDER_SAMPLED"]


class TestValidateDesign:

    def test_reference_design(self, reference_params):
        result = validate_design(reference_params)
        assert result.valid
        assert result.warnings == []

    def test_uses_given_limits(self, reference_params):
        result = validate_design(reference_params, PressureLimits())
        assert "NO_BOUND_FOUND" in _codes(result.warnings)

    def test_stops_at_parameter_errors(self):
        result = validate_design({"num_teeth": 3})
        assert not result.valid
        assert "NO_BOUND_FOUND" not in _codes(result.messages)

    def test_high_limit_warns(self):
        result = validate_design(CamParameters(pressure_angle_limit_deg=95.0))
        assert result.valid
        assert "NO_BOUND_FOUND" in _codes(result.warnings)
