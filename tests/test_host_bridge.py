"""
Tests for the host integration bridge.

The bridge has a single entry point: calculate(input_json) -> output_json
"""

import json
import pytest

from hypocam.calculator.host_bridge import (
    calculate,
    CalculatorInputs,
    CalculatorOutput,
)


def _run(**inputs):
    return json.loads(calculate(json.dumps(inputs)))


class TestCalculatorInputs:

    def test_defaults(self):
        inputs = CalculatorInputs()
        assert inputs.mode == "pitch"
        assert inputs.size == 0.08
        assert inputs.num_teeth == 10
        assert inputs.correction_mode == "offset"
        assert inputs.include_points is True

    def test_mode_normalized(self):
        inputs = CalculatorInputs.model_validate({"mode": " Bolt-Circle ", "correction_mode": "CLAMP"})
        assert inputs.mode == "bolt-circle"
        assert inputs.correction_mode == "clamp"

    def test_unknown_fields_ignored(self):
        inputs = CalculatorInputs.model_validate({"size": 1.0, "units": "mm"})
        assert inputs.size == 1.0


class TestCalculate:

    def test_default_inputs(self):
        result = _run()
        assert result["success"] is True
        assert result["error"] is None
        assert result["valid"] is True

        design = json.loads(result["design_json"])
        assert len(design["profile"]) == 1001
        assert len(design["pins"]) == 12
        assert design["pressure_limits"]["pa_min_deg"] == 13.0
        assert design["pressure_limits"]["pa_max_deg"] == 112.0

    def test_display_formats(self):
        result = _run()
        assert result["summary"].startswith("═══ Hypocycloid Cam ═══")
        assert "# Hypocycloid Cam Specification" in result["markdown"]

    def test_bolt_circle_mode(self):
        result = _run(mode="bolt-circle", size=0.8, num_teeth=10, num_samples=200)
        assert result["success"] is True
        design = json.loads(result["design_json"])
        assert design["parameters"]["pitch"] == pytest.approx(0.08)

    def test_without_points(self):
        design = json.loads(_run(include_points=False, num_samples=200)["design_json"])
        assert "profile" not in design

    def test_clamp_mode(self):
        design = json.loads(_run(correction_mode="clamp", num_samples=200)["design_json"])
        assert design["correction_mode"] == "clamp"

    def test_warnings_reported(self):
        result = _run(num_samples=50)
        assert result["success"] is True
        assert result["valid"] is True
        codes = [m["code"] for m in result["messages"]]
        assert "UNDER_SAMPLED" in codes
        warning = next(m for m in result["messages"] if m["code"] == "UNDER_SAMPLED")
        assert warning["severity"] == "warning"

    def test_invalid_parameters_reported_not_raised(self):
        result = _run(num_teeth=3)
        assert result["success"] is False
        assert result["valid"] is False
        assert result["design_json"] is None
        assert "TEETH_TOO_FEW" in [m["code"] for m in result["messages"]]

    def test_zero_teeth_bolt_circle(self):
        result = _run(mode="bolt-circle", size=0.8, num_teeth=0)
        assert result["success"] is False
        codes = [m["code"] for m in result["messages"]]
        assert "TEETH_TOO_FEW" in codes

    def test_invalid_json(self):
        result = json.loads(calculate("not json {"))
        assert result["success"] is False
        assert result["error"].startswith("Invalid JSON")

    def test_unknown_mode(self):
        result = _run(mode="diameter")
        assert result["success"] is False
        assert result["error"]

    def test_wrong_type(self):
        result = _run(num_teeth="many")
        assert result["success"] is False

    def test_output_parses_as_model(self):
        output = CalculatorOutput.model_validate_json(calculate(json.dumps({"num_samples": 200})))
        assert output.success

    def test_non_finite_size_rejected(self):
        """NaN parses from JSON but never reaches the geometry."""
        result = json.loads(calculate('{"size": NaN}'))
        assert result["success"] is False
        assert result["design_json"] is None
        assert "PITCH_INVALID" in [m["code"] for m in result["messages"]]
