"""
Host integration bridge.

Provides a single JSON-in/JSON-out entry point for CAD hosts and other
front ends that collect cam parameters in their own UI and draw the result
with their own primitives. All inputs are validated via Pydantic models
before processing, and errors come back in the output instead of being
raised.

Usage from a host:
    result = json.loads(calculate(json.dumps({
        "mode": "pitch",
        "size": 0.08,
        "pin_diameter": 0.15,
        "eccentricity": 0.05,
        "num_teeth": 10,
    })))
    design = json.loads(result["design_json"])
"""

import json
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from typing_extensions import TypedDict

from ..constants import (
    DEFAULT_PITCH,
    DEFAULT_PIN_DIAMETER,
    DEFAULT_ECCENTRICITY,
    DEFAULT_NUM_TEETH,
    DEFAULT_NUM_SAMPLES,
    DEFAULT_PRESSURE_ANGLE_LIMIT_DEG,
    DEFAULT_PRESSURE_ANGLE_OFFSET,
    DEFAULT_CIRCLE_SEGMENTS,
)
from ..enums import CorrectionMode, SizeMode
from ..exceptions import CamError
from .core import design_from_pitch, design_from_bolt_circle
from .validation import validate_design, validate_parameters
from .output import to_json, to_markdown, to_summary


class ValidationMessageDict(TypedDict, total=False):
    """Type for validation message dictionaries sent to the host."""
    severity: str  # "error", "warning", "info"
    code: str  # e.g., "UNDER_SAMPLED"
    message: str
    suggestion: Optional[str]


# ============================================================================
# Input Models
# ============================================================================

class CalculatorInputs(BaseModel):
    """
    All inputs from the host's parameter dialog.

    'size' is the tooth pitch in "pitch" mode and the pin bolt circle
    diameter in "bolt-circle" mode.
    """
    model_config = ConfigDict(extra='ignore')

    mode: str = SizeMode.PITCH.value
    size: float = DEFAULT_PITCH
    pin_diameter: float = DEFAULT_PIN_DIAMETER
    eccentricity: float = DEFAULT_ECCENTRICITY
    num_teeth: int = DEFAULT_NUM_TEETH
    num_samples: int = DEFAULT_NUM_SAMPLES
    pressure_angle_limit_deg: float = DEFAULT_PRESSURE_ANGLE_LIMIT_DEG
    pressure_angle_offset: float = DEFAULT_PRESSURE_ANGLE_OFFSET
    circle_segments: int = DEFAULT_CIRCLE_SEGMENTS
    correction_mode: str = CorrectionMode.OFFSET.value
    include_points: bool = True

    @field_validator('mode', 'correction_mode', mode='before')
    @classmethod
    def normalize_lower(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v


# ============================================================================
# Output Models
# ============================================================================

class CalculatorOutput(BaseModel):
    """Output from calculate()."""
    model_config = ConfigDict(extra='ignore')

    success: bool
    error: Optional[str] = None

    # Design data (JSON string for the host to parse)
    design_json: Optional[str] = None

    # Display formats
    summary: Optional[str] = None
    markdown: Optional[str] = None

    # Validation
    valid: bool = True
    messages: List[ValidationMessageDict] = Field(default_factory=list)


# ============================================================================
# Main Entry Point
# ============================================================================

def calculate(input_json: str) -> str:
    """
    Single entry point for host calculator calls.

    Args:
        input_json: JSON string with CalculatorInputs structure

    Returns:
        JSON string with CalculatorOutput structure
    """
    try:
        data = json.loads(input_json)
        inputs = CalculatorInputs.model_validate(data)

        size_mode = SizeMode(inputs.mode)
        correction_mode = CorrectionMode(inputs.correction_mode)

        kwargs = {
            'pin_diameter': inputs.pin_diameter,
            'eccentricity': inputs.eccentricity,
            'num_teeth': inputs.num_teeth,
            'num_samples': inputs.num_samples,
            'pressure_angle_limit_deg': inputs.pressure_angle_limit_deg,
            'pressure_angle_offset': inputs.pressure_angle_offset,
            'circle_segments': inputs.circle_segments,
        }

        # Report parameter errors as validation messages, not as an exception
        pitch = inputs.size if size_mode == SizeMode.PITCH else (
            inputs.size / inputs.num_teeth if inputs.num_teeth else 0.0
        )
        precheck = validate_parameters(dict(kwargs, pitch=pitch))
        if not precheck.valid:
            return CalculatorOutput(
                success=False,
                error="; ".join(m.message for m in precheck.errors),
                valid=False,
                messages=_messages(precheck),
            ).model_dump_json()

        if size_mode == SizeMode.PITCH:
            design = design_from_pitch(pitch=inputs.size, mode=correction_mode, **kwargs)
        else:
            design = design_from_bolt_circle(bolt_circle_diameter=inputs.size, mode=correction_mode, **kwargs)

        validation = validate_design(design.parameters, design.pressure_limits)

        output = CalculatorOutput(
            success=True,
            design_json=to_json(design, include_points=inputs.include_points),
            summary=to_summary(design),
            markdown=to_markdown(design, validation),
            valid=validation.valid,
            messages=_messages(validation),
        )

        return output.model_dump_json()

    except json.JSONDecodeError as e:
        return CalculatorOutput(
            success=False,
            error=f"Invalid JSON: {e}"
        ).model_dump_json()

    except (ValidationError, CamError, ValueError) as e:
        return CalculatorOutput(
            success=False,
            error=str(e)
        ).model_dump_json()


def _messages(validation) -> List[ValidationMessageDict]:
    return [
        {
            'severity': m.severity.value,
            'code': m.code,
            'message': m.message,
            'suggestion': m.suggestion
        }
        for m in validation.messages
    ]
