"""
Hypocycloid Cam Calculator - Validation Rules

Checks cam parameters before geometry is generated and reports quality
problems in the generated result.

Errors stop generation (the entry points in calculator.core raise
InvalidParameterError). Warnings are recoverable: generation proceeds with a
documented fallback and the host decides how to show them.

This module accepts both dict and CamParameters inputs, so it can check raw
host input before a model is built as well as loaded designs.
"""

from dataclasses import dataclass, field
from enum import Enum
from math import isfinite
from typing import Any, Dict, List, Optional, Union

from ..constants import (
    MIN_NUM_TEETH,
    MIN_NUM_SAMPLES,
    MIN_SAMPLES_PER_TOOTH,
    RECOMMENDED_SAMPLES_PER_TOOTH,
)
from ..core.pressure_angle import calc_pa_limit_circles
from ..io.loaders import CamParameters, PressureLimits


ParametersInput = Union[Dict[str, Any], CamParameters]


def _get(obj: ParametersInput, key: str, default: Optional[Union[float, int]] = None) -> Optional[Union[float, int]]:
    """Read a parameter from a dict or CamParameters model."""
    if obj is None:
        return default
    if isinstance(obj, dict):
        return obj.get(key, default)
    return getattr(obj, key, default)


class Severity(Enum):
    """Validation message severity"""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


@dataclass
class ValidationMessage:
    """A single validation finding"""
    severity: Severity
    code: str
    message: str
    suggestion: Optional[str] = None


@dataclass
class ValidationResult:
    """Complete validation result"""
    valid: bool  # True if no errors
    messages: List[ValidationMessage] = field(default_factory=list)

    @property
    def errors(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.WARNING]

    @property
    def infos(self) -> List[ValidationMessage]:
        return [m for m in self.messages if m.severity == Severity.INFO]


def validate_parameters(params: ParametersInput) -> ValidationResult:
    """
    Check parameters without running the pressure angle scan.

    Args:
        params: CamParameters or dict with the same field names

    Returns:
        ValidationResult with parameter errors and sampling findings
    """
    messages: List[ValidationMessage] = []
    messages.extend(_validate_num_teeth(params))
    messages.extend(_validate_lengths(params))
    messages.extend(_validate_pressure_angle(params))
    messages.extend(_validate_samples(params))

    has_errors = any(m.severity == Severity.ERROR for m in messages)
    return ValidationResult(valid=not has_errors, messages=messages)


def validate_design(
    params: ParametersInput,
    limits: Optional[PressureLimits] = None
) -> ValidationResult:
    """
    Validate cam parameters and, when they are usable, the pressure limits.

    Args:
        params: CamParameters or dict with the same field names
        limits: Pressure limits already computed for params. If omitted and
                the parameters have no errors, the scan is run here.

    Returns:
        ValidationResult with all findings
    """
    result = validate_parameters(params)
    if not result.valid:
        return result

    if limits is None:
        limits = calc_pa_limit_circles(
            _get(params, 'pitch'),
            _get(params, 'pin_diameter'),
            _get(params, 'eccentricity'),
            _get(params, 'num_teeth'),
            _get(params, 'pressure_angle_limit_deg'),
        )

    result.messages.extend(_validate_pressure_limits(params, limits))
    return result


def _validate_num_teeth(params: ParametersInput) -> List[ValidationMessage]:
    """Check the cam has enough teeth"""
    messages = []
    n = _get(params, 'num_teeth')

    if n is None or n < MIN_NUM_TEETH:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="TEETH_TOO_FEW",
            message=f"Cam has {n} teeth, minimum is {MIN_NUM_TEETH}",
            suggestion=f"Use at least {MIN_NUM_TEETH} teeth"
        ))

    return messages


def _validate_lengths(params: ParametersInput) -> List[ValidationMessage]:
    """Check pitch, pin diameter and eccentricity are in range"""
    messages = []
    pitch = _get(params, 'pitch')
    pin_diameter = _get(params, 'pin_diameter')
    eccentricity = _get(params, 'eccentricity')

    if pitch is None or not isfinite(pitch) or pitch <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PITCH_INVALID",
            message=f"Tooth pitch must be positive and finite, got {pitch}",
            suggestion="Specify a positive pitch or bolt circle diameter"
        ))

    if pin_diameter is None or not isfinite(pin_diameter) or pin_diameter <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PIN_DIAMETER_INVALID",
            message=f"Pin diameter must be positive and finite, got {pin_diameter}",
            suggestion=None
        ))

    if eccentricity is None or not isfinite(eccentricity) or eccentricity < 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="ECCENTRICITY_NEGATIVE",
            message=f"Eccentricity must be finite and not negative, got {eccentricity}",
            suggestion=None
        ))

    return messages


def _validate_pressure_angle(params: ParametersInput) -> List[ValidationMessage]:
    """Check the pressure angle limit is positive and the offset finite"""
    messages = []
    ang = _get(params, 'pressure_angle_limit_deg')

    if ang is None or not isfinite(ang) or ang <= 0:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PRESSURE_ANGLE_INVALID",
            message=f"Pressure angle limit must be positive and finite, got {ang}",
            suggestion="The reference default is 50°"
        ))

    offset = _get(params, 'pressure_angle_offset')
    if offset is not None and not isfinite(offset):
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="PRESSURE_OFFSET_INVALID",
            message=f"Pressure angle offset must be finite, got {offset}",
            suggestion="Use 0 to leave out-of-limit samples where they are"
        ))

    return messages


def _validate_samples(params: ParametersInput) -> List[ValidationMessage]:
    """Check sample density around the profile"""
    messages = []
    s = _get(params, 'num_samples')
    n = _get(params, 'num_teeth')

    if s is None or s < MIN_NUM_SAMPLES:
        messages.append(ValidationMessage(
            severity=Severity.ERROR,
            code="SAMPLES_INVALID",
            message=f"Profile needs at least {MIN_NUM_SAMPLES} segment, got {s}",
            suggestion=None
        ))
        return messages

    if n is None or n < MIN_NUM_TEETH:
        return messages  # Reported by _validate_num_teeth

    if s < MIN_SAMPLES_PER_TOOTH * n:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="UNDER_SAMPLED",
            message=f"{s} segments for {n} teeth is below {MIN_SAMPLES_PER_TOOTH} per tooth; the profile may self-intersect",
            suggestion=f"Use at least {MIN_SAMPLES_PER_TOOTH * n} segments ({RECOMMENDED_SAMPLES_PER_TOOTH * n} recommended)"
        ))
    elif s < RECOMMENDED_SAMPLES_PER_TOOTH * n:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="SAMPLES_BELOW_RECOMMENDED",
            message=f"{s} segments for {n} teeth; {RECOMMENDED_SAMPLES_PER_TOOTH * n} gives a smoother profile",
            suggestion=None
        ))

    return messages


def _validate_pressure_limits(params: ParametersInput, limits: PressureLimits) -> List[ValidationMessage]:
    """Check the pressure angle scan produced usable limit circles"""
    messages = []
    ang = _get(params, 'pressure_angle_limit_deg')

    if not limits.bound_found:
        missing = []
        if not limits.min_bound_found:
            missing.append("minimum")
        if not limits.max_bound_found:
            missing.append("maximum")
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="NO_BOUND_FOUND",
            message=f"No {' or '.join(missing)} pressure angle bound found for {ang}° limit; profile is not radially corrected",
            suggestion="Lower the pressure angle limit"
        ))
    elif limits.pa_min_deg > limits.pa_max_deg:
        messages.append(ValidationMessage(
            severity=Severity.WARNING,
            code="PRESSURE_BOUNDS_INVERTED",
            message=f"Minimum bound {limits.pa_min_deg:.0f}° is after maximum bound {limits.pa_max_deg:.0f}°",
            suggestion="Check pressure angle limit against pin diameter and pitch"
        ))

    if limits.skipped_degrees:
        messages.append(ValidationMessage(
            severity=Severity.INFO,
            code="PRESSURE_SCAN_SKIPPED",
            message=f"Pressure angle undefined at {len(limits.skipped_degrees)} scan step(s): "
                    f"{', '.join(f'{d}°' for d in limits.skipped_degrees)}",
            suggestion=None
        ))

    return messages
