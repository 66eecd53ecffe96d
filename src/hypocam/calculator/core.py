"""
Hypocycloid Cam Calculator - Core Calculations

Entry points for host integrations. Each takes a CamParameters value,
validates it, and returns fresh immutable results; nothing is cached between
calls.

Reference:
- Hypocycloid cam formulas: http://gears.ru/transmis/zaprogramata/2.139.pdf
- Pressure angle limit circles:
  http://imtuoradea.ro/auo.fmte/files-2007/MECATRONICA_files/Anamaria_Dascalescu_1.pdf
"""

import logging
from typing import Optional, Tuple, Union

from ..constants import (
    DEFAULT_PIN_DIAMETER,
    DEFAULT_ECCENTRICITY,
    DEFAULT_NUM_TEETH,
    DEFAULT_NUM_SAMPLES,
    DEFAULT_PRESSURE_ANGLE_LIMIT_DEG,
    DEFAULT_PRESSURE_ANGLE_OFFSET,
    DEFAULT_CIRCLE_SEGMENTS,
)
from ..core import Point2D, calc_pa_limit_circles, calc_cam_vertices, calc_pin_locations
from ..enums import CorrectionMode
from ..exceptions import InvalidParameterError
from ..io import CamParameters, PressureLimits, CamDesign
from .validation import validate_parameters, ValidationResult

logger = logging.getLogger(__name__)

ProfileCurve = Tuple[Point2D, ...]
PinLayout = Tuple[Point2D, ...]


def _require_valid(params: CamParameters) -> ValidationResult:
    """Raise InvalidParameterError if params have validation errors."""
    result = validate_parameters(params)
    if not result.valid:
        details = "; ".join(f"{m.code}: {m.message}" for m in result.errors)
        raise InvalidParameterError(f"Invalid cam parameters - {details}", result.errors)

    for msg in result.warnings:
        logger.warning(f"{msg.code}: {msg.message}")
    return result


def _coerce_mode(mode: Union[CorrectionMode, str]) -> CorrectionMode:
    if isinstance(mode, str):
        return CorrectionMode(mode.lower())
    return mode


def compute_pressure_limits(params: CamParameters) -> PressureLimits:
    """
    Find the pressure angle limit circles for params.

    Raises:
        InvalidParameterError: If params fail validation
    """
    _require_valid(params)
    return calc_pa_limit_circles(
        params.pitch,
        params.pin_diameter,
        params.eccentricity,
        params.num_teeth,
        params.pressure_angle_limit_deg,
    )


def compute_profile(
    params: CamParameters,
    mode: Union[CorrectionMode, str] = CorrectionMode.OFFSET,
    limits: Optional[PressureLimits] = None
) -> ProfileCurve:
    """
    Generate the cam profile for params.

    Args:
        params: Cam parameters
        mode: Radial correction mode (OFFSET reproduces the reference tool)
        limits: Pressure limits already computed for params; computed here
                if omitted

    Returns:
        num_samples + 1 points, shifted in -x by the eccentricity

    Raises:
        InvalidParameterError: If params fail validation
    """
    _require_valid(params)
    if limits is None:
        limits = calc_pa_limit_circles(
            params.pitch,
            params.pin_diameter,
            params.eccentricity,
            params.num_teeth,
            params.pressure_angle_limit_deg,
        )

    return calc_cam_vertices(
        params.pitch,
        params.pin_diameter,
        params.eccentricity,
        params.num_teeth,
        params.num_samples,
        params.pressure_angle_limit_deg,
        offset=params.pressure_angle_offset,
        limits=limits,
        mode=_coerce_mode(mode),
    )


def compute_pin_layout(params: CamParameters) -> PinLayout:
    """
    Generate the pin centres on the bolt circle.

    Returns:
        num_teeth + 2 points; the last repeats the first

    Raises:
        InvalidParameterError: If params fail validation
    """
    _require_valid(params)
    return calc_pin_locations(params.pitch, params.num_teeth)


def design_from_parameters(
    params: CamParameters,
    mode: Union[CorrectionMode, str] = CorrectionMode.OFFSET
) -> CamDesign:
    """
    Run every calculation for params and collect the results.

    Returns:
        CamDesign with parameters, pressure limits, profile and pins

    Raises:
        InvalidParameterError: If params fail validation
    """
    mode = _coerce_mode(mode)
    _require_valid(params)

    limits = calc_pa_limit_circles(
        params.pitch,
        params.pin_diameter,
        params.eccentricity,
        params.num_teeth,
        params.pressure_angle_limit_deg,
    )
    profile = calc_cam_vertices(
        params.pitch,
        params.pin_diameter,
        params.eccentricity,
        params.num_teeth,
        params.num_samples,
        params.pressure_angle_limit_deg,
        offset=params.pressure_angle_offset,
        limits=limits,
        mode=mode,
    )
    pins = calc_pin_locations(params.pitch, params.num_teeth)

    logger.info(
        f"Cam design: {params.num_teeth} teeth, pitch {params.pitch}, "
        f"{len(profile)} profile points, {len(pins) - 1} pins"
    )

    return CamDesign(
        parameters=params,
        pressure_limits=limits,
        correction_mode=mode,
        profile=[tuple(pt) for pt in profile],
        pins=[tuple(pt) for pt in pins],
    )


def design_from_pitch(
    pitch: float,
    pin_diameter: float = DEFAULT_PIN_DIAMETER,
    eccentricity: float = DEFAULT_ECCENTRICITY,
    num_teeth: int = DEFAULT_NUM_TEETH,
    num_samples: int = DEFAULT_NUM_SAMPLES,
    pressure_angle_limit_deg: float = DEFAULT_PRESSURE_ANGLE_LIMIT_DEG,
    pressure_angle_offset: float = DEFAULT_PRESSURE_ANGLE_OFFSET,
    circle_segments: int = DEFAULT_CIRCLE_SEGMENTS,
    mode: Union[CorrectionMode, str] = CorrectionMode.OFFSET
) -> CamDesign:
    """
    Design a cam sized by its tooth pitch.

    The pin bolt circle diameter follows as pitch * num_teeth.

    Args:
        pitch: Tooth (lobe) pitch
        pin_diameter: Roller diameter
        eccentricity: Eccentricity
        num_teeth: Teeth (lobes) in cam (min 4)
        num_samples: Line segments around the profile (suggest 100 * num_teeth)
        pressure_angle_limit_deg: Pressure angle limit (degrees)
        pressure_angle_offset: Radial correction for out-of-limit samples
        circle_segments: Segments for host-drawn circles
        mode: Radial correction mode

    Returns:
        CamDesign
    """
    params = CamParameters(
        pitch=pitch,
        pin_diameter=pin_diameter,
        eccentricity=eccentricity,
        num_teeth=num_teeth,
        num_samples=num_samples,
        pressure_angle_limit_deg=pressure_angle_limit_deg,
        pressure_angle_offset=pressure_angle_offset,
        circle_segments=circle_segments,
    )
    return design_from_parameters(params, mode=mode)


def design_from_bolt_circle(
    bolt_circle_diameter: float,
    pin_diameter: float = DEFAULT_PIN_DIAMETER,
    eccentricity: float = DEFAULT_ECCENTRICITY,
    num_teeth: int = DEFAULT_NUM_TEETH,
    num_samples: int = DEFAULT_NUM_SAMPLES,
    pressure_angle_limit_deg: float = DEFAULT_PRESSURE_ANGLE_LIMIT_DEG,
    pressure_angle_offset: float = DEFAULT_PRESSURE_ANGLE_OFFSET,
    circle_segments: int = DEFAULT_CIRCLE_SEGMENTS,
    mode: Union[CorrectionMode, str] = CorrectionMode.OFFSET
) -> CamDesign:
    """
    Design a cam sized by its pin bolt circle diameter.

    The tooth pitch follows as bolt_circle_diameter / num_teeth. Other
    arguments as design_from_pitch().
    """
    if num_teeth < 1:
        raise InvalidParameterError(f"Cannot derive pitch from bolt circle with {num_teeth} teeth")
    return design_from_pitch(
        pitch=bolt_circle_diameter / num_teeth,
        pin_diameter=pin_diameter,
        eccentricity=eccentricity,
        num_teeth=num_teeth,
        num_samples=num_samples,
        pressure_angle_limit_deg=pressure_angle_limit_deg,
        pressure_angle_offset=pressure_angle_offset,
        circle_segments=circle_segments,
        mode=mode,
    )
