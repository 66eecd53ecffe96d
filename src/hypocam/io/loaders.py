"""
JSON input/output for hypocycloid cam designs.

Defines the parameter and result models shared by the calculator, the host
bridge and the CLI, and loads/saves complete designs as JSON.

Uses Pydantic for automatic validation and type coercion.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .schema import SCHEMA_VERSION
from ..constants import (
    DEFAULT_PITCH,
    DEFAULT_PIN_DIAMETER,
    DEFAULT_ECCENTRICITY,
    DEFAULT_NUM_TEETH,
    DEFAULT_NUM_SAMPLES,
    DEFAULT_PRESSURE_ANGLE_LIMIT_DEG,
    DEFAULT_PRESSURE_ANGLE_OFFSET,
    DEFAULT_CIRCLE_SEGMENTS,
    PA_NOT_FOUND_DEG,
)

logger = logging.getLogger(__name__)


class CamParameters(BaseModel):
    """Input parameters for one cam generation run.

    The model only checks types. Engineering limits (minimum teeth, positive
    pitch, ...) are reported by calculator.validation.validate_design().
    """
    model_config = ConfigDict(extra='ignore', frozen=True)

    pitch: float = Field(default=DEFAULT_PITCH, description="Tooth (lobe) pitch p")
    pin_diameter: float = Field(default=DEFAULT_PIN_DIAMETER, description="Roller diameter d")
    eccentricity: float = Field(default=DEFAULT_ECCENTRICITY, description="Eccentricity e")
    num_teeth: int = Field(default=DEFAULT_NUM_TEETH, description="Teeth (lobes) in cam n")
    num_samples: int = Field(default=DEFAULT_NUM_SAMPLES, description="Line segments in cam s")
    pressure_angle_limit_deg: float = Field(
        default=DEFAULT_PRESSURE_ANGLE_LIMIT_DEG, description="Pressure angle limit in degrees"
    )
    pressure_angle_offset: float = Field(
        default=DEFAULT_PRESSURE_ANGLE_OFFSET, description="Radial correction for out-of-limit samples"
    )
    circle_segments: int = Field(
        default=DEFAULT_CIRCLE_SEGMENTS, description="Segments for host-drawn circles (not used by the math)"
    )

    @property
    def bolt_circle_diameter(self) -> float:
        """Pin bolt circle diameter b = p * n."""
        return self.pitch * self.num_teeth

    @classmethod
    def from_bolt_circle(cls, bolt_circle_diameter: float, num_teeth: int = DEFAULT_NUM_TEETH, **kwargs) -> "CamParameters":
        """Build parameters from the pin bolt circle diameter; pitch is b / n."""
        if num_teeth == 0:
            raise ValueError("num_teeth must be non-zero to derive pitch from bolt circle")
        return cls(pitch=bolt_circle_diameter / num_teeth, num_teeth=num_teeth, **kwargs)


class PressureLimits(BaseModel):
    """Pressure angle limit circles found by the 0..180 degree scan."""
    model_config = ConfigDict(extra='ignore', frozen=True)

    pa_min_deg: float = PA_NOT_FOUND_DEG
    pa_max_deg: float = PA_NOT_FOUND_DEG
    pa_rad_min: Optional[float] = None  # None if pa_min was not found
    pa_rad_max: Optional[float] = None  # None if pa_max was not found
    skipped_degrees: Tuple[int, ...] = ()  # Scan steps dropped by a domain error

    @property
    def min_bound_found(self) -> bool:
        return self.pa_min_deg >= 0

    @property
    def max_bound_found(self) -> bool:
        return self.pa_max_deg >= 0

    @property
    def bound_found(self) -> bool:
        """True if both limit circles are usable for radial correction."""
        return (
            self.min_bound_found and self.max_bound_found
            and self.pa_rad_min is not None and self.pa_rad_max is not None
        )


class CamDesign(BaseModel):
    """Complete cam design: inputs plus everything computed from them."""
    model_config = ConfigDict(extra='ignore')

    schema_version: str = SCHEMA_VERSION
    parameters: CamParameters
    pressure_limits: Optional[PressureLimits] = None  # None until the scan has run
    correction_mode: str = "offset"
    profile: List[Tuple[float, float]] = Field(default_factory=list)
    pins: List[Tuple[float, float]] = Field(default_factory=list)

    @field_validator('correction_mode', mode='before')
    @classmethod
    def normalize_correction_mode(cls, v):
        if hasattr(v, 'value'):  # Enum
            return v.value
        if isinstance(v, str):
            return v.lower()
        return v


def load_design_json(filepath: Union[str, Path]) -> CamDesign:
    """
    Load a cam design from a JSON file written by save_design_json().

    A bare parameters object (no 'parameters' section) is accepted too.
    A file without a 'pressure_limits' section loads with pressure_limits
    None, so "not computed" stays distinct from a scan that found no bound;
    the point lists are left empty.

    Args:
        filepath: Path to JSON file

    Returns:
        CamDesign with all stored values

    Raises:
        FileNotFoundError: If file doesn't exist
        ValidationError: If JSON is invalid or has wrongly typed fields
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Design file not found: {filepath}")

    with open(filepath, 'r') as f:
        data = json.load(f)

    # Check for 'design' wrapper (host exports may add it)
    if 'design' in data:
        data = data['design']

    if not isinstance(data, dict):
        raise ValueError("Invalid design JSON - root must be an object")

    if 'parameters' not in data:
        logger.debug(f"{filepath} has no 'parameters' section, reading it as bare parameters")
        data = {'parameters': data}

    return CamDesign.model_validate(data)


def save_design_json(design: CamDesign, filepath: Union[str, Path]) -> None:
    """
    Save a complete cam design to a JSON file.

    Args:
        design: Cam design to save
        filepath: Path to save JSON file
    """
    filepath = Path(filepath)

    data = design.model_dump(mode='json')
    data['schema_version'] = SCHEMA_VERSION

    with open(filepath, 'w') as f:
        json.dump(data, f, indent=2)

    logger.info(f"Saved design with {len(design.profile)} profile points to {filepath}")
