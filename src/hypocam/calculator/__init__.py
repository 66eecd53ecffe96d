"""
Hypocycloid Cam Calculator - Entry points for cam design.

This module provides the validated entry points host integrations call.
High-level design functions return CamDesign models.

Example:
    >>> from hypocam.calculator import design_from_pitch, to_summary
    >>>
    >>> design = design_from_pitch(pitch=0.08, num_teeth=10)
    >>> print(to_summary(design))
"""

from .core import (
    # Entry points
    compute_profile,
    compute_pin_layout,
    compute_pressure_limits,

    # High-level design functions (return CamDesign)
    design_from_parameters,
    design_from_pitch,
    design_from_bolt_circle,

    # Result types
    ProfileCurve,
    PinLayout,
)

from .validation import (
    validate_design,
    validate_parameters,
    Severity,
    ValidationMessage,
    ValidationResult,
)

from ..enums import (
    SizeMode,
    CorrectionMode,
)

from .output import (
    to_json,
    to_markdown,
    to_summary,
)

# Convenience imports
from ..io import CamParameters, PressureLimits, CamDesign


__all__ = [
    # Enums
    "SizeMode",
    "CorrectionMode",

    # Models
    "CamParameters",
    "PressureLimits",
    "CamDesign",
    "ProfileCurve",
    "PinLayout",

    # Entry points
    "compute_profile",
    "compute_pin_layout",
    "compute_pressure_limits",

    # High-level design functions
    "design_from_parameters",
    "design_from_pitch",
    "design_from_bolt_circle",

    # Validation
    "validate_design",
    "validate_parameters",
    "Severity",
    "ValidationMessage",
    "ValidationResult",

    # Output formatters
    "to_json",
    "to_markdown",
    "to_summary",
]
