"""
Hypocam IO - parameter models, JSON loaders and schema checks.

Example:
    >>> from hypocam.io import load_design_json, save_design_json
    >>> from hypocam.calculator import design_from_pitch
    >>>
    >>> design = design_from_pitch(pitch=0.08, num_teeth=10)
    >>> save_design_json(design, "cam.json")
    >>> loaded = load_design_json("cam.json")
"""

from .loaders import (
    load_design_json,
    save_design_json,
    CamParameters,
    PressureLimits,
    CamDesign,
)

from .schema import (
    SCHEMA_VERSION,
    validate_json_schema,
)

__all__ = [
    # Loaders
    "load_design_json",
    "save_design_json",

    # Models
    "CamParameters",
    "PressureLimits",
    "CamDesign",

    # Schema
    "SCHEMA_VERSION",
    "validate_json_schema",
]
