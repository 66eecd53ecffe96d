"""
Hypocam - Hypocycloid cam profile calculator for cycloidal drives.

Computes the 2D boundary of a hypocycloid cam and the ring of mating pins
from tooth pitch, pin diameter, eccentricity and tooth count.

Example:
    >>> from hypocam.calculator import design_from_pitch
    >>> from hypocam.io import save_design_json
    >>>
    >>> # Calculate profile, pins and pressure angle limits
    >>> design = design_from_pitch(pitch=0.08, pin_diameter=0.15, eccentricity=0.05, num_teeth=10)
    >>>
    >>> # Save design
    >>> save_design_json(design, "cam.json")

Note: All imports are lazy-loaded for fast startup. Importing hypocam alone
does not import Pydantic.
"""

__version__ = "1.0.0"

# Define which names come from which submodule
# All imports are lazy to minimize startup time

_ENUMS = {"SizeMode", "CorrectionMode"}

_EXCEPTIONS = {"CamError", "InvalidParameterError", "NumericDomainError"}

_CALCULATOR = {
    "compute_profile",
    "compute_pin_layout",
    "compute_pressure_limits",
    "design_from_parameters",
    "design_from_pitch",
    "design_from_bolt_circle",
    "validate_design",
    "validate_parameters",
    "Severity",
    "ValidationResult",
    "to_json",
    "to_markdown",
    "to_summary",
}

_IO = {
    "load_design_json",
    "save_design_json",
    "CamParameters",
    "PressureLimits",
    "CamDesign",
}

_CORE = {
    "Point2D",
    "to_polar",
    "to_rect",
    "calc_cam_vertices",
    "calc_pin_locations",
    "calc_pa_limit_circles",
}

# Cache for lazy-loaded modules
_modules = {}


def __getattr__(name):
    """Lazy load submodules when their attributes are accessed."""
    global _modules

    if name in _ENUMS:
        if "enums" not in _modules:
            from . import enums
            _modules["enums"] = enums
        return getattr(_modules["enums"], name)

    if name in _EXCEPTIONS:
        if "exceptions" not in _modules:
            from . import exceptions
            _modules["exceptions"] = exceptions
        return getattr(_modules["exceptions"], name)

    if name in _CALCULATOR:
        if "calculator" not in _modules:
            from . import calculator
            _modules["calculator"] = calculator
        return getattr(_modules["calculator"], name)

    if name in _IO:
        if "io" not in _modules:
            from . import io
            _modules["io"] = io
        return getattr(_modules["io"], name)

    if name in _CORE:
        if "core" not in _modules:
            from . import core
            _modules["core"] = core
        return getattr(_modules["core"], name)

    raise AttributeError(f"module 'hypocam' has no attribute {name!r}")


__all__ = [
    # Version
    "__version__",

    # Enums (lazy loaded from enums)
    "SizeMode",
    "CorrectionMode",

    # Exceptions (lazy loaded from exceptions)
    "CamError",
    "InvalidParameterError",
    "NumericDomainError",

    # Geometry engine (lazy loaded from core)
    "Point2D",
    "to_polar",
    "to_rect",
    "calc_cam_vertices",
    "calc_pin_locations",
    "calc_pa_limit_circles",

    # Calculator (lazy loaded from calculator)
    "compute_profile",
    "compute_pin_layout",
    "compute_pressure_limits",
    "design_from_parameters",
    "design_from_pitch",
    "design_from_bolt_circle",
    "validate_design",
    "validate_parameters",
    "Severity",
    "ValidationResult",
    "to_json",
    "to_markdown",
    "to_summary",

    # IO (lazy loaded from io)
    "load_design_json",
    "save_design_json",
    "CamParameters",
    "PressureLimits",
    "CamDesign",
]
