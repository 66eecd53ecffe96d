"""
Numerical constants for hypocycloid cam calculations.

Defaults reproduce the reference cam generator so that a design built with
no arguments matches its output. Units follow the input: lengths are in
whatever unit the pitch is given in, angles carry a _DEG suffix.

Constants are grouped by category:
- Reference defaults: parameter values used when nothing is specified
- Pressure angle scan: resolution and range of the limit circle search
- Validation: thresholds for errors and quality warnings
"""

# =============================================================================
# Reference Defaults
# =============================================================================

DEFAULT_PITCH: float = 0.08  # Tooth (lobe) pitch
DEFAULT_PIN_DIAMETER: float = 0.15  # Roller / pin diameter
DEFAULT_ECCENTRICITY: float = 0.05
DEFAULT_NUM_TEETH: int = 10  # Teeth (lobes) in the cam
DEFAULT_NUM_SAMPLES: int = 1000  # Line segments around the cam profile
DEFAULT_PRESSURE_ANGLE_LIMIT_DEG: float = 50.0
DEFAULT_PRESSURE_ANGLE_OFFSET: float = 0.0
DEFAULT_CIRCLE_SEGMENTS: int = 180  # Tessellation for host-drawn circles

# =============================================================================
# Pressure Angle Scan
# =============================================================================

# The limit circles are found by a linear scan in whole degrees. 1° steps
# over 0..180 match the reference numerics exactly.
PA_SCAN_START_DEG: int = 0
PA_SCAN_END_DEG: int = 180
PA_SCAN_STEP_DEG: int = 1

# Sentinel for a bound the scan never found
PA_NOT_FOUND_DEG: float = -1.0

# =============================================================================
# Validation Thresholds
# =============================================================================

MIN_NUM_TEETH: int = 4
MIN_NUM_SAMPLES: int = 1

# Below this many samples per tooth the profile may self-intersect
MIN_SAMPLES_PER_TOOTH: int = 10

# Suggested density for a smooth profile
RECOMMENDED_SAMPLES_PER_TOOTH: int = 100

# Tolerance used when comparing closure of the generated profile
CLOSURE_TOLERANCE: float = 1e-6
