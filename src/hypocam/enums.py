"""Type-safe enums for the hypocycloid cam calculator."""

from enum import Enum


class SizeMode(Enum):
    """Which dimension drives the cam size"""
    PITCH = "pitch"  # Tooth (lobe) pitch; bolt circle is derived as p * n
    BOLT_CIRCLE = "bolt-circle"  # Pin bolt circle diameter; pitch is derived as b / n


class CorrectionMode(Enum):
    """How profile samples outside the pressure angle limit circles are corrected"""
    OFFSET = "offset"  # Pull the radius in by a fixed offset (reference behaviour)
    CLAMP = "clamp"  # Snap the radius onto the violated limit circle
