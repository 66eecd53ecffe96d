"""
Exceptions raised by the hypocycloid cam calculator.

All errors derive from ValueError.
"""

from typing import List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .calculator.validation import ValidationMessage


class CamError(ValueError):
    """Base class for cam calculation errors."""
    pass


class InvalidParameterError(CamError):
    """Raised when cam parameters fail validation before any geometry is built."""

    def __init__(self, message: str, messages: Optional[List["ValidationMessage"]] = None):
        super().__init__(message)
        self.messages = list(messages or [])


class NumericDomainError(CamError):
    """Raised when the pressure angle arcsine argument leaves [-1, 1]."""

    def __init__(self, message: str, angle_rad: Optional[float] = None, value: Optional[float] = None):
        super().__init__(message)
        self.angle_rad = angle_rad
        self.value = value
