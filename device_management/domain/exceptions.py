"""
Exception hierarchy for the device domain.

Every rule violation raised by the device use cases inherits from DeviceError.
The HTTP layer maps each concrete class to a status code; nothing below the
controllers knows about HTTP.
"""

# Standard library imports
from typing import Any, Dict, Optional


class DeviceError(Exception):
    """Base exception for all device domain errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class DeviceNotFoundError(DeviceError):
    """Raised when no device exists for the requested ID."""
    pass


class InvalidDeviceStateError(DeviceError):
    """Raised when a state string does not name a known device state."""
    pass


class DeviceUpdateValidationError(DeviceError):
    """Raised when a full update omits one of the required fields."""
    pass


class DeviceUpdateConflictError(DeviceError):
    """Raised when an update would change the identity of an in-use device."""
    pass


class DeviceDeletionConflictError(DeviceError):
    """Raised when attempting to delete an in-use device."""
    pass
