"""
Lifecycle rules for device mutations.

A device that is IN_USE keeps its identity: its name and brand cannot change
while someone is using it, and it cannot be deleted. Its state can always
change. Every function here is pure and is evaluated against the currently
stored record, before anything is written.

Full and partial updates share check_update_allowed; a full update simply
supplies every field.
"""

# Standard library imports
import dataclasses
from dataclasses import dataclass
from typing import Optional

# Local application imports
from ..constants import DeviceFields
from ..exceptions import DeviceDeletionConflictError, DeviceUpdateConflictError
from ..models.device import Device, DeviceState


@dataclass(frozen=True)
class GuardViolation:
    """An update rejected because it would change an in-use device's identity"""
    device_id: Optional[str]
    field: str

    @property
    def message(self) -> str:
        return f"Cannot update '{self.field}' for device {self.device_id} because its state is IN_USE."


def check_update_allowed(
    current: Device,
    *,
    name: Optional[str] = None,
    brand: Optional[str] = None,
) -> Optional[GuardViolation]:
    """
    Check whether the supplied fields may be applied to the stored device.

    Args:
        current: Device as currently stored
        name: Requested name, or None when the request does not touch it
        brand: Requested brand, or None when the request does not touch it

    Returns:
        The first violation found (name is checked before brand), or None
    """
    if current.state is not DeviceState.IN_USE:
        return None

    if name is not None and name != current.name:
        return GuardViolation(device_id=current.id, field=DeviceFields.NAME)

    if brand is not None and brand != current.brand:
        return GuardViolation(device_id=current.id, field=DeviceFields.BRAND)

    return None


def ensure_update_allowed(
    current: Device,
    *,
    name: Optional[str] = None,
    brand: Optional[str] = None,
) -> None:
    """
    Raise if the supplied fields may not be applied to the stored device.

    Raises:
        DeviceUpdateConflictError: If the device is IN_USE and name or brand would change
    """
    violation = check_update_allowed(current, name=name, brand=brand)
    if violation is not None:
        raise DeviceUpdateConflictError(
            violation.message,
            details={"device_id": violation.device_id, "field": violation.field},
        )


def ensure_deletable(current: Device) -> None:
    """
    Raise if the stored device may not be deleted.

    Raises:
        DeviceDeletionConflictError: If the device is IN_USE
    """
    if current.state is DeviceState.IN_USE:
        raise DeviceDeletionConflictError(
            f"Cannot delete device with ID {current.id} because its state is IN_USE.",
            details={"device_id": current.id},
        )


def apply_changes(
    current: Device,
    *,
    name: Optional[str] = None,
    brand: Optional[str] = None,
    state: Optional[DeviceState] = None,
) -> Device:
    """Return a copy of current with every supplied (non-None) field overwritten"""
    changes = {}
    if name is not None:
        changes[DeviceFields.NAME] = name
    if brand is not None:
        changes[DeviceFields.BRAND] = brand
    if state is not None:
        changes[DeviceFields.STATE] = state
    return dataclasses.replace(current, **changes)
