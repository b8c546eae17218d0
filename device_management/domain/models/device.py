# Standard library imports
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

# Local application imports
from ..exceptions import InvalidDeviceStateError


class DeviceState(str, Enum):
    """Lifecycle state of a device"""
    AVAILABLE = "AVAILABLE"
    IN_USE = "IN_USE"
    INACTIVE = "INACTIVE"

    @classmethod
    def parse(cls, text: Optional[str]) -> "DeviceState":
        """
        Parse free text into a DeviceState.

        The text is trimmed and upper-cased before matching, so "in_use",
        " In_Use " and "IN_USE" all resolve to IN_USE.

        Raises:
            InvalidDeviceStateError: If the text does not name a known state
        """
        normalized = (text or "").strip().upper()
        try:
            return cls(normalized)
        except ValueError:
            valid = ", ".join(member.value for member in cls)
            raise InvalidDeviceStateError(
                f"Invalid device state '{text}'. Valid values are: {valid}",
                details={"state": text},
            ) from None


@dataclass
class Device:
    """
    Pure domain model for Device entity.

    Represents a physical device tracked through the AVAILABLE / IN_USE /
    INACTIVE lifecycle. The ID and creation timestamp are assigned by the
    device store on first save and stay None until then.
    """
    id: Optional[str]
    name: str
    brand: str
    state: DeviceState = DeviceState.AVAILABLE
    created_at: Optional[datetime] = field(default=None)

    def __post_init__(self) -> None:
        """Business validations"""
        if not self.name or len(self.name.strip()) < 1:
            raise ValueError("Device name is required")
        if not self.brand or len(self.brand.strip()) < 1:
            raise ValueError("Device brand is required")
        if self.state is None:
            self.state = DeviceState.AVAILABLE
        elif not isinstance(self.state, DeviceState):
            # Exact enum values only; free-text parsing belongs to DeviceState.parse
            self.state = DeviceState(self.state)

    @property
    def is_in_use(self) -> bool:
        return self.state is DeviceState.IN_USE
