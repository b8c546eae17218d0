from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from ...domain.models.device import Device, DeviceState


def _reject_blank(value: Optional[str]) -> Optional[str]:
    if value is not None and not value.strip():
        raise ValueError("must not be blank")
    return value


class DeviceCreateRequest(BaseModel):
    """DTO for device creation request"""
    name: str = Field(min_length=1, max_length=255)
    brand: str = Field(min_length=1, max_length=255)
    state: Optional[DeviceState] = None  # Defaults to AVAILABLE when omitted

    @field_validator("name", "brand")
    @classmethod
    def reject_blank(cls, value: Optional[str]) -> Optional[str]:
        return _reject_blank(value)


class DeviceUpdateRequest(BaseModel):
    """
    DTO for full (PUT) and partial (PATCH) device updates.

    Every field is optional here: PATCH applies only the fields that are
    present, PUT requires all three and that check belongs to the use case.
    """
    name: Optional[str] = Field(default=None, max_length=255)
    brand: Optional[str] = Field(default=None, max_length=255)
    state: Optional[DeviceState] = None

    @field_validator("name", "brand")
    @classmethod
    def reject_blank(cls, value: Optional[str]) -> Optional[str]:
        return _reject_blank(value)


class DeviceResponse(BaseModel):
    """DTO for device response"""
    id: str
    name: str
    brand: str
    state: DeviceState
    created_at: Optional[datetime] = None

    @classmethod
    def from_device(cls, device: Device) -> "DeviceResponse":
        return cls(
            id=device.id,
            name=device.name,
            brand=device.brand,
            state=device.state,
            created_at=device.created_at,
        )
