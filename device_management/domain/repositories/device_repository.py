from abc import ABC, abstractmethod
from typing import Optional
from ..models.device import Device, DeviceState


class DeviceRepository(ABC):
    """Repository interface - defines contract for device data access"""

    @abstractmethod
    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        pass

    @abstractmethod
    async def find_all(self) -> list[Device]:
        """Find all devices"""
        pass

    @abstractmethod
    async def find_by_brand(self, brand: str) -> list[Device]:
        """Find all devices of a brand (exact match)"""
        pass

    @abstractmethod
    async def find_by_state(self, state: DeviceState) -> list[Device]:
        """Find all devices in a lifecycle state"""
        pass

    @abstractmethod
    async def find_by_brand_and_state(self, brand: str, state: DeviceState) -> list[Device]:
        """Find all devices of a brand that are in a lifecycle state"""
        pass

    @abstractmethod
    async def save(self, device: Device) -> Device:
        """Save device (create or update); assigns id and created_at on first insert"""
        pass

    @abstractmethod
    async def delete(self, device: Device) -> None:
        """Remove device"""
        pass
