"""
In-memory device store.

A plain dict keyed by device ID, used for local development
(DEVICE_STORE_BACKEND=memory) and for behavioural tests. Records are copied
in and out so callers never hold a reference into the store.
"""

# Standard library imports
import dataclasses
import uuid
from typing import Callable, Dict, List, Optional

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device, DeviceState
from ...utils.datetime_utils import utc_now


class InMemoryDeviceRepository(DeviceRepository):
    """Process-local implementation of DeviceRepository"""

    def __init__(self) -> None:
        self._devices: Dict[str, Device] = {}

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        device = self._devices.get(device_id)
        return dataclasses.replace(device) if device is not None else None

    async def find_all(self) -> List[Device]:
        return self._select(lambda device: True)

    async def find_by_brand(self, brand: str) -> List[Device]:
        return self._select(lambda device: device.brand == brand)

    async def find_by_state(self, state: DeviceState) -> List[Device]:
        return self._select(lambda device: device.state is state)

    async def find_by_brand_and_state(self, brand: str, state: DeviceState) -> List[Device]:
        return self._select(lambda device: device.brand == brand and device.state is state)

    async def save(self, device: Device) -> Device:
        if not device:
            raise ValueError("Device cannot be None")

        device_id = device.id or uuid.uuid4().hex
        existing = self._devices.get(device_id)
        # id and created_at belong to the store once assigned
        if existing is not None:
            created_at = existing.created_at
        else:
            created_at = device.created_at or utc_now()

        stored = dataclasses.replace(device, id=device_id, created_at=created_at)
        self._devices[device_id] = stored
        return dataclasses.replace(stored)

    async def delete(self, device: Device) -> None:
        if device.id is not None:
            self._devices.pop(device.id, None)

    def _select(self, predicate: Callable[[Device], bool]) -> List[Device]:
        # Insertion order
        return [dataclasses.replace(device) for device in self._devices.values() if predicate(device)]
