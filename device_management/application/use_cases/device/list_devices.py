# Standard library imports
from typing import List, Optional

# Local application imports
from ....domain.models.device import Device, DeviceState
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse


class ListDevicesUseCase:
    """Use case for listing devices, optionally filtered by brand and/or state"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(
        self,
        brand: Optional[str] = None,
        state: Optional[str] = None,
    ) -> List[DeviceResponse]:
        """
        List devices, picking the query from the filters supplied.

        Empty strings count as "no filter".

        Args:
            brand: Exact brand to match
            state: State text; trimmed and case-folded before matching

        Returns:
            List of DeviceResponse objects

        Raises:
            InvalidDeviceStateError: If state does not name a known state
        """
        if brand and state:
            return await self.get_by_brand_and_state(brand, state)
        if brand:
            return await self.get_by_brand(brand)
        if state:
            return await self.get_by_state(state)
        return await self.get_all()

    async def get_all(self) -> List[DeviceResponse]:
        devices = await self.device_repository.find_all()
        return self._to_responses(devices)

    async def get_by_brand(self, brand: str) -> List[DeviceResponse]:
        devices = await self.device_repository.find_by_brand(brand)
        return self._to_responses(devices)

    async def get_by_state(self, state: str) -> List[DeviceResponse]:
        # Parse before touching the store so bad input never reaches it
        device_state = DeviceState.parse(state)
        devices = await self.device_repository.find_by_state(device_state)
        return self._to_responses(devices)

    async def get_by_brand_and_state(self, brand: str, state: str) -> List[DeviceResponse]:
        device_state = DeviceState.parse(state)
        devices = await self.device_repository.find_by_brand_and_state(brand, device_state)
        return self._to_responses(devices)

    @staticmethod
    def _to_responses(devices: List[Device]) -> List[DeviceResponse]:
        return [DeviceResponse.from_device(device) for device in devices]
