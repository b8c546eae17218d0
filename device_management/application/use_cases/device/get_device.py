# Local application imports
from ....domain.exceptions import DeviceNotFoundError
from ....domain.models.device import Device
from ....domain.repositories.device_repository import DeviceRepository
from ...dto.device_dto import DeviceResponse


async def find_device_or_raise(device_repository: DeviceRepository, device_id: str) -> Device:
    """Load the stored device or raise DeviceNotFoundError"""
    device = await device_repository.find_by_id(device_id)
    if device is None:
        raise DeviceNotFoundError(
            f"Device not found with id: {device_id}",
            details={"device_id": device_id},
        )
    return device


class GetDeviceUseCase:
    """Use case for getting a device by ID"""

    def __init__(
        self,
        device_repository: DeviceRepository,
    ) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str) -> DeviceResponse:
        """
        Get a device by ID

        Args:
            device_id: ID of the device

        Returns:
            DeviceResponse with device information

        Raises:
            DeviceNotFoundError: If no device exists for the ID
        """
        device = await find_device_or_raise(self.device_repository, device_id)
        return DeviceResponse.from_device(device)
