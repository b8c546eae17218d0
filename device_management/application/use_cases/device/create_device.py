# Standard library imports
import logging

# Local application imports
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.models.device import Device, DeviceState
from ...dto.device_dto import DeviceCreateRequest, DeviceResponse

logger = logging.getLogger(__name__)


class CreateDeviceUseCase:
    """Use case for creating a new device"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, request: DeviceCreateRequest) -> DeviceResponse:
        """
        Create a new device

        Args:
            request: Device creation request

        Returns:
            DeviceResponse with the stored device, including its generated
            ID and creation timestamp
        """
        new_device = Device(
            id=None,
            name=request.name,
            brand=request.brand,
            state=request.state or DeviceState.AVAILABLE,
        )

        saved_device = await self.device_repository.save(new_device)

        logger.info(
            f"Created device {saved_device.id} ({saved_device.brand} / {saved_device.name}) "
            f"in state {saved_device.state.value}"
        )

        return DeviceResponse.from_device(saved_device)
