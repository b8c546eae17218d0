# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import DeviceDeletionConflictError
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.services.device_lifecycle import ensure_deletable
from .get_device import find_device_or_raise

logger = logging.getLogger(__name__)


class DeleteDeviceUseCase:
    """Use case for deleting a device that is not in use"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str) -> None:
        """
        Delete a device

        Args:
            device_id: ID of the device

        Raises:
            DeviceNotFoundError: If no device exists for the ID
            DeviceDeletionConflictError: If the device is IN_USE
        """
        device = await find_device_or_raise(self.device_repository, device_id)

        try:
            ensure_deletable(device)
        except DeviceDeletionConflictError as exception:
            logger.warning(f"Rejected deletion of device {device_id}: {exception.message}")
            raise

        await self.device_repository.delete(device)

        logger.info(f"Deleted device {device_id}")
