# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import DeviceUpdateConflictError
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.services.device_lifecycle import apply_changes, ensure_update_allowed
from ...dto.device_dto import DeviceResponse, DeviceUpdateRequest
from .get_device import find_device_or_raise

logger = logging.getLogger(__name__)


class PartialUpdateDeviceUseCase:
    """Use case for merging supplied fields into a device (PATCH semantics)"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
        """
        Overwrite only the fields present in the request

        Args:
            device_id: ID of the device
            request: Update request; absent (None) fields keep their stored value

        Returns:
            DeviceResponse with the merged device

        Raises:
            DeviceNotFoundError: If no device exists for the ID
            DeviceUpdateConflictError: If the device is IN_USE and a supplied name or brand differs
        """
        existing_device = await find_device_or_raise(self.device_repository, device_id)

        try:
            ensure_update_allowed(existing_device, name=request.name, brand=request.brand)
        except DeviceUpdateConflictError as exception:
            logger.warning(f"Rejected partial update of device {device_id}: {exception.message}")
            raise

        merged_device = apply_changes(
            existing_device,
            name=request.name,
            brand=request.brand,
            state=request.state,
        )
        saved_device = await self.device_repository.save(merged_device)

        logger.info(
            f"Partially updated device {saved_device.id} "
            f"(fields: {', '.join(sorted(request.model_dump(exclude_none=True))) or 'none'})"
        )

        return DeviceResponse.from_device(saved_device)
