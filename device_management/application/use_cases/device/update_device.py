# Standard library imports
import logging

# Local application imports
from ....domain.exceptions import DeviceUpdateConflictError, DeviceUpdateValidationError
from ....domain.repositories.device_repository import DeviceRepository
from ....domain.services.device_lifecycle import apply_changes, ensure_update_allowed
from ...dto.device_dto import DeviceResponse, DeviceUpdateRequest
from .get_device import find_device_or_raise

logger = logging.getLogger(__name__)


class UpdateDeviceUseCase:
    """Use case for fully replacing a device's mutable fields (PUT semantics)"""

    def __init__(self, device_repository: DeviceRepository) -> None:
        self.device_repository = device_repository

    async def execute(self, device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
        """
        Replace name, brand and state of a device

        Args:
            device_id: ID of the device
            request: Update request; name, brand and state must all be present

        Returns:
            DeviceResponse with the updated device

        Raises:
            DeviceUpdateValidationError: If name, brand or state is missing
            DeviceNotFoundError: If no device exists for the ID
            DeviceUpdateConflictError: If the device is IN_USE and name or brand would change
        """
        if request.name is None or request.brand is None or request.state is None:
            raise DeviceUpdateValidationError(
                "PUT request requires 'name', 'brand', and 'state' fields to be present.",
                details={
                    "missing": [
                        field
                        for field in ("name", "brand", "state")
                        if getattr(request, field) is None
                    ]
                },
            )

        existing_device = await find_device_or_raise(self.device_repository, device_id)

        try:
            ensure_update_allowed(existing_device, name=request.name, brand=request.brand)
        except DeviceUpdateConflictError as exception:
            logger.warning(f"Rejected full update of device {device_id}: {exception.message}")
            raise

        updated_device = apply_changes(
            existing_device,
            name=request.name,
            brand=request.brand,
            state=request.state,
        )
        saved_device = await self.device_repository.save(updated_device)

        logger.info(f"Updated device {saved_device.id} (state {saved_device.state.value})")

        return DeviceResponse.from_device(saved_device)
