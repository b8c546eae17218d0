from typing import TYPE_CHECKING
from ...domain.repositories.device_repository import DeviceRepository
from ...application.use_cases.device.create_device import CreateDeviceUseCase
from ...application.use_cases.device.list_devices import ListDevicesUseCase
from ...application.use_cases.device.get_device import GetDeviceUseCase
from ...application.use_cases.device.update_device import UpdateDeviceUseCase
from ...application.use_cases.device.partial_update_device import PartialUpdateDeviceUseCase
from ...application.use_cases.device.delete_device import DeleteDeviceUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DeviceProvider:
    """Device use case provider - registers all device-related use cases"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all device use cases.
        Use cases are created on-demand via factories.
        """
        use_cases = (
            CreateDeviceUseCase,
            ListDevicesUseCase,
            GetDeviceUseCase,
            UpdateDeviceUseCase,
            PartialUpdateDeviceUseCase,
            DeleteDeviceUseCase,
        )
        for use_case in use_cases:
            container.register_factory(
                use_case,
                lambda use_case=use_case: use_case(
                    device_repository=container.get(DeviceRepository),
                )
            )
