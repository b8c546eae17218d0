from .create_device import CreateDeviceUseCase
from .list_devices import ListDevicesUseCase
from .get_device import GetDeviceUseCase
from .update_device import UpdateDeviceUseCase
from .partial_update_device import PartialUpdateDeviceUseCase
from .delete_device import DeleteDeviceUseCase

__all__ = [
    "CreateDeviceUseCase",
    "ListDevicesUseCase",
    "GetDeviceUseCase",
    "UpdateDeviceUseCase",
    "PartialUpdateDeviceUseCase",
    "DeleteDeviceUseCase",
]
