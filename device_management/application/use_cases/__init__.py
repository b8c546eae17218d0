from .device import (
    CreateDeviceUseCase,
    ListDevicesUseCase,
    GetDeviceUseCase,
    UpdateDeviceUseCase,
    PartialUpdateDeviceUseCase,
    DeleteDeviceUseCase,
)

__all__ = [
    "CreateDeviceUseCase",
    "ListDevicesUseCase",
    "GetDeviceUseCase",
    "UpdateDeviceUseCase",
    "PartialUpdateDeviceUseCase",
    "DeleteDeviceUseCase",
]
