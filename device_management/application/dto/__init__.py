from .device_dto import DeviceCreateRequest, DeviceUpdateRequest, DeviceResponse
from .error_dto import ErrorResponse

__all__ = [
    "DeviceCreateRequest",
    "DeviceUpdateRequest",
    "DeviceResponse",
    "ErrorResponse",
]
