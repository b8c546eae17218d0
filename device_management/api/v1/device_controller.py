# Standard library imports
from typing import List, Optional

# External package imports
from fastapi import APIRouter, Query, Response, status

# Local application imports
from ...application.dto.device_dto import DeviceCreateRequest, DeviceResponse, DeviceUpdateRequest
from ...application.use_cases.device.create_device import CreateDeviceUseCase
from ...application.use_cases.device.list_devices import ListDevicesUseCase
from ...application.use_cases.device.get_device import GetDeviceUseCase
from ...application.use_cases.device.update_device import UpdateDeviceUseCase
from ...application.use_cases.device.partial_update_device import PartialUpdateDeviceUseCase
from ...application.use_cases.device.delete_device import DeleteDeviceUseCase
from ...di.container import get_container


router = APIRouter(tags=["devices"])


@router.post("", response_model=DeviceResponse, status_code=status.HTTP_201_CREATED)
async def create_device(request: DeviceCreateRequest) -> DeviceResponse:
    """
    Create a new device

    Args:
        request: Device creation request (state defaults to AVAILABLE)

    Returns:
        DeviceResponse with created device information
    """
    container = get_container()
    create_device_use_case = container.get(CreateDeviceUseCase)

    return await create_device_use_case.execute(request=request)


@router.get("", response_model=List[DeviceResponse])
async def list_devices(
    brand: Optional[str] = Query(default=None),
    state: Optional[str] = Query(default=None),
) -> List[DeviceResponse]:
    """
    List devices, optionally filtered by brand and/or state

    Args:
        brand: Exact brand to match
        state: Lifecycle state, case-insensitive

    Returns:
        List of DeviceResponse objects
    """
    container = get_container()
    list_devices_use_case = container.get(ListDevicesUseCase)

    return await list_devices_use_case.execute(brand=brand, state=state)


@router.get("/{device_id}", response_model=DeviceResponse)
async def get_device(device_id: str) -> DeviceResponse:
    """
    Get a device by ID

    Args:
        device_id: ID of the device

    Returns:
        DeviceResponse with device information
    """
    container = get_container()
    get_device_use_case = container.get(GetDeviceUseCase)

    return await get_device_use_case.execute(device_id=device_id)


@router.put("/{device_id}", response_model=DeviceResponse)
async def update_device(device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
    """
    Fully update a device (name, brand and state are all required)
    """
    container = get_container()
    update_device_use_case = container.get(UpdateDeviceUseCase)

    return await update_device_use_case.execute(device_id=device_id, request=request)


@router.patch("/{device_id}", response_model=DeviceResponse)
async def partial_update_device(device_id: str, request: DeviceUpdateRequest) -> DeviceResponse:
    """
    Partially update a device (only the supplied fields change)
    """
    container = get_container()
    partial_update_use_case = container.get(PartialUpdateDeviceUseCase)

    return await partial_update_use_case.execute(device_id=device_id, request=request)


@router.delete("/{device_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_device(device_id: str) -> Response:
    """
    Delete a device that is not in use
    """
    container = get_container()
    delete_device_use_case = container.get(DeleteDeviceUseCase)

    await delete_device_use_case.execute(device_id=device_id)

    return Response(status_code=status.HTTP_204_NO_CONTENT)
