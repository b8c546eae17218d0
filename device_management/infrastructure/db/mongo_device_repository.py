# Standard library imports
from typing import Optional, List, Dict, Any

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId

# Local application imports
from ...domain.repositories.device_repository import DeviceRepository
from ...domain.models.device import Device, DeviceState
from ...domain.constants import DeviceFields
from ...utils.datetime_utils import utc_now, ensure_utc
from .mongo_connection import get_device_collection


class MongoDeviceRepository(DeviceRepository):
    """MongoDB implementation of DeviceRepository"""

    def __init__(self, device_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.device_collection = device_collection if device_collection is not None else get_device_collection()

    async def find_by_id(self, device_id: str) -> Optional[Device]:
        """Find device by ID"""
        object_id = self._to_object_id(device_id)
        if object_id is None:
            return None

        try:
            document = await self.device_collection.find_one({DeviceFields.MONGO_ID: object_id})
            if document is None:
                return None
            return self._document_to_device(document)
        except Exception as e:
            raise RuntimeError(f"Error finding device by ID: {str(e)}") from e

    async def find_all(self) -> List[Device]:
        """Find all devices"""
        return await self._find_many({}, "Error listing devices")

    async def find_by_brand(self, brand: str) -> List[Device]:
        """Find all devices of a brand (exact match)"""
        return await self._find_many(
            {DeviceFields.BRAND: brand},
            "Error listing devices by brand",
        )

    async def find_by_state(self, state: DeviceState) -> List[Device]:
        """Find all devices in a lifecycle state"""
        return await self._find_many(
            {DeviceFields.STATE: state.value},
            "Error listing devices by state",
        )

    async def find_by_brand_and_state(self, brand: str, state: DeviceState) -> List[Device]:
        """Find all devices of a brand that are in a lifecycle state"""
        return await self._find_many(
            {DeviceFields.BRAND: brand, DeviceFields.STATE: state.value},
            "Error listing devices by brand and state",
        )

    async def save(self, device: Device) -> Device:
        """Save device (create new or update existing)"""
        if not device:
            raise ValueError("Device cannot be None")

        try:
            device_dict = self._device_to_dict(device)

            if device.id:
                object_id = self._to_object_id(device.id)
                if object_id is None:
                    raise ValueError(f"Invalid device ID: {device.id}")

                # created_at is written only when the upsert inserts
                await self.device_collection.update_one(
                    {DeviceFields.MONGO_ID: object_id},
                    {
                        "$set": device_dict,
                        "$setOnInsert": {DeviceFields.CREATED_AT: device.created_at or utc_now()},
                    },
                    upsert=True,
                )
                updated_document = await self.device_collection.find_one({DeviceFields.MONGO_ID: object_id})
                if updated_document is None:
                    raise RuntimeError("Device was updated but could not be retrieved")
                return self._document_to_device(updated_document)

            device_dict[DeviceFields.CREATED_AT] = utc_now()
            result = await self.device_collection.insert_one(device_dict)
            new_document = await self.device_collection.find_one({DeviceFields.MONGO_ID: result.inserted_id})
            if new_document is None:
                raise RuntimeError("Device was created but could not be retrieved")

            return self._document_to_device(new_document)
        except ValueError:
            raise
        except Exception as e:
            raise RuntimeError(f"Error saving device: {str(e)}") from e

    async def delete(self, device: Device) -> None:
        """Remove device"""
        object_id = self._to_object_id(device.id)
        if object_id is None:
            return

        try:
            await self.device_collection.delete_one({DeviceFields.MONGO_ID: object_id})
        except Exception as e:
            raise RuntimeError(f"Error deleting device: {str(e)}") from e

    async def _find_many(self, query: Dict[str, Any], error_message: str) -> List[Device]:
        try:
            cursor = self.device_collection.find(query)
            devices = []
            async for document in cursor:
                devices.append(self._document_to_device(document))
            return devices
        except Exception as e:
            raise RuntimeError(f"{error_message}: {str(e)}") from e

    @staticmethod
    def _to_object_id(device_id: Optional[str]) -> Optional[ObjectId]:
        if not device_id:
            return None
        try:
            return ObjectId(device_id)
        except (InvalidId, TypeError):
            return None

    def _document_to_device(self, document: Dict[str, Any]) -> Device:
        """Convert MongoDB document to Device domain model"""
        if not document:
            raise ValueError("Invalid document: document is None or empty")

        return Device(
            id=str(document[DeviceFields.MONGO_ID]),
            name=document.get(DeviceFields.NAME, ""),
            brand=document.get(DeviceFields.BRAND, ""),
            state=DeviceState(document.get(DeviceFields.STATE, DeviceState.AVAILABLE.value)),
            created_at=ensure_utc(document.get(DeviceFields.CREATED_AT)),
        )

    def _device_to_dict(self, device: Device) -> Dict[str, Any]:
        """Convert Device domain model to MongoDB document (mutable fields only)"""
        if not device:
            raise ValueError("Device cannot be None")

        return {
            DeviceFields.NAME: device.name,
            DeviceFields.BRAND: device.brand,
            DeviceFields.STATE: device.state.value,
        }
