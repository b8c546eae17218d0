from typing import TYPE_CHECKING
from ...core.config import get_settings
from ...domain.repositories.device_repository import DeviceRepository
from ...infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository
from ...infrastructure.db.mongo_device_repository import MongoDeviceRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the device repository for the configured backend.
        """
        if get_settings().use_in_memory_store:
            container.register_singleton(DeviceRepository, InMemoryDeviceRepository())
            return

        container.register_singleton(
            DeviceRepository,
            MongoDeviceRepository(device_collection=container.get("device_collection"))
        )
