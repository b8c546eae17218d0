from .device_controller import router as device_router
from .health_controller import router as health_router


__all__ = ["device_router", "health_router"]
