"""Liveness endpoint with a device store check."""

# Standard library imports
import asyncio
import logging
import time
from typing import Any, Dict

# External package imports
from fastapi import APIRouter, status
from fastapi.responses import JSONResponse

# Local application imports
from ...core.config import get_settings
from ...di.container import get_container

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


async def check_device_store() -> Dict[str, Any]:
    """
    Check that the configured device store answers.

    Returns:
        dict with status, backend, latency_ms, and optional error
    """
    settings = get_settings()
    if settings.use_in_memory_store:
        return {"status": "healthy", "backend": "memory"}

    start = time.time()
    try:
        database = get_container().get("database")
        await asyncio.wait_for(database.command("ping"), timeout=5.0)
        latency_ms = round((time.time() - start) * 1000, 2)
        return {"status": "healthy", "backend": "mongo", "latency_ms": latency_ms}
    except asyncio.TimeoutError:
        return {"status": "unhealthy", "backend": "mongo", "error": "Database ping timeout (>5s)"}
    except Exception as e:
        logger.error(f"Device store health check failed: {e}")
        return {"status": "unhealthy", "backend": "mongo", "error": "Database connection failed"}


@router.get("")
async def health_check() -> JSONResponse:
    """Report service health; 503 when the device store is unreachable"""
    store = await check_device_store()
    healthy = store["status"] == "healthy"
    return JSONResponse(
        status_code=status.HTTP_200_OK if healthy else status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "healthy" if healthy else "unhealthy", "checks": {"device_store": store}},
    )
