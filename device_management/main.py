# Standard library imports
from pathlib import Path
from contextlib import asynccontextmanager
import logging

# External package imports
from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from .api.v1 import device_router, health_router
from .api.error_handlers import register_error_handlers
from .core.config import get_settings
from .core.logging_config import setup_logging
from .di.container import get_container
from .infrastructure.db.mongo_connection import close_database

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for startup/shutdown events.

    Builds the DI container on startup and closes the MongoDB client on shutdown.
    """
    settings = get_settings()
    get_container()
    logger.info(f"Device Management API started (device store backend: {settings.device_store_backend})")

    yield

    close_database()
    logger.info("Application shutdown complete")


def create_application() -> FastAPI:
    """
    Create and configure FastAPI application.

    This function sets up the FastAPI application with:
    - Environment variable loading
    - Logging configuration
    - CORS middleware configuration
    - Error handlers (ErrorResponse bodies)
    - API route registration

    Returns:
        Configured FastAPI application instance
    """
    # Load environment variables from .env file
    env_path = Path(__file__).resolve().parent.parent / ".env"
    load_dotenv(env_path)

    settings = get_settings()
    setup_logging(settings.log_level)

    application = FastAPI(
        title="Device Management API",
        version="1.0.0",
        description="Device lifecycle management (AVAILABLE / IN_USE / INACTIVE)",
        lifespan=lifespan
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(application)

    application.include_router(device_router, prefix="/api/v1/devices")
    application.include_router(health_router, prefix="/health")

    return application


# Create application instance
app = create_application()
