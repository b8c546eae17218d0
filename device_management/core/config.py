# Standard library imports
import os
from typing import Final, List, Optional


class Settings:
    """
    Application settings loaded from environment variables.

    This class centralizes all configuration settings for the application.
    All settings are loaded from environment variables with sensible defaults.
    """

    def __init__(self) -> None:
        # Database Configuration
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "device_management")

        # Device store backend: "mongo" for MongoDB, "memory" for a process-local store
        self.device_store_backend: Final[str] = os.getenv("DEVICE_STORE_BACKEND", "mongo").strip().lower()

        # Logging Configuration
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO")

        # CORS Configuration (comma-separated)
        self.cors_allowed_origins_str: Final[str] = os.getenv(
            "CORS_ALLOWED_ORIGINS",
            "http://localhost:5173,http://localhost:3000",
        )

    @property
    def cors_allowed_origins(self) -> List[str]:
        """Parse allowed origins from the comma-separated setting"""
        return [origin.strip() for origin in self.cors_allowed_origins_str.split(",") if origin.strip()]

    @property
    def use_in_memory_store(self) -> bool:
        return self.device_store_backend == "memory"


# Global settings instance (singleton pattern)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get application settings (singleton pattern)

    Returns:
        Settings instance with all configuration values
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() re-reads the environment"""
    global _settings
    _settings = None
