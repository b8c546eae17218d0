from .config import Settings, get_settings, reset_settings
from .logging_config import setup_logging

__all__ = [
    "Settings",
    "get_settings",
    "reset_settings",
    "setup_logging",
]
