"""
Shared pytest fixtures for device management tests.
"""
import dataclasses
import os
from unittest.mock import AsyncMock, patch

import pytest

from device_management.core.config import reset_settings
from device_management.di.container import reset_container
from device_management.domain.repositories.device_repository import DeviceRepository
from device_management.infrastructure.db.in_memory_device_repository import InMemoryDeviceRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "MONGO_URI": "mongodb://localhost:27017",
        "MONGO_DB_NAME": "test_device_db",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def in_memory_backend(monkeypatch):
    """Select the in-memory device store and rebuild settings and container around the test."""
    monkeypatch.setenv("DEVICE_STORE_BACKEND", "memory")
    reset_settings()
    reset_container()
    yield
    reset_settings()
    reset_container()


@pytest.fixture
def mock_device_repo():
    """Mock DeviceRepository with async methods; save echoes its argument, assigning an ID to new devices."""
    repo = AsyncMock(spec=DeviceRepository)
    repo.save.side_effect = lambda device: device if device.id else dataclasses.replace(device, id="generated")
    return repo


@pytest.fixture
def memory_repo():
    return InMemoryDeviceRepository()
