"""
Unit tests for the Device domain model, DeviceState parsing and device DTOs.
"""
import pytest
from pydantic import ValidationError

from device_management.application.dto.device_dto import DeviceCreateRequest, DeviceUpdateRequest
from device_management.domain.exceptions import InvalidDeviceStateError
from device_management.domain.models.device import Device, DeviceState


class TestDeviceStateParse:
    """Tests for DeviceState.parse"""

    @pytest.mark.parametrize("text", ["available", "AVAILABLE", "AvAiLaBlE", "  available  "])
    def test_case_and_whitespace_insensitive(self, text):
        assert DeviceState.parse(text) is DeviceState.AVAILABLE

    def test_in_use(self):
        assert DeviceState.parse("in_use") is DeviceState.IN_USE

    @pytest.mark.parametrize("text", ["INVALID_STATE", "", "   ", None, "in use"])
    def test_unknown_raises(self, text):
        with pytest.raises(InvalidDeviceStateError, match="Invalid device state"):
            DeviceState.parse(text)


class TestDevice:
    """Tests for Device business validations"""

    def test_state_defaults_to_available(self):
        device = Device(id=None, name="Phone", brand="BrandX")
        assert device.state is DeviceState.AVAILABLE
        assert device.created_at is None

    def test_exact_state_value_is_coerced(self):
        device = Device(id="d1", name="Phone", brand="BrandX", state="INACTIVE")
        assert device.state is DeviceState.INACTIVE

    def test_unknown_state_value_rejected(self):
        with pytest.raises(ValueError):
            Device(id="d1", name="Phone", brand="BrandX", state="BROKEN")

    def test_blank_name_rejected(self):
        with pytest.raises(ValueError, match="name is required"):
            Device(id=None, name="  ", brand="BrandX")

    def test_blank_brand_rejected(self):
        with pytest.raises(ValueError, match="brand is required"):
            Device(id=None, name="Phone", brand="")

    def test_is_in_use(self):
        assert Device(id=None, name="Phone", brand="B", state=DeviceState.IN_USE).is_in_use
        assert not Device(id=None, name="Phone", brand="B").is_in_use


class TestDeviceDtos:
    """Tests for request shape checks"""

    def test_create_state_optional(self):
        request = DeviceCreateRequest(name="Phone", brand="BrandX")
        assert request.state is None

    def test_create_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            DeviceCreateRequest(name="   ", brand="BrandX")

    def test_create_missing_brand_rejected(self):
        with pytest.raises(ValidationError):
            DeviceCreateRequest(name="Phone")

    def test_create_invalid_state_rejected(self):
        with pytest.raises(ValidationError):
            DeviceCreateRequest(name="Phone", brand="BrandX", state="BROKEN")

    def test_update_all_fields_optional(self):
        request = DeviceUpdateRequest()
        assert request.name is None
        assert request.brand is None
        assert request.state is None

    def test_update_blank_brand_rejected(self):
        with pytest.raises(ValidationError):
            DeviceUpdateRequest(brand=" ")
