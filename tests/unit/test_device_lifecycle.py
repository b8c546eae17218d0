"""
Unit tests for the in-use guard (device_management.domain.services.device_lifecycle).
"""
import pytest

from device_management.domain.exceptions import DeviceDeletionConflictError, DeviceUpdateConflictError
from device_management.domain.models.device import Device, DeviceState
from device_management.domain.services.device_lifecycle import (
    apply_changes,
    check_update_allowed,
    ensure_deletable,
    ensure_update_allowed,
)


def _make_device(state: DeviceState, name: str = "Tablet 2", brand: str = "BrandY") -> Device:
    return Device(id="dev-1", name=name, brand=brand, state=state)


class TestCheckUpdateAllowed:
    """Tests for check_update_allowed"""

    def test_in_use_name_change_is_violation(self):
        violation = check_update_allowed(_make_device(DeviceState.IN_USE), name="Tablet 3")
        assert violation is not None
        assert violation.field == "name"
        assert violation.device_id == "dev-1"

    def test_in_use_brand_change_is_violation(self):
        violation = check_update_allowed(_make_device(DeviceState.IN_USE), brand="OtherBrand")
        assert violation is not None
        assert violation.field == "brand"

    def test_name_checked_before_brand(self):
        violation = check_update_allowed(
            _make_device(DeviceState.IN_USE), name="Tablet 3", brand="OtherBrand"
        )
        assert violation.field == "name"

    def test_requested_state_does_not_lift_guard(self):
        # Only the stored state counts; the incoming state is not an argument
        current = _make_device(DeviceState.IN_USE)
        violation = check_update_allowed(current, name="Other")
        assert violation is not None
        assert violation.field == "name"

    def test_in_use_same_values_allowed(self):
        assert check_update_allowed(
            _make_device(DeviceState.IN_USE), name="Tablet 2", brand="BrandY"
        ) is None

    def test_in_use_absent_fields_allowed(self):
        assert check_update_allowed(_make_device(DeviceState.IN_USE)) is None

    @pytest.mark.parametrize("state", [DeviceState.AVAILABLE, DeviceState.INACTIVE])
    def test_not_in_use_anything_allowed(self, state):
        assert check_update_allowed(
            _make_device(state), name="Other", brand="OtherBrand"
        ) is None

    def test_violation_message(self):
        violation = check_update_allowed(_make_device(DeviceState.IN_USE), brand="X")
        assert violation.message == "Cannot update 'brand' for device dev-1 because its state is IN_USE."


class TestEnsureUpdateAllowed:
    """Tests for ensure_update_allowed"""

    def test_raises_conflict(self):
        with pytest.raises(DeviceUpdateConflictError, match="Cannot update 'name' for device dev-1") as info:
            ensure_update_allowed(_make_device(DeviceState.IN_USE), name="Renamed")
        assert info.value.details == {"device_id": "dev-1", "field": "name"}

    def test_passes_when_allowed(self):
        ensure_update_allowed(_make_device(DeviceState.AVAILABLE), name="Renamed")


class TestEnsureDeletable:
    """Tests for ensure_deletable"""

    def test_in_use_raises(self):
        with pytest.raises(DeviceDeletionConflictError, match="Cannot delete device with ID dev-1"):
            ensure_deletable(_make_device(DeviceState.IN_USE))

    @pytest.mark.parametrize("state", [DeviceState.AVAILABLE, DeviceState.INACTIVE])
    def test_not_in_use_passes(self, state):
        ensure_deletable(_make_device(state))


class TestApplyChanges:
    """Tests for apply_changes"""

    def test_only_supplied_fields_change(self):
        current = _make_device(DeviceState.IN_USE)
        merged = apply_changes(current, state=DeviceState.AVAILABLE)
        assert merged.state is DeviceState.AVAILABLE
        assert merged.name == "Tablet 2"
        assert merged.brand == "BrandY"
        assert merged.id == "dev-1"

    def test_does_not_mutate_current(self):
        current = _make_device(DeviceState.AVAILABLE)
        apply_changes(current, name="Renamed", brand="NewBrand", state=DeviceState.INACTIVE)
        assert current.name == "Tablet 2"
        assert current.state is DeviceState.AVAILABLE
