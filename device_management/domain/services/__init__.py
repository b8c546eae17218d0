from .device_lifecycle import (
    GuardViolation,
    apply_changes,
    check_update_allowed,
    ensure_deletable,
    ensure_update_allowed,
)

__all__ = [
    "GuardViolation",
    "apply_changes",
    "check_update_allowed",
    "ensure_deletable",
    "ensure_update_allowed",
]
