"""
API layer for the Device Management service.

Exposes the device CRUD endpoints under /api/v1/devices and a health check
under /health.
"""
