"""
Device Management API: root package.

This package contains the FastAPI app entry point (main.py), API routes,
the device lifecycle domain, its use cases, and the device store
implementations (MongoDB and in-memory).
"""
