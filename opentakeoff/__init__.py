"""
OpenTakeOff Backend: root package.

This package contains the FastAPI app entry point (main.py), API routes,
take-off domain logic (projects, plans, devices, locations, stamps, history)
and infrastructure (MongoDB repositories, the count event bus and its
WebSocket sessions).
"""
