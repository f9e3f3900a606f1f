"""Tracking domain API package."""

from tracking.api.routes import router

__all__ = ["router"]
