"""API routers."""

from pitchside.api.routers.layout import router as layout_router
from pitchside.api.routers.websocket import router as websocket_router

__all__ = ["layout_router", "websocket_router"]
