"""HTTP API for the pack calculator."""

from .app import create_app, build_service
from .routes import router, system_router, get_pack_service

__all__ = [
    "create_app",
    "build_service",
    "router",
    "system_router",
    "get_pack_service",
]
