"""API routes."""

from .folders import router as folders_router, debug_router
from .health import router as health_router
from .upload import router as upload_router, files_router

__all__ = [
    "folders_router",
    "debug_router",
    "health_router",
    "upload_router",
    "files_router",
]
