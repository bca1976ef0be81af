"""Main FastAPI application."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api import debug_router, files_router, folders_router, health_router, upload_router
from .core.config import Environment, settings
from .core.logging_config import setup_logging
from .exceptions import GalleryException
from .middleware.exception_handler import (
    gallery_exception_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from .middleware.request_context import RequestContextMiddleware
from .storage import init_storage

# Setup logging first
setup_logging(log_level=settings.log_level, log_format=settings.log_format)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup / shutdown lifecycle for the gallery API."""
    logger.info(f"Environment: {settings.environment.value}")
    init_storage()

    origins = settings.get_cors_origins()
    localhost_origins = [o for o in origins if "localhost" in o or "127.0.0.1" in o]
    if localhost_origins and settings.environment == Environment.PRODUCTION:
        logger.warning(
            "CORS allows localhost origins: %s. Remove these for production.",
            localhost_origins,
        )

    yield  # App runs here


app = FastAPI(
    title="Folder Gallery API",
    description=(
        "Organize image uploads into named folders. Admins create folders, upload "
        "images and toggle which single folder is active; the user view shows the "
        "images of the active folder."
    ),
    version=__version__,
    lifespan=lifespan,
)

# Middleware stack (the last one added runs outermost).
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PATCH", "DELETE"],
    allow_headers=["Origin", "X-Requested-With", "Content-Type", "Accept", "Authorization"],
)
app.add_middleware(
    RequestContextMiddleware,
    quiet_prefixes=("/api/health", settings.uploads_url_prefix),
)

# Register exception handlers
app.add_exception_handler(GalleryException, gallery_exception_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

logger.info(
    "Folder gallery started | env=%s | uploads=%s | config=%s",
    settings.environment.value,
    settings.upload_root,
    settings.config_path,
)

app.include_router(health_router)
app.include_router(folders_router)
app.include_router(debug_router)
app.include_router(upload_router)
app.include_router(files_router)
