"""Pydantic schemas for API validation."""

from .folder import (
    CamelModel,
    FolderCreate,
    FolderSummary,
    FolderCreatedResponse,
    ToggleResult,
    CurrentActiveResponse,
    DebugFoldersResponse,
    CleanupResponse,
    MessageResponse,
    HealthResponse,
)
from .upload import (
    StoredFile,
    UploadResponse,
)

__all__ = [
    "CamelModel",
    "FolderCreate",
    "FolderSummary",
    "FolderCreatedResponse",
    "ToggleResult",
    "CurrentActiveResponse",
    "DebugFoldersResponse",
    "CleanupResponse",
    "MessageResponse",
    "HealthResponse",
    "StoredFile",
    "UploadResponse",
]
