"""Folder API: list, create, toggle, delete, and config maintenance.

Listing and filesystem mutations go through FolderRepository; the active
flag goes through ActivationService.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends

from ..repositories.config_store import ConfigStore
from ..repositories.folder_repository import FolderRepository
from ..schemas.folder import (
    CleanupResponse,
    CurrentActiveResponse,
    DebugFoldersResponse,
    FolderCreate,
    FolderCreatedResponse,
    FolderSummary,
    MessageResponse,
    ToggleResult,
)
from ..services.activation_service import ActivationService
from ..storage import get_config_store, get_folder_repository

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/folders", tags=["folders"])

# Kept apart so the raw config dump lives under /api/debug.
debug_router = APIRouter(prefix="/api/debug", tags=["debug"])


def get_activation_service(store: ConfigStore = Depends(get_config_store)) -> ActivationService:
    return ActivationService(store)


# -- Listing ----------------------------------------------------------------

@router.get("", response_model=List[FolderSummary])
def list_folders(folders: FolderRepository = Depends(get_folder_repository)):
    """Every folder under the upload root, for the admin view."""
    return folders.list()


@router.get("/active", response_model=List[FolderSummary])
def list_active_folders(folders: FolderRepository = Depends(get_folder_repository)):
    """Only the active folder(s), for the user view."""
    return folders.list(active_only=True)


@router.get("/current-active", response_model=CurrentActiveResponse)
def get_current_active(service: ActivationService = Depends(get_activation_service)):
    return service.current_active()


# -- Mutations --------------------------------------------------------------

@router.post("", response_model=FolderCreatedResponse)
def create_folder(
    data: FolderCreate,
    folders: FolderRepository = Depends(get_folder_repository),
):
    """Create an empty, inactive folder. The name is sanitized first."""
    folder = folders.create(data.folder_name)
    return FolderCreatedResponse(message="Folder created successfully", folder_name=folder.name)


@router.patch(
    "/{folder_name}/toggle",
    response_model=ToggleResult,
    response_model_exclude_unset=True,
)
def toggle_folder(
    folder_name: str,
    service: ActivationService = Depends(get_activation_service),
):
    """Activate the folder (deactivating any other) or deactivate it."""
    return service.toggle(folder_name)


@router.delete("/{folder_name}", response_model=MessageResponse)
def delete_folder(
    folder_name: str,
    folders: FolderRepository = Depends(get_folder_repository),
):
    """Delete the folder directory, its images and its config record."""
    folders.delete(folder_name)
    return MessageResponse(message="Folder deleted successfully")


@router.post("/cleanup", response_model=CleanupResponse)
def cleanup_stale_records(folders: FolderRepository = Depends(get_folder_repository)):
    """Remove config records for folders whose directory is gone."""
    return CleanupResponse(deleted_count=folders.prune_orphans())


# -- Debug ------------------------------------------------------------------

@debug_router.get("/folders", response_model=DebugFoldersResponse)
def debug_folders(store: ConfigStore = Depends(get_config_store)):
    doc = store.load()
    return DebugFoldersResponse(
        config=doc,
        active_folders=doc.active_names(),
        total_folders=len(doc.folders),
    )
