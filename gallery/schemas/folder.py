"""Folder and activation schemas."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from ..models.folder_record import ConfigDocument, FolderRecord


class CamelModel(BaseModel):
    """Base schema serialized with camelCase keys, accepting either case on input."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FolderCreate(CamelModel):
    """Schema for creating a folder. Sanitized and validated by the repository."""
    folder_name: Optional[str] = None


class FolderSummary(CamelModel):
    """A folder as listed to the admin and user views."""
    name: str
    image_count: int
    images: List[str]
    active: bool


class FolderCreatedResponse(CamelModel):
    message: str
    folder_name: str


class ToggleResult(CamelModel):
    """Outcome of flipping a folder's active flag.

    ``previous_active`` and ``total_active_folders`` are only set on the
    activating branch.
    """
    message: str
    folder_name: str
    active: bool
    previous_active: Optional[str] = None
    total_active_folders: Optional[int] = None


class CurrentActiveResponse(CamelModel):
    active_folders: List[str]
    active_folder: Optional[str]
    active_count: int
    all_folders: Dict[str, FolderRecord]
    timestamp: datetime


class DebugFoldersResponse(CamelModel):
    config: ConfigDocument
    active_folders: List[str]
    total_folders: int


class CleanupResponse(CamelModel):
    deleted_count: int


class MessageResponse(CamelModel):
    message: str


class HealthResponse(CamelModel):
    status: str
    message: str
    timestamp: datetime
