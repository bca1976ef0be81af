"""Upload schemas."""

from typing import List

from .folder import CamelModel


class StoredFile(CamelModel):
    """One file written to a folder directory."""
    original_name: str
    filename: str
    path: str  # relative URL, e.g. /uploads/<folder>/<filename>
    size: int


class UploadResponse(CamelModel):
    message: str
    files: List[StoredFile]
    folder: str
