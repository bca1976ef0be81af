"""Upload API: multipart image upload into a folder, and serving of stored images."""

from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import FileResponse

from ..core.config import settings
from ..repositories.folder_repository import FolderRepository
from ..schemas.upload import UploadResponse
from ..services.upload_service import FilePart, UploadService, resolve_folder_name
from ..storage import get_folder_repository

router = APIRouter(prefix="/api", tags=["upload"])

# Stored images live under the configurable uploads prefix, not /api.
files_router = APIRouter(prefix=settings.uploads_url_prefix, tags=["upload"])


def get_upload_service(folders: FolderRepository = Depends(get_folder_repository)) -> UploadService:
    return UploadService(
        folders,
        max_files=settings.max_upload_files,
        max_file_size=settings.max_file_size,
    )


@router.post("/upload", response_model=UploadResponse)
def upload_images(
    folder_name: str = Form("", alias="folderName"),
    images: Optional[List[UploadFile]] = File(None),
    service: UploadService = Depends(get_upload_service),
):
    """Store up to ``max_upload_files`` images in the named folder."""
    parts = [
        FilePart(filename=f.filename or "", content_type=f.content_type, stream=f.file)
        for f in images or []
    ]
    stored = service.upload(folder_name, parts)
    return UploadResponse(
        message="Files uploaded successfully",
        files=stored,
        folder=resolve_folder_name(folder_name),
    )


@files_router.get("/{folder_name}/{filename}", response_class=FileResponse)
def get_image(
    folder_name: str,
    filename: str,
    folders: FolderRepository = Depends(get_folder_repository),
):
    """Serve a stored image at the URL returned by uploads and listings."""
    return FileResponse(folders.image_file(folder_name, filename))
