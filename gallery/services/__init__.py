"""Business logic services."""

from .activation_service import ActivationService
from .upload_service import FilePart, UploadService

__all__ = ["ActivationService", "FilePart", "UploadService"]
