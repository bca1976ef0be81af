"""Custom exception hierarchy for the folder gallery."""

from enum import Enum
from typing import Optional, Dict, Any


class ErrorCode(str, Enum):
    """Standardized error codes for API responses."""

    # Folder errors
    FOLDER_NOT_FOUND = "FOLDER_NOT_FOUND"
    IMAGE_NOT_FOUND = "IMAGE_NOT_FOUND"
    FOLDER_ALREADY_EXISTS = "FOLDER_ALREADY_EXISTS"
    INVALID_FOLDER_NAME = "INVALID_FOLDER_NAME"

    # Upload errors
    NO_FILES = "NO_FILES"
    TOO_MANY_FILES = "TOO_MANY_FILES"
    FILE_TOO_LARGE = "FILE_TOO_LARGE"
    UNSUPPORTED_FILE_TYPE = "UNSUPPORTED_FILE_TYPE"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Generic errors
    INTERNAL_ERROR = "INTERNAL_ERROR"


class GalleryException(Exception):
    """
    Base exception for all gallery errors.

    Provides structured error responses with:
    - Human-readable message
    - Machine-readable error code
    - HTTP status code
    - Optional additional details
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize exception.

        Args:
            message: Human-readable error message
            error_code: Machine-readable error code
            status_code: HTTP status code to return
            details: Optional additional context/details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary for JSON response."""
        return {
            "error": self.error_code.value,
            "message": self.message,
            "details": self.details
        }


class ValidationError(GalleryException):
    """Validation failed for user input."""

    def __init__(self, message: str, field: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(
            message,
            ErrorCode.VALIDATION_ERROR,
            status_code=400,
            details=details
        )


class InvalidFolderNameError(GalleryException):
    """Folder name is empty, or nothing usable is left after sanitizing it."""

    def __init__(self, folder_name: str, message: str = "Invalid folder name"):
        super().__init__(
            message,
            ErrorCode.INVALID_FOLDER_NAME,
            status_code=400,
            details={"folder_name": folder_name}
        )


class FolderNotFoundError(GalleryException):
    """Folder directory does not exist under the upload root."""

    def __init__(self, folder_name: str):
        super().__init__(
            f"Folder not found: {folder_name}",
            ErrorCode.FOLDER_NOT_FOUND,
            status_code=404,
            details={"folder_name": folder_name}
        )


class ImageNotFoundError(GalleryException):
    """No servable image with this name in the folder."""

    def __init__(self, folder_name: str, filename: str):
        super().__init__(
            f"Image not found: {folder_name}/{filename}",
            ErrorCode.IMAGE_NOT_FOUND,
            status_code=404,
            details={"folder_name": folder_name, "filename": filename}
        )


class FolderAlreadyExistsError(GalleryException):
    """A folder with the same sanitized name already exists."""

    def __init__(self, folder_name: str):
        super().__init__(
            f"Folder already exists: {folder_name}",
            ErrorCode.FOLDER_ALREADY_EXISTS,
            status_code=400,
            details={"folder_name": folder_name}
        )


class NoFilesError(GalleryException):
    """Upload request carried no file parts."""

    def __init__(self):
        super().__init__(
            "No files uploaded",
            ErrorCode.NO_FILES,
            status_code=400,
        )


class TooManyFilesError(GalleryException):
    """Upload request carried more file parts than allowed."""

    def __init__(self, count: int, limit: int):
        super().__init__(
            f"Too many files: {count} (maximum {limit} per upload)",
            ErrorCode.TOO_MANY_FILES,
            status_code=400,
            details={"count": count, "limit": limit}
        )


class FileTooLargeError(GalleryException):
    """A file part exceeds the per-file size cap."""

    def __init__(self, filename: str, size: int, limit: int):
        super().__init__(
            "File size too large",
            ErrorCode.FILE_TOO_LARGE,
            status_code=400,
            details={"filename": filename, "size": size, "limit": limit}
        )


class UnsupportedFileTypeError(GalleryException):
    """File extension or declared content type is not an allowed image type."""

    def __init__(self, filename: str, content_type: Optional[str]):
        super().__init__(
            "Only image files are allowed",
            ErrorCode.UNSUPPORTED_FILE_TYPE,
            status_code=400,
            details={"filename": filename, "content_type": content_type}
        )
