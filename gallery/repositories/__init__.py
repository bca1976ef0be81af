"""Data access repositories."""

from .config_store import ConfigStore
from .folder_repository import FolderRepository, sanitize_folder_name

__all__ = [
    "ConfigStore",
    "FolderRepository",
    "sanitize_folder_name",
]
