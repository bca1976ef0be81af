"""Persisted state models."""

from .folder_record import ConfigDocument, FolderRecord

__all__ = ["ConfigDocument", "FolderRecord"]
