"""Storage wiring: FastAPI dependencies for the config store and folder repository."""

from pathlib import Path

from fastapi import Depends

from .core.config import settings
from .repositories.config_store import ConfigStore
from .repositories.folder_repository import FolderRepository


def get_config_store() -> ConfigStore:
    """Dependency for routes needing the folder-state document."""
    return ConfigStore(settings.config_path)


def get_upload_root() -> Path:
    return Path(settings.upload_root)


def get_folder_repository(
    store: ConfigStore = Depends(get_config_store),
    upload_root: Path = Depends(get_upload_root),
) -> FolderRepository:
    return FolderRepository(upload_root, store, url_prefix=settings.uploads_url_prefix)


def init_storage() -> None:
    """Create the upload root and an empty config document if they are missing."""
    Path(settings.upload_root).mkdir(parents=True, exist_ok=True)
    ConfigStore(settings.config_path).ensure_exists()
