"""Shared test fixtures for the folder gallery test suite.

Every test gets its own upload root and config document under ``tmp_path``;
the API dependencies are overridden to point at them, so tests never touch
the working directory.
"""

import io
import os
import tempfile

# Point the import-time storage at a throwaway directory before any app imports.
_BOOT_DIR = tempfile.mkdtemp(prefix="gallery-test-")
os.environ["UPLOAD_ROOT"] = os.path.join(_BOOT_DIR, "uploads")
os.environ["CONFIG_PATH"] = os.path.join(_BOOT_DIR, "folders.json")
os.environ["LOG_FORMAT"] = "text"

import pytest
from fastapi.testclient import TestClient

from gallery.main import app
from gallery.repositories.config_store import ConfigStore
from gallery.repositories.folder_repository import FolderRepository
from gallery.services.activation_service import ActivationService
from gallery.services.upload_service import FilePart, UploadService
from gallery.storage import get_config_store, get_upload_root

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 64


@pytest.fixture()
def upload_root(tmp_path):
    root = tmp_path / "uploads"
    root.mkdir()
    return root


@pytest.fixture()
def store(tmp_path):
    return ConfigStore(tmp_path / "folders.json")


@pytest.fixture()
def folders(upload_root, store):
    return FolderRepository(upload_root, store)


@pytest.fixture()
def activation(store):
    return ActivationService(store)


@pytest.fixture()
def uploads(folders):
    return UploadService(folders)


@pytest.fixture()
def client(upload_root, store):
    """FastAPI TestClient with storage dependencies pointed at the per-test directories."""
    app.dependency_overrides[get_config_store] = lambda: store
    app.dependency_overrides[get_upload_root] = lambda: upload_root
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


def make_part(
    filename: str = "photo.png",
    content_type: str = "image/png",
    data: bytes = PNG_BYTES,
) -> FilePart:
    """Factory for in-memory upload parts."""
    return FilePart(filename=filename, content_type=content_type, stream=io.BytesIO(data))


def make_image_field(
    filename: str = "photo.png",
    content_type: str = "image/png",
    data: bytes = PNG_BYTES,
) -> tuple:
    """Factory for a multipart ``images`` entry accepted by TestClient."""
    return ("images", (filename, io.BytesIO(data), content_type))
