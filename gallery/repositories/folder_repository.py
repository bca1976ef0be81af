"""Repository for gallery folders: directories under the upload root plus their config records."""

import logging
import re
import shutil
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, List, Optional, Union
from urllib.parse import quote

from ..exceptions import (
    FolderAlreadyExistsError,
    FolderNotFoundError,
    ImageNotFoundError,
    InvalidFolderNameError,
)
from ..models.folder_record import ConfigDocument, FolderRecord
from ..schemas.folder import FolderSummary
from .config_store import ConfigStore

logger = logging.getLogger(__name__)

IMAGE_EXTENSIONS = frozenset({".jpg", ".jpeg", ".png", ".gif", ".webp", ".svg"})

# Anything outside letters, digits, hyphen, underscore and whitespace.
_DISALLOWED_NAME_CHARS = re.compile(r"[^a-zA-Z0-9\-_\s]")


def sanitize_folder_name(name: str) -> str:
    """Strip disallowed characters, then surrounding whitespace. Idempotent."""
    return _DISALLOWED_NAME_CHARS.sub("", name).strip()


def is_image_file(filename: str) -> bool:
    return Path(filename).suffix.lower() in IMAGE_EXTENSIONS


class FolderRepository:
    """Data access layer for folders.

    The filesystem is the source of truth for which folders exist; the
    :class:`ConfigStore` document holds their active flag. Listing
    backfills config records for directories that have none.
    """

    def __init__(
        self,
        upload_root: Union[str, Path],
        store: ConfigStore,
        url_prefix: str = "/uploads",
    ):
        self.upload_root = Path(upload_root)
        self.store = store
        self.url_prefix = url_prefix.rstrip("/")

    def ensure_root(self) -> None:
        self.upload_root.mkdir(parents=True, exist_ok=True)

    def folder_path(self, name: str) -> Path:
        """Directory for *name*. Rejects anything that is not a single path component."""
        if (
            not name
            or name in (".", "..")
            or "/" in name
            or "\\" in name
            or "\x00" in name
        ):
            raise InvalidFolderNameError(name)
        return self.upload_root / name

    def image_url(self, folder: str, filename: str) -> str:
        return f"{self.url_prefix}/{quote(folder)}/{quote(filename)}"

    def image_file(self, folder: str, filename: str) -> Path:
        """Path of an existing image inside *folder*, for serving."""
        if not filename or filename in (".", "..") or "/" in filename or "\\" in filename:
            raise ImageNotFoundError(folder, filename)
        path = self.folder_path(folder) / filename
        if not is_image_file(filename) or not path.is_file():
            raise ImageNotFoundError(folder, filename)
        return path

    def folder_names(self) -> List[str]:
        """Names of every directory directly under the upload root."""
        if not self.upload_root.is_dir():
            return []
        return sorted(entry.name for entry in self.upload_root.iterdir() if entry.is_dir())

    def list(self, active_only: bool = False) -> List[FolderSummary]:
        names = self.folder_names()
        doc = self._backfill(names)

        summaries = []
        for name in names:
            record = doc.folders.get(name)
            active = bool(record and record.active)
            if active_only and not active:
                continue
            images = self._image_files(self.upload_root / name)
            summaries.append(FolderSummary(
                name=name,
                image_count=len(images),
                images=[self.image_url(name, f) for f in images],
                active=active,
            ))
        return summaries

    def create(self, raw_name: Optional[str]) -> FolderSummary:
        """Create an empty, inactive folder from a user-supplied name."""
        if raw_name is None or not raw_name.strip():
            raise InvalidFolderNameError(raw_name or "", "Folder name is required")

        name = sanitize_folder_name(raw_name)
        if not name:
            raise InvalidFolderNameError(raw_name)

        path = self.folder_path(name)
        self.ensure_root()
        try:
            path.mkdir()
        except FileExistsError:
            raise FolderAlreadyExistsError(name)

        with self.store.transaction() as doc:
            doc.folders[name] = FolderRecord(active=False, created_at=_now())

        logger.info(f"Folder created: {name}", extra={"folder": name})
        return FolderSummary(name=name, image_count=0, images=[], active=False)

    def delete(self, name: str) -> None:
        """Remove the folder directory with all its files, and its config record."""
        path = self.folder_path(name)
        if not path.is_dir():
            raise FolderNotFoundError(name)

        shutil.rmtree(path)
        with self.store.transaction() as doc:
            doc.folders.pop(name, None)

        logger.info(f"Folder deleted: {name}", extra={"folder": name})

    def prune_orphans(self) -> int:
        """Remove config records whose directory no longer exists."""
        existing = set(self.folder_names())
        with self.store.transaction() as doc:
            stale = [name for name in doc.folders if name not in existing]
            for name in stale:
                del doc.folders[name]

        if stale:
            logger.info(f"Pruned {len(stale)} stale folder record(s)", extra={"folders": stale})
        return len(stale)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _backfill(self, names: Iterable[str]) -> ConfigDocument:
        """Add inactive records for directories missing from the config."""
        doc = self.store.load()
        missing = [name for name in names if name not in doc.folders]
        if not missing:
            return doc

        with self.store.transaction() as doc:
            now = _now()
            for name in missing:
                doc.ensure(name, now)
        logger.debug("Backfilled folder records", extra={"folders": missing})
        return doc

    @staticmethod
    def _image_files(path: Path) -> List[str]:
        return sorted(
            entry.name for entry in path.iterdir()
            if entry.is_file() and is_image_file(entry.name)
        )


def _now() -> datetime:
    return datetime.now(timezone.utc)
