"""Image upload: validation of multipart file parts and storage into folder directories."""

import logging
import re
import shutil
import time
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, List, Optional, Sequence

from ..exceptions import (
    FileTooLargeError,
    NoFilesError,
    TooManyFilesError,
    UnsupportedFileTypeError,
)
from ..repositories.folder_repository import FolderRepository, is_image_file
from ..schemas.upload import StoredFile

logger = logging.getLogger(__name__)

DEFAULT_FOLDER = "default"
DEFAULT_MAX_FILES = 10
DEFAULT_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10 MiB

# Matched against the declared content type, e.g. "image/svg+xml".
_ALLOWED_CONTENT_TYPES = re.compile(r"jpeg|jpg|png|gif|webp|svg")

# Upper bound on suffix bumps when a stored name is already taken.
_MAX_NAME_ATTEMPTS = 1000


@dataclass
class FilePart:
    """One uploaded file as received from the client."""
    filename: str
    content_type: Optional[str]
    stream: BinaryIO


def resolve_folder_name(folder_name: Optional[str]) -> str:
    """Uploads without a folder name land in ``default``."""
    return (folder_name or "").strip() or DEFAULT_FOLDER


def stored_filename(original_name: str, millis: int) -> str:
    """``{stem}_{millis}{ext}`` built from the client's file name."""
    base = Path(original_name.replace("\\", "/")).name
    suffix = Path(base).suffix
    stem = base[: len(base) - len(suffix)] if suffix else base
    return f"{stem}_{millis}{suffix}"


class UploadService:
    """Validates a batch of file parts and writes them into one folder.

    Every part is checked (count, type, size) before anything touches the
    disk, so a rejected batch stores nothing. The destination directory is
    created on demand; its config record is backfilled by the next listing.
    """

    def __init__(
        self,
        folders: FolderRepository,
        max_files: int = DEFAULT_MAX_FILES,
        max_file_size: int = DEFAULT_MAX_FILE_SIZE,
    ):
        self.folders = folders
        self.max_files = max_files
        self.max_file_size = max_file_size

    def upload(self, folder_name: Optional[str], files: Sequence[FilePart]) -> List[StoredFile]:
        folder = resolve_folder_name(folder_name)
        target_dir = self.folders.folder_path(folder)

        sizes = self._validate(files)

        target_dir.mkdir(parents=True, exist_ok=True)
        stored: List[StoredFile] = []
        written: List[Path] = []
        try:
            for part, size in zip(files, sizes):
                path = self._write(target_dir, part)
                written.append(path)
                stored.append(StoredFile(
                    original_name=part.filename,
                    filename=path.name,
                    path=self.folders.image_url(folder, path.name),
                    size=size,
                ))
        except OSError:
            logger.exception(f"Upload to {folder} failed, removing {len(written)} partial file(s)")
            for path in written:
                path.unlink(missing_ok=True)
            raise

        logger.info(
            f"Uploaded {len(stored)} file(s) to {folder}",
            extra={"folder": folder, "files": [s.filename for s in stored]},
        )
        return stored

    def check_type(self, part: FilePart) -> bool:
        """Extension and declared content type must both name an image type."""
        content_type = (part.content_type or "").lower()
        return is_image_file(part.filename) and bool(_ALLOWED_CONTENT_TYPES.search(content_type))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _validate(self, files: Sequence[FilePart]) -> List[int]:
        if not files:
            raise NoFilesError()
        if len(files) > self.max_files:
            raise TooManyFilesError(len(files), self.max_files)

        sizes = []
        for part in files:
            if not self.check_type(part):
                raise UnsupportedFileTypeError(part.filename, part.content_type)
            size = _stream_size(part.stream)
            if size > self.max_file_size:
                raise FileTooLargeError(part.filename, size, self.max_file_size)
            sizes.append(size)
        return sizes

    def _write(self, target_dir: Path, part: FilePart) -> Path:
        millis = time.time_ns() // 1_000_000
        for _ in range(_MAX_NAME_ATTEMPTS):
            path = target_dir / stored_filename(part.filename, millis)
            try:
                fh = open(path, "xb")
            except FileExistsError:
                millis += 1
                continue
            with fh:
                part.stream.seek(0)
                shutil.copyfileobj(part.stream, fh)
            return path
        raise FileExistsError(f"No free file name for {part.filename} in {target_dir}")


def _stream_size(stream: BinaryIO) -> int:
    stream.seek(0, 2)
    size = stream.tell()
    stream.seek(0)
    return size
