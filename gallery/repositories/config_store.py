"""JSON-backed store for the folder state document."""

import json
import logging
import os
import tempfile
import threading
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Union

from pydantic import ValidationError as PydanticValidationError

from ..models.folder_record import ConfigDocument

logger = logging.getLogger(__name__)


class ConfigStore:
    """Reads and rewrites the single folder-state document.

    ``load`` never raises: a missing, unreadable or malformed file is
    treated as an empty document. ``save`` writes a temp file next to the
    target and renames it into place, so readers only ever see a complete
    document.

    Mutations go through :meth:`transaction`, which serializes the
    read-modify-write span with a lock shared by every store instance
    pointing at the same file.
    """

    _locks: dict = {}
    _locks_guard = threading.Lock()

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        with self._locks_guard:
            key = str(self.path.resolve())
            self._lock = self._locks.setdefault(key, threading.RLock())

    def ensure_exists(self) -> None:
        """Write an empty document if none exists yet."""
        if not self.path.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.save(ConfigDocument())
            logger.info("Created folder config", extra={"config_path": str(self.path)})

    def load(self) -> ConfigDocument:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return ConfigDocument()
        except OSError as e:
            logger.warning(f"Folder config unreadable, using empty document: {e}")
            return ConfigDocument()

        try:
            return ConfigDocument.model_validate(json.loads(raw))
        except (ValueError, PydanticValidationError) as e:
            # json.JSONDecodeError is a ValueError subclass
            logger.warning(f"Folder config malformed, using empty document: {e}")
            return ConfigDocument()

    def save(self, doc: ConfigDocument) -> None:
        payload = json.dumps(doc.to_json_dict(), indent=2)
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @contextmanager
    def transaction(self) -> Iterator[ConfigDocument]:
        """Hold the store lock, yield the current document, save on clean exit."""
        with self._lock:
            doc = self.load()
            yield doc
            self.save(doc)
