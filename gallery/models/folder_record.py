"""Persisted folder state: the JSON document kept beside the upload tree."""

from datetime import datetime
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class FolderRecord(BaseModel):
    """Active flag and last-transition audit stamps for one folder."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    active: bool = False
    created_at: Optional[datetime] = None
    activated_at: Optional[datetime] = None
    deactivated_at: Optional[datetime] = None


class ConfigDocument(BaseModel):
    """Mapping of folder name to :class:`FolderRecord`.

    Stored on disk as ``{"folders": {name: record}}`` and always rewritten
    in full.
    """

    folders: Dict[str, FolderRecord] = {}

    def active_names(self) -> List[str]:
        return [name for name, record in self.folders.items() if record.active]

    def ensure(self, name: str, now: datetime) -> FolderRecord:
        """Return the record for *name*, creating an inactive one if missing."""
        record = self.folders.get(name)
        if record is None:
            record = FolderRecord(active=False, created_at=now)
            self.folders[name] = record
        return record

    def to_json_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
