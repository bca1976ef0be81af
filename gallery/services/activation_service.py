"""Folder activation: keeps at most one folder visible to users at a time."""

import logging
from datetime import datetime, timezone

from ..repositories.config_store import ConfigStore
from ..schemas.folder import CurrentActiveResponse, ToggleResult

logger = logging.getLogger(__name__)


class ActivationService:
    """Flips a folder's active flag while enforcing a single active folder.

    Activating a folder deactivates every other folder in the same
    read-modify-write, which runs under the store's lock. Deactivating
    touches only the target record.
    """

    def __init__(self, store: ConfigStore):
        self.store = store

    def toggle(self, folder_name: str) -> ToggleResult:
        now = datetime.now(timezone.utc)

        with self.store.transaction() as doc:
            record = doc.ensure(folder_name, now)
            logger.debug(
                f"Toggle request for {folder_name}, current status: {record.active}",
                extra={"folder": folder_name, "active": record.active},
            )

            if record.active:
                record.active = False
                record.deactivated_at = now
                activating = False
                previous = None
            else:
                active_names = doc.active_names()
                previous = active_names[0] if active_names else None

                for name, other in doc.folders.items():
                    other.active = False
                    if name != folder_name:
                        other.deactivated_at = now

                record.active = True
                record.activated_at = now
                activating = True

        if not activating:
            logger.info(f"Folder deactivated: {folder_name}", extra={"folder": folder_name})
            return ToggleResult(
                message=f'Folder "{folder_name}" deactivated successfully',
                folder_name=folder_name,
                active=False,
            )

        # Recount from what was persisted rather than from the in-memory copy.
        total_active = len(self.store.load().active_names())
        logger.info(
            f"Folder activated: {folder_name}",
            extra={"folder": folder_name, "previous_active": previous, "active_count": total_active},
        )

        if previous:
            message = f'Folder "{folder_name}" activated. "{previous}" has been deactivated.'
        else:
            message = f'Folder "{folder_name}" activated successfully.'

        return ToggleResult(
            message=message,
            folder_name=folder_name,
            active=True,
            previous_active=previous,
            total_active_folders=total_active,
        )

    def current_active(self) -> CurrentActiveResponse:
        """Snapshot of which folders are active, plus every folder record."""
        doc = self.store.load()
        active = doc.active_names()
        return CurrentActiveResponse(
            active_folders=active,
            active_folder=active[0] if active else None,
            active_count=len(active),
            all_folders=doc.folders,
            timestamp=datetime.now(timezone.utc),
        )
