"""Tests for ConfigStore: load fails open, save replaces the whole document."""

import json
import threading
from datetime import datetime, timezone

from gallery.models.folder_record import ConfigDocument, FolderRecord
from gallery.repositories.config_store import ConfigStore


class TestLoad:

    def test_missing_file_is_empty_document(self, tmp_path):
        store = ConfigStore(tmp_path / "absent.json")
        assert store.load().folders == {}

    def test_unparsable_file_is_empty_document(self, tmp_path):
        path = tmp_path / "folders.json"
        path.write_text("{not json", encoding="utf-8")
        assert ConfigStore(path).load().folders == {}

    def test_wrong_shape_is_empty_document(self, tmp_path):
        path = tmp_path / "folders.json"
        path.write_text(json.dumps({"folders": ["a", "b"]}), encoding="utf-8")
        assert ConfigStore(path).load().folders == {}

    def test_reads_camel_case_records(self, tmp_path):
        path = tmp_path / "folders.json"
        path.write_text(json.dumps({
            "folders": {
                "vacation": {"active": True, "createdAt": "2024-05-01T10:00:00+00:00"},
                "work": {"active": False},
            }
        }), encoding="utf-8")

        doc = ConfigStore(path).load()
        assert doc.folders["vacation"].active is True
        assert doc.folders["vacation"].created_at.year == 2024
        assert doc.folders["work"].active is False
        assert doc.folders["work"].created_at is None


class TestSave:

    def test_round_trip_uses_original_layout(self, store):
        now = datetime(2024, 5, 1, tzinfo=timezone.utc)
        store.save(ConfigDocument(folders={"a": FolderRecord(active=True, created_at=now)}))

        raw = json.loads(store.path.read_text(encoding="utf-8"))
        assert raw == {"folders": {"a": {"active": True, "createdAt": "2024-05-01T00:00:00Z"}}}

    def test_save_leaves_no_temp_files(self, store):
        store.save(ConfigDocument())
        store.save(ConfigDocument())
        assert [p.name for p in store.path.parent.iterdir()] == ["folders.json"]

    def test_ensure_exists_writes_empty_document_once(self, store):
        store.ensure_exists()
        assert json.loads(store.path.read_text(encoding="utf-8")) == {"folders": {}}

        store.save(ConfigDocument(folders={"kept": FolderRecord()}))
        store.ensure_exists()
        assert "kept" in store.load().folders


class TestTransaction:

    def test_changes_are_persisted(self, store):
        with store.transaction() as doc:
            doc.folders["new"] = FolderRecord(active=False)
        assert "new" in store.load().folders

    def test_exception_discards_changes(self, store):
        try:
            with store.transaction() as doc:
                doc.folders["lost"] = FolderRecord()
                raise RuntimeError("boom")
        except RuntimeError:
            pass
        assert "lost" not in store.load().folders

    def test_concurrent_transactions_do_not_lose_updates(self, tmp_path):
        path = tmp_path / "folders.json"

        def add(i: int) -> None:
            # Separate instances on the same file share one lock.
            with ConfigStore(path).transaction() as doc:
                doc.folders[f"f{i}"] = FolderRecord()

        threads = [threading.Thread(target=add, args=(i,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(ConfigStore(path).load().folders) == 20
