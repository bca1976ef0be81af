"""Unit tests for ActivationService: the single-active-folder toggle."""

from gallery.models.folder_record import FolderRecord


def _active(store) -> list:
    return store.load().active_names()


class TestToggleActivate:

    def test_activating_inactive_folder(self, activation, store):
        with store.transaction() as doc:
            doc.folders["a"] = FolderRecord()

        result = activation.toggle("a")

        assert result.active is True
        assert result.previous_active is None
        assert result.total_active_folders == 1
        assert result.message == 'Folder "a" activated successfully.'
        record = store.load().folders["a"]
        assert record.active is True
        assert record.activated_at is not None

    def test_activating_b_deactivates_a(self, activation, store):
        with store.transaction() as doc:
            doc.folders["a"] = FolderRecord()
            doc.folders["b"] = FolderRecord()
        activation.toggle("a")

        result = activation.toggle("b")

        assert result.previous_active == "a"
        assert result.total_active_folders == 1
        assert result.message == 'Folder "b" activated. "a" has been deactivated.'
        assert _active(store) == ["b"]
        folders = store.load().folders
        assert folders["a"].active is False
        assert folders["a"].deactivated_at is not None

    def test_activation_repairs_multiple_active(self, activation, store):
        with store.transaction() as doc:
            doc.folders["x"] = FolderRecord(active=True)
            doc.folders["y"] = FolderRecord(active=True)
            doc.folders["z"] = FolderRecord()

        result = activation.toggle("z")

        assert result.previous_active == "x"
        assert _active(store) == ["z"]

    def test_stamps_deactivated_on_every_other_record(self, activation, store):
        with store.transaction() as doc:
            doc.folders["a"] = FolderRecord()
            doc.folders["b"] = FolderRecord()
            doc.folders["c"] = FolderRecord()

        activation.toggle("b")

        folders = store.load().folders
        assert folders["a"].deactivated_at is not None
        assert folders["c"].deactivated_at is not None
        assert folders["b"].deactivated_at is None

    def test_unknown_folder_gets_record_and_activates(self, activation, store):
        result = activation.toggle("fresh")

        assert result.active is True
        record = store.load().folders["fresh"]
        assert record.active is True
        assert record.created_at is not None


class TestToggleDeactivate:

    def test_toggling_active_folder_leaves_none_active(self, activation, store):
        activation.toggle("only")

        result = activation.toggle("only")

        assert result.active is False
        assert result.message == 'Folder "only" deactivated successfully'
        assert result.previous_active is None
        assert result.total_active_folders is None
        assert _active(store) == []
        assert store.load().folders["only"].deactivated_at is not None

    def test_deactivation_touches_only_target(self, activation, store):
        with store.transaction() as doc:
            doc.folders["a"] = FolderRecord(active=True)
            doc.folders["b"] = FolderRecord()

        activation.toggle("a")

        assert store.load().folders["b"].deactivated_at is None

    def test_toggle_twice_round_trips_state(self, activation, store):
        activation.toggle("p")
        activation.toggle("p")
        activation.toggle("p")
        assert _active(store) == ["p"]


class TestCurrentActive:

    def test_reports_no_active(self, activation, store):
        with store.transaction() as doc:
            doc.folders["a"] = FolderRecord()

        current = activation.current_active()

        assert current.active_folders == []
        assert current.active_folder is None
        assert current.active_count == 0
        assert set(current.all_folders) == {"a"}

    def test_reports_active_folder(self, activation):
        activation.toggle("a")
        activation.toggle("b")

        current = activation.current_active()

        assert current.active_folder == "b"
        assert current.active_folders == ["b"]
        assert current.active_count == 1
