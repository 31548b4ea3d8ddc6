import json
import threading
from datetime import datetime, timezone

import pytest

from sellin.config import Settings
from sellin.models.store import StoreRecord, is_valid_identifier, normalize_identifier
from sellin.stores import (
    BaseStoreRegistry,
    InMemoryStoreRegistry,
    InvalidIdentifierError,
    JsonFileStoreRegistry,
    StorageFailureError,
    StoreConflictError,
    StoreNotFoundError,
    build_store_registry,
)


@pytest.fixture(params=["memory", "file"])
def any_registry(request, tmp_path) -> BaseStoreRegistry:
    if request.param == "file":
        return JsonFileStoreRegistry(tmp_path / "stores.json")
    return InMemoryStoreRegistry()


class TestIdentifierRule:

    @pytest.mark.parametrize("identifier", ["abc", "acme", "my-store", "store-42", "a1b", "a" * 50])
    def test_valid(self, identifier):
        assert is_valid_identifier(identifier)

    @pytest.mark.parametrize("identifier", [
        "", "ab", "a" * 51, "-abc", "abc-", "-", "my_store", "my store", "café", "Acme", "a.b.c",
    ])
    def test_invalid(self, identifier):
        assert not is_valid_identifier(identifier)

    def test_normalize(self):
        assert normalize_identifier("  ACME-Shop ") == "acme-shop"
        assert normalize_identifier(None) == ""


class TestStoreRegistry:

    def test_create_returns_active_record(self, any_registry: BaseStoreRegistry):
        record = any_registry.create("acme")
        assert record.name == "acme"
        assert record.status == "active"
        assert record.subdomain == "acme"
        assert record.assets_path == "/stores/acme/assets"
        assert record.created_at.tzinfo is not None

    def test_created_store_is_retrievable_unchanged(self, any_registry: BaseStoreRegistry):
        created = any_registry.create("my-store-1")
        assert any_registry.get("my-store-1") == created

    def test_create_normalizes_name(self, any_registry: BaseStoreRegistry):
        record = any_registry.create("  ACME ")
        assert record.name == "acme"
        assert any_registry.get("Acme").name == "acme"

    def test_too_short_name_is_rejected(self, any_registry: BaseStoreRegistry):
        with pytest.raises(InvalidIdentifierError):
            any_registry.create("ab")
        assert any_registry.list() == []

    def test_hyphen_edges_are_rejected(self, any_registry: BaseStoreRegistry):
        with pytest.raises(InvalidIdentifierError):
            any_registry.create("-acme")
        with pytest.raises(InvalidIdentifierError):
            any_registry.create("acme-")

    def test_duplicate_is_a_conflict(self, any_registry: BaseStoreRegistry):
        first = any_registry.create("acme")
        with pytest.raises(StoreConflictError):
            any_registry.create("acme")
        with pytest.raises(StoreConflictError):
            any_registry.create("ACME")
        assert any_registry.get("acme") == first

    def test_missing_store_is_not_found(self, any_registry: BaseStoreRegistry):
        with pytest.raises(StoreNotFoundError):
            any_registry.get("nonexistent")
        assert not any_registry.exists("nonexistent")

    def test_list_keeps_creation_order(self, any_registry: BaseStoreRegistry):
        for name in ["zeta", "alpha", "mid-store"]:
            any_registry.create(name)
        assert any_registry.list() == ["zeta", "alpha", "mid-store"]
        assert [r.name for r in any_registry.records()] == ["zeta", "alpha", "mid-store"]
        assert any_registry.count() == 3

    def test_concurrent_creates_of_same_name(self, any_registry: BaseStoreRegistry):
        outcomes = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            try:
                any_registry.create("race")
                outcomes.append("created")
            except StoreConflictError:
                outcomes.append("conflict")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert outcomes.count("created") == 1
        assert outcomes.count("conflict") == 7
        assert any_registry.list() == ["race"]


class TestJsonFileStoreRegistry:

    def test_missing_file_is_empty(self, file_registry: JsonFileStoreRegistry):
        assert not file_registry.path.exists()
        assert file_registry.list() == []

    def test_records_survive_a_new_instance(self, file_registry: JsonFileStoreRegistry):
        created = file_registry.create("acme")
        reopened = JsonFileStoreRegistry(file_registry.path)
        assert reopened.get("acme") == created
        assert reopened.list() == ["acme"]

    def test_file_layout_is_a_mapping_by_name(self, file_registry: JsonFileStoreRegistry):
        created_at = datetime(2025, 1, 5, 12, 0, tzinfo=timezone.utc)
        file_registry.create("acme", created_at=created_at)
        data = json.loads(file_registry.path.read_text())
        assert data == {
            "acme": {
                "name": "acme",
                "createdAt": "2025-01-05T12:00:00Z",
                "status": "active",
                "subdomain": "acme",
                "assetsPath": "/stores/acme/assets",
            }
        }

    def test_no_temporary_files_left_behind(self, file_registry: JsonFileStoreRegistry):
        file_registry.create("acme")
        file_registry.create("demo")
        assert [p.name for p in file_registry.path.parent.iterdir()] == ["stores.json"]

    def test_corrupt_file_is_a_storage_failure(self, file_registry: JsonFileStoreRegistry):
        file_registry.path.parent.mkdir(parents=True, exist_ok=True)
        file_registry.path.write_text("{not json")
        with pytest.raises(StorageFailureError):
            file_registry.list()
        with pytest.raises(StorageFailureError):
            file_registry.create("acme")

    def test_wrong_shape_is_a_storage_failure(self, file_registry: JsonFileStoreRegistry):
        file_registry.path.parent.mkdir(parents=True, exist_ok=True)
        file_registry.path.write_text("[]")
        with pytest.raises(StorageFailureError):
            file_registry.get("acme")

    def test_empty_file_is_empty(self, file_registry: JsonFileStoreRegistry):
        file_registry.path.parent.mkdir(parents=True, exist_ok=True)
        file_registry.path.write_text("")
        assert file_registry.list() == []

    def test_unwritable_location_is_a_storage_failure(self, tmp_path):
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        registry = JsonFileStoreRegistry(blocker / "stores.json")

        assert registry.list() == []
        with pytest.raises(StorageFailureError):
            registry.create("acme")
        assert sorted(p.name for p in tmp_path.iterdir()) == ["not-a-dir"]

    def test_failed_swap_removes_temporary_file(self, file_registry: JsonFileStoreRegistry, monkeypatch):
        existing = file_registry.create("demo")

        def fail_replace(src, dst):
            raise OSError("device busy")

        monkeypatch.setattr("sellin.stores.json_file.os.replace", fail_replace)
        with pytest.raises(StorageFailureError):
            file_registry.create("acme")
        monkeypatch.undo()

        assert [p.name for p in file_registry.path.parent.iterdir()] == ["stores.json"]
        assert file_registry.list() == ["demo"]
        assert file_registry.get("demo") == existing


def test_build_store_registry_follows_settings(tmp_path):
    memory = build_store_registry(Settings(_env_file=None, storage_backend="memory"))
    assert isinstance(memory, InMemoryStoreRegistry)

    path = tmp_path / "stores.json"
    on_disk = build_store_registry(Settings(_env_file=None, storage_backend="file", storage_path=str(path)))
    assert isinstance(on_disk, JsonFileStoreRegistry)
    assert on_disk.path == path


def test_record_wire_format():
    record = StoreRecord.new("acme", datetime(2025, 1, 5, tzinfo=timezone.utc))
    assert record.to_wire()["createdAt"] == "2025-01-05T00:00:00Z"
    assert StoreRecord(**record.to_wire()) == record
