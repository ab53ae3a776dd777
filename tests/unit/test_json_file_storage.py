"""Unit tests for the JSON-file key-value storage adapter."""

import json
from pathlib import Path

import pytest

from student_registry.application.services import StudentStore
from student_registry.domain.entities import StudentRecord
from student_registry.domain.exceptions import PersistenceUnavailableError
from student_registry.infrastructure.storage.json_file_storage import JsonFileKeyValueStorage


@pytest.fixture
def storage(tmp_path: Path) -> JsonFileKeyValueStorage:
    return JsonFileKeyValueStorage(tmp_path / "data" / "local_storage.json")


def test_missing_file_reads_as_absent(storage: JsonFileKeyValueStorage):
    assert storage.get_item("students") is None
    assert not storage.path.exists()


def test_set_item_creates_file_and_parent(storage: JsonFileKeyValueStorage):
    storage.set_item("students", "[]")

    assert json.loads(storage.path.read_text("utf-8")) == {"students": "[]"}
    assert storage.get_item("students") == "[]"


def test_keys_are_independent(storage: JsonFileKeyValueStorage):
    storage.set_item("students", "[1]")
    storage.set_item("theme", "dark")
    storage.remove_item("theme")
    storage.remove_item("never-set")

    assert storage.get_item("students") == "[1]"
    assert storage.get_item("theme") is None


def test_no_temp_files_left_behind(storage: JsonFileKeyValueStorage):
    storage.set_item("students", "[]")
    storage.set_item("students", "[]")
    assert [p.name for p in storage.path.parent.iterdir()] == ["local_storage.json"]


def test_corrupt_file_reads_as_empty(storage: JsonFileKeyValueStorage):
    storage.path.parent.mkdir(parents=True)
    storage.path.write_text("{ not json", encoding="utf-8")

    assert storage.get_item("students") is None
    storage.set_item("students", "[]")
    assert storage.get_item("students") == "[]"


def test_non_string_value_reads_as_absent(storage: JsonFileKeyValueStorage):
    storage.path.parent.mkdir(parents=True)
    storage.path.write_text(json.dumps({"students": [1, 2]}), encoding="utf-8")
    assert storage.get_item("students") is None


def test_unwritable_location_raises_persistence_error(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    storage = JsonFileKeyValueStorage(blocker / "local_storage.json")

    with pytest.raises(PersistenceUnavailableError):
        storage.set_item("students", "[]")


def test_store_survives_restart(storage: JsonFileKeyValueStorage):
    record = StudentRecord(name="Ann Lee", student_id="1001", email="a@b.com", contact="5551234567")
    store = StudentStore(storage)
    store.init()
    store.insert(record)

    restarted = StudentStore(JsonFileKeyValueStorage(storage.path))
    restarted.init()

    assert restarted.records == (record,)


def test_store_treats_non_json_value_as_empty(storage: JsonFileKeyValueStorage):
    storage.set_item("students", "definitely not json")
    store = StudentStore(storage)
    store.init()
    assert store.records == ()


def test_overlong_path_component_degrades_store(tmp_path: Path):
    storage = JsonFileKeyValueStorage(tmp_path / ("x" * 300) / "local_storage.json")
    with pytest.raises(PersistenceUnavailableError):
        storage.get_item("students")

    store = StudentStore(storage)
    store.init()
    assert store.records == ()
    assert store.persistence_warning is not None

    record = StudentRecord(name="Ann Lee", student_id="1001", email="a@b.com", contact="5551234567")
    store.insert(record)
    assert store.records == (record,)
    assert "could not be saved" in store.persistence_warning
