"""Unit tests for the StudentStore — persistence, ordering and degraded mode."""

import json

import pytest

from student_registry.application.interfaces import KeyValueStorage
from student_registry.application.services import StudentStore
from student_registry.domain.entities import StudentRecord
from student_registry.domain.exceptions import PersistenceUnavailableError, RecordNotFoundError


class FakeKeyValueStorage(KeyValueStorage):
    """In-memory fake storage for unit testing."""

    def __init__(self, items: dict[str, str] | None = None):
        self.items: dict[str, str] = dict(items or {})
        self.writes = 0

    def get_item(self, key: str) -> str | None:
        return self.items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self.writes += 1
        self.items[key] = value

    def remove_item(self, key: str) -> None:
        self.items.pop(key, None)


class UnavailableStorage(KeyValueStorage):
    """Storage that fails every read and write."""

    def get_item(self, key: str) -> str | None:
        raise PersistenceUnavailableError("read", "disk gone")

    def set_item(self, key: str, value: str) -> None:
        raise PersistenceUnavailableError("write", "disk gone")

    def remove_item(self, key: str) -> None:
        raise PersistenceUnavailableError("write", "disk gone")


ANN = StudentRecord(name="Ann Lee", student_id="1001", email="a@b.com", contact="5551234567")
BOB = StudentRecord(name="Bob Ray", student_id="1002", email="bob@x.org", contact="5559876543")
CY = StudentRecord(name="Cy Young", student_id="1003", email="cy@y.net", contact="5550001111")


@pytest.fixture
def storage() -> FakeKeyValueStorage:
    return FakeKeyValueStorage()


@pytest.fixture
def store(storage: FakeKeyValueStorage) -> StudentStore:
    store = StudentStore(storage)
    store.init()
    return store


def test_insert_persists_under_students_key(store: StudentStore, storage: FakeKeyValueStorage):
    store.insert(ANN)

    assert store.records == (ANN,)
    assert json.loads(storage.items["students"]) == [
        {"name": "Ann Lee", "studentId": "1001", "email": "a@b.com", "contact": "5551234567"}
    ]


def test_round_trip_preserves_order(store: StudentStore, storage: FakeKeyValueStorage):
    for record in (CY, ANN, BOB):
        store.insert(record)

    reloaded = StudentStore(storage)
    assert reloaded.load() == [CY, ANN, BOB]


def test_save_is_idempotent(store: StudentStore, storage: FakeKeyValueStorage):
    store.insert(ANN)
    store.save()
    first = storage.items["students"]
    store.save()
    assert storage.items["students"] == first


def test_replace_keeps_position(store: StudentStore):
    store.insert(ANN)
    store.insert(BOB)
    updated = StudentRecord(name="Ann Marie", student_id="1001", email="a@b.com", contact="5551234567")

    store.replace(0, updated)

    assert store.records == (updated, BOB)


def test_remove_at_shifts_later_records(store: StudentStore, storage: FakeKeyValueStorage):
    for record in (ANN, BOB, CY):
        store.insert(record)

    removed = store.remove_at(1)

    assert removed == BOB
    assert store.records == (ANN, CY)
    assert StudentStore(storage).load() == [ANN, CY]


def test_every_mutation_writes(store: StudentStore, storage: FakeKeyValueStorage):
    store.insert(ANN)
    store.replace(0, ANN)
    store.remove_at(0)
    assert storage.writes == 3
    assert json.loads(storage.items["students"]) == []


@pytest.mark.parametrize("index", [-1, 1, 5])
def test_bad_position_raises(store: StudentStore, index: int):
    store.insert(ANN)
    with pytest.raises(RecordNotFoundError):
        store.get(index)
    with pytest.raises(RecordNotFoundError):
        store.remove_at(index)
    assert store.records == (ANN,)


@pytest.mark.parametrize(
    "raw",
    [
        "not json at all",
        "null",
        '{"name": "Ann"}',
        '[{"name": "Ann Lee", "studentId": "1001", "email": "a@b.com"}]',
        '[{"name": "Ann Lee", "studentId": 1001, "email": "a@b.com", "contact": "5551234567"}]',
        '[{"name": "", "studentId": "1001", "email": "a@b.com", "contact": "5551234567"}]',
        '[{"name": "A", "studentId": "1", "email": "a@b.com", "contact": "5551234567", "x": "y"}]',
    ],
)
def test_corrupt_data_loads_as_empty(raw: str):
    store = StudentStore(FakeKeyValueStorage({"students": raw}))
    store.init()
    assert store.records == ()
    assert store.persistence_warning is None


def test_duplicate_ids_in_persisted_data_load_as_empty():
    record = {"name": "Ann Lee", "studentId": "1001", "email": "a@b.com", "contact": "5551234567"}
    store = StudentStore(FakeKeyValueStorage({"students": json.dumps([record, record])}))
    assert store.load() == []


def test_missing_key_loads_as_empty(store: StudentStore):
    assert store.load() == []


def test_custom_storage_key(storage: FakeKeyValueStorage):
    store = StudentStore(storage, key="registry")
    store.insert(ANN)
    assert "registry" in storage.items
    assert "students" not in storage.items


def test_unavailable_storage_degrades_without_raising():
    store = StudentStore(UnavailableStorage())
    store.init()
    assert store.records == ()
    assert store.persistence_warning is not None

    store.insert(ANN)

    assert store.records == (ANN,)
    assert "could not be saved" in store.persistence_warning


def test_successful_save_clears_warning(storage: FakeKeyValueStorage, monkeypatch):
    store = StudentStore(storage)
    monkeypatch.setattr(storage, "set_item", UnavailableStorage().set_item)
    store.insert(ANN)
    assert store.persistence_warning

    monkeypatch.undo()
    assert store.save() is True
    assert store.persistence_warning is None
    assert json.loads(storage.items["students"])[0]["studentId"] == "1001"
