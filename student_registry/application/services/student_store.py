"""Application service owning the ordered student record list and its durable mirror.

The whole list lives under a single storage key as a JSON array. Every
mutation rewrites that key, so in-memory and persisted state never diverge
while storage is available.
"""

import json
import logging

from pydantic import TypeAdapter, ValidationError

from student_registry.application.interfaces import KeyValueStorage
from student_registry.application.schemas import PersistedStudentRecord
from student_registry.domain.entities import StudentRecord
from student_registry.domain.exceptions import PersistenceUnavailableError, RecordNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_KEY = "students"

_PERSISTED_LIST = TypeAdapter(list[PersistedStudentRecord])


class StudentStore:
    """Owns the in-memory record sequence. Depends on the storage port (DI).

    Positions handed out by this store are only valid until the next
    mutation; callers must re-read ``records`` after every change.
    """

    def __init__(self, storage: KeyValueStorage, key: str = DEFAULT_STORAGE_KEY):
        self._storage = storage
        self._key = key
        self._records: list[StudentRecord] = []
        self._persistence_warning: str | None = None

    # ── Lifecycle ───────────────────────────────────────────────────

    def init(self) -> None:
        """Load the persisted list into memory. Call once at startup."""
        self._records = self.load()
        logger.info("Student store initialised with %d record(s)", len(self._records))

    def load(self) -> list[StudentRecord]:
        """Read the persisted list, returning [] if it is missing or corrupt."""
        try:
            raw = self._storage.get_item(self._key)
        except PersistenceUnavailableError as exc:
            self._set_warning(f"Saved records could not be read ({exc.reason}).")
            return []
        if raw is None:
            return []

        try:
            persisted = _PERSISTED_LIST.validate_json(raw)
        except ValidationError as exc:
            logger.warning(
                "Ignoring unreadable data under storage key '%s': %d error(s)",
                self._key,
                exc.error_count(),
            )
            return []

        records = [item.to_entity() for item in persisted]
        if len({r.student_id for r in records}) != len(records):
            logger.warning(
                "Ignoring data under storage key '%s': duplicate student IDs", self._key
            )
            return []
        return records

    # ── Persistence ─────────────────────────────────────────────────

    def serialize(self) -> str:
        """Return the persisted representation of the current list."""
        return json.dumps(
            [record.to_persisted() for record in self._records],
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def save(self) -> bool:
        """Persist the full list, replacing any prior value.

        Returns False (and records a warning) if storage is unavailable; the
        in-memory list is kept either way.
        """
        try:
            self._storage.set_item(self._key, self.serialize())
        except PersistenceUnavailableError as exc:
            self._set_warning(f"Changes could not be saved and will be lost on restart ({exc.reason}).")
            return False
        self._persistence_warning = None
        return True

    @property
    def persistence_warning(self) -> str | None:
        """Message describing the last persistence failure, if storage is degraded."""
        return self._persistence_warning

    def _set_warning(self, message: str) -> None:
        logger.warning("Persistence unavailable for key '%s': %s", self._key, message)
        self._persistence_warning = message

    # ── Queries ─────────────────────────────────────────────────────

    @property
    def records(self) -> tuple[StudentRecord, ...]:
        return tuple(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def get(self, index: int) -> StudentRecord:
        self._check_index(index)
        return self._records[index]

    # ── Mutations ───────────────────────────────────────────────────

    def insert(self, record: StudentRecord) -> None:
        self._records.append(record)
        logger.info("Added student %s at position %d", record.student_id, len(self._records) - 1)
        self.save()

    def replace(self, index: int, record: StudentRecord) -> None:
        self._check_index(index)
        self._records[index] = record
        logger.info("Replaced student at position %d with %s", index, record.student_id)
        self.save()

    def remove_at(self, index: int) -> StudentRecord:
        self._check_index(index)
        removed = self._records.pop(index)
        logger.info("Removed student %s from position %d", removed.student_id, index)
        self.save()
        return removed

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self._records):
            raise RecordNotFoundError(index)
