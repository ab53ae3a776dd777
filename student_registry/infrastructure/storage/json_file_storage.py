"""Local filesystem key-value storage — a single JSON file of string values.

Storage layout:
    <storage_file>   — JSON object mapping each key to its serialized string value

The file is rewritten whole on every change through a temporary sibling file
and ``os.replace`` so a crash mid-write never leaves a truncated file behind.
"""

import json
import logging
import os
import tempfile
from pathlib import Path

from student_registry.application.interfaces import KeyValueStorage
from student_registry.domain.exceptions import PersistenceUnavailableError

logger = logging.getLogger(__name__)


class JsonFileKeyValueStorage(KeyValueStorage):
    """Infrastructure adapter for key-value storage in one local JSON file."""

    def __init__(self, path: str | Path):
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    # ── KeyValueStorage ─────────────────────────────────────────────

    def get_item(self, key: str) -> str | None:
        value = self._read_all().get(key)
        return value if isinstance(value, str) else None

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)
        logger.debug("Stored key '%s' (%d chars) in %s", key, len(value), self._path)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)
            logger.debug("Removed key '%s' from %s", key, self._path)

    # ── File access ─────────────────────────────────────────────────

    def _read_all(self) -> dict[str, object]:
        """Read the whole file, returning {} if it is missing or not a JSON object."""
        try:
            raw = self._path.read_bytes()
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise PersistenceUnavailableError("read", str(exc)) from exc
        try:
            data = json.loads(raw.decode("utf-8"))
        except ValueError:
            logger.warning("Could not parse %s — treating it as empty", self._path)
            return {}
        if not isinstance(data, dict):
            logger.warning("%s does not hold a JSON object — treating it as empty", self._path)
            return {}
        return data

    def _write_all(self, items: dict[str, object]) -> None:
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
            )
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                    json.dump(items, tmp, indent=2, ensure_ascii=False)
                os.replace(tmp_name, self._path)
            finally:
                Path(tmp_name).unlink(missing_ok=True)
        except OSError as exc:
            raise PersistenceUnavailableError("write", str(exc)) from exc
