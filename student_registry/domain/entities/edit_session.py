"""Domain entity for the edit session — which record, if any, is being edited."""

from dataclasses import dataclass
from enum import Enum


class EditState(str, Enum):
    """States of the record form."""

    IDLE = "idle"
    EDITING = "editing"


@dataclass
class EditSession:
    """Transient edit state. Never persisted.

    ``target`` is the position of the record being edited. Positions shift
    when records are deleted, so the session must be told about every
    removal through ``record_removed``.
    """

    target: int | None = None

    @property
    def state(self) -> EditState:
        return EditState.IDLE if self.target is None else EditState.EDITING

    @property
    def is_active(self) -> bool:
        return self.target is not None

    def begin(self, index: int) -> None:
        """Transition to editing the record at ``index``."""
        self.target = index

    def end(self) -> None:
        """Transition back to idle."""
        self.target = None

    def record_removed(self, index: int) -> None:
        """Keep the target consistent after the record at ``index`` was deleted.

        Deleting the target itself ends the session; deleting an earlier
        record shifts the target down so it still names the same record.
        """
        if self.target is None:
            return
        if index == self.target:
            self.end()
        elif index < self.target:
            self.target -= 1
