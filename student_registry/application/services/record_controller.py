"""Application service (use case) driving the student record form.

The controller owns the add/edit state machine:

    IDLE    --submit_add-->   IDLE      (store.insert)
    IDLE    --start_edit(i)-> EDITING(i)
    EDITING --start_edit(j)-> EDITING(j)
    EDITING --commit_edit-->  IDLE      (store.replace)
    EDITING --cancel_edit-->  IDLE
    any     --delete(i)-->    same state, target adjusted or cleared

Guarded transitions validate first and only then touch the store, so a
rejected transition leaves both the store and the session unchanged.
"""

import logging
from collections.abc import Sequence

from student_registry.application.interfaces import RecordPresenter
from student_registry.application.schemas import StudentForm
from student_registry.application.services.student_store import StudentStore
from student_registry.application.services.student_validator import validate_student
from student_registry.domain.entities import EditSession, EditState, StudentRecord
from student_registry.domain.exceptions import EditSessionActiveError, NoActiveEditSessionError

logger = logging.getLogger(__name__)

DELETE_PROMPT = "Delete this record?"


class _SilentPresenter(RecordPresenter):
    """Presenter used when none is wired: confirms everything, shows nothing."""

    def confirm(self, prompt: str) -> bool:
        return True

    def render(self, records: Sequence[StudentRecord]) -> None:
        pass

    def warn(self, message: str) -> None:
        pass


class RecordController:
    """Orchestrates validation, store mutations and rendering for user actions."""

    def __init__(
        self,
        store: StudentStore,
        session: EditSession | None = None,
        presenter: RecordPresenter | None = None,
    ):
        self._store = store
        self._session = session if session is not None else EditSession()
        self._presenter = presenter or _SilentPresenter()

    @property
    def state(self) -> EditState:
        return self._session.state

    @property
    def edit_target(self) -> int | None:
        return self._session.target

    def records(self) -> tuple[StudentRecord, ...]:
        return self._store.records

    def refresh(self) -> None:
        """Render the current list without changing anything."""
        self._presenter.render(self._store.records)
        self._report_persistence()

    # ── Transitions ─────────────────────────────────────────────────

    def submit_add(self, form: StudentForm) -> StudentRecord:
        """Validate the form as a new record and append it."""
        if self._session.is_active:
            raise EditSessionActiveError(self._session.target)

        candidate = form.to_candidate()
        validate_student(candidate, self._store.records, edit_target=None)
        self._store.insert(candidate)
        self._after_mutation()
        return candidate

    def start_edit(self, index: int) -> StudentRecord:
        """Open the record at ``index`` for editing and return it for the form."""
        record = self._store.get(index)
        self._session.begin(index)
        logger.debug("Editing record at position %d", index)
        return record

    def commit_edit(self, form: StudentForm) -> StudentRecord:
        """Validate the form against the edited record and replace it in place."""
        target = self._session.target
        if target is None:
            raise NoActiveEditSessionError()

        candidate = form.to_candidate()
        validate_student(candidate, self._store.records, edit_target=target)
        self._store.replace(target, candidate)
        self._session.end()
        self._after_mutation()
        return candidate

    def cancel_edit(self) -> None:
        """Discard the edit in progress, if any."""
        if self._session.is_active:
            logger.debug("Cancelled edit of position %d", self._session.target)
        self._session.end()

    def delete(self, index: int) -> bool:
        """Delete the record at ``index`` once the user confirms.

        Returns False if the user declined. Deleting the record being edited
        ends the edit session; deleting an earlier record moves the edit
        target down with the record it points at.
        """
        self._store.get(index)
        if not self._presenter.confirm(DELETE_PROMPT):
            logger.debug("Delete of position %d not confirmed", index)
            return False

        self._store.remove_at(index)
        self._session.record_removed(index)
        self._after_mutation()
        return True

    # ── Helpers ─────────────────────────────────────────────────────

    def _after_mutation(self) -> None:
        self._presenter.render(self._store.records)
        self._report_persistence()

    def _report_persistence(self) -> None:
        warning = self._store.persistence_warning
        if warning:
            self._presenter.warn(warning)
