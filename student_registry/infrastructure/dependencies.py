"""FastAPI dependency injection — wires infrastructure to application layer.

The store and the edit session are process-wide: there is one record list
and at most one edit in progress. A RecordController is built per request
around them, bound to that request's presenter.
"""

from functools import lru_cache

from fastapi import Depends, Query

from student_registry.application.services import RecordController, StudentStore
from student_registry.config import get_settings
from student_registry.domain.entities import EditSession
from student_registry.infrastructure.storage.json_file_storage import JsonFileKeyValueStorage
from student_registry.presentation.api.v1.record_presenter import ApiRecordPresenter


@lru_cache
def get_student_store() -> StudentStore:
    """Single StudentStore, loaded from disk on first use."""
    settings = get_settings()
    store = StudentStore(
        JsonFileKeyValueStorage(settings.storage_file),
        key=settings.storage_key,
    )
    store.init()
    return store


@lru_cache
def get_edit_session() -> EditSession:
    """Single edit session shared by every request."""
    return EditSession()


def get_record_presenter(
    confirm: bool = Query(False, description="Confirm a destructive action"),
) -> ApiRecordPresenter:
    """Provides a presenter that answers confirmation prompts from the request."""
    return ApiRecordPresenter(confirmed=confirm)


def get_record_controller(
    store: StudentStore = Depends(get_student_store),
    session: EditSession = Depends(get_edit_session),
    presenter: ApiRecordPresenter = Depends(get_record_presenter),
) -> RecordController:
    """Provides a RecordController bound to the shared store and session."""
    return RecordController(store, session, presenter)
