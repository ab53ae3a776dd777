from .student_record import PERSISTED_KEYS, StudentRecord
from .edit_session import EditSession, EditState
from .field_error import ErrorCode, FieldError

__all__ = [
    "PERSISTED_KEYS",
    "StudentRecord",
    "EditSession",
    "EditState",
    "ErrorCode",
    "FieldError",
]
