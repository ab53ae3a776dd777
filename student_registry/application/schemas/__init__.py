from .student_record import (
    EditFormResponse,
    FieldErrorSchema,
    PersistedStudentRecord,
    StudentForm,
    StudentListResponse,
    StudentRecordResponse,
)

__all__ = [
    "EditFormResponse",
    "FieldErrorSchema",
    "PersistedStudentRecord",
    "StudentForm",
    "StudentListResponse",
    "StudentRecordResponse",
]
