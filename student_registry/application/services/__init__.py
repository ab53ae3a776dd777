from .student_store import StudentStore
from .record_controller import RecordController
from .student_validator import collect_field_errors, validate_student
from .input_filters import filter_digits, filter_form, filter_name

__all__ = [
    "StudentStore",
    "RecordController",
    "collect_field_errors",
    "validate_student",
    "filter_digits",
    "filter_form",
    "filter_name",
]
