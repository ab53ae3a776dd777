"""Field rules for student records.

Checks run in a fixed priority order and stop at the first failing stage,
so at most one error is reported per call, except for the presence stage,
which reports every empty field at once.

All functions are pure: they never mutate the record sequence they are given.
"""

import re
from collections.abc import Sequence

from student_registry.domain.entities import ErrorCode, FieldError, StudentRecord
from student_registry.domain.exceptions import StudentValidationError

MIN_CONTACT_DIGITS = 10

_LETTERS_AND_SPACES = re.compile(r"[A-Za-z\s]+")
_DIGITS = re.compile(r"[0-9]+")
_NON_DIGITS = re.compile(r"[^0-9]")
_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

_REQUIRED_MESSAGES = {
    "name": "Name is required.",
    "student_id": "Student ID is required.",
    "email": "Email is required.",
    "contact": "Contact number is required.",
}


def is_letters_only(value: str) -> bool:
    return _LETTERS_AND_SPACES.fullmatch(value.strip()) is not None


def is_digits_only(value: str) -> bool:
    return _DIGITS.fullmatch(value) is not None


def is_valid_email(value: str) -> bool:
    return _EMAIL.fullmatch(value.strip()) is not None


def has_min_digits(value: str, count: int) -> bool:
    return len(_NON_DIGITS.sub("", value)) >= count


def find_duplicate(
    student_id: str,
    records: Sequence[StudentRecord],
    edit_target: int | None = None,
) -> int | None:
    """Return the position of another record using ``student_id``, if any.

    The record at ``edit_target`` is skipped so that committing an edit
    with an unchanged identifier does not collide with itself.
    """
    for index, record in enumerate(records):
        if index != edit_target and record.student_id == student_id:
            return index
    return None


def collect_field_errors(
    candidate: StudentRecord,
    records: Sequence[StudentRecord],
    edit_target: int | None = None,
) -> dict[str, FieldError]:
    """Validate ``candidate`` against the field rules and the current records.

    Returns an empty mapping when the candidate is acceptable.
    """
    missing = {
        field: FieldError(ErrorCode.MISSING_FIELD, message)
        for field, message in _REQUIRED_MESSAGES.items()
        if not getattr(candidate, field).strip()
    }
    if missing:
        return missing

    if not is_letters_only(candidate.name):
        return {"name": FieldError(ErrorCode.INVALID_FORMAT, "Only letters and spaces are allowed.")}
    if not is_digits_only(candidate.student_id):
        return {
            "student_id": FieldError(
                ErrorCode.INVALID_FORMAT, "Student ID must contain digits only."
            )
        }
    if not is_valid_email(candidate.email):
        return {"email": FieldError(ErrorCode.INVALID_FORMAT, "Please enter a valid email address.")}
    if not is_digits_only(candidate.contact):
        return {
            "contact": FieldError(
                ErrorCode.INVALID_FORMAT, "Contact number must contain digits only."
            )
        }
    if not has_min_digits(candidate.contact, MIN_CONTACT_DIGITS):
        return {
            "contact": FieldError(
                ErrorCode.INVALID_FORMAT,
                f"Contact number must have at least {MIN_CONTACT_DIGITS} digits.",
            )
        }

    if find_duplicate(candidate.student_id, records, edit_target) is not None:
        return {
            "student_id": FieldError(
                ErrorCode.DUPLICATE_IDENTIFIER, "This Student ID already exists."
            )
        }
    return {}


def validate_student(
    candidate: StudentRecord,
    records: Sequence[StudentRecord],
    edit_target: int | None = None,
) -> None:
    """Raise StudentValidationError if ``candidate`` breaks any field rule."""
    errors = collect_field_errors(candidate, records, edit_target)
    if errors:
        raise StudentValidationError(errors)
