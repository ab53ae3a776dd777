"""Live input filtering for the record form.

These strip characters a field can never accept while the user types. They
are a convenience only; submitted values still go through full validation.
"""

import re

from student_registry.application.schemas import StudentForm

_NOT_NAME_CHAR = re.compile(r"[^A-Za-z\s]")
_NOT_DIGIT = re.compile(r"[^0-9]")


def filter_name(value: str) -> str:
    """Keep only letters and whitespace."""
    return _NOT_NAME_CHAR.sub("", value)


def filter_digits(value: str) -> str:
    """Keep only the digits 0-9."""
    return _NOT_DIGIT.sub("", value)


def filter_form(form: StudentForm) -> StudentForm:
    """Apply the per-field filters; the email field is left as typed."""
    return StudentForm(
        name=filter_name(form.name),
        student_id=filter_digits(form.student_id),
        email=form.email,
        contact=filter_digits(form.contact),
    )
