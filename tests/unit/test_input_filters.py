"""Unit tests for live input filtering."""

from student_registry.application.schemas import StudentForm
from student_registry.application.services import filter_digits, filter_form, filter_name


def test_filter_name_strips_non_letters():
    assert filter_name("Ann-Lee 3rd!") == "AnnLee rd"


def test_filter_digits_keeps_only_digits():
    assert filter_digits("(555) 123-4567") == "5551234567"


def test_filter_form_leaves_email_untouched():
    form = StudentForm(name="Ann_Lee", studentId="10a01", email=" a+b@c.com ", contact="555.123")
    filtered = filter_form(form)

    assert filtered.name == "AnnLee"
    assert filtered.student_id == "1001"
    assert filtered.email == " a+b@c.com "
    assert filtered.contact == "555123"
