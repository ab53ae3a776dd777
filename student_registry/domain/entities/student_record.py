"""Domain entity — one student entry in the registry."""

from dataclasses import dataclass

# Persisted key for each entity attribute, in serialization order.
PERSISTED_KEYS: dict[str, str] = {
    "name": "name",
    "student_id": "studentId",
    "email": "email",
    "contact": "contact",
}


@dataclass(frozen=True)
class StudentRecord:
    """Core domain entity for a student registration.

    Records carry no surrogate id: ``student_id`` is the identity key and is
    unique across the store. A record is never patched field by field; an
    edit replaces the whole record at its position.
    """

    name: str
    student_id: str
    email: str
    contact: str

    @classmethod
    def from_form(
        cls,
        *,
        name: str = "",
        student_id: str = "",
        email: str = "",
        contact: str = "",
    ) -> "StudentRecord":
        """Build a candidate from raw form values, trimming every field."""
        return cls(
            name=name.strip(),
            student_id=student_id.strip(),
            email=email.strip(),
            contact=contact.strip(),
        )

    def to_persisted(self) -> dict[str, str]:
        """Map entity → persisted JSON object (fixed key order)."""
        return {key: getattr(self, attr) for attr, key in PERSISTED_KEYS.items()}

