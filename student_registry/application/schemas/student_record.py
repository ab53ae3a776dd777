"""Pydantic DTOs (Data Transfer Objects) for the student records feature.

Field names on the wire follow the persisted layout (``studentId``), so the
same JSON shape is used for requests, responses and storage.
"""

from pydantic import BaseModel, Field

from student_registry.domain.entities import EditState, FieldError, StudentRecord


# ── Persisted layout ────────────────────────────────────────────────


class PersistedStudentRecord(BaseModel):
    """One element of the persisted JSON array — exactly four non-empty strings."""

    name: str = Field(..., min_length=1)
    student_id: str = Field(..., min_length=1, alias="studentId")
    email: str = Field(..., min_length=1)
    contact: str = Field(..., min_length=1)

    model_config = {"extra": "forbid", "strict": True, "populate_by_name": True}

    def to_entity(self) -> StudentRecord:
        return StudentRecord(
            name=self.name,
            student_id=self.student_id,
            email=self.email,
            contact=self.contact,
        )


# ── Form input ──────────────────────────────────────────────────────


class StudentForm(BaseModel):
    """Raw form values. Emptiness and format are checked by the validator, not here."""

    name: str = ""
    student_id: str = Field("", alias="studentId")
    email: str = ""
    contact: str = ""

    model_config = {"populate_by_name": True, "coerce_numbers_to_str": True}

    def to_candidate(self) -> StudentRecord:
        """Build a trimmed candidate record from the form values."""
        return StudentRecord.from_form(
            name=self.name,
            student_id=self.student_id,
            email=self.email,
            contact=self.contact,
        )

    @classmethod
    def from_entity(cls, record: StudentRecord) -> "StudentForm":
        return cls(
            name=record.name,
            student_id=record.student_id,
            email=record.email,
            contact=record.contact,
        )


# ── Responses ───────────────────────────────────────────────────────


class StudentRecordResponse(BaseModel):
    """A record as rendered in the list, with its current position."""

    position: int
    name: str
    student_id: str = Field(..., alias="studentId")
    email: str
    contact: str

    model_config = {"populate_by_name": True}

    @classmethod
    def from_entity(cls, position: int, record: StudentRecord) -> "StudentRecordResponse":
        return cls(
            position=position,
            name=record.name,
            student_id=record.student_id,
            email=record.email,
            contact=record.contact,
        )


class StudentListResponse(BaseModel):
    """The rendered record list plus the state of the form."""

    records: list[StudentRecordResponse]
    edit_state: EditState
    edit_target: int | None = None
    warnings: list[str] = Field(default_factory=list)


class EditFormResponse(BaseModel):
    """Form values for the record that was opened for editing."""

    position: int
    form: StudentForm
    edit_state: EditState = EditState.EDITING


class FieldErrorSchema(BaseModel):
    """A single field error as returned to the client."""

    code: str
    message: str

    @classmethod
    def from_entity(cls, error: FieldError) -> "FieldErrorSchema":
        return cls(code=error.code.value, message=error.message)
