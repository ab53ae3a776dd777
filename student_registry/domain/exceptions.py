"""Domain-specific exceptions — framework-independent."""

from student_registry.domain.entities import FieldError


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class RecordNotFoundError(EntityNotFoundError):
    """Raised when no record exists at the given list position."""

    def __init__(self, index: int):
        self.index = index
        self.entity_type = "StudentRecord"
        self.entity_id = index
        Exception.__init__(self, f"No student record at position {index}")


class StudentValidationError(Exception):
    """Raised when a candidate record fails validation.

    ``errors`` maps entity field names to the error reported for that field.
    """

    def __init__(self, errors: dict[str, FieldError]):
        self.errors = errors
        fields = ", ".join(errors)
        super().__init__(f"Invalid student record: {fields}")


class NoActiveEditSessionError(Exception):
    """Raised when an edit is committed while no record is being edited."""

    def __init__(self) -> None:
        super().__init__("No record is currently being edited")


class EditSessionActiveError(Exception):
    """Raised when a new record is submitted while an edit is in progress."""

    def __init__(self, target: int):
        self.target = target
        super().__init__(f"Record at position {target} is being edited; update or cancel first")


class PersistenceUnavailableError(Exception):
    """Raised by storage adapters when the backing store cannot be read or written."""

    def __init__(self, operation: str, reason: str):
        self.operation = operation
        self.reason = reason
        super().__init__(f"Storage {operation} failed: {reason}")
