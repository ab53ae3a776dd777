"""Abstract presenter interface (port) — the user-facing side of the record form."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from student_registry.domain.entities import StudentRecord


class RecordPresenter(ABC):
    """Port through which the RecordController talks back to the user."""

    @abstractmethod
    def confirm(self, prompt: str) -> bool:
        """Ask the user to confirm a destructive action."""
        ...

    @abstractmethod
    def render(self, records: Sequence[StudentRecord]) -> None:
        """Redraw the record list from the store's current state."""
        ...

    @abstractmethod
    def warn(self, message: str) -> None:
        """Show a non-fatal warning."""
        ...
