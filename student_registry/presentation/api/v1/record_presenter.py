"""Presenter adapter for the HTTP API — one instance per request."""

from collections.abc import Sequence

from student_registry.application.interfaces import RecordPresenter
from student_registry.application.schemas import StudentRecordResponse
from student_registry.domain.entities import StudentRecord


class ApiRecordPresenter(RecordPresenter):
    """Collects what the controller shows so the endpoint can return it.

    Confirmation cannot be asked interactively over HTTP, so the client
    states it up front with ``?confirm=true``.
    """

    def __init__(self, confirmed: bool = False):
        self._confirmed = confirmed
        self.prompts: list[str] = []
        self.rendered: list[StudentRecordResponse] | None = None
        self.warnings: list[str] = []

    def confirm(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        return self._confirmed

    def render(self, records: Sequence[StudentRecord]) -> None:
        self.rendered = [
            StudentRecordResponse.from_entity(position, record)
            for position, record in enumerate(records)
        ]

    def warn(self, message: str) -> None:
        if message not in self.warnings:
            self.warnings.append(message)
