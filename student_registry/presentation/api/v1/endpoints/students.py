"""Student record endpoints — the form and list surface of the registry."""

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from student_registry.application.schemas import (
    EditFormResponse,
    FieldErrorSchema,
    StudentForm,
    StudentListResponse,
)
from student_registry.application.services import RecordController, filter_form
from student_registry.domain.entities import PERSISTED_KEYS, ErrorCode
from student_registry.domain.exceptions import (
    EditSessionActiveError,
    NoActiveEditSessionError,
    RecordNotFoundError,
    StudentValidationError,
)
from student_registry.infrastructure.dependencies import (
    get_record_controller,
    get_record_presenter,
)
from student_registry.presentation.api.v1.record_presenter import ApiRecordPresenter

router = APIRouter(prefix="/students", tags=["Students"])


def _list_response(
    controller: RecordController, presenter: ApiRecordPresenter
) -> StudentListResponse:
    """Build the list view from what the controller last rendered."""
    if presenter.rendered is None:
        controller.refresh()
    return StudentListResponse(
        records=presenter.rendered or [],
        edit_state=controller.state,
        edit_target=controller.edit_target,
        warnings=presenter.warnings,
    )


def _validation_error(exc: StudentValidationError) -> HTTPException:
    """Map field errors to a 422 keyed by the wire field names."""
    errors = {
        PERSISTED_KEYS.get(field, field): FieldErrorSchema.from_entity(error).model_dump()
        for field, error in exc.errors.items()
    }
    return HTTPException(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        detail={"errors": errors},
    )


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report malformed request values in the same shape as field errors."""
    errors: dict[str, dict[str, str]] = {}
    for error in exc.errors():
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] == "body":
            field = loc[1]
        else:
            field = loc[-1] if loc else "body"
        errors.setdefault(
            field, {"code": ErrorCode.INVALID_FORMAT.value, "message": error.get("msg", "Invalid value")}
        )
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": {"errors": errors}},
    )


@router.get("", response_model=StudentListResponse)
async def list_students(
    controller: RecordController = Depends(get_record_controller),
    presenter: ApiRecordPresenter = Depends(get_record_presenter),
) -> StudentListResponse:
    """Render the current record list and form state."""
    return _list_response(controller, presenter)


@router.post("", response_model=StudentListResponse, status_code=status.HTTP_201_CREATED)
async def add_student(
    form: StudentForm,
    controller: RecordController = Depends(get_record_controller),
    presenter: ApiRecordPresenter = Depends(get_record_presenter),
) -> StudentListResponse:
    """Validate and append a new student record."""
    try:
        controller.submit_add(form)
    except StudentValidationError as e:
        raise _validation_error(e)
    except EditSessionActiveError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _list_response(controller, presenter)


@router.post("/filter", response_model=StudentForm)
async def filter_student_form(form: StudentForm) -> StudentForm:
    """Strip characters each field can never accept, as the user types."""
    return filter_form(form)


@router.post("/{index}/edit", response_model=EditFormResponse)
async def start_edit(
    index: int,
    controller: RecordController = Depends(get_record_controller),
) -> EditFormResponse:
    """Open the record at ``index`` for editing and return its form values."""
    try:
        record = controller.start_edit(index)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return EditFormResponse(position=index, form=StudentForm.from_entity(record))


@router.put("/edit", response_model=StudentListResponse)
async def commit_edit(
    form: StudentForm,
    controller: RecordController = Depends(get_record_controller),
    presenter: ApiRecordPresenter = Depends(get_record_presenter),
) -> StudentListResponse:
    """Replace the record being edited with the submitted form values."""
    try:
        controller.commit_edit(form)
    except StudentValidationError as e:
        raise _validation_error(e)
    except NoActiveEditSessionError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    return _list_response(controller, presenter)


@router.delete("/edit", response_model=StudentListResponse)
async def cancel_edit(
    controller: RecordController = Depends(get_record_controller),
    presenter: ApiRecordPresenter = Depends(get_record_presenter),
) -> StudentListResponse:
    """Discard the edit in progress."""
    controller.cancel_edit()
    return _list_response(controller, presenter)


@router.delete("/{index}", response_model=StudentListResponse)
async def delete_student(
    index: int,
    controller: RecordController = Depends(get_record_controller),
    presenter: ApiRecordPresenter = Depends(get_record_presenter),
) -> StudentListResponse:
    """Delete the record at ``index``; requires ``?confirm=true``."""
    try:
        deleted = controller.delete(index)
    except RecordNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    if not deleted:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Delete not confirmed; repeat the request with ?confirm=true",
        )
    return _list_response(controller, presenter)
