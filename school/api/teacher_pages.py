"""Server-rendered teacher pages.

The pages call TeacherService in-process and translate its outcomes into
redirects, re-rendered forms or not-found pages.
"""

import logging
from typing import Any, Mapping, Optional

from fastapi import APIRouter, Depends, Request, Response, status
from fastapi.responses import RedirectResponse
from pydantic import ValidationError

from school.exceptions import (
    IdMismatchError,
    RecordNotFoundError,
    RecordValidationError,
)
from school.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from school.services.teacher_service import TeacherService
from school.utils.dependencies import dependencies
from school.utils.templates import templates

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/TeacherPage", tags=["TeacherPage"])

FORM_FIELDS = (
    "teacher_id",
    "first_name",
    "last_name",
    "employee_number",
    "hire_date",
    "salary",
)
HIRE_DATE_INPUT_FORMAT = "%Y-%m-%dT%H:%M:%S"


def form_values(teacher: TeacherResponse) -> dict[str, Any]:
    """Convert a teacher into the string values an HTML form expects."""
    return {
        "teacher_id": teacher.teacher_id,
        "first_name": teacher.first_name,
        "last_name": teacher.last_name,
        "employee_number": teacher.employee_number,
        "hire_date": teacher.hire_date.strftime(HIRE_DATE_INPUT_FORMAT),
        "salary": str(teacher.salary),
    }


def submitted_values(form: Mapping[str, Any]) -> dict[str, Any]:
    """Keep the known teacher fields of a submitted form."""
    return {key: form[key] for key in FORM_FIELDS if key in form}


def validation_messages(error: ValidationError) -> list[str]:
    """Flatten pydantic errors into ``field: message`` lines."""
    messages = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"])
        messages.append(f"{field}: {item['msg']}")
    return messages


def not_found_page(request: Request, message: str) -> Response:
    """Render the not-found page."""
    return templates.TemplateResponse(
        request=request,
        name="404.html",
        context={"message": message},
        status_code=status.HTTP_404_NOT_FOUND,
    )


def render_form(
    request: Request,
    name: str,
    values: Mapping[str, Any],
    errors: Optional[list[str]] = None,
    status_code: int = status.HTTP_200_OK,
    path_id: Optional[int] = None,
) -> Response:
    """Render a teacher form with the given values and error messages.

    ``path_id`` is the id the edit form posts back to; it stays the id from
    the URL even when the submitted body carries another one.
    """
    return templates.TemplateResponse(
        request=request,
        name=name,
        context={"teacher": values, "errors": errors or [], "path_id": path_id},
        status_code=status_code,
    )


@router.get("/List")
async def list_page(
    request: Request,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Display all teachers."""
    teachers = await service.list_teachers()
    return templates.TemplateResponse(
        request=request,
        name="teacher_page/list.html",
        context={"teachers": teachers},
    )


@router.get("/Show/{teacher_id}")
async def show_page(
    request: Request,
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Display one teacher."""
    teacher = await service.find_teacher(teacher_id)
    if teacher is None:
        return not_found_page(request, "Teacher not found.")
    return templates.TemplateResponse(
        request=request,
        name="teacher_page/show.html",
        context={"teacher": teacher},
    )


@router.get("/New")
async def new_page(request: Request) -> Response:
    """Display an empty form for a new teacher."""
    return render_form(request, "teacher_page/new.html", {})


@router.post("/Create")
async def create_page(
    request: Request,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Add the submitted teacher and redirect to its page.

    Only presence, type and column shape of the fields are checked here.
    """
    values = submitted_values(await request.form())
    try:
        data = TeacherCreate.model_validate(values)
    except ValidationError as e:
        return render_form(
            request,
            "teacher_page/new.html",
            values,
            validation_messages(e),
            status.HTTP_400_BAD_REQUEST,
        )

    teacher_id = await service.add_teacher(data)
    return RedirectResponse(
        url=f"/TeacherPage/Show/{teacher_id}", status_code=status.HTTP_303_SEE_OTHER
    )


@router.get("/Edit/{teacher_id}")
async def edit_page(
    request: Request,
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Display the edit form prefilled with the stored teacher."""
    teacher = await service.find_teacher(teacher_id)
    if teacher is None:
        return not_found_page(request, "Teacher not found.")
    return render_form(
        request, "teacher_page/edit.html", form_values(teacher), path_id=teacher_id
    )


@router.post("/Update/{teacher_id}")
async def update_page(
    request: Request,
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Apply the submitted changes, or redisplay the form with the error."""
    values = submitted_values(await request.form())
    try:
        data = TeacherUpdate.model_validate(values)
    except ValidationError as e:
        return render_form(
            request,
            "teacher_page/edit.html",
            values,
            validation_messages(e),
            status.HTTP_400_BAD_REQUEST,
            teacher_id,
        )

    try:
        await service.update_teacher(teacher_id, data)
    except (IdMismatchError, RecordValidationError, RecordNotFoundError) as e:
        logger.info(
            "Teacher update rejected",
            extra={"teacher_id": teacher_id, "reason": str(e)},
        )
        return render_form(
            request,
            "teacher_page/edit.html",
            values,
            [str(e)],
            status.HTTP_400_BAD_REQUEST,
            teacher_id,
        )

    return RedirectResponse(
        url=f"/TeacherPage/Show/{teacher_id}", status_code=status.HTTP_303_SEE_OTHER
    )


@router.get("/DeleteConfirm/{teacher_id}")
async def delete_confirm_page(
    request: Request,
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Ask for confirmation before deleting a teacher."""
    teacher = await service.find_teacher(teacher_id)
    if teacher is None:
        return not_found_page(request, "Teacher not found.")
    return templates.TemplateResponse(
        request=request,
        name="teacher_page/delete_confirm.html",
        context={"teacher": teacher},
    )


@router.post("/Delete/{teacher_id}")
async def delete_page(
    request: Request,
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> Response:
    """Delete a teacher and go back to the list."""
    rows = await service.delete_teacher(teacher_id)
    if rows == 0:
        return not_found_page(request, "Teacher not found or could not be deleted.")
    logger.info("Teacher deleted via pages", extra={"teacher_id": teacher_id})
    return RedirectResponse(url="/TeacherPage/List", status_code=status.HTTP_303_SEE_OTHER)
