"""Teacher API endpoints."""

from typing import Optional

from fastapi import APIRouter, Depends

from school.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from school.services.teacher_service import TeacherService
from school.utils.dependencies import dependencies

router = APIRouter(
    prefix="/api/Teacher",
    tags=["Teacher"],
)


@router.get("/ListTeachers")
async def list_teachers(
    service: TeacherService = Depends(dependencies.teacher),
) -> list[TeacherResponse]:
    """Return every teacher in storage order."""
    return await service.list_teachers()


@router.get("/FindTeacher/{teacher_id}")
async def find_teacher(
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> Optional[TeacherResponse]:
    """Return one teacher, or null when no teacher has this id."""
    return await service.find_teacher(teacher_id)


@router.post("/AddTeacher")
async def add_teacher(
    data: TeacherCreate,
    service: TeacherService = Depends(dependencies.teacher),
) -> int:
    """Add a teacher.

    Args:
        data: Teacher fields without id.
        service: TeacherService instance.

    Returns:
        Id assigned to the new teacher.
    """
    return await service.add_teacher(data)


@router.put("/UpdateTeacher/{teacher_id}")
async def update_teacher(
    teacher_id: int,
    data: TeacherUpdate,
    service: TeacherService = Depends(dependencies.teacher),
) -> dict:
    """Replace all fields of a teacher.

    Mismatched ids and invalid fields answer 400, an unknown id 404; see
    the exception handlers.

    Args:
        teacher_id: Id of the teacher to update.
        data: Full teacher record, including the same id.
        service: TeacherService instance.

    Returns:
        Success message.
    """
    await service.update_teacher(teacher_id, data)
    return {"message": "Teacher updated successfully."}


@router.delete("/DeleteTeacher/{teacher_id}")
async def delete_teacher(
    teacher_id: int,
    service: TeacherService = Depends(dependencies.teacher),
) -> int:
    """Delete a teacher and return the number of rows removed."""
    return await service.delete_teacher(teacher_id)
