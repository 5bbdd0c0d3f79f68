"""Teacher service: the CRUD facade over the ``teachers`` table.

Each call runs one statement in its own session scope. Only updates are
validated; adds are written as submitted.
"""

import logging
from datetime import datetime
from typing import Callable, List, Optional

from school.exceptions import (
    IdMismatchError,
    RecordNotFoundError,
    RecordValidationError,
)
from school.models.teacher import Teacher
from school.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate
from school.services.base import BaseService
from school.utils.db import DatabaseManager

logger = logging.getLogger(__name__)


def validate_teacher_update(
    teacher_id: int, data: TeacherUpdate, now: datetime
) -> None:
    """Check an update request, stopping at the first failing rule.

    Args:
        teacher_id: Id taken from the request path.
        data: Replacement record.
        now: Current time; hire dates equal to it are accepted.

    Raises:
        IdMismatchError: If ``teacher_id`` differs from ``data.teacher_id``.
        RecordValidationError: If a name is blank, the hire date is in the
            future or the salary is negative.
    """
    if teacher_id != data.teacher_id:
        raise IdMismatchError(teacher_id, data.teacher_id)
    if not data.first_name.strip() or not data.last_name.strip():
        raise RecordValidationError("Teacher name cannot be empty.", field="name")
    if data.hire_date > now:
        raise RecordValidationError(
            "Hire date cannot be in the future.", field="hire_date"
        )
    if data.salary < 0:
        raise RecordValidationError("Salary cannot be negative.", field="salary")


class TeacherService(BaseService[Teacher]):
    """Service for managing Teacher records.

    Operations:
    - list_teachers(): all teachers in storage order
    - find_teacher(id): one teacher or None
    - add_teacher(data): insert, returns the new id
    - delete_teacher(id): hard delete, returns rows affected
    - update_teacher(id, data): validated full replace

    Usage:
        service = TeacherService(db_manager)
        teacher_id = await service.add_teacher(TeacherCreate(...))
        teacher = await service.find_teacher(teacher_id)

    Attributes:
        model: Teacher model class
        clock: Callable returning the current time, used by update validation
    """

    model = Teacher

    def __init__(
        self,
        database: DatabaseManager,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__(database)
        self.clock = clock

    async def list_teachers(self) -> List[TeacherResponse]:
        """Return every teacher; empty list when the table is empty."""
        teachers = await self.get_all()
        return [TeacherResponse.model_validate(t) for t in teachers]

    async def find_teacher(self, teacher_id: int) -> Optional[TeacherResponse]:
        """Return the teacher with the given id, or None if there is none."""
        teacher = await self.get_by_id(teacher_id)
        if teacher is None:
            return None
        return TeacherResponse.model_validate(teacher)

    async def add_teacher(self, data: TeacherCreate) -> int:
        """Insert a teacher without validating its fields.

        Returns:
            Id assigned by the store.
        """
        teacher = await self.create(**data.model_dump())
        logger.info("Teacher added", extra={"teacher_id": teacher.teacher_id})
        return teacher.teacher_id

    async def delete_teacher(self, teacher_id: int) -> int:
        """Delete a teacher.

        Returns:
            Rows affected; 0 means no teacher had that id.
        """
        return await self.delete_by_id(teacher_id)

    async def update_teacher(self, teacher_id: int, data: TeacherUpdate) -> None:
        """Validate and replace every field of an existing teacher.

        Raises:
            IdMismatchError: If path and body ids differ.
            RecordValidationError: If a field fails validation.
            RecordNotFoundError: If no teacher has ``teacher_id``.
        """
        validate_teacher_update(teacher_id, data, self.clock())

        rows = await self.update_by_id(
            teacher_id, **data.model_dump(exclude={"teacher_id"})
        )
        if rows == 0:
            raise RecordNotFoundError(self.model.__name__, teacher_id)
        logger.info("Teacher updated", extra={"teacher_id": teacher_id})
