"""Business logic services package."""

from school.services.base import BaseService
from school.services.teacher_service import TeacherService, validate_teacher_update

__all__ = ["BaseService", "TeacherService", "validate_teacher_update"]
