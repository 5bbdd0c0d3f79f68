"""Pydantic schemas for API request/response models."""

from school.schemas.teacher import TeacherCreate, TeacherResponse, TeacherUpdate

__all__ = ["TeacherCreate", "TeacherResponse", "TeacherUpdate"]
