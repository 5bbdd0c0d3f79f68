"""Data models package."""

from school.models.teacher import Teacher

__all__ = ["Teacher"]
