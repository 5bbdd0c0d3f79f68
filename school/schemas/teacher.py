"""Teacher schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator


class TeacherCreate(BaseModel):
    """Schema for adding a teacher.

    Presence, type and column shape are checked here; range checks happen
    on update.

    Attributes:
        first_name: Given name.
        last_name: Family name.
        employee_number: Opaque employee identifier.
        hire_date: Date and time of hire.
        salary: Salary amount.
    """

    first_name: str = Field(..., max_length=255)
    last_name: str = Field(..., max_length=255)
    employee_number: str = Field(..., max_length=255)
    hire_date: datetime
    salary: Decimal = Field(..., max_digits=10, decimal_places=2)

    @field_validator("hire_date")
    @classmethod
    def to_naive_local(cls, value: datetime) -> datetime:
        """Store hire dates as naive local time."""
        if value.tzinfo is not None:
            return value.astimezone().replace(tzinfo=None)
        return value


class TeacherUpdate(TeacherCreate):
    """Schema for a full replace of a teacher; must carry its own id."""

    teacher_id: int


class TeacherResponse(BaseModel):
    """Teacher record returned by the repository and the API."""

    teacher_id: int
    first_name: str
    last_name: str
    employee_number: str
    hire_date: datetime
    salary: Decimal

    model_config = {"from_attributes": True}
