"""Teacher model mapped onto the ``teachers`` table."""

from datetime import datetime
from decimal import Decimal

from sqlalchemy import DateTime, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from school.utils.db import Base


class Teacher(Base):
    """Row of the ``teachers`` table.

    Python attribute names differ from the legacy column names:

        teacher_id      -> teacherid (PK, auto-increment)
        first_name      -> teacherfname
        last_name       -> teacherlname
        employee_number -> employeenumber
        hire_date       -> hiredate
        salary          -> salary

    Employee numbers are opaque and not unique.
    """

    __tablename__ = "teachers"

    teacher_id: Mapped[int] = mapped_column(
        "teacherid", Integer, primary_key=True, autoincrement=True
    )
    first_name: Mapped[str] = mapped_column("teacherfname", String(255))
    last_name: Mapped[str] = mapped_column("teacherlname", String(255))
    employee_number: Mapped[str] = mapped_column("employeenumber", String(255))
    hire_date: Mapped[datetime] = mapped_column("hiredate", DateTime)
    salary: Mapped[Decimal] = mapped_column("salary", Numeric(10, 2))

    def __repr__(self) -> str:
        """String representation of the teacher."""
        return (
            f"Teacher(teacher_id={self.teacher_id}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r})"
        )
