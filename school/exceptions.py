"""Application exceptions."""

from typing import Any, Optional


class AppError(Exception):
    """Base exception for application errors.

    ``context`` holds the structured fields that accompany the message in
    error responses and log records.
    """

    @property
    def context(self) -> dict[str, Any]:
        return {}


class ModelError(AppError):
    """Base exception for model/database operations."""


class RecordNotFoundError(ModelError):
    """Raised when a record is not found in the database."""

    def __init__(self, model_name: str, record_id: int):
        self.model_name = model_name
        self.record_id = record_id
        super().__init__(f"{model_name} with id={record_id} not found")

    @property
    def context(self) -> dict[str, Any]:
        return {"model": self.model_name, "record_id": self.record_id}


class RecordValidationError(ModelError):
    """Raised when record fields fail validation before a write."""

    def __init__(self, message: str, field: Optional[str] = None):
        self.field = field
        super().__init__(message)

    @property
    def context(self) -> dict[str, Any]:
        return {"field": self.field}


class IdMismatchError(ModelError):
    """Raised when the id in the path differs from the id in the body."""

    def __init__(self, path_id: int, body_id: Optional[int]):
        self.path_id = path_id
        self.body_id = body_id
        super().__init__("Teacher ID mismatch.")

    @property
    def context(self) -> dict[str, Any]:
        return {"path_id": self.path_id, "body_id": self.body_id}


class DatabaseConnectionError(ModelError):
    """Raised when database connection fails."""
