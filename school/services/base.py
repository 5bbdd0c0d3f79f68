"""Base service class running each database operation in its own session."""

import logging
from typing import Any, Generic, List, Optional, TypeVar

from sqlalchemy import delete, inspect, select, update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from school.exceptions import DatabaseConnectionError
from school.utils.db import Base, DatabaseManager

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Base)


class BaseService(Generic[T]):
    """Base service class issuing one statement per call.

    Every public operation acquires a session from the database manager,
    executes a single statement and releases the session before returning:
    - Writes are committed when the session scope exits normally
    - Any store error rolls back and is re-raised as DatabaseConnectionError
    - No state is kept between calls

    Usage:
        class UserService(BaseService[User]):
            model = User

        service = UserService(db_manager)
        user = await service.create(name="John")

    Attributes:
        database: Database manager providing session scopes
        model: Model class this service manages
    """

    model: type[T]

    def __init__(self, database: DatabaseManager) -> None:
        """Initialize service with a database manager.

        Args:
            database: Database manager used to acquire sessions
        """
        self.database = database

    @property
    def _primary_key(self) -> Any:
        return inspect(self.model).primary_key[0]

    def _store_error(
        self, operation: str, error: SQLAlchemyError, **context: Any
    ) -> DatabaseConnectionError:
        logger.error(
            f"Failed to {operation} {self.model.__name__}",
            extra={"model": self.model.__name__, "error": str(error), **context},
            exc_info=True,
        )
        if isinstance(error, IntegrityError):
            return DatabaseConnectionError(
                f"Integrity constraint violation: {str(error)}"
            )
        return DatabaseConnectionError(f"Database error during {operation}: {error}")

    async def get_all(self) -> List[T]:
        """Retrieve all records in primary key order.

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            async with self.database.session() as session:
                result = await session.execute(
                    select(self.model).order_by(self._primary_key)
                )
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise self._store_error("get_all", e) from e

    async def get_by_id(self, record_id: int) -> Optional[T]:
        """Retrieve a record by its primary key.

        Returns:
            Model instance or None if not found

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            async with self.database.session() as session:
                result = await session.execute(
                    select(self.model).where(self._primary_key == record_id)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise self._store_error("get", e, id=record_id) from e

    async def create(self, **kwargs: Any) -> T:
        """Insert a new record.

        Args:
            **kwargs: Model attributes

        Returns:
            Created model instance with its generated key populated

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        try:
            async with self.database.session() as session:
                instance = self.model(**kwargs)
                session.add(instance)
                await session.flush()
            logger.debug(
                f"Created {self.model.__name__}",
                extra={
                    "model": self.model.__name__,
                    "id": inspect(instance).identity[0],
                },
            )
            return instance
        except SQLAlchemyError as e:
            raise self._store_error("create", e) from e

    async def update_by_id(self, record_id: int, **values: Any) -> int:
        """Overwrite columns of the record with the given key.

        Args:
            record_id: Primary key of the record
            **values: Attribute names and their new values

        Returns:
            Number of rows affected

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        stmt = (
            update(self.model)
            .where(self._primary_key == record_id)
            .values({getattr(self.model, key): value for key, value in values.items()})
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                rowcount = result.rowcount
        except SQLAlchemyError as e:
            raise self._store_error("update", e, id=record_id) from e
        logger.debug(
            f"Updated {self.model.__name__}",
            extra={"model": self.model.__name__, "id": record_id, "rows": rowcount},
        )
        return rowcount

    async def delete_by_id(self, record_id: int) -> int:
        """Delete the record with the given key.

        Returns:
            Number of rows affected (0 when nothing matched)

        Raises:
            DatabaseConnectionError: If database operation fails
        """
        stmt = (
            delete(self.model)
            .where(self._primary_key == record_id)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.database.session() as session:
                result = await session.execute(stmt)
                rowcount = result.rowcount
        except SQLAlchemyError as e:
            raise self._store_error("delete", e, id=record_id) from e
        logger.debug(
            f"Deleted {self.model.__name__}",
            extra={"model": self.model.__name__, "id": record_id, "rows": rowcount},
        )
        return rowcount
