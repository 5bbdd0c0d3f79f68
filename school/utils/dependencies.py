"""Dependency injection functions for FastAPI routes.

Uses descriptor pattern to create one dependency function per service.
"""

from typing import Any, Type, TypeVar

from school.services.teacher_service import TeacherService
from school.utils.db import db_manager

T = TypeVar("T")


class ServiceDependency:
    """Descriptor that creates a dependency injection function for a service.

    Caches the dependency function to ensure the same function object is returned
    each time, enabling proper use of FastAPI's dependency_overrides.
    """

    def __init__(self, service_class: Type[T]) -> None:
        """Initialize service dependency descriptor.

        Args:
            service_class: The service class to create instances of.
        """
        self.service_class = service_class
        self._cached_func: Any = None

    def __get__(self, instance: Any, owner: type) -> Any:
        """Create and return cached dependency function when accessed."""
        if self._cached_func is None:

            def dependency_func() -> T:
                """Get service instance bound to the global database manager."""
                return self.service_class(db_manager)

            self._cached_func = dependency_func
        return self._cached_func


class ServiceDependencies:
    """Container for all service dependency injection functions."""

    teacher = ServiceDependency(TeacherService)


# Create singleton instance for easy access
dependencies = ServiceDependencies()
