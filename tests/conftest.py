"""Pytest configuration and shared fixtures."""

import os
from datetime import datetime
from decimal import Decimal
from typing import AsyncGenerator, Generator

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

# Never reach for a real server from tests
os.environ.setdefault("DB_CREATE_TABLES", "False")
os.environ.setdefault("DB_NAME", "test_db")

from school.application import create_app  # noqa: E402
from school.schemas.teacher import TeacherCreate  # noqa: E402
from school.services.teacher_service import TeacherService  # noqa: E402
from school.utils.db import DatabaseManager  # noqa: E402
from school.utils.dependencies import dependencies  # noqa: E402

FROZEN_NOW = datetime(2026, 1, 15, 12, 0, 0)


@pytest.fixture
def frozen_now() -> datetime:
    """Fixed 'current time' used by update validation."""
    return FROZEN_NOW


@pytest.fixture
async def database(tmp_path) -> AsyncGenerator[DatabaseManager, None]:
    """Database manager bound to a fresh SQLite file with tables created."""
    manager = DatabaseManager(f"sqlite+aiosqlite:///{tmp_path / 'school.db'}")
    await manager.create_tables()
    yield manager
    await manager.close()


@pytest.fixture
def teacher_service(database: DatabaseManager, frozen_now: datetime) -> TeacherService:
    """TeacherService over the test database with a frozen clock."""
    return TeacherService(database, clock=lambda: frozen_now)


@pytest.fixture
def ada() -> TeacherCreate:
    """Sample teacher used across tests."""
    return TeacherCreate(
        first_name="Ada",
        last_name="Lovelace",
        employee_number="E1",
        hire_date=datetime(2020, 1, 1),
        salary=Decimal("50000"),
    )


@pytest.fixture
def app(teacher_service: TeacherService) -> Generator[FastAPI, None, None]:
    """Application whose routes use the test TeacherService."""
    app = create_app()
    app.dependency_overrides[dependencies.teacher] = lambda: teacher_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client talking to the app in-process."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client
