"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from school.api import create_api_router, create_page_router
from school.config import get_settings
from school.utils.db import close_db, init_db
from school.utils.exception_handlers import register_exception_handlers


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    await init_db()
    yield
    # Shutdown
    await close_db()


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.API_TITLE,
        description="Teacher records API with server-rendered pages",
        version=settings.API_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )

    register_exception_handlers(app)

    app.include_router(create_api_router())
    app.include_router(create_page_router())

    return app
