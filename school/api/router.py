"""API router factory with core endpoints."""

import logging

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, RedirectResponse

from school.utils.db import db_manager

logger = logging.getLogger(__name__)


def create_page_router() -> APIRouter:
    """Create router with server-rendered teacher pages and root redirect.

    Returns:
        APIRouter with page routes.
    """
    from school.api.teacher_pages import router as teacher_pages_router

    router = APIRouter()

    @router.get("/", include_in_schema=False)
    async def root():
        """Redirect root to the teacher list."""
        return RedirectResponse(url="/TeacherPage/List", status_code=302)

    router.include_router(teacher_pages_router)

    return router


def create_api_router() -> APIRouter:
    """Create router with JSON endpoints, including health checks.

    Returns:
        APIRouter with teacher API and health endpoints.
    """
    from school.api.teachers import router as teachers_router

    router = APIRouter()

    @router.get("/health", tags=["Health"], status_code=status.HTTP_200_OK)
    async def health_check() -> dict:
        """Health check endpoint - basic application health."""
        return {"status": "healthy"}

    @router.get(
        "/health/db",
        tags=["Health"],
        status_code=status.HTTP_200_OK,
        response_model=None,
    )
    async def health_check_db() -> JSONResponse:
        """Deep health check - includes database connectivity check."""
        try:
            await db_manager.verify_connection()
            return JSONResponse(
                status_code=status.HTTP_200_OK,
                content={"status": "healthy", "database": "connected"},
            )
        except Exception as e:
            logger.error(
                "Database health check failed",
                extra={"error": str(e)},
                exc_info=True,
            )
            return JSONResponse(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                content={"status": "unhealthy", "database": "disconnected"},
            )

    router.include_router(teachers_router)

    return router
