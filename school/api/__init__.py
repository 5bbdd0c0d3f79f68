"""API endpoints package."""

from school.api.router import create_api_router, create_page_router

__all__ = ["create_api_router", "create_page_router"]
