"""
API routes module.

FastAPI routers for all HTTP endpoints.
"""

from fastapi import APIRouter

from .routers import (
    courses_router,
    health_router,
    transactions_router,
    users_router,
)

api_router = APIRouter()

# Include all routers
api_router.include_router(health_router)
api_router.include_router(courses_router)
api_router.include_router(transactions_router)
api_router.include_router(users_router)

__all__ = ["api_router"]
