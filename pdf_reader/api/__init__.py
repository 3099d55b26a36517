"""
API routes module.

FastAPI routers for the local reader surface.
"""

from fastapi import APIRouter

from .routers import (
    chat_router,
    citations_router,
    documents_router,
    health_router,
)

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(documents_router)
api_router.include_router(chat_router)
api_router.include_router(citations_router)

__all__ = ["api_router"]
