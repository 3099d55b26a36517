"""
Health check API endpoints.

Routes: GET /health

Dependencies: pdf_reader.configs
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from pdf_reader.api.deps import get_settings_dependency
from pdf_reader.configs import ReaderSettings


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str
    api_url: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(
    settings: ReaderSettings = Depends(get_settings_dependency),
) -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Reader Healthy", api_url=settings.api_url)
