"""
Citation API endpoints.

Routes:
- POST /session/citations/focus - Bring the viewer into view for a cited page

Dependencies: pdf_reader.application.controller
System role: Citation navigation HTTP API
"""

from fastapi import APIRouter, Depends

from pdf_reader.api.deps import get_controller
from pdf_reader.application.controller import ReaderController
from pdf_reader.models.citation import FocusRequest
from pdf_reader.models.session import SessionSnapshot

router = APIRouter(prefix="/session/citations", tags=["citations"])


@router.post("/focus", response_model=SessionSnapshot)
async def focus_citation(
    request: FocusRequest,
    controller: ReaderController = Depends(get_controller),
) -> SessionSnapshot:
    """Best-effort navigation to a cited page."""
    controller.focus(request.to_citation())
    return controller.snapshot()
