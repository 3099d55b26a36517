"""
Chat API endpoints.

Routes:
- POST /session/chat - Ask a question about the selected document

Dependencies: pdf_reader.application.controller
System role: Chat messaging HTTP API
"""

from fastapi import APIRouter, Depends, status

from pdf_reader.api.deps import get_controller
from pdf_reader.application.controller import ReaderController
from pdf_reader.models.chat import ChatResponse, ChatTurnRequest

router = APIRouter(prefix="/session", tags=["chat"])


@router.post("/chat", response_model=ChatResponse, status_code=status.HTTP_202_ACCEPTED)
async def chat(
    request: ChatTurnRequest,
    controller: ReaderController = Depends(get_controller),
) -> ChatResponse:
    """Send a question; the answer is appended to the transcript when it arrives.

    Questions that cannot be sent right now (empty, no document, failed
    document, another question pending) are ignored and reported with
    accepted=false.

    Args:
        request: ChatTurnRequest with the question
        controller: Injected reader controller

    Returns:
        ChatResponse: Acceptance flag and the session snapshot
    """
    task = controller.ask(request.message)
    return ChatResponse(accepted=task is not None, session=controller.snapshot())
