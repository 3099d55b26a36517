"""Domain models and wire schemas."""

from pdf_reader.models.chat import ChatAnswer, ChatRequest, ChatResponse, ChatTurnRequest
from pdf_reader.models.citation import Citation, FocusRequest
from pdf_reader.models.document import (
    Document,
    DocumentCandidate,
    LocalHandle,
    ProcessingState,
    UploadSummary,
)
from pdf_reader.models.session import SessionSnapshot
from pdf_reader.models.transcript import BotEntry, SystemEntry, TranscriptEntry, UserEntry

__all__ = [
    "BotEntry",
    "ChatAnswer",
    "ChatRequest",
    "ChatResponse",
    "ChatTurnRequest",
    "Citation",
    "Document",
    "DocumentCandidate",
    "FocusRequest",
    "LocalHandle",
    "ProcessingState",
    "SessionSnapshot",
    "SystemEntry",
    "TranscriptEntry",
    "UploadSummary",
    "UserEntry",
]
