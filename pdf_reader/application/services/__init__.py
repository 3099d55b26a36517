"""Service orchestrators."""

from .citation_navigator import CitationNavigator
from .document_session import DocumentSession
from .query_dispatcher import QueryDispatcher
from .transcript_store import TranscriptStore
from .upload_orchestrator import UploadOrchestrator

__all__ = [
    "CitationNavigator",
    "DocumentSession",
    "QueryDispatcher",
    "TranscriptStore",
    "UploadOrchestrator",
]
