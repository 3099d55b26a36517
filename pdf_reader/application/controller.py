"""
Reader controller.

Wires the document session, upload orchestrator, transcript store, query
dispatcher and citation navigator around one ReaderSession value.

Dependencies: pdf_reader.application.services, pdf_reader.boundary
System role: Composition root for the client-side state machine
"""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from pdf_reader.application.services import (
    CitationNavigator,
    DocumentSession,
    QueryDispatcher,
    TranscriptStore,
    UploadOrchestrator,
)
from pdf_reader.application.services.transcript_store import TranscriptListener
from pdf_reader.application.session_state import ReaderSession
from pdf_reader.boundary.api_client import ReaderApiClient
from pdf_reader.boundary.resource_guard import ResourceGuard
from pdf_reader.boundary.viewport import Viewport
from pdf_reader.configs.settings import ReaderSettings, get_settings
from pdf_reader.models.citation import Citation
from pdf_reader.models.document import DocumentCandidate
from pdf_reader.models.session import SessionSnapshot

logger = logging.getLogger(__name__)


class ReaderController:
    """
    Client-side controller for one reader session.

    Requests are scheduled on the running event loop and never awaited by
    select()/ask(); the controller keeps them alive until they finish.
    """

    def __init__(
        self,
        settings: ReaderSettings | None = None,
        client: ReaderApiClient | None = None,
        guard: ResourceGuard | None = None,
        viewport: Viewport | None = None,
    ) -> None:
        """
        Initialize controller.

        Args:
            settings: Reader settings (loaded from environment if None)
            client: Remote service client (created from settings if None)
            guard: Local handle owner (created from settings if None)
            viewport: Initially mounted viewport
        """
        self.settings = settings or get_settings()
        self.session = ReaderSession()
        self.store = TranscriptStore()
        self.client = client or ReaderApiClient(self.settings)
        self.guard = guard or ResourceGuard(self.settings.handle_dir)
        self._tasks: set[asyncio.Task[None]] = set()

        self.orchestrator = UploadOrchestrator(self.session, self.store, self.client)
        self.documents = DocumentSession(
            self.session,
            self.guard,
            self.store,
            self.orchestrator,
            self.settings,
            spawn=self._spawn,
        )
        self.dispatcher = QueryDispatcher(self.session, self.store, self.client, spawn=self._spawn)
        self.navigator = CitationNavigator(viewport)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> "asyncio.Task[None]":
        task = asyncio.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    @property
    def pending_tasks(self) -> tuple["asyncio.Task[None]", ...]:
        return tuple(self._tasks)

    def select(self, candidate: DocumentCandidate | None) -> "asyncio.Task[None]":
        """Select a document and start processing it. See DocumentSession.select."""
        return self.documents.select(candidate)

    def reset(self) -> None:
        """Drop the active document and its transcript."""
        self.documents.reset()
        self.navigator.reset()

    def ask(self, question: str) -> "asyncio.Task[None] | None":
        """Ask a question about the active document. See QueryDispatcher.ask."""
        return self.dispatcher.ask(question)

    def focus(self, citation: Citation) -> None:
        """Bring the viewport into view for citation."""
        self.navigator.focus(citation)

    def mount_viewport(self, viewport: Viewport) -> None:
        self.navigator.mount(viewport)

    def unmount_viewport(self) -> None:
        self.navigator.unmount()

    def subscribe(self, listener: TranscriptListener) -> Callable[[], None]:
        """Register a "scroll to newest" listener on the transcript."""
        return self.store.subscribe(listener)

    def snapshot(self) -> SessionSnapshot:
        """Read-only view of the current state for rendering."""
        document = self.session.document
        viewport = self.navigator.viewport
        return SessionSnapshot(
            document_name=document.name if document else None,
            document_uri=document.handle.uri if document else None,
            state=self.session.state,
            is_processing=self.session.is_processing,
            is_chat_loading=self.session.is_chat_loading,
            transcript=list(self.store.entries),
            focused_page=getattr(viewport, "focused_page", None),
        )

    async def wait_idle(self) -> None:
        """Wait until every scheduled upload and chat request has resolved."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    async def aclose(self) -> None:
        """Let in-flight requests finish, release the handle and close the client."""
        await self.wait_idle()
        self.guard.release()
        await self.client.aclose()
        logger.info(f"{__name__}:aclose - Controller closed")

    async def __aenter__(self) -> "ReaderController":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

