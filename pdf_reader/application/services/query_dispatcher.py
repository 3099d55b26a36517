"""
Query dispatcher.

Sends questions to the question-answering endpoint one at a time and
records both sides of the exchange in the transcript.

Dependencies: pdf_reader.boundary.api_client, pdf_reader.application.services.transcript_store
System role: Chat request/response correlation
"""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from pdf_reader.application.services.transcript_store import TranscriptStore
from pdf_reader.application.session_state import ReaderSession
from pdf_reader.boundary.api_client import ReaderApiClient
from pdf_reader.models.document import ProcessingState
from pdf_reader.models.transcript import BotEntry, UserEntry

logger = logging.getLogger(__name__)

CHAT_ERROR_MESSAGE = (
    "Sorry, I encountered an error while processing your question. Please try again."
)

Spawn = Callable[[Coroutine[Any, Any, None]], "asyncio.Task[None]"]


class QueryDispatcher:
    """Single-flight chat dispatcher."""

    def __init__(
        self,
        session: ReaderSession,
        store: TranscriptStore,
        client: ReaderApiClient,
        spawn: Spawn = asyncio.create_task,
    ) -> None:
        self.session = session
        self.store = store
        self.client = client
        self._spawn = spawn

    def rejection_reason(self, question: str | None) -> str | None:
        """Return why ask() would ignore question, or None if it would be accepted."""
        if not question or not question.strip():
            return "empty question"
        if self.session.document is None:
            return "no document selected"
        if self.session.state is ProcessingState.FAILED:
            return "document failed to process"
        if self.session.is_chat_loading:
            return "chat request already in flight"
        return None

    def ask(self, question: str) -> "asyncio.Task[None] | None":
        """
        Ask a question about the active document.

        Calls that violate a precondition are ignored without touching the
        transcript.

        Args:
            question: Question as typed by the user

        Returns:
            asyncio.Task | None: Scheduled request, or None if ignored
        """
        reason = self.rejection_reason(question)
        if reason is not None:
            logger.debug(f"{__name__}:ask - Ignored: {reason}")
            return None

        document = self.session.document
        self.store.append(UserEntry(content=question))
        self.session.is_chat_loading = True
        return self._spawn(self._dispatch(question, document.name, self.session.generation))

    async def _dispatch(self, question: str, file_name: str, generation: int) -> None:
        logger.info(f"{__name__}:ask - START file={file_name} len={len(question)}")
        try:
            try:
                answer = await self.client.ask(message=question, file_name=file_name)
                entry = BotEntry(content=answer.response, citations=tuple(answer.citations))
                logger.info(f"{__name__}:ask - Answer received, citations={len(answer.citations)}")
            except Exception as e:
                logger.error(f"{__name__}:ask - Chat request failed: {type(e).__name__}: {e}")
                entry = BotEntry(content=CHAT_ERROR_MESSAGE)

            if self.session.is_current(generation):
                self.store.append(entry)
            else:
                logger.info(
                    f"{__name__}:ask - Discarding answer for replaced document {file_name}",
                    extra={"generation": generation, "current": self.session.generation},
                )
        finally:
            self.session.is_chat_loading = False
