"""
Document session.

Owns the selected document and its lifecycle:
EMPTY -> UPLOADING -> READY | FAILED, and back to EMPTY on reset.

Dependencies: pdf_reader.boundary.resource_guard, pdf_reader.application.services
System role: Document lifecycle management
"""

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from pdf_reader.application.services.transcript_store import TranscriptStore
from pdf_reader.application.services.upload_orchestrator import (
    UploadOrchestrator,
    processing_message,
)
from pdf_reader.application.session_state import ReaderSession
from pdf_reader.boundary.resource_guard import ResourceGuard
from pdf_reader.configs.settings import ReaderSettings
from pdf_reader.core.exceptions import ValidationError
from pdf_reader.models.document import Document, DocumentCandidate, ProcessingState
from pdf_reader.models.transcript import SystemEntry

logger = logging.getLogger(__name__)

Spawn = Callable[[Coroutine[Any, Any, None]], "asyncio.Task[None]"]


class DocumentSession:
    """
    Selection and reset of the active document.

    Validation happens before any mutation, so a rejected candidate leaves
    the document, state and transcript untouched.
    """

    def __init__(
        self,
        session: ReaderSession,
        guard: ResourceGuard,
        store: TranscriptStore,
        orchestrator: UploadOrchestrator,
        settings: ReaderSettings,
        spawn: Spawn = asyncio.create_task,
    ) -> None:
        """
        Initialize document session.

        Args:
            session: Shared reader session state
            guard: Owner of the local document handle
            store: Transcript store
            orchestrator: Upload orchestrator driven on selection
            settings: Reader settings (accepted type, size limit)
            spawn: Scheduler for the background upload
        """
        self.session = session
        self.guard = guard
        self.store = store
        self.orchestrator = orchestrator
        self.settings = settings
        self._spawn = spawn

    def validate(self, candidate: DocumentCandidate | None) -> DocumentCandidate:
        """
        Check a candidate against selection rules.

        Raises:
            ValidationError: Missing file, wrong media type or oversized file
        """
        if candidate is None:
            raise ValidationError("Please select a PDF file", field="file")

        accepted = self.settings.accepted_media_type
        if candidate.media_type.split(";")[0].strip().lower() != accepted:
            raise ValidationError(
                "Please select a PDF file",
                field="media_type",
                details={"media_type": candidate.media_type, "accepted": accepted},
            )

        if candidate.size > self.settings.max_upload_bytes:
            raise ValidationError(
                "The selected file is too large",
                field="size",
                details={"size": candidate.size, "limit": self.settings.max_upload_bytes},
            )
        return candidate

    def select(self, candidate: DocumentCandidate | None) -> "asyncio.Task[None]":
        """
        Make candidate the active document and start processing it.

        Args:
            candidate: File offered by the user

        Returns:
            asyncio.Task: The scheduled upload (callers need not await it)

        Raises:
            ValidationError: Candidate rejected (no state change)
            OSError: Local handle could not be written (session is reset)
        """
        candidate = self.validate(candidate)

        try:
            handle = self.guard.acquire(candidate.name, candidate.content)
        except OSError:
            logger.exception(f"{__name__}:select - Failed to materialize {candidate.name}")
            self.reset()
            raise

        generation = self.session.next_generation()
        self.session.document = Document(
            name=candidate.name,
            media_type=candidate.media_type,
            handle=handle,
            generation=generation,
        )
        self.session.state = ProcessingState.UPLOADING
        self.session.is_processing = True

        placeholder = SystemEntry(content=processing_message(candidate.name), is_processing=True)
        self.store.reset_to(placeholder)

        logger.info(
            f"{__name__}:select - Selected {candidate.name}",
            extra={"generation": generation, "size": candidate.size},
        )
        return self._spawn(self.orchestrator.submit(candidate, placeholder.id, generation))

    def reset(self) -> None:
        """Release the handle and return to the empty state. Never fails."""
        released = self.guard.release()
        self.session.next_generation()
        self.session.document = None
        self.session.state = ProcessingState.EMPTY
        self.session.is_processing = False
        self.store.clear()
        logger.info(f"{__name__}:reset - Session cleared (handle released={released})")
