"""
Upload orchestrator.

Drives the one-shot upload/processing request and turns its outcome into
the final transcript entry for the document.

Dependencies: pdf_reader.boundary.api_client, pdf_reader.application.services.transcript_store
System role: Upload/processing handshake
"""

import logging

from pdf_reader.application.services.transcript_store import TranscriptStore
from pdf_reader.application.session_state import ReaderSession
from pdf_reader.boundary.api_client import ReaderApiClient
from pdf_reader.core.exceptions import UploadError
from pdf_reader.models.document import DocumentCandidate, ProcessingState, UploadSummary
from pdf_reader.models.transcript import SystemEntry

logger = logging.getLogger(__name__)

UNEXPECTED_UPLOAD_REASON = "Unexpected error while processing the document"
REMEDIATION_TEXT = (
    "Please try again with a smaller file, check your connection to the server, "
    "or reload the page."
)


def processing_message(name: str) -> str:
    return f'Uploading and processing "{name}". This may take a moment...'


def success_message(name: str, summary: UploadSummary) -> str:
    """Render the ready notice for a processed document."""
    parts = [
        f'PDF "{name}" has been uploaded and processed. '
        "You can now ask questions about its content.",
        f"Pages: {summary.total_pages}. Sections indexed: {summary.chunks_created}.",
    ]
    if summary.search_method:
        parts.append(f"Search method: {summary.search_method}.")
    if summary.warning:
        parts.append(f"Warning: {summary.warning}")
    return " ".join(parts)


def failure_message(name: str, reason: str) -> str:
    return f'Failed to upload and process "{name}": {reason.rstrip(".")}. {REMEDIATION_TEXT}'


class UploadOrchestrator:
    """Posts a selected document and resolves its processing placeholder."""

    def __init__(
        self,
        session: ReaderSession,
        store: TranscriptStore,
        client: ReaderApiClient,
    ) -> None:
        """
        Initialize orchestrator.

        Args:
            session: Shared reader session state
            store: Transcript holding the processing placeholder
            client: Remote service client
        """
        self.session = session
        self.store = store
        self.client = client

    async def submit(
        self,
        candidate: DocumentCandidate,
        placeholder_id: str,
        generation: int,
    ) -> None:
        """
        Upload candidate and replace the placeholder with the outcome.

        Flow:
        1. POST the bytes to the processing endpoint
        2. On success: ready notice with page/chunk counts, state READY
        3. On any failure: error notice with remediation, state FAILED
        4. If recording the outcome itself fails: state FAILED, generic error notice
        5. Always clear the processing flag (for the current generation)

        Outcomes arriving after the document was replaced or reset are
        logged and dropped.

        Args:
            candidate: Selected document
            placeholder_id: Id of the processing entry to replace
            generation: Session generation the upload was issued under
        """
        logger.info(
            f"{__name__}:submit - START name={candidate.name} size={candidate.size}",
            extra={"generation": generation},
        )
        try:
            try:
                summary = await self.client.upload_document(
                    name=candidate.name,
                    content=candidate.content,
                    media_type=candidate.media_type,
                )
            except Exception as e:
                self._resolve_failure(candidate, placeholder_id, generation, e)
            else:
                self._resolve_success(candidate, placeholder_id, generation, summary)
        except Exception:
            logger.exception(f"{__name__}:submit - Could not record outcome for {candidate.name}")
            self._mark_unrecorded_failure(candidate, placeholder_id, generation)
        finally:
            if self.session.is_current(generation):
                self.session.is_processing = False
            logger.info(f"{__name__}:submit - END name={candidate.name}")

    def _resolve_success(
        self,
        candidate: DocumentCandidate,
        placeholder_id: str,
        generation: int,
        summary: UploadSummary,
    ) -> None:
        if not self.session.is_current(generation):
            logger.info(
                f"{__name__}:submit - Discarding stale upload result for {candidate.name}",
                extra={"generation": generation, "current": self.session.generation},
            )
            return

        logger.info(
            f"{__name__}:submit - Processed pages={summary.total_pages} "
            f"chunks={summary.chunks_created} method={summary.search_method}"
        )
        self.store.replace(
            placeholder_id,
            SystemEntry(content=success_message(candidate.name, summary)),
        )
        self.session.state = ProcessingState.READY

    def _resolve_failure(
        self,
        candidate: DocumentCandidate,
        placeholder_id: str,
        generation: int,
        error: Exception,
    ) -> None:
        if isinstance(error, UploadError):
            logger.error(f"{__name__}:submit - Upload failed: {error}")
            reason = error.message
        else:
            logger.exception(
                f"{__name__}:submit - Unexpected upload failure: {type(error).__name__}: {error}"
            )
            reason = UNEXPECTED_UPLOAD_REASON

        if not self.session.is_current(generation):
            logger.info(
                f"{__name__}:submit - Discarding stale upload failure for {candidate.name}",
                extra={"generation": generation, "current": self.session.generation},
            )
            return

        self.store.replace(
            placeholder_id,
            SystemEntry(content=failure_message(candidate.name, reason), is_error=True),
        )
        self.session.state = ProcessingState.FAILED

    def _mark_unrecorded_failure(
        self,
        candidate: DocumentCandidate,
        placeholder_id: str,
        generation: int,
    ) -> None:
        if not self.session.is_current(generation):
            return

        self.session.state = ProcessingState.FAILED
        notice = SystemEntry(
            content=failure_message(candidate.name, UNEXPECTED_UPLOAD_REASON),
            is_error=True,
        )
        try:
            self.store.replace(placeholder_id, notice)
        except Exception:
            logger.exception(f"{__name__}:submit - Failure notice for {candidate.name} not recorded")
