"""
Test suite for DocumentSession.

Tests selection validation (no mutation on rejection), handle replacement,
placeholder creation, upload scheduling and reset.

System role: Verification of document lifecycle management
"""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from pdf_reader.application.services.document_session import DocumentSession
from pdf_reader.application.services.transcript_store import TranscriptStore
from pdf_reader.application.session_state import ReaderSession
from pdf_reader.boundary.resource_guard import ResourceGuard
from pdf_reader.configs.settings import ReaderSettings
from pdf_reader.core.exceptions import ValidationError
from pdf_reader.models.document import DocumentCandidate, ProcessingState
from pdf_reader.models.transcript import SystemEntry, UserEntry


@pytest.fixture
def session() -> ReaderSession:
    return ReaderSession()


@pytest.fixture
def store() -> TranscriptStore:
    return TranscriptStore()


@pytest.fixture
def guard(tmp_path: Path) -> ResourceGuard:
    return ResourceGuard(tmp_path)


@pytest.fixture
def mock_orchestrator() -> MagicMock:
    """Provide orchestrator whose submit() returns a placeholder coroutine object."""
    return MagicMock()


@pytest.fixture
def mock_spawn() -> MagicMock:
    return MagicMock(name="spawn")


@pytest.fixture
def documents(
    session: ReaderSession,
    guard: ResourceGuard,
    store: TranscriptStore,
    mock_orchestrator: MagicMock,
    reader_settings: ReaderSettings,
    mock_spawn: MagicMock,
) -> DocumentSession:
    """Provide DocumentSession with a mocked orchestrator and scheduler."""
    return DocumentSession(session, guard, store, mock_orchestrator, reader_settings, spawn=mock_spawn)


class TestDocumentSessionSelectValidation:
    """Test suite for rejected selections."""

    @pytest.mark.parametrize(
        "media_type",
        ["text/plain", "image/png", "application/msword", "", "application/pdfx"],
    )
    def test_select_should_reject_non_pdf_without_mutation(
        self,
        documents: DocumentSession,
        session: ReaderSession,
        store: TranscriptStore,
        mock_spawn: MagicMock,
        media_type: str,
    ) -> None:
        """Test non-PDF candidates leave state and transcript untouched."""
        # Arrange
        store.append(UserEntry(content="kept"))
        before = (session.state, session.document, session.generation, store.entries)
        candidate = DocumentCandidate(name="x.bin", media_type=media_type, content=b"x")

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            documents.select(candidate)

        assert exc_info.value.field == "media_type"
        assert (session.state, session.document, session.generation, store.entries) == before
        mock_spawn.assert_not_called()

    def test_select_should_accept_media_type_parameters(
        self, documents: DocumentSession
    ) -> None:
        """Test a charset-style suffix and upper case still count as PDF."""
        candidate = DocumentCandidate(name="a.pdf", media_type="Application/PDF; qs=1", content=b"%PDF")
        assert documents.validate(candidate) is candidate

    def test_select_should_accept_pdf_with_mixed_case_setting(
        self,
        session: ReaderSession,
        guard: ResourceGuard,
        store: TranscriptStore,
        mock_orchestrator: MagicMock,
        mock_spawn: MagicMock,
        tmp_path: Path,
    ) -> None:
        """Test a configured type in mixed case still accepts ordinary PDFs."""
        # Arrange
        settings = ReaderSettings(accepted_media_type=" Application/PDF ", handle_dir=str(tmp_path))
        documents = DocumentSession(session, guard, store, mock_orchestrator, settings, spawn=mock_spawn)
        candidate = DocumentCandidate(name="a.pdf", media_type="application/pdf", content=b"%PDF")

        # Act & Assert
        assert documents.validate(candidate) is candidate

    def test_select_should_reject_missing_candidate(self, documents: DocumentSession) -> None:
        """Test selecting nothing is a validation error."""
        with pytest.raises(ValidationError, match="Please select a PDF file"):
            documents.select(None)

    def test_select_should_reject_oversized_file(
        self, documents: DocumentSession, reader_settings: ReaderSettings, guard: ResourceGuard
    ) -> None:
        """Test files over the configured limit are rejected before a handle is made."""
        # Arrange
        reader_settings.max_upload_bytes = 4
        candidate = DocumentCandidate(name="big.pdf", media_type="application/pdf", content=b"%PDF-1.4")

        # Act & Assert
        with pytest.raises(ValidationError) as exc_info:
            documents.select(candidate)

        assert exc_info.value.field == "size"
        assert guard.handle is None


class TestDocumentSessionSelect:
    """Test suite for accepted selections."""

    def test_select_should_enter_uploading_with_processing_placeholder(
        self,
        documents: DocumentSession,
        session: ReaderSession,
        store: TranscriptStore,
        pdf_candidate: DocumentCandidate,
    ) -> None:
        """Test selection sets UPLOADING and a single processing entry."""
        # Act
        documents.select(pdf_candidate)

        # Assert
        assert session.state is ProcessingState.UPLOADING
        assert session.is_processing is True
        assert session.document.name == "contract.pdf"
        [entry] = store.entries
        assert isinstance(entry, SystemEntry)
        assert entry.is_processing is True
        assert entry.is_error is False
        assert "contract.pdf" in entry.content

    def test_select_should_schedule_upload_with_placeholder_and_generation(
        self,
        documents: DocumentSession,
        session: ReaderSession,
        store: TranscriptStore,
        mock_orchestrator: MagicMock,
        mock_spawn: MagicMock,
        pdf_candidate: DocumentCandidate,
    ) -> None:
        """Test the orchestrator receives the candidate, placeholder id and generation."""
        # Act
        task = documents.select(pdf_candidate)

        # Assert
        placeholder = store.entries[0]
        mock_orchestrator.submit.assert_called_once_with(
            pdf_candidate, placeholder.id, session.generation
        )
        mock_spawn.assert_called_once_with(mock_orchestrator.submit.return_value)
        assert task is mock_spawn.return_value

    def test_select_should_replace_transcript_and_handle(
        self,
        documents: DocumentSession,
        session: ReaderSession,
        store: TranscriptStore,
        guard: ResourceGuard,
        pdf_candidate: DocumentCandidate,
    ) -> None:
        """Test a second selection releases the first handle and drops old entries."""
        # Arrange
        documents.select(pdf_candidate)
        first_handle = session.document.handle
        first_generation = session.generation
        store.append(UserEntry(content="question about the old file"))
        other = DocumentCandidate(name="other.pdf", media_type="application/pdf", content=b"%PDF-2")

        # Act
        documents.select(other)

        # Assert
        assert not first_handle.path.exists()
        assert guard.release_count == 1
        assert session.document.handle.path.read_bytes() == b"%PDF-2"
        assert session.generation == first_generation + 1
        assert len(store) == 1
        assert store.entries[0].is_processing is True

    def test_select_should_reset_when_handle_cannot_be_written(
        self,
        documents: DocumentSession,
        session: ReaderSession,
        store: TranscriptStore,
        guard: ResourceGuard,
        pdf_candidate: DocumentCandidate,
        mock_spawn: MagicMock,
    ) -> None:
        """Test a disk failure propagates and leaves an empty session."""
        # Arrange
        documents.select(pdf_candidate)
        mock_spawn.reset_mock()

        # Act & Assert
        with patch.object(Path, "write_bytes", side_effect=OSError("read-only")):
            with pytest.raises(OSError):
                documents.select(pdf_candidate)

        assert session.document is None
        assert session.state is ProcessingState.EMPTY
        assert len(store) == 0
        assert guard.release_count == 1
        mock_spawn.assert_not_called()


class TestDocumentSessionReset:
    """Test suite for DocumentSession.reset."""

    def test_reset_should_return_to_empty(
        self,
        documents: DocumentSession,
        session: ReaderSession,
        store: TranscriptStore,
        guard: ResourceGuard,
        pdf_candidate: DocumentCandidate,
    ) -> None:
        """Test reset clears document, state, flag and transcript, releasing once."""
        # Arrange
        documents.select(pdf_candidate)
        handle = session.document.handle

        # Act
        documents.reset()

        # Assert
        assert session.document is None
        assert session.state is ProcessingState.EMPTY
        assert session.is_processing is False
        assert len(store) == 0
        assert guard.release_count == 1
        assert not handle.path.exists()

    def test_reset_when_empty_should_not_fail(
        self, documents: DocumentSession, guard: ResourceGuard
    ) -> None:
        """Test reset with nothing selected releases nothing."""
        documents.reset()
        documents.reset()
        assert guard.release_count == 0

    def test_reset_should_invalidate_generation(
        self, documents: DocumentSession, session: ReaderSession, pdf_candidate: DocumentCandidate
    ) -> None:
        """Test requests issued before reset are recognized as stale."""
        # Arrange
        documents.select(pdf_candidate)
        issued_under = session.generation

        # Act
        documents.reset()

        # Assert
        assert session.is_current(issued_under) is False
