"""
Shared test fixtures and configuration for entire test suite.

Provides: settings pointing at a fake remote service, document candidates,
an httpx MockTransport backed fake of the upload/chat endpoints, and
controller factories.
Dependencies: pytest, httpx
System role: Test infrastructure and fixture management
"""

import asyncio
import json
from pathlib import Path
from typing import Any

import httpx
import pytest

from pdf_reader.application.controller import ReaderController
from pdf_reader.boundary.api_client import ReaderApiClient
from pdf_reader.boundary.resource_guard import ResourceGuard
from pdf_reader.boundary.viewport import RecordingViewport
from pdf_reader.configs.settings import ReaderSettings
from pdf_reader.models.document import DocumentCandidate

TEST_API_URL = "http://reader.test"
PDF_BYTES = b"%PDF-1.4\n1 0 obj\n<< >>\nendobj\n"


class FakeReaderService:
    """
    In-process stand-in for the processing and question-answering service.

    Replies are (status, body) tuples or exceptions to raise. Gates let a
    test hold a request in flight until it sets the event.
    """

    def __init__(self) -> None:
        self.upload_reply: tuple[int, Any] | Exception = (
            200,
            {"totalPages": 10, "chunksCreated": 42},
        )
        self.chat_reply: tuple[int, Any] | Exception = (
            200,
            {"response": "The deadline is March 3.", "citations": [{"page": 4}]},
        )
        self.upload_gate: asyncio.Event | None = None
        self.chat_gate: asyncio.Event | None = None
        self.requests: list[httpx.Request] = []

    def chat_bodies(self) -> list[dict]:
        return [json.loads(r.content) for r in self.requests if r.url.path == "/api/chat"]

    def upload_requests(self) -> list[httpx.Request]:
        return [r for r in self.requests if r.url.path == "/api/upload"]

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/api/upload":
            if self.upload_gate is not None:
                await self.upload_gate.wait()
            return self._reply(self.upload_reply, request)
        if request.url.path == "/api/chat":
            if self.chat_gate is not None:
                await self.chat_gate.wait()
            return self._reply(self.chat_reply, request)
        return httpx.Response(404, json={"error": "not found"})

    @staticmethod
    def _reply(reply: tuple[int, Any] | Exception, request: httpx.Request) -> httpx.Response:
        if isinstance(reply, Exception):
            raise reply
        status_code, body = reply
        if isinstance(body, bytes):
            return httpx.Response(status_code, content=body)
        if body is None:
            return httpx.Response(status_code)
        return httpx.Response(status_code, json=body)


@pytest.fixture
def reader_settings(tmp_path: Path) -> ReaderSettings:
    """Provide settings pointing at the fake service and a temp handle dir."""
    return ReaderSettings(api_url=TEST_API_URL, handle_dir=str(tmp_path / "handles"))


@pytest.fixture
def pdf_candidate() -> DocumentCandidate:
    """Provide a valid PDF candidate."""
    return DocumentCandidate(name="contract.pdf", media_type="application/pdf", content=PDF_BYTES)


@pytest.fixture
def text_candidate() -> DocumentCandidate:
    """Provide a candidate with a non-PDF media type."""
    return DocumentCandidate(name="notes.txt", media_type="text/plain", content=b"just text")


@pytest.fixture
def fake_service() -> FakeReaderService:
    """Provide the fake remote service."""
    return FakeReaderService()


@pytest.fixture
def api_client(reader_settings: ReaderSettings, fake_service: FakeReaderService) -> ReaderApiClient:
    """Provide an API client wired to the fake service."""
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(fake_service))
    return ReaderApiClient(reader_settings, http_client=http_client)


@pytest.fixture
def viewport() -> RecordingViewport:
    """Provide a recording viewport."""
    return RecordingViewport()


@pytest.fixture
def controller(
    reader_settings: ReaderSettings,
    api_client: ReaderApiClient,
    viewport: RecordingViewport,
):
    """
    Provide a controller talking to the fake service.

    Yields:
        ReaderController: Controller; its handle is released on teardown
    """
    guard = ResourceGuard(reader_settings.handle_dir)
    controller = ReaderController(
        settings=reader_settings,
        client=api_client,
        guard=guard,
        viewport=viewport,
    )
    yield controller
    guard.release()
