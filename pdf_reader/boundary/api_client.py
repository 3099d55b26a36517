"""
HTTP client for the document processing and question-answering service.

Wraps the two remote endpoints and converts every failure mode (transport
error, non-success status, error payload, unparsable body) into a typed
exception.

Dependencies: httpx, pydantic
System role: Remote service adapter
"""

import logging
from typing import Any

import httpx
from pydantic import ValidationError as PydanticValidationError

from pdf_reader.configs.settings import ReaderSettings
from pdf_reader.core.exceptions import ChatError, UploadError
from pdf_reader.models.chat import ChatAnswer, ChatRequest
from pdf_reader.models.document import UploadSummary

logger = logging.getLogger(__name__)


def _error_reason(response: httpx.Response) -> str | None:
    """Extract the server's {error: ...} message if the body carries one."""
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict) and body.get("error"):
        return str(body["error"])
    return None


class ReaderApiClient:
    """Async client for POST /api/upload and POST /api/chat."""

    def __init__(
        self,
        settings: ReaderSettings,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        Initialize API client.

        Args:
            settings: Reader settings with base URL and endpoint paths
            http_client: Optional preconfigured client (created lazily if None)
        """
        self._settings = settings
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load HTTP client to avoid opening connections before first use."""
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self._settings.request_timeout_seconds)
        return self._client

    async def upload_document(
        self,
        name: str,
        content: bytes,
        media_type: str,
    ) -> UploadSummary:
        """
        Upload a document for server-side processing.

        Args:
            name: Document filename
            content: Document bytes
            media_type: Declared MIME type

        Returns:
            UploadSummary: Page and chunk counts reported by the server

        Raises:
            UploadError: Transport failure, non-success status, error payload
                or malformed success payload
        """
        files = {self._settings.upload_field_name: (name, content, media_type)}
        try:
            response = await self.client.post(self._settings.upload_url, files=files)
        except httpx.HTTPError as e:
            raise UploadError(
                f"Could not reach the processing service: {type(e).__name__}",
                details={"url": self._settings.upload_url},
            ) from e

        if response.is_error:
            reason = _error_reason(response) or f"Server responded with status {response.status_code}"
            raise UploadError(reason, status_code=response.status_code)

        payload = self._json_body(response, UploadError)
        if isinstance(payload, dict) and payload.get("error"):
            raise UploadError(str(payload["error"]), status_code=response.status_code)

        try:
            return UploadSummary.model_validate(payload)
        except PydanticValidationError as e:
            raise UploadError(
                "Processing service returned an unexpected response",
                status_code=response.status_code,
                details={"errors": e.error_count()},
            ) from e

    async def ask(self, message: str, file_name: str) -> ChatAnswer:
        """
        Ask a question about a processed document.

        Args:
            message: User question, sent as typed
            file_name: Name of the processed document

        Returns:
            ChatAnswer: Answer text and cited pages

        Raises:
            ChatError: Transport failure, non-success status or malformed payload
        """
        body = ChatRequest(message=message, file_name=file_name).to_wire()
        try:
            response = await self.client.post(self._settings.chat_url, json=body)
        except httpx.HTTPError as e:
            raise ChatError(
                f"Could not reach the question-answering service: {type(e).__name__}",
                details={"url": self._settings.chat_url},
            ) from e

        if response.is_error:
            reason = _error_reason(response) or f"Server responded with status {response.status_code}"
            raise ChatError(reason, status_code=response.status_code)

        payload = self._json_body(response, ChatError)
        try:
            return ChatAnswer.model_validate(payload)
        except PydanticValidationError as e:
            raise ChatError(
                "Question-answering service returned an unexpected response",
                status_code=response.status_code,
                details={"errors": e.error_count()},
            ) from e

    @staticmethod
    def _json_body(response: httpx.Response, error_cls: type[UploadError] | type[ChatError]) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise error_cls(
                "Response body is not valid JSON",
                status_code=response.status_code,
            ) from e

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
