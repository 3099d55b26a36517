"""
Document domain models and schemas.

Selected document, its lifecycle state, and the processing summary
returned by the upload endpoint.

Dependencies: pydantic
System role: Document contracts
"""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, NonNegativeInt


class ProcessingState(str, Enum):
    """Lifecycle of the selected document."""

    EMPTY = "empty"
    UPLOADING = "uploading"
    READY = "ready"
    FAILED = "failed"


class DocumentCandidate(BaseModel):
    """A file offered by the user for selection."""

    name: str = Field(description="Original filename")
    media_type: str = Field(description="Declared MIME type")
    content: bytes = Field(repr=False, description="Document bytes")

    @property
    def size(self) -> int:
        return len(self.content)

    @classmethod
    def from_path(cls, path: str | Path, media_type: str = "application/pdf") -> "DocumentCandidate":
        """Build a candidate from a file on disk."""
        path = Path(path)
        return cls(name=path.name, media_type=media_type, content=path.read_bytes())


class LocalHandle(BaseModel):
    """Locally addressable reference to the selected document's bytes."""

    model_config = ConfigDict(frozen=True)

    path: Path = Field(description="Materialized file")

    @property
    def uri(self) -> str:
        return self.path.resolve().as_uri()


class Document(BaseModel):
    """The single active document."""

    model_config = ConfigDict(frozen=True)

    name: str
    media_type: str
    handle: LocalHandle
    generation: int = Field(description="Session generation the document was selected in")


class UploadSummary(BaseModel):
    """Success payload of the upload endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    total_pages: NonNegativeInt = Field(alias="totalPages")
    chunks_created: NonNegativeInt = Field(alias="chunksCreated")
    search_method: str | None = Field(default=None, alias="searchMethod")
    warning: str | None = None
