"""
Chat wire schemas.

Request/response schemas for the question-answering endpoint and for the
local chat route.

Dependencies: pydantic
System role: Chat API contracts
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from pdf_reader.models.citation import Citation
from pdf_reader.models.session import SessionSnapshot


class ChatRequest(BaseModel):
    """Body posted to the question-answering endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    message: str = Field(description="User question")
    file_name: str = Field(alias="fileName", description="Name of the processed document")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)


class ChatAnswer(BaseModel):
    """Success payload of the question-answering endpoint."""

    response: str
    citations: list[Citation] = Field(default_factory=list)

    @field_validator("citations", mode="before")
    @classmethod
    def default_citations(cls, value):
        return [] if value is None else value


class ChatTurnRequest(BaseModel):
    """Request schema for the local chat route."""

    message: str = Field(description="User question or message")


class ChatResponse(BaseModel):
    """Response schema for the local chat route."""

    accepted: bool = Field(description="False when the question was ignored")
    session: SessionSnapshot
