"""
Transcript entry models.

Closed tagged union over the three conversation roles. Each entry carries a
stable id so a placeholder can be swapped in place without positional
assumptions.

Dependencies: pydantic
System role: Conversation log contracts
"""

import uuid
from datetime import datetime, timezone
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from pdf_reader.models.citation import Citation


def _new_entry_id() -> str:
    return uuid.uuid4().hex


def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()


class _BaseEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(default_factory=_new_entry_id)
    timestamp: str = Field(default_factory=_utc_timestamp, description="ISO-8601 UTC")
    content: str


class SystemEntry(_BaseEntry):
    """Status notice about the document (processing, ready, failed)."""

    role: Literal["system"] = "system"
    is_processing: bool = False
    is_error: bool = False


class UserEntry(_BaseEntry):
    """Question as typed by the user."""

    role: Literal["user"] = "user"


class BotEntry(_BaseEntry):
    """Answer from the question-answering service."""

    role: Literal["bot"] = "bot"
    citations: tuple[Citation, ...] = ()


TranscriptEntry = Annotated[
    Union[SystemEntry, UserEntry, BotEntry],
    Field(discriminator="role"),
]
