"""
Session snapshot schema.

Read-only view of the controller state consumed by the presentation layer.

Dependencies: pydantic
System role: View-model contract
"""

from pydantic import BaseModel, Field, computed_field

from pdf_reader.models.document import ProcessingState
from pdf_reader.models.transcript import TranscriptEntry


class SessionSnapshot(BaseModel):
    """Everything the interface needs to render itself."""

    document_name: str | None = None
    document_uri: str | None = None
    state: ProcessingState = ProcessingState.EMPTY
    is_processing: bool = False
    is_chat_loading: bool = False
    transcript: list[TranscriptEntry] = Field(default_factory=list)
    focused_page: int | None = Field(default=None, description="Last cited page brought into view")

    @computed_field
    @property
    def can_select(self) -> bool:
        return not self.is_processing

    @computed_field
    @property
    def can_ask(self) -> bool:
        return (
            self.document_name is not None
            and self.state is not ProcessingState.FAILED
            and not self.is_processing
            and not self.is_chat_loading
        )
