"""
Reader session state.

Single mutable state value owned by the controller and handed to each
service, in place of ambient globals.

Dependencies: dataclasses (stdlib)
System role: Shared session state
"""

from dataclasses import dataclass

from pdf_reader.models.document import Document, ProcessingState


@dataclass
class ReaderSession:
    """Current document, its lifecycle state and the in-flight flags."""

    document: Document | None = None
    state: ProcessingState = ProcessingState.EMPTY
    is_processing: bool = False
    is_chat_loading: bool = False
    generation: int = 0

    def next_generation(self) -> int:
        """Invalidate every request issued under the previous generation."""
        self.generation += 1
        return self.generation

    def is_current(self, generation: int) -> bool:
        return self.generation == generation
