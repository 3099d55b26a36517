"""
Citation domain model.

Represents a page reference returned alongside an answer.

Dependencies: pydantic
System role: Citation data structure
"""

from pydantic import BaseModel, ConfigDict, Field, PositiveInt


class Citation(BaseModel):
    """Citation model for source attribution."""

    model_config = ConfigDict(frozen=True)

    page: PositiveInt = Field(description="Page number in the document")


class FocusRequest(BaseModel):
    """Request schema for bringing a cited page into view."""

    page: PositiveInt = Field(description="Cited page number")

    def to_citation(self) -> Citation:
        return Citation(page=self.page)
