"""
Document viewport boundary.

The rendering surface is passive: it shows a local handle and can be asked
to bring itself into view.

Dependencies: typing (stdlib)
System role: Contract between the citation navigator and the rendering surface
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Viewport(Protocol):
    """Rendering surface for the selected document."""

    def scroll_into_view(self, page: int) -> None:
        """Bring the viewport region into the user's view, best effort."""
        ...

    def clear(self) -> None:
        """Forget navigation state when the document is dropped."""
        ...


class RecordingViewport:
    """
    Viewport stand-in for the HTTP surface.

    Remembers the last requested page so the rendered page can scroll its
    document frame on the next refresh.
    """

    def __init__(self) -> None:
        self.focused_page: int | None = None
        self.focus_count = 0

    def scroll_into_view(self, page: int) -> None:
        self.focused_page = page
        self.focus_count += 1

    def clear(self) -> None:
        self.focused_page = None
