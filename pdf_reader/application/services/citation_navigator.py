"""
Citation navigator.

Turns a citation click into a best-effort "bring into view" on the mounted
viewport. Does not guarantee the cited page itself is shown.

Dependencies: pdf_reader.boundary.viewport
System role: Citation-triggered navigation
"""

import logging

from pdf_reader.boundary.viewport import Viewport
from pdf_reader.models.citation import Citation

logger = logging.getLogger(__name__)


class CitationNavigator:
    """Forwards citation focus requests to the current viewport, if any."""

    def __init__(self, viewport: Viewport | None = None) -> None:
        self._viewport = viewport

    @property
    def viewport(self) -> Viewport | None:
        return self._viewport

    def mount(self, viewport: Viewport) -> None:
        self._viewport = viewport

    def unmount(self) -> None:
        self._viewport = None

    def focus(self, citation: Citation) -> None:
        """Scroll the viewport into view for citation; no-op without a viewport."""
        if self._viewport is None:
            logger.debug(f"{__name__}:focus - No viewport mounted, page={citation.page}")
            return

        logger.info(f"{__name__}:focus - Navigate to page {citation.page}")
        try:
            self._viewport.scroll_into_view(citation.page)
        except Exception as e:
            logger.warning(
                f"{__name__}:focus - Viewport failed to scroll: {type(e).__name__}: {e}",
                extra={"page": citation.page},
            )

    def reset(self) -> None:
        """Clear the viewport's navigation state after the document is dropped."""
        if self._viewport is None:
            return

        try:
            self._viewport.clear()
        except Exception as e:
            logger.warning(f"{__name__}:reset - Viewport failed to clear: {type(e).__name__}: {e}")
