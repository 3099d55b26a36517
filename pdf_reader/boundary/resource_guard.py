"""
Local document handle ownership.

Materializes the selected document as a temporary file that the viewport can
address, and guarantees the previous file is removed whenever the handle is
superseded or cleared.

Dependencies: tempfile, shutil (stdlib)
System role: Exclusive owner of the single live document handle
"""

import logging
import re
import shutil
import tempfile
from pathlib import Path

from pdf_reader.models.document import LocalHandle

logger = logging.getLogger(__name__)

HANDLE_DIR_PREFIX = "pdf_reader_"
_UNSAFE_NAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _safe_filename(name: str) -> str:
    cleaned = _UNSAFE_NAME_CHARS.sub("_", Path(name).name).strip("._")
    return cleaned or "document.pdf"


class ResourceGuard:
    """
    Owns at most one live LocalHandle.

    Every acquire releases the handle it replaces, and release never deletes
    the same handle twice.
    """

    def __init__(self, base_dir: str | Path | None = None) -> None:
        """
        Initialize guard.

        Args:
            base_dir: Parent directory for handle files (system temp dir if None)
        """
        self._base_dir = Path(base_dir) if base_dir else None
        self._handle: LocalHandle | None = None
        self.release_count = 0

    @property
    def handle(self) -> LocalHandle | None:
        return self._handle

    def acquire(self, name: str, content: bytes) -> LocalHandle:
        """
        Replace the current handle with a new one holding content.

        Args:
            name: Original document filename
            content: Document bytes

        Returns:
            LocalHandle: Newly materialized handle

        Raises:
            OSError: If the file cannot be written (no handle is held afterwards)
        """
        self.release()

        if self._base_dir is not None:
            self._base_dir.mkdir(parents=True, exist_ok=True)
        temp_dir = Path(
            tempfile.mkdtemp(
                prefix=HANDLE_DIR_PREFIX,
                dir=str(self._base_dir) if self._base_dir else None,
            )
        )
        path = temp_dir / _safe_filename(name)
        try:
            path.write_bytes(content)
        except OSError:
            shutil.rmtree(temp_dir, ignore_errors=True)
            raise

        self._handle = LocalHandle(path=path)
        logger.debug("Acquired document handle", extra={"path": str(path), "size": len(content)})
        return self._handle

    def release(self) -> bool:
        """
        Release the current handle.

        Returns:
            bool: True if a handle was released, False if none was held
        """
        handle = self._handle
        if handle is None:
            return False

        self._handle = None
        self.release_count += 1
        _remove_handle_files(handle.path)
        logger.debug("Released document handle", extra={"path": str(handle.path)})
        return True

    def __enter__(self) -> "ResourceGuard":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.release()


def _remove_handle_files(path: Path) -> None:
    """Remove a handle file and its private temp directory."""
    try:
        if path.exists():
            path.unlink()
        parent_dir = path.parent
        if parent_dir.exists() and parent_dir.name.startswith(HANDLE_DIR_PREFIX):
            shutil.rmtree(parent_dir, ignore_errors=True)
    except OSError as e:
        logger.warning(
            "Failed to remove document handle",
            extra={"path": str(path), "error": str(e)},
        )
