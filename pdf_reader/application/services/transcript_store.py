"""
Transcript store.

Append-only ordered log of conversation entries. The only in-place change is
the swap of a placeholder by its id, resolved through an index map.

Dependencies: pdf_reader.models.transcript
System role: Conversation log owner
"""

import logging
from collections.abc import Callable, Iterator

from pdf_reader.models.transcript import SystemEntry, TranscriptEntry

logger = logging.getLogger(__name__)

TranscriptListener = Callable[[TranscriptEntry], None]


class TranscriptStore:
    """Ordered transcript with "scroll to newest" notifications."""

    def __init__(self) -> None:
        self._entries: list[TranscriptEntry] = []
        self._index_by_id: dict[str, int] = {}
        self._listeners: list[TranscriptListener] = []

    @property
    def entries(self) -> tuple[TranscriptEntry, ...]:
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TranscriptEntry]:
        return iter(tuple(self._entries))

    def last(self) -> TranscriptEntry | None:
        return self._entries[-1] if self._entries else None

    def subscribe(self, listener: TranscriptListener) -> Callable[[], None]:
        """
        Register a listener called with every appended or swapped-in entry.

        Args:
            listener: Callback receiving the changed entry

        Returns:
            Callable: Function that removes the listener
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def append(self, entry: TranscriptEntry) -> None:
        """Add entry at the end and notify listeners."""
        self._index_by_id[entry.id] = len(self._entries)
        self._entries.append(entry)
        self._notify(entry)

    def replace(self, entry_id: str, entry: TranscriptEntry) -> None:
        """
        Swap the entry identified by entry_id for a new one, in place, and
        notify listeners with the replacement.

        Args:
            entry_id: Id of the entry being replaced
            entry: Replacement entry

        Raises:
            KeyError: If no entry with entry_id is in the transcript
        """
        index = self._index_by_id.pop(entry_id)
        self._entries[index] = entry
        self._index_by_id[entry.id] = index
        self._notify(entry)

    def clear(self) -> None:
        self._entries.clear()
        self._index_by_id.clear()

    def reset_to(self, entry: SystemEntry) -> None:
        """Clear the transcript and start over with a single entry."""
        self.clear()
        self.append(entry)

    def _notify(self, entry: TranscriptEntry) -> None:
        for listener in list(self._listeners):
            try:
                listener(entry)
            except Exception as e:
                logger.exception(
                    f"{__name__}:_notify - Transcript listener failed",
                    extra={"entry_id": entry.id, "error": str(e)},
                )
