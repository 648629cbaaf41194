"""
Undo/redo history for Pixel Painter.

History is a linear list of full buffer snapshots with a cursor. Capturing
after an undo prunes the redo branch. Capacity is bounded; when full the
oldest entry is evicted and the cursor is rebased.

Classes:
    HistoryEntry: Immutable snapshot with its sequence number
    HistoryStack: Bounded linear undo/redo history
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List

from PP_Libs.constants import DEFAULT_HISTORY_CAPACITY
from PP_Libs.exceptions import NoHistoryError
from PP_Libs.RasterLib.pixel_buffer import BufferSnapshot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HistoryEntry:
    """One captured canvas state.

    Attributes:
        snapshot: Full copy of the buffer at capture time
        sequence: Monotonic capture number (survives eviction)
        timestamp: Wall-clock capture time in seconds
    """
    snapshot: BufferSnapshot
    sequence: int
    timestamp: float = field(default_factory=time.time)


class HistoryStack:
    """
    Bounded linear history of buffer snapshots.

    ``index`` is -1 while empty and otherwise points at the entry matching
    the current buffer. Undo is possible while index > 0 so the first
    capture (the blank canvas) can never be undone past.

    Example:
        >>> history = HistoryStack(capacity=50)
        >>> history.capture(buffer.snapshot())
        >>> buffer.set(0, 0, (255, 0, 0))
        >>> history.capture(buffer.snapshot())
        >>> buffer.restore(history.undo().snapshot)
    """

    def __init__(self, capacity: int = DEFAULT_HISTORY_CAPACITY):
        """
        Initialize an empty history.

        Args:
            capacity: Maximum number of entries kept (>= 1)

        Raises:
            ValueError: If capacity is less than 1
        """
        capacity = int(capacity)
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")

        self.capacity = capacity
        self._entries: List[HistoryEntry] = []
        self._index = -1
        self._next_sequence = 0

    @property
    def index(self) -> int:
        return self._index

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def entries(self) -> List[HistoryEntry]:
        return list(self._entries)

    def capture(self, snapshot: BufferSnapshot) -> HistoryEntry:
        """
        Record a new canvas state.

        Args:
            snapshot: The buffer snapshot to store

        Returns:
            The new entry, which becomes current
        """
        if self._index < len(self._entries) - 1:
            pruned = len(self._entries) - 1 - self._index
            del self._entries[self._index + 1:]
            logger.debug(f"Pruned {pruned} redo entries")

        entry = HistoryEntry(snapshot=snapshot, sequence=self._next_sequence)
        self._next_sequence += 1
        self._entries.append(entry)

        overflow = len(self._entries) - self.capacity
        if overflow > 0:
            del self._entries[:overflow]

        self._index = len(self._entries) - 1
        self._check_invariant()

        logger.debug(f"Captured history entry {entry.sequence} ({len(self._entries)}/{self.capacity})")
        return entry

    def undo(self) -> HistoryEntry:
        """
        Step back one entry.

        Returns:
            The entry now current, for the caller to restore

        Raises:
            NoHistoryError: If there is nothing to undo
        """
        if not self.can_undo():
            raise NoHistoryError("Nothing to undo")
        self._index -= 1
        logger.debug(f"Undo to history index {self._index}")
        return self._entries[self._index]

    def redo(self) -> HistoryEntry:
        """
        Step forward one entry.

        Raises:
            NoHistoryError: If there is nothing to redo
        """
        if not self.can_redo():
            raise NoHistoryError("Nothing to redo")
        self._index += 1
        logger.debug(f"Redo to history index {self._index}")
        return self._entries[self._index]

    def can_undo(self) -> bool:
        return self._index > 0

    def can_redo(self) -> bool:
        return self._index < len(self._entries) - 1

    def current(self) -> HistoryEntry:
        if self._index < 0:
            raise NoHistoryError("History is empty")
        return self._entries[self._index]

    def clear(self) -> None:
        self._entries.clear()
        self._index = -1
        logger.warning("History cleared")

    def get_stats(self) -> Dict[str, Any]:
        """
        Get statistics about history usage.

        Returns:
            dict: entry count, index, undo/redo availability and capacity
        """
        return {
            "entries": len(self._entries),
            "index": self._index,
            "undo_count": max(0, self._index),
            "redo_count": len(self._entries) - 1 - self._index,
            "capacity": self.capacity,
            "full": len(self._entries) >= self.capacity,
        }

    def _check_invariant(self) -> None:
        if not -1 <= self._index <= len(self._entries) - 1:
            raise RuntimeError(
                f"History index {self._index} out of range for {len(self._entries)} entries"
            )
