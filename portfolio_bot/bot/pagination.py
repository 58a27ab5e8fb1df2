"""Per-chat pagination cursors for the Projects and Git screens.

Each chat has two independent zero-based indices. Cursors are reset when the
user enters a section and otherwise persist; a stale cursor that no longer
fits the current item count is clamped on the next move.
"""

import logging

from ..core.locks import ReadWriteLock
from .types import AdvanceResult, Direction

logger = logging.getLogger(__name__)


class PaginationState:
    """Process-wide cursor store keyed by chat id."""

    def __init__(self) -> None:
        self._lock = ReadWriteLock()
        self._project_index: dict[int, int] = {}
        self._commit_page_index: dict[int, int] = {}

    async def reset_project_cursor(self, chat_id: int) -> None:
        async with self._lock.write():
            self._project_index[chat_id] = 0

    async def reset_commit_cursor(self, chat_id: int) -> None:
        async with self._lock.write():
            self._commit_page_index[chat_id] = 0

    async def advance_project(
        self, chat_id: int, direction: Direction, bound: int
    ) -> AdvanceResult:
        """Move the project cursor by one within ``[0, bound - 1]``.

        Args:
            chat_id: Chat owning the cursor.
            direction: Direction of the move.
            bound: Number of projects.

        Returns:
            New index and whether it changed. At a boundary the index is left
            as is and ``moved`` is False.
        """
        async with self._lock.write():
            return self._advance(self._project_index, chat_id, direction, bound)

    async def advance_commit_page(
        self, chat_id: int, direction: Direction, total_pages: int
    ) -> AdvanceResult:
        """Move the commit page cursor by one within ``[0, total_pages - 1]``."""
        async with self._lock.write():
            return self._advance(self._commit_page_index, chat_id, direction, total_pages)

    @staticmethod
    def _advance(
        cursors: dict[int, int], chat_id: int, direction: Direction, bound: int
    ) -> AdvanceResult:
        if bound <= 0:
            cursors[chat_id] = 0
            return AdvanceResult(0, False)

        current = min(max(cursors.get(chat_id, 0), 0), bound - 1)
        if direction is Direction.NEXT:
            target = current + 1 if current < bound - 1 else current
        else:
            target = current - 1 if current > 0 else current

        cursors[chat_id] = target
        return AdvanceResult(target, target != current)
