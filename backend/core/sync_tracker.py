"""
Sync progress tracking.

Tracks how many posts a background summary sync has to process and how
many it has finished. One tracker instance lives for the process.

Dependencies: asyncio (stdlib)
System role: Progress state for the full summary sync
"""

import asyncio


class SyncProgressTracker:
    """In-memory progress counter for one running sync at a time."""

    def __init__(self) -> None:
        self._total = 0
        self._finished = 0
        self._lock = asyncio.Lock()

    @property
    def total(self) -> int:
        return self._total

    @property
    def finished(self) -> int:
        return self._finished

    @property
    def running(self) -> bool:
        return self._finished < self._total

    async def start(self, total: int) -> None:
        """
        Reset counters for a new sync.

        Args:
            total: Number of posts queued
        """
        async with self._lock:
            self._total = total
            self._finished = 0

    async def mark_finished(self) -> None:
        """Count one post as processed, whether it succeeded or not."""
        async with self._lock:
            self._finished += 1

    def snapshot(self) -> dict[str, int]:
        return {"total": self._total, "finished": self._finished}
