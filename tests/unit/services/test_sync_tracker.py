"""
Test suite for SyncProgressTracker.

System role: Verification of background sync progress counters
"""

import asyncio

import pytest

from backend.core.sync_tracker import SyncProgressTracker


class TestSyncProgressTracker:
    """Test suite for SyncProgressTracker."""

    def test_initial_snapshot_should_be_idle(self) -> None:
        tracker = SyncProgressTracker()

        assert tracker.snapshot() == {"total": 0, "finished": 0}
        assert tracker.running is False

    @pytest.mark.asyncio
    async def test_start_should_reset_finished(self) -> None:
        # Arrange
        tracker = SyncProgressTracker()
        await tracker.start(2)
        await tracker.mark_finished()

        # Act
        await tracker.start(5)

        # Assert
        assert tracker.snapshot() == {"total": 5, "finished": 0}
        assert tracker.running is True

    @pytest.mark.asyncio
    async def test_concurrent_marks_should_all_count(self) -> None:
        tracker = SyncProgressTracker()
        await tracker.start(20)

        await asyncio.gather(*(tracker.mark_finished() for _ in range(20)))

        assert tracker.finished == 20
        assert tracker.running is False
