"""Pytest configuration shared by every test directory."""
import os
from typing import Callable, Dict, List

import pytest

# Render tests draw to an off-screen surface
os.environ.setdefault('SDL_VIDEODRIVER', 'dummy')
os.environ.setdefault('SDL_AUDIODRIVER', 'dummy')

from gamekit.games import FrameScheduler  # noqa: E402


class ManualScheduler(FrameScheduler):
    """Scheduler whose refreshes are fired by the test."""

    def __init__(self):
        self.pending: Dict[int, Callable[[], None]] = {}
        self.cancelled: List[int] = []
        self._next = 1

    def request_frame(self, callback):
        handle = self._next
        self._next += 1
        self.pending[handle] = callback
        return handle

    def cancel_frame(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def refresh(self, count: int = 1) -> None:
        for _ in range(count):
            due = list(self.pending.items())
            self.pending.clear()
            for _, callback in due:
                callback()


@pytest.fixture
def scheduler():
    """A FrameScheduler the test drives with refresh()."""
    return ManualScheduler()
