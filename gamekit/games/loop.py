"""
Frame loop driver.

A GameLoop runs one simulation step followed by one render per display
refresh until it is stopped. Refreshes come from a FrameScheduler, which
works like a browser's requestAnimationFrame: a callback is requested for
the next refresh and can be cancelled before it fires.

Speed is coupled to the refresh rate: the simulation advances exactly one
logical tick per frame, never by elapsed wall-clock time.

Usage:
    scheduler = PygameFrameScheduler(fps=60)
    loop = GameLoop(step=game.update, render=draw, scheduler=scheduler)
    loop.start()
    while running:
        pump_input()
        scheduler.tick()
    loop.stop()
"""
from abc import ABC, abstractmethod
from functools import partial
from typing import Callable, Dict, Optional

import pygame

from gamekit.logging import get_logger

log = get_logger('game_loop')

FrameCallback = Callable[[], None]


class FrameScheduler(ABC):
    """Source of display-refresh callbacks."""

    @abstractmethod
    def request_frame(self, callback: FrameCallback) -> int:
        """Schedule callback for the next refresh.

        Returns:
            Handle that can be passed to cancel_frame()
        """
        pass

    @abstractmethod
    def cancel_frame(self, handle: int) -> None:
        """Cancel a pending callback. Unknown or spent handles are ignored."""
        pass


class PygameFrameScheduler(FrameScheduler):
    """FrameScheduler driven by pygame.time.Clock.

    Call tick() once per pass of the application's main loop. It waits for
    the next refresh at the configured frame rate and then runs every
    callback that was pending before the refresh. Callbacks requested while
    a refresh is being processed fire on the following refresh.
    """

    def __init__(self, fps: int = 60, clock: Optional[pygame.time.Clock] = None):
        """Initialize scheduler.

        Args:
            fps: Target refresh rate (0 = uncapped)
            clock: Clock to wait on (default: a new pygame.time.Clock)
        """
        self._fps = fps
        self._clock = clock if clock is not None else pygame.time.Clock()
        self._pending: Dict[int, FrameCallback] = {}
        self._next_handle = 1

    @property
    def fps(self) -> int:
        """Target refresh rate."""
        return self._fps

    @property
    def pending_count(self) -> int:
        """Number of callbacks waiting for the next refresh."""
        return len(self._pending)

    def request_frame(self, callback: FrameCallback) -> int:
        handle = self._next_handle
        self._next_handle += 1
        self._pending[handle] = callback
        return handle

    def cancel_frame(self, handle: int) -> None:
        self._pending.pop(handle, None)

    def tick(self) -> float:
        """Wait for the next refresh and fire the due callbacks.

        Returns:
            Seconds elapsed since the previous tick
        """
        dt = self._clock.tick(self._fps) / 1000.0

        due = sorted(self._pending)
        for handle in due:
            # A callback may cancel another one that is due on this refresh
            callback = self._pending.pop(handle, None)
            if callback is not None:
                callback()

        return dt


class GameLoop:
    """Runs step() then render() once per refresh until stopped.

    Guarantees:
    - No step runs after stop() returns. A step that stops the loop
      skips the render of its own frame.
    - stop() is idempotent.
    - start() replaces any schedule left by a previous start(), so two
      loops never drive the same state.
    """

    def __init__(
        self,
        step: Callable[[], None],
        render: Callable[[], None],
        scheduler: FrameScheduler,
    ):
        """Initialize loop.

        Args:
            step: Advances the simulation by one logical tick
            render: Draws the state produced by step
            scheduler: Source of refresh callbacks
        """
        self._step = step
        self._render = render
        self._scheduler = scheduler
        self._handle: Optional[int] = None
        self._generation = 0
        self._running = False
        self._frames = 0

    @property
    def running(self) -> bool:
        """True between start() and stop()."""
        return self._running

    @property
    def frames(self) -> int:
        """Frames run since the last start()."""
        return self._frames

    def start(self) -> None:
        """Start (or restart) the loop from the next refresh."""
        self.stop()
        self._generation += 1
        self._running = True
        self._frames = 0
        self._schedule()
        log.info("Loop started (generation %d)", self._generation)

    def stop(self) -> None:
        """Stop the loop. Safe to call when already stopped."""
        if not self._running:
            return
        self._running = False
        if self._handle is not None:
            self._scheduler.cancel_frame(self._handle)
            self._handle = None
        log.info("Loop stopped after %d frames", self._frames)

    def _schedule(self) -> None:
        self._handle = self._scheduler.request_frame(
            partial(self._on_frame, self._generation)
        )

    def _on_frame(self, generation: int) -> None:
        # Stale callback from an earlier start()
        if generation != self._generation or not self._running:
            return

        self._handle = None
        self._step()
        # step() may have stopped or restarted the loop
        if not self._running or generation != self._generation:
            return

        self._render()
        self._frames += 1
        self._schedule()
