"""
Mouse Input Source - Pointer movement and clicks over the playfield.
"""
import time
from typing import List

import pygame

from models import Vector2D, EventType
from gamekit.games.input.input_event import InputEvent
from gamekit.games.input.sources.base import InputSource


class MouseInputSource(InputSource):
    """Mouse input source.

    Converts pygame MOUSEMOTION into MOVE events and left-button
    MOUSEBUTTONDOWN into PRESS events. Positions are window coordinates,
    which are playfield coordinates when the playfield fills the window.
    Non-mouse events are re-posted to the pygame event queue for the main loop.
    """

    def __init__(self):
        """Initialize the mouse input source."""
        self._event_queue: List[InputEvent] = []

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pygame events and collect pointer moves and clicks."""
        deferred = []
        for event in pygame.event.get():
            if event.type == pygame.MOUSEMOTION:
                self._queue(event.pos, EventType.MOVE)
            elif event.type == pygame.MOUSEBUTTONDOWN:
                if event.button == 1:  # Left mouse button only
                    self._queue(event.pos, EventType.PRESS)
            elif event.type != pygame.MOUSEBUTTONUP:
                deferred.append(event)

        # Re-post after draining so the loop above cannot see them again
        for event in deferred:
            pygame.event.post(event)

    def _queue(self, pos, event_type: EventType) -> None:
        pos_x, pos_y = pos
        self._event_queue.append(InputEvent(
            position=Vector2D(x=float(pos_x), y=float(pos_y)),
            timestamp=time.monotonic(),
            event_type=event_type,
        ))
