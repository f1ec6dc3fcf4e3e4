"""
Input Manager - Collects input from the active source.

This is a shared module used by all games.
"""
from typing import List, Optional

from gamekit.games.input.input_event import InputEvent
from gamekit.games.input.sources.base import InputSource


class InputManager:
    """Manages input sources and collects events.

    Games only see InputEvent objects, so the source can be swapped
    (mouse, scripted replay) without changing game logic.
    """

    def __init__(self, source: Optional[InputSource] = None):
        """Initialize with an optional input source."""
        self._source: Optional[InputSource] = None
        if source is not None:
            self.set_source(source)

    def set_source(self, source: InputSource) -> None:
        """Set the input source.

        Raises:
            TypeError: If source does not implement InputSource
        """
        if not isinstance(source, InputSource):
            raise TypeError(
                f"source must be an InputSource, got {type(source).__name__}"
            )
        self._source = source

    def update(self, dt: float) -> None:
        """Update the active input source.

        Args:
            dt: Delta time in seconds since last update.
        """
        if self._source is not None:
            self._source.update(dt)

    def get_events(self) -> List[InputEvent]:
        """Get collected events since last update."""
        if self._source is None:
            return []
        return self._source.poll_events()
