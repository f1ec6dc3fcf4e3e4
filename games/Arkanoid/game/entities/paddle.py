"""Paddle entity that follows the pointer.

The paddle rests on the bottom edge of the playfield. Its left edge tracks
the pointer's x coordinate, clamped so the paddle never leaves the
playfield.
"""

from typing import Optional, Tuple


class Paddle:
    """Paddle positioned by its left edge.

    Invariant: 0 <= x <= screen_width - width.
    """

    def __init__(
        self,
        width: float,
        height: float,
        screen_width: float,
        screen_height: float,
        x: Optional[float] = None,
    ):
        """Initialize paddle.

        Args:
            width: Paddle width
            height: Paddle height
            screen_width: Playfield width in pixels
            screen_height: Playfield height in pixels
            x: Initial left edge (default: centered)
        """
        self._width = width
        self._height = height
        self._screen_width = screen_width
        self._screen_height = screen_height

        if x is None:
            x = screen_width / 2 - width / 2
        self._x = self._clamp(x)

    @property
    def x(self) -> float:
        """Get paddle left edge X."""
        return self._x

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def left(self) -> float:
        return self._x

    @property
    def right(self) -> float:
        return self._x + self._width

    @property
    def top(self) -> float:
        """Get paddle top Y (the paddle sits on the bottom edge)."""
        return self._screen_height - self._height

    @property
    def max_x(self) -> float:
        """Largest legal left edge."""
        return self._screen_width - self._width

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get paddle bounding rectangle (x, y, width, height)."""
        return (self._x, self.top, self._width, self._height)

    def _clamp(self, x: float) -> float:
        return max(0.0, min(self._screen_width - self._width, x))

    def follow_pointer(self, pointer_x: float) -> float:
        """Move the paddle's left edge to the pointer, clamped to the playfield.

        Args:
            pointer_x: Pointer X relative to the playfield origin

        Returns:
            The paddle's new x
        """
        self._x = self._clamp(pointer_x)
        return self._x

    def __repr__(self) -> str:
        return f"Paddle(x={self._x:.2f}, w={self._width}, h={self._height})"
