"""Collision detection for Arkanoid.

Pure functions for ball-wall, ball-paddle and ball-brick tests. None of
them change state; the simulation step applies their answers.
"""

import math
from typing import Optional, Literal, Tuple, TYPE_CHECKING

from models import Point2D, Rectangle

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.paddle import Paddle

ReflectionAxis = Literal["horizontal", "vertical"]


def closest_point_on_rect(point: Point2D, rect: Rectangle) -> Point2D:
    """Clamp point into rect, one axis at a time.

    Returns point itself (as a new Point2D) when it lies inside rect.
    """
    return Point2D(
        x=max(rect.left, min(point.x, rect.right)),
        y=max(rect.top, min(point.y, rect.bottom)),
    )


def distance_to_rect(point: Point2D, rect: Rectangle) -> float:
    """Euclidean distance from point to the nearest point of rect (0 inside)."""
    closest = closest_point_on_rect(point, rect)
    return math.hypot(point.x - closest.x, point.y - closest.y)


def circle_intersects_rect(center: Point2D, radius: float, rect: Rectangle) -> bool:
    """Check whether a circle touches or overlaps rect.

    Args:
        center: Circle center
        radius: Circle radius
        rect: Rectangle to test

    Returns:
        True if the distance from center to rect is at most radius
    """
    return distance_to_rect(center, rect) <= radius


def select_reflection_axis(center: Point2D, rect: Rectangle) -> Optional[ReflectionAxis]:
    """Decide which velocity component a brick hit reverses.

    The ball's approach side is read from where its center lies relative
    to the brick. A side approach with a mostly horizontal offset to the
    closest point reflects horizontally; a top/bottom approach with a mostly
    vertical offset reflects vertically.

    Returns None when neither holds (center inside the brick, or an exact
    diagonal touch on a corner). The brick still breaks in that case but
    the ball keeps going.

    Args:
        center: Ball center
        rect: Brick bounds

    Returns:
        "horizontal" (negate dx), "vertical" (negate dy), or None
    """
    closest = closest_point_on_rect(center, rect)
    distance_x = center.x - closest.x
    distance_y = center.y - closest.y

    from_left = center.x < rect.left
    from_right = center.x > rect.right
    from_top = center.y < rect.top
    from_bottom = center.y > rect.bottom

    if (from_left or from_right) and abs(distance_x) > abs(distance_y):
        return "horizontal"
    elif (from_top or from_bottom) and abs(distance_y) > abs(distance_x):
        return "vertical"
    return None


def check_wall_collision(ball: 'Ball', screen_width: float) -> Tuple[bool, bool]:
    """Check the ball against the side walls and the ceiling.

    The bottom edge is open; see has_fallen_below().

    Args:
        ball: Ball to check
        screen_width: Playfield width in pixels

    Returns:
        Tuple of (hit a side wall, hit the ceiling)
    """
    hit_side = ball.x + ball.radius > screen_width or ball.x - ball.radius < 0
    hit_top = ball.y - ball.radius < 0
    return hit_side, hit_top


def check_paddle_collision(ball: 'Ball', paddle: 'Paddle') -> bool:
    """Check if the ball has reached the paddle.

    The ball's bottom must be below the paddle's top edge and its center
    strictly between the paddle's ends. There is no direction check: a
    ball already inside the paddle band is redirected upward again.

    Args:
        ball: Ball to check
        paddle: Paddle to check against

    Returns:
        True if ball hits paddle
    """
    return (
        ball.bottom > paddle.top and
        paddle.left < ball.x < paddle.right
    )


def has_fallen_below(ball: 'Ball', screen_height: float) -> bool:
    """Check if the ball's bottom edge has left the playfield."""
    return ball.bottom > screen_height
