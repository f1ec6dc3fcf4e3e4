"""Arkanoid physics and collision detection."""

from .collision import (
    closest_point_on_rect,
    distance_to_rect,
    circle_intersects_rect,
    select_reflection_axis,
    check_wall_collision,
    check_paddle_collision,
    has_fallen_below,
)

__all__ = [
    'closest_point_on_rect',
    'distance_to_rect',
    'circle_intersects_rect',
    'select_reflection_axis',
    'check_wall_collision',
    'check_paddle_collision',
    'has_fallen_below',
]
