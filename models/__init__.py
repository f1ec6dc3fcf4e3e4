"""
Unified models library for the game framework.

This package provides the Pydantic data models used across the system:
- Primitives: Basic geometric and color types (Point2D, Vector2D, Color, Rectangle)
- Enums: Input event types

Usage:
    >>> from models import Point2D, Rectangle
    >>> from models import EventType
"""

from .primitives import (
    Point2D,
    Vector2D,  # Alias for Point2D
    Color,
    Rectangle,
)
from .enums import EventType

__all__ = [
    'Point2D',
    'Vector2D',
    'Color',
    'Rectangle',
    'EventType',
]
