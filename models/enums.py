"""
Enumerations shared by the input layer and the games.
"""

from enum import Enum


class EventType(str, Enum):
    """Types of pointer input events.

    Attributes:
        MOVE: The pointer moved over the playfield
        PRESS: The primary button was pressed
    """
    MOVE = "move"
    PRESS = "press"
