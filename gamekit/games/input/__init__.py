"""
Input abstraction layer for GameKit games.

Provides unified input handling so games never read pygame events directly.
"""

from gamekit.games.input.input_event import InputEvent
from gamekit.games.input.input_manager import InputManager

__all__ = ['InputEvent', 'InputManager']
