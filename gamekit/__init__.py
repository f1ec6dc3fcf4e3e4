"""
GameKit - shared framework for pygame arcade games.

Provides the standard game interface, the frame loop driver, pointer
input abstraction and the unified logger used by every game.
"""

from gamekit.logging import get_logger

__all__ = ['get_logger']
