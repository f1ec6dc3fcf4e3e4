"""
Input source implementations.
"""

from gamekit.games.input.sources.base import InputSource
from gamekit.games.input.sources.mouse import MouseInputSource

__all__ = ['InputSource', 'MouseInputSource']
