"""
GameKit Game Framework.

Provides:
- base_game: BaseGame class that all games should inherit from
- game_state: Standard GameState enum for platform compatibility
- loop: Frame loop driver and display-refresh schedulers
- input: Common input event handling
"""

from gamekit.games.game_state import GameState
from gamekit.games.base_game import BaseGame
from gamekit.games.loop import FrameScheduler, PygameFrameScheduler, GameLoop

__all__ = [
    'GameState',
    'BaseGame',
    'FrameScheduler',
    'PygameFrameScheduler',
    'GameLoop',
]
