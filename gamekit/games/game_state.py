"""Common GameState enum for all GameKit games.

Games can have additional internal states, but must map them to these
standard states via the `state` property.
"""
from enum import Enum


class GameState(Enum):
    """Standard game states reported by every game.

    States:
        PLAYING: Active gameplay in progress
        GAME_OVER: Game ended; only an explicit restart leaves this state

    Usage in game_mode.py:
        from gamekit.games import GameState

        class MyGameMode(BaseGame):
            def _get_internal_state(self) -> GameState:
                return self._world.status
    """
    PLAYING = "playing"
    GAME_OVER = "game_over"
