"""Arkanoid - Breakout-style game with a pointer-driven paddle.

Features:
- Paddle follows the pointer, clamped to the playfield
- Ball angle off the paddle depends on where it lands
- Every brick touched in a tick breaks and scores a point
- Game over when the ball drops past the bottom edge; "Play Again" restarts
"""

from typing import List, Optional

import pygame

from gamekit.games import BaseGame, GameState
from gamekit.games.input import InputEvent
from gamekit.logging import get_logger, emit_record
from models import EventType

from .config import GameConfig, default_config
from .game.simulation import StepResult, step
from .game.skins import ArkanoidSkin, ClassicSkin
from .game.world import World

log = get_logger('arkanoid')


class ArkanoidMode(BaseGame):
    """Arkanoid game mode.

    Each call to update() is one logical tick, whatever dt says. The frame
    loop calls update() once per display refresh, so the ball moves faster
    on faster displays.
    """

    # Game metadata
    NAME = "Arkanoid"
    DESCRIPTION = "Break every brick with a pointer-driven paddle."
    VERSION = "1.0.0"
    AUTHOR = "Arkanoid Team"

    # CLI arguments
    ARGUMENTS = [
        {
            'name': '--skin',
            'type': str,
            'default': 'classic',
            'choices': ['classic'],
            'help': 'Visual skin'
        },
    ]

    # Skin registry
    SKINS = {
        'classic': ClassicSkin,
    }

    def __init__(
        self,
        config: Optional[GameConfig] = None,
        skin: str = 'classic',
        **kwargs,
    ):
        """Initialize Arkanoid game.

        Args:
            config: Game configuration (default: from config module / .env)
            skin: Visual skin to use
            **kwargs: Unused CLI options shared by all games (fps, log_level)
        """
        self._config = config if config is not None else default_config()
        self._world = World.create(self._config)

        skin_class = self.SKINS.get(skin, ClassicSkin)
        self._skin: ArkanoidSkin = skin_class()

        self._last_result = StepResult()
        self._games_played = 0

        log.info(
            "New game: %dx%d playfield, %d bricks",
            self._config.width, self._config.height, len(self._world.bricks),
        )

    @property
    def config(self) -> GameConfig:
        return self._config

    @property
    def world(self) -> World:
        """Current world state (read only for callers)."""
        return self._world

    @property
    def skin(self) -> ArkanoidSkin:
        return self._skin

    @property
    def last_result(self) -> StepResult:
        """What happened during the most recent tick."""
        return self._last_result

    def _get_internal_state(self) -> GameState:
        return self._world.status

    def get_score(self) -> int:
        return self._world.score

    def handle_input(self, events: List[InputEvent]) -> None:
        """Process input events.

        MOVE events move the paddle, in every state. PRESS events on the
        restart button restart the game while it is over.

        Args:
            events: List of input events
        """
        for event in events:
            if event.event_type == EventType.MOVE:
                self.move_paddle(event.position.x)
            elif event.event_type == EventType.PRESS and self._world.is_over:
                if self.restart_button_hit(event.position.x, event.position.y):
                    self.restart()

    def move_paddle(self, pointer_x: float) -> float:
        """Point the paddle at pointer_x (clamped). Returns the new paddle x."""
        return self._world.paddle.follow_pointer(pointer_x)

    def restart_button_hit(self, x: float, y: float) -> bool:
        """Check whether (x, y) lands on the restart button."""
        size = (int(self._config.width), int(self._config.height))
        return self._skin.restart_button_rect(size).collidepoint(x, y)

    def update(self, dt: float = 0.0) -> None:
        """Run one simulation tick.

        Args:
            dt: Ignored; one call is one tick
        """
        was_playing = self._world.status is GameState.PLAYING
        self._last_result = step(self._world)

        if was_playing and self._last_result.game_over:
            self._games_played += 1
            emit_record('session', {
                'type': 'game_over',
                'game': self._games_played,
                'score': self._world.score,
                'tick': self._world.tick,
                'bricks_left': len(self._world.visible_bricks),
            })

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        self._skin.render_world(self._world, screen)

    def restart(self) -> bool:
        """Start a new game after a game over.

        Returns:
            True if the game restarted, False if it was still being played
        """
        if not self._world.is_over:
            log.debug("Restart ignored while playing")
            return False

        final_score = self._world.score
        self._world.restart()
        self._last_result = StepResult()
        log.info("Restarted (previous score %d)", final_score)
        return True

    def reset(self) -> None:
        """Reset game to initial state, whatever the current state."""
        super().reset()
        self._world = World.create(self._config)
        self._last_result = StepResult()
