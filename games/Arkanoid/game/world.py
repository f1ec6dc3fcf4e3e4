"""World state: everything one game session owns.

The simulation step receives the World and mutates it; the skin receives
the same World and only reads it. Both run on the main thread, one after
the other, so a render never sees a half-finished tick.
"""

from dataclasses import dataclass, field
from typing import List

from gamekit.games import GameState

from ..config import GameConfig
from .entities.ball import Ball
from .entities.brick import Brick, build_brick_grid
from .entities.paddle import Paddle


def spawn_ball(config: GameConfig) -> Ball:
    """Ball at its start position with the initial velocity."""
    x, y = config.ball_start
    dx, dy = config.ball_start_velocity
    return Ball(x, y, dx, dy, config.ball_radius)


@dataclass
class World:
    """Mutable game-session state."""

    config: GameConfig
    ball: Ball
    paddle: Paddle
    bricks: List[Brick] = field(default_factory=list)
    score: int = 0
    status: GameState = GameState.PLAYING
    tick: int = 0  # simulation steps run since the last (re)start

    @classmethod
    def create(cls, config: GameConfig) -> 'World':
        """Fresh world: centered paddle, ball at its spawn point, full grid."""
        paddle = Paddle(
            config.paddle_width,
            config.paddle_height,
            config.width,
            config.height,
        )
        return cls(
            config=config,
            ball=spawn_ball(config),
            paddle=paddle,
            bricks=build_brick_grid(config),
        )

    @property
    def is_over(self) -> bool:
        return self.status is GameState.GAME_OVER

    @property
    def visible_bricks(self) -> List[Brick]:
        return [brick for brick in self.bricks if brick.visible]

    def restart(self) -> None:
        """Full reset for a new game.

        Score 0, every brick visible, ball back at its spawn point with the
        initial velocity, status PLAYING. The paddle stays where it is.
        """
        self.ball = spawn_ball(self.config)
        self.bricks = [brick.restore() for brick in self.bricks]
        self.score = 0
        self.tick = 0
        self.status = GameState.PLAYING
