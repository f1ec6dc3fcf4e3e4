"""Base class for Arkanoid game skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick
    from ..world import World


class ArkanoidSkin(ABC):
    """Base class for game skins.

    Skins read the World and draw it; they never change it.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle."""
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render the ball."""
        pass

    @abstractmethod
    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        """Render a brick. Invisible bricks draw nothing."""
        pass

    @abstractmethod
    def render_hud(self, screen: pygame.Surface, score: int) -> None:
        """Render the heads-up display (score)."""
        pass

    @abstractmethod
    def render_game_over(self, screen: pygame.Surface, score: int) -> None:
        """Render the game-over message and the restart button."""
        pass

    @abstractmethod
    def restart_button_rect(self, screen_size: tuple) -> pygame.Rect:
        """Where the restart button is drawn for a surface of this size."""
        pass

    def clear(self, screen: pygame.Surface) -> None:
        """Clear the playfield before a frame is drawn."""
        screen.fill((0, 0, 0))

    def render_world(self, world: 'World', screen: pygame.Surface) -> None:
        """Draw a whole frame: bricks, paddle, ball, score, game-over overlay.

        Args:
            world: State to draw (read only)
            screen: Pygame surface to draw on
        """
        self.clear(screen)

        for brick in world.bricks:
            self.render_brick(brick, screen)

        self.render_paddle(world.paddle, screen)
        self.render_ball(world.ball, screen)
        self.render_hud(screen, world.score)

        if world.is_over:
            self.render_game_over(screen, world.score)
