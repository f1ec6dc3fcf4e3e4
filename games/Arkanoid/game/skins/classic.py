"""Classic skin - flat colors on a white playfield."""

from typing import TYPE_CHECKING, Optional, Tuple

import pygame

from models import Color
from .base import ArkanoidSkin
from ...config import (
    BACKGROUND_COLOR,
    BRICK_COLOR,
    BALL_AND_PADDLE_COLOR,
    TEXT_COLOR,
    OVERLAY_TEXT_COLOR,
    BUTTON_COLOR,
    BUTTON_TEXT_COLOR,
    FONT_FAMILY,
    SCORE_FONT_SIZE,
    OVERLAY_FONT_SIZE,
    SCORE_POSITION,
)

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.brick import Brick


class ClassicSkin(ArkanoidSkin):
    """Renders the game with flat shapes.

    - Bricks: red rectangles
    - Paddle and ball: blue rectangle and circle
    - Score: small blue text, top left
    - Game over: centered message with a "Play Again" button below it
    """

    NAME = "classic"
    DESCRIPTION = "Flat shapes on a white playfield"

    BUTTON_SIZE = (160, 44)

    def __init__(self):
        """Initialize classic skin."""
        self._brick_color = Color.from_hex(BRICK_COLOR).as_rgb_tuple
        self._ball_color = Color.from_hex(BALL_AND_PADDLE_COLOR).as_rgb_tuple
        self._text_color = Color.from_hex(TEXT_COLOR).as_rgb_tuple
        self._font: Optional[pygame.font.Font] = None
        self._overlay_font: Optional[pygame.font.Font] = None

    def _ensure_fonts(self) -> None:
        """Ensure fonts are initialized."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.SysFont(FONT_FAMILY, SCORE_FONT_SIZE)
            self._overlay_font = pygame.font.SysFont(FONT_FAMILY, OVERLAY_FONT_SIZE)

    def clear(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND_COLOR)

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render paddle as a filled rectangle on the bottom edge."""
        pygame.draw.rect(screen, self._ball_color, paddle.rect)

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render ball as a filled circle."""
        pos = (int(ball.x), int(ball.y))
        pygame.draw.circle(screen, self._ball_color, pos, int(ball.radius))

    def render_brick(self, brick: 'Brick', screen: pygame.Surface) -> None:
        if not brick.visible:
            return
        pygame.draw.rect(screen, self._brick_color, brick.rect)

    def render_hud(self, screen: pygame.Surface, score: int) -> None:
        """Render the score at the top left."""
        self._ensure_fonts()
        text = self._font.render(f"Score: {score}", True, self._text_color)
        # SCORE_POSITION is a baseline origin, blit wants the top-left
        x, baseline = SCORE_POSITION
        screen.blit(text, (x, baseline - self._font.get_ascent()))

    def restart_button_rect(self, screen_size: Tuple[int, int]) -> pygame.Rect:
        width, height = screen_size
        rect = pygame.Rect((0, 0), self.BUTTON_SIZE)
        rect.center = (width // 2, height // 2 + 40)
        return rect

    def render_game_over(self, screen: pygame.Surface, score: int) -> None:
        """Render the final score and the "Play Again" button."""
        self._ensure_fonts()
        width, height = screen.get_size()

        message = self._overlay_font.render(
            f"Game Over! Final Score: {score}", True, OVERLAY_TEXT_COLOR
        )
        screen.blit(message, message.get_rect(center=(width // 2, height // 2 - 20)))

        button = self.restart_button_rect((width, height))
        pygame.draw.rect(screen, BUTTON_COLOR, button, border_radius=6)
        label = self._font.render("Play Again", True, BUTTON_TEXT_COLOR)
        screen.blit(label, label.get_rect(center=button.center))
