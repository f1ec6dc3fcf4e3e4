"""
Arkanoid - Configuration loader.

Loads settings from a .env file beside this module with sensible defaults.
All geometry in the game derives from these values.
"""
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Tuple

from dotenv import load_dotenv

# Load .env from game directory
_env_path = Path(__file__).parent / '.env'
load_dotenv(_env_path)


def _get_int(key: str, default: int) -> int:
    """Get integer from environment."""
    return int(os.getenv(key, str(default)))


def _get_float(key: str, default: float) -> float:
    """Get float from environment."""
    return float(os.getenv(key, str(default)))


# Playfield
SCREEN_WIDTH = _get_int('SCREEN_WIDTH', 800)
SCREEN_HEIGHT = _get_int('SCREEN_HEIGHT', 600)
FPS = _get_int('FPS', 60)  # one simulation tick per frame

# Paddle
PADDLE_WIDTH = _get_float('PADDLE_WIDTH', 75.0)
PADDLE_HEIGHT = _get_float('PADDLE_HEIGHT', 10.0)

# Ball
BALL_RADIUS = _get_float('BALL_RADIUS', 8.0)
BALL_SPEED = _get_float('BALL_SPEED', 4.0)  # pixels per tick, per axis
BALL_START_OFFSET = _get_float('BALL_START_OFFSET', 30.0)  # spawn height above bottom edge

# Brick grid
BRICK_ROWS = _get_int('BRICK_ROWS', 5)
BRICK_COLS = _get_int('BRICK_COLS', 8)
BRICK_WIDTH = _get_float('BRICK_WIDTH', 80.0)
BRICK_HEIGHT = _get_float('BRICK_HEIGHT', 20.0)
BRICK_PADDING = _get_float('BRICK_PADDING', 10.0)
BRICK_TOP_OFFSET = _get_float('BRICK_TOP_OFFSET', 30.0)
BRICK_LEFT_OFFSET = _get_float('BRICK_LEFT_OFFSET', 35.0)

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (255, 255, 255)
BRICK_COLOR = '#FF0000'
BALL_AND_PADDLE_COLOR = '#0095DD'
TEXT_COLOR = '#0095DD'
OVERLAY_TEXT_COLOR: Tuple[int, int, int] = (30, 30, 30)
BUTTON_COLOR: Tuple[int, int, int] = (59, 130, 246)
BUTTON_TEXT_COLOR: Tuple[int, int, int] = (255, 255, 255)
FONT_FAMILY = 'arial'  # SysFont falls back to the default font
SCORE_FONT_SIZE = 16  # px
OVERLAY_FONT_SIZE = 32  # px
SCORE_POSITION: Tuple[int, int] = (8, 20)  # text baseline origin


@dataclass(frozen=True)
class GameConfig:
    """Every tunable the simulation, input adapter and skin read.

    Built from the module constants by default_config(); tests and the
    CLI derive variants with dataclasses.replace() or with_playfield().
    """

    width: float = SCREEN_WIDTH
    height: float = SCREEN_HEIGHT

    paddle_width: float = PADDLE_WIDTH
    paddle_height: float = PADDLE_HEIGHT

    ball_radius: float = BALL_RADIUS
    ball_speed: float = BALL_SPEED
    ball_start_offset: float = BALL_START_OFFSET

    brick_rows: int = BRICK_ROWS
    brick_cols: int = BRICK_COLS
    brick_width: float = BRICK_WIDTH
    brick_height: float = BRICK_HEIGHT
    brick_padding: float = BRICK_PADDING
    brick_top_offset: float = BRICK_TOP_OFFSET
    brick_left_offset: float = BRICK_LEFT_OFFSET

    def __post_init__(self):
        for name in ('width', 'height', 'paddle_width', 'paddle_height',
                     'ball_radius', 'brick_width', 'brick_height'):
            value = getattr(self, name)
            if value <= 0:
                raise ValueError(f'{name} must be positive, got {value}')
        if self.brick_rows < 0 or self.brick_cols < 0:
            raise ValueError(
                f'Brick grid must not be negative, got {self.brick_rows}x{self.brick_cols}'
            )
        if self.paddle_width > self.width:
            raise ValueError(
                f'Paddle width {self.paddle_width} exceeds playfield width {self.width}'
            )

    @property
    def paddle_max_x(self) -> float:
        """Largest legal paddle x (left edge)."""
        return self.width - self.paddle_width

    @property
    def paddle_top(self) -> float:
        """Y of the paddle's top edge; the paddle rests on the bottom edge."""
        return self.height - self.paddle_height

    @property
    def ball_start(self) -> Tuple[float, float]:
        """Ball spawn position (x, y)."""
        return (self.width / 2, self.height - self.ball_start_offset)

    @property
    def ball_start_velocity(self) -> Tuple[float, float]:
        """Ball spawn velocity (dx, dy): up and to the right."""
        return (self.ball_speed, -self.ball_speed)

    def with_playfield(self, width: float, height: float) -> 'GameConfig':
        """Copy of this config with a different playfield size."""
        return replace(self, width=width, height=height)


def default_config() -> GameConfig:
    """Config built from the module constants (and .env overrides)."""
    return GameConfig()
