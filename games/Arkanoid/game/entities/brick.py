"""Brick entity and the grid layout the game starts with."""

from typing import List, Tuple, TYPE_CHECKING

from models import Rectangle

if TYPE_CHECKING:
    from ...config import GameConfig


class Brick:
    """A destructible brick.

    A brick is visible until the ball first touches it, then invisible
    until the game restarts. destroy() and restore() return new bricks.
    """

    def __init__(
        self,
        x: float,
        y: float,
        width: float,
        height: float,
        visible: bool = True,
        grid_position: Tuple[int, int] = (0, 0),
    ):
        """Initialize brick.

        Args:
            x: Left edge X position
            y: Top edge Y position
            width: Brick width
            height: Brick height
            visible: False once destroyed
            grid_position: (row, col) position in grid
        """
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self._visible = visible
        self._grid_position = grid_position

    @property
    def x(self) -> float:
        """Get left edge X position."""
        return self._x

    @property
    def y(self) -> float:
        """Get top edge Y position."""
        return self._y

    @property
    def width(self) -> float:
        return self._width

    @property
    def height(self) -> float:
        return self._height

    @property
    def visible(self) -> bool:
        """True while the brick can be hit and is drawn."""
        return self._visible

    @property
    def grid_position(self) -> Tuple[int, int]:
        """Get grid position (row, col)."""
        return self._grid_position

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self._x, self._y, self._width, self._height)

    def to_rectangle(self) -> Rectangle:
        """Brick bounds as a Rectangle."""
        return Rectangle(x=self._x, y=self._y, width=self._width, height=self._height)

    def destroy(self) -> 'Brick':
        """Return this brick, invisible."""
        return Brick(self._x, self._y, self._width, self._height,
                     False, self._grid_position)

    def restore(self) -> 'Brick':
        """Return this brick, visible again."""
        return Brick(self._x, self._y, self._width, self._height,
                     True, self._grid_position)

    def __repr__(self) -> str:
        row, col = self._grid_position
        return f"Brick(row={row}, col={col}, visible={self._visible})"


def build_brick_grid(config: 'GameConfig') -> List[Brick]:
    """Lay out the brick grid, row by row.

    Args:
        config: Game configuration (grid size, brick size, padding, offsets)

    Returns:
        Visible bricks in row-major order
    """
    bricks = []
    for row in range(config.brick_rows):
        for col in range(config.brick_cols):
            x = col * (config.brick_width + config.brick_padding) + config.brick_left_offset
            y = row * (config.brick_height + config.brick_padding) + config.brick_top_offset
            bricks.append(Brick(
                x, y, config.brick_width, config.brick_height,
                grid_position=(row, col),
            ))
    return bricks
