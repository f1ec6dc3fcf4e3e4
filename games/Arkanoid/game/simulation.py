"""One logical tick of the Arkanoid simulation.

Order within a tick:
    1. move the ball by its velocity
    2. reflect off the side walls and the ceiling
    3. redirect off the paddle (angle from hit position)
    4. end the game if the ball fell past the bottom edge
    5. test every visible brick; each one touched breaks, scores a point
       and may reflect the ball

Step 5 does not stop at the first hit. Two bricks touched on the same tick
both break, and both reflections apply (so two same-axis reflections
cancel out).
"""

from dataclasses import dataclass, field
from typing import List, Tuple

from gamekit.games import GameState
from gamekit.logging import get_logger

from .physics.collision import (
    circle_intersects_rect,
    select_reflection_axis,
    check_wall_collision,
    check_paddle_collision,
    has_fallen_below,
)
from .world import World

log = get_logger('simulation')


@dataclass
class StepResult:
    """What happened during one tick."""

    ran: bool = False
    wall_bounces: int = 0
    paddle_hit: bool = False
    bricks_destroyed: List[Tuple[int, int]] = field(default_factory=list)
    game_over: bool = False


def step(world: World) -> StepResult:
    """Advance world by one tick.

    Does nothing unless the world is PLAYING.

    Args:
        world: Game state, mutated in place

    Returns:
        StepResult describing the tick
    """
    result = StepResult()
    if world.status is not GameState.PLAYING:
        return result

    result.ran = True
    world.tick += 1
    config = world.config

    ball = world.ball.update()

    hit_side, hit_top = check_wall_collision(ball, config.width)
    if hit_side:
        ball = ball.bounce_horizontal()
        result.wall_bounces += 1
    if hit_top:
        ball = ball.bounce_vertical()
        result.wall_bounces += 1

    paddle = world.paddle
    if check_paddle_collision(ball, paddle):
        ball = ball.bounce_off_paddle(paddle.x, paddle.width)
        result.paddle_hit = True

    if has_fallen_below(ball, config.height):
        world.ball = ball
        world.status = GameState.GAME_OVER
        result.game_over = True
        log.info("Game over at tick %d, score %d", world.tick, world.score)
        return result

    for index, brick in enumerate(world.bricks):
        if not brick.visible:
            continue

        rect = brick.to_rectangle()
        center = ball.center
        if not circle_intersects_rect(center, ball.radius, rect):
            continue

        axis = select_reflection_axis(center, rect)
        if axis == "horizontal":
            ball = ball.bounce_horizontal()
        elif axis == "vertical":
            ball = ball.bounce_vertical()

        world.bricks[index] = brick.destroy()
        world.score += 1
        result.bricks_destroyed.append(brick.grid_position)
        log.debug("Brick %s destroyed (axis=%s), score %d",
                  brick.grid_position, axis, world.score)

    world.ball = ball
    return result
