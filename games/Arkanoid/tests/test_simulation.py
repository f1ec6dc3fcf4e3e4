"""
Tests for the simulation step and the World it drives.

Tests cover:
- Wall and ceiling reflections
- Paddle redirection, including the dead-center hit
- Game over and the no-op step afterwards
- Brick hits: side, top/bottom, corner, inside, several per tick
- Speed conservation and brick idempotence
- Restart
"""

import math
from dataclasses import replace

import pytest

from gamekit.games import GameState
from games.Arkanoid.config import GameConfig
from games.Arkanoid.game.entities import Ball
from games.Arkanoid.game.simulation import step
from games.Arkanoid.game.world import World


@pytest.fixture
def config():
    """Default 800x600 configuration."""
    return GameConfig()


@pytest.fixture
def world(config):
    """Fresh world with the default brick grid."""
    return World.create(config)


@pytest.fixture
def empty_world(config):
    """World without bricks, for wall and paddle tests."""
    return World.create(replace(config, brick_rows=0))


def place_ball(world, x, y, dx=4.0, dy=-4.0):
    """Put the ball where the next tick should start."""
    world.ball = Ball(x, y, dx, dy, world.config.ball_radius)


# ============================================================================
# World construction
# ============================================================================


class TestWorldCreate:
    """Test the initial world."""

    def test_initial_state(self, world):
        assert world.status is GameState.PLAYING
        assert world.score == 0
        assert world.tick == 0
        assert len(world.bricks) == 40
        assert len(world.visible_bricks) == 40

    def test_ball_spawn(self, world):
        ball = world.ball
        assert (ball.x, ball.y) == (400.0, 570.0)
        assert (ball.dx, ball.dy) == (4.0, -4.0)
        assert ball.radius == 8.0

    def test_paddle_centered(self, world):
        assert world.paddle.x == 362.5


# ============================================================================
# Walls
# ============================================================================


class TestWalls:
    """Test wall and ceiling reflection."""

    def test_moving_toward_ceiling(self, empty_world):
        place_ball(empty_world, 400.0, 50.0)
        step(empty_world)
        assert empty_world.ball.y < 50.0
        assert empty_world.ball.dy == -4.0

    def test_ceiling_flips_dy(self, empty_world):
        place_ball(empty_world, 400.0, 10.0)
        result = step(empty_world)
        assert empty_world.ball.y == 6.0
        assert empty_world.ball.dy == 4.0
        assert result.wall_bounces == 1

    def test_dy_flips_once_ceiling_reached(self, empty_world):
        place_ball(empty_world, 400.0, 50.0)
        flips = 0
        previous_dy = empty_world.ball.dy
        for _ in range(20):
            step(empty_world)
            if empty_world.ball.dy != previous_dy:
                flips += 1
                assert empty_world.ball.y - empty_world.ball.radius < 0
            previous_dy = empty_world.ball.dy
        assert flips == 1

    def test_right_wall_flips_dx(self, empty_world):
        place_ball(empty_world, 790.0, 300.0)
        step(empty_world)
        assert empty_world.ball.dx == -4.0
        assert empty_world.ball.dy == -4.0

    def test_left_wall_flips_dx(self, empty_world):
        place_ball(empty_world, 10.0, 300.0, dx=-4.0)
        step(empty_world)
        assert empty_world.ball.dx == 4.0

    def test_top_corner_flips_both(self, empty_world):
        place_ball(empty_world, 10.0, 10.0, dx=-4.0, dy=-4.0)
        result = step(empty_world)
        assert (empty_world.ball.dx, empty_world.ball.dy) == (4.0, 4.0)
        assert result.wall_bounces == 2

    def test_speed_conserved_until_game_over(self, empty_world):
        speed_sq = empty_world.ball.dx ** 2 + empty_world.ball.dy ** 2
        ticks = 0
        while empty_world.status is GameState.PLAYING and ticks < 5000:
            step(empty_world)
            ticks += 1
            ball = empty_world.ball
            assert ball.dx ** 2 + ball.dy ** 2 == pytest.approx(speed_sq)
        assert ticks > 100


# ============================================================================
# Paddle
# ============================================================================


class TestPaddle:
    """Test paddle redirection."""

    def test_center_hit_goes_horizontal(self, empty_world):
        # Paddle spans 362.5..437.5; ball lands at x=400
        place_ball(empty_world, 396.0, 579.0, dx=4.0, dy=4.0)
        result = step(empty_world)
        assert result.paddle_hit
        assert empty_world.ball.dx == pytest.approx(math.sqrt(32))
        assert empty_world.ball.dy == 0
        assert empty_world.status is GameState.PLAYING

    def test_off_center_hit_goes_up(self, empty_world):
        place_ball(empty_world, 416.0, 579.0, dx=4.0, dy=4.0)
        step(empty_world)
        assert empty_world.ball.dy < 0
        assert empty_world.ball.speed == pytest.approx(math.sqrt(32))

    def test_paddle_follows_pointer_between_ticks(self, empty_world):
        empty_world.paddle.follow_pointer(0.0)
        place_ball(empty_world, 36.0, 579.0, dx=4.0, dy=4.0)
        result = step(empty_world)
        assert result.paddle_hit
        assert empty_world.ball.dy < 0

    def test_miss_beside_paddle(self, empty_world):
        place_ball(empty_world, 96.0, 579.0, dx=4.0, dy=4.0)
        result = step(empty_world)
        assert not result.paddle_hit
        assert empty_world.ball.dy == 4.0


# ============================================================================
# Game over
# ============================================================================


class TestGameOver:
    """Test the PLAYING -> GAME_OVER transition."""

    def test_ball_past_bottom_ends_game(self, world):
        place_ball(world, 100.0, 589.0, dx=4.0, dy=4.0)
        result = step(world)
        assert result.game_over
        assert world.status is GameState.GAME_OVER
        assert world.ball.bottom > 600.0

    def test_no_brick_checks_on_final_tick(self, config):
        # A brick reaching the floor would otherwise be hit on the same tick
        low = replace(config, brick_rows=1, brick_top_offset=585.0)
        world = World.create(low)
        place_ball(world, 71.0, 589.0, dx=4.0, dy=4.0)
        step(world)
        assert world.status is GameState.GAME_OVER
        assert world.score == 0
        assert world.bricks[0].visible

    def test_step_is_noop_when_over(self, world):
        place_ball(world, 100.0, 589.0, dx=4.0, dy=4.0)
        step(world)
        ball = world.ball
        tick = world.tick

        for _ in range(10):
            result = step(world)
            assert not result.ran

        assert world.ball is ball
        assert world.tick == tick
        assert world.status is GameState.GAME_OVER

    def test_paddle_still_moves_when_over(self, world):
        place_ball(world, 100.0, 589.0, dx=4.0, dy=4.0)
        step(world)
        world.paddle.follow_pointer(900.0)
        assert world.paddle.x == 725.0


# ============================================================================
# Bricks
# ============================================================================


class TestBricks:
    """Test ball-brick collisions."""

    def test_center_inside_brick_breaks_it(self, world):
        # Lands at (70, 40), inside brick (0, 0)
        place_ball(world, 66.0, 44.0)
        result = step(world)
        assert not world.bricks[0].visible
        assert world.score == 1
        assert result.bricks_destroyed == [(0, 0)]
        # No reflection from inside the brick
        assert (world.ball.dx, world.ball.dy) == (4.0, -4.0)

    def test_hit_from_left_reflects_dx(self, world):
        place_ball(world, 26.0, 44.0)
        step(world)
        assert not world.bricks[0].visible
        assert (world.ball.dx, world.ball.dy) == (-4.0, -4.0)
        assert world.score == 1

    def test_hit_from_below_reflects_dy(self, world):
        # Bottom row brick (4, 0) spans y 150..170
        place_ball(world, 66.0, 179.0)
        result = step(world)
        assert result.bricks_destroyed == [(4, 0)]
        assert (world.ball.dx, world.ball.dy) == (4.0, 4.0)

    def test_exact_corner_breaks_without_reflection(self, world):
        # Lands at (30, 25): 5 left and 5 above brick (0, 0)
        place_ball(world, 26.0, 29.0)
        step(world)
        assert not world.bricks[0].visible
        assert world.score == 1
        assert (world.ball.dx, world.ball.dy) == (4.0, -4.0)

    def test_two_bricks_in_one_tick(self, world):
        # Lands at (120, 40), in the gap between bricks (0, 0) and (0, 1)
        place_ball(world, 116.0, 44.0)
        result = step(world)
        assert result.bricks_destroyed == [(0, 0), (0, 1)]
        assert world.score == 2
        # Both reflect horizontally and cancel out
        assert world.ball.dx == 4.0

    def test_destroyed_brick_is_inert(self, world):
        place_ball(world, 66.0, 44.0)
        step(world)
        assert world.score == 1

        place_ball(world, 66.0, 44.0)
        result = step(world)
        assert world.score == 1
        assert result.bricks_destroyed == []
        assert (world.ball.dx, world.ball.dy) == (4.0, -4.0)

    def test_miss(self, world):
        place_ball(world, 400.0, 300.0)
        result = step(world)
        assert result.bricks_destroyed == []
        assert world.score == 0


# ============================================================================
# Restart
# ============================================================================


class TestRestart:
    """Test World.restart."""

    def test_restart_is_full_reset(self, world):
        place_ball(world, 66.0, 44.0)
        step(world)
        place_ball(world, 116.0, 44.0)
        step(world)
        world.paddle.follow_pointer(100.0)
        place_ball(world, 300.0, 589.0, dx=4.0, dy=4.0)
        step(world)
        assert world.status is GameState.GAME_OVER
        assert world.score > 0

        world.restart()

        assert world.status is GameState.PLAYING
        assert world.score == 0
        assert world.tick == 0
        assert all(brick.visible for brick in world.bricks)
        assert (world.ball.x, world.ball.y) == (400.0, 570.0)
        assert (world.ball.dx, world.ball.dy) == (4.0, -4.0)
        assert world.paddle.x == 100.0

    def test_steps_resume_after_restart(self, world):
        place_ball(world, 100.0, 589.0, dx=4.0, dy=4.0)
        step(world)
        world.restart()
        result = step(world)
        assert result.ran
        assert world.tick == 1
