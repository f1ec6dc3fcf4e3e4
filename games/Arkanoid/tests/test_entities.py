"""
Tests for the Arkanoid entities: Ball, Paddle, Brick and the brick grid.
"""

import math

import pytest

from games.Arkanoid.config import GameConfig
from games.Arkanoid.game.entities import Ball, Brick, Paddle, build_brick_grid


class TestBall:
    """Test Ball movement and bounces."""

    def test_update_moves_by_velocity(self):
        ball = Ball(400.0, 570.0, 4.0, -4.0, 8.0)
        moved = ball.update()
        assert (moved.x, moved.y) == (404.0, 566.0)
        assert (moved.dx, moved.dy) == (4.0, -4.0)

    def test_update_returns_new_ball(self):
        ball = Ball(400.0, 570.0, 4.0, -4.0, 8.0)
        ball.update()
        assert (ball.x, ball.y) == (400.0, 570.0)

    def test_bounces_negate_one_component(self):
        ball = Ball(100.0, 100.0, 3.0, -5.0, 8.0)
        assert (ball.bounce_horizontal().dx, ball.bounce_horizontal().dy) == (-3.0, -5.0)
        assert (ball.bounce_vertical().dx, ball.bounce_vertical().dy) == (3.0, 5.0)

    def test_bounces_conserve_speed(self):
        ball = Ball(100.0, 100.0, 3.0, -5.0, 8.0)
        assert ball.bounce_horizontal().speed == pytest.approx(ball.speed)
        assert ball.bounce_vertical().speed == pytest.approx(ball.speed)

    def test_speed(self):
        assert Ball(0.0, 0.0, 3.0, 4.0, 8.0).speed == pytest.approx(5.0)

    def test_bottom_and_center(self):
        ball = Ball(100.0, 50.0, 0.0, 0.0, 8.0)
        assert ball.bottom == 58.0
        assert (ball.center.x, ball.center.y) == (100.0, 50.0)


class TestBallPaddleBounce:
    """Test the hit-position angle mapping."""

    def test_center_hit_leaves_horizontally(self):
        ball = Ball(400.0, 583.0, 4.0, 4.0, 8.0)
        bounced = ball.bounce_off_paddle(362.5, 75.0)
        assert bounced.dx == pytest.approx(math.sqrt(32))
        assert bounced.dy == 0

    def test_quarter_hit_leaves_at_45_degrees(self):
        ball = Ball(380.0, 583.0, 4.0, 4.0, 8.0)
        bounced = ball.bounce_off_paddle(362.5, 70.0)
        assert bounced.dx == pytest.approx(4.0)
        assert bounced.dy == pytest.approx(-4.0)

    def test_always_leaves_upward(self):
        for x in (363.0, 380.0, 420.0, 437.0):
            bounced = Ball(x, 583.0, -2.0, 6.0, 8.0).bounce_off_paddle(362.5, 75.0)
            assert bounced.dy <= 0

    def test_preserves_speed(self):
        ball = Ball(371.0, 583.0, -2.0, 6.0, 8.0)
        bounced = ball.bounce_off_paddle(362.5, 75.0)
        assert bounced.speed == pytest.approx(ball.speed)


class TestPaddle:
    """Test Paddle placement and pointer clamping."""

    @pytest.fixture
    def paddle(self):
        return Paddle(75.0, 10.0, 800.0, 600.0)

    def test_starts_centered(self, paddle):
        assert paddle.x == 362.5

    def test_sits_on_bottom_edge(self, paddle):
        assert paddle.top == 590.0
        assert paddle.rect == (362.5, 590.0, 75.0, 10.0)

    def test_follow_pointer_inside(self, paddle):
        assert paddle.follow_pointer(200.0) == 200.0
        assert paddle.x == 200.0

    def test_follow_pointer_clamps_left(self, paddle):
        assert paddle.follow_pointer(-50.0) == 0.0

    def test_follow_pointer_clamps_right(self, paddle):
        assert paddle.follow_pointer(900.0) == 725.0
        assert paddle.right == 800.0

    @pytest.mark.parametrize("pointer_x", [-1e6, -1.0, 0.0, 362.5, 724.9, 725.0, 800.0, 1e6])
    def test_follow_pointer_stays_in_bounds(self, paddle, pointer_x):
        paddle.follow_pointer(pointer_x)
        assert 0.0 <= paddle.x <= paddle.max_x

    def test_initial_x_is_clamped(self):
        assert Paddle(75.0, 10.0, 800.0, 600.0, x=790.0).x == 725.0


class TestBrick:
    """Test Brick visibility changes."""

    def test_destroy_and_restore(self):
        brick = Brick(35.0, 30.0, 80.0, 20.0, grid_position=(0, 0))
        destroyed = brick.destroy()
        assert brick.visible
        assert not destroyed.visible
        assert destroyed.rect == brick.rect
        assert destroyed.grid_position == (0, 0)
        assert destroyed.restore().visible

    def test_to_rectangle(self):
        rect = Brick(35.0, 30.0, 80.0, 20.0).to_rectangle()
        assert (rect.left, rect.top, rect.right, rect.bottom) == (35.0, 30.0, 115.0, 50.0)


class TestBrickGrid:
    """Test build_brick_grid layout."""

    def test_default_grid_size(self):
        bricks = build_brick_grid(GameConfig())
        assert len(bricks) == 40
        assert all(brick.visible for brick in bricks)

    def test_first_and_last_positions(self):
        bricks = build_brick_grid(GameConfig())
        assert (bricks[0].x, bricks[0].y) == (35.0, 30.0)
        # row 4, col 7
        assert bricks[-1].grid_position == (4, 7)
        assert (bricks[-1].x, bricks[-1].y) == (7 * 90.0 + 35.0, 4 * 30.0 + 30.0)

    def test_row_major_order(self):
        bricks = build_brick_grid(GameConfig(brick_rows=2, brick_cols=3))
        assert [b.grid_position for b in bricks] == [
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
        ]

    def test_geometry_follows_config(self):
        config = GameConfig(brick_width=50.0, brick_padding=5.0, brick_left_offset=0.0)
        bricks = build_brick_grid(config)
        assert bricks[1].x == 55.0
        assert bricks[1].width == 50.0
