"""
Tests for Arcade Pong game entities
"""

import math

import pytest

from arcade_pong.core.entities import Action, Ball, Field, Paddle, ScoreState, Side, Vector2D


class TestVector2D:
    """Tests for Vector2D class"""

    def test_addition(self) -> None:
        result = Vector2D(1.0, 2.0) + Vector2D(3.0, 4.0)
        assert result.x == 4.0
        assert result.y == 6.0

    def test_subtraction(self) -> None:
        result = Vector2D(5.0, 7.0) - Vector2D(2.0, 3.0)
        assert result.to_tuple() == (3.0, 4.0)

    def test_scalar_multiplication(self) -> None:
        result = Vector2D(2.0, 3.0) * 2.5
        assert result.to_tuple() == (5.0, 7.5)

    def test_magnitude(self) -> None:
        assert Vector2D(3.0, 4.0).magnitude() == 5.0
        assert Vector2D(0.0, 0.0).magnitude() == 0.0

    def test_lerp(self) -> None:
        """Test interpolation along a segment"""
        point = Vector2D(0.0, 10.0).lerp(Vector2D(10.0, 20.0), 0.25)
        assert point.to_tuple() == (2.5, 12.5)

    def test_copy_is_independent(self) -> None:
        v = Vector2D(1.0, 1.0)
        c = v.copy()
        c.x = 5.0
        assert v.x == 1.0


class TestField:
    def test_center(self) -> None:
        assert Field(800, 600).center.to_tuple() == (400, 300)

    def test_is_immutable(self) -> None:
        field = Field(800, 600)
        with pytest.raises(AttributeError):
            field.width = 100  # type: ignore[misc]


class TestSide:
    def test_opponent(self) -> None:
        assert Side.PLAYER.opponent is Side.CPU
        assert Side.CPU.opponent is Side.PLAYER

    def test_direction(self) -> None:
        """The player defends the left side, the CPU the right side"""
        assert Side.PLAYER.direction == -1
        assert Side.CPU.direction == 1


class TestBall:
    """Tests for Ball class"""

    def test_creation(self) -> None:
        ball = Ball(100.0, 200.0, 3.0, -4.0, radius=5.0)
        assert ball.position.to_tuple() == (100.0, 200.0)
        assert ball.velocity.to_tuple() == (3.0, -4.0)
        assert ball.radius == 5.0
        assert ball.speed == 5.0

    def test_update_position(self) -> None:
        """Test position update scaled by the step"""
        ball = Ball(0.0, 0.0, 10.0, 4.0)
        ball.update(0.5)
        assert ball.position.to_tuple() == (5.0, 2.0)
        assert ball.prev_position.to_tuple() == (0.0, 0.0)

    def test_launch_keeps_speed(self) -> None:
        ball = Ball(0.0, 0.0)
        ball.speed = 6.0
        ball.launch(-1, math.radians(20))
        assert ball.velocity.x < 0
        assert ball.velocity.magnitude() == pytest.approx(6.0)

    def test_reset_to_center(self) -> None:
        ball = Ball(10.0, 20.0, 9.0, 9.0)
        ball.reset_to_center(Field(800, 600), 6.0)
        assert ball.position.to_tuple() == (400, 300)
        assert ball.prev_position.to_tuple() == (400, 300)
        assert ball.speed == 6.0

    def test_bounce_vertical(self) -> None:
        ball = Ball(0.0, 0.0, 100.0, 50.0)
        ball.bounce_vertical()
        assert ball.velocity.to_tuple() == (100.0, -50.0)


class TestPaddle:
    """Tests for Paddle class"""

    def make_paddle(self, y: float = 200.0) -> Paddle:
        return Paddle(10.0, y, Side.PLAYER, width=12.0, height=100.0, speed=6.0, field_height=600)

    def test_creation(self) -> None:
        paddle = self.make_paddle()
        assert paddle.position.to_tuple() == (10.0, 200.0)
        assert paddle.side is Side.PLAYER
        assert paddle.max_y == 500.0
        assert paddle.center_y == 250.0

    def test_move_scaled_by_step(self) -> None:
        paddle = self.make_paddle()
        paddle.move(1.0, 0.5)
        assert paddle.position.y == 203.0

    def test_move_clamped_at_top(self) -> None:
        """Test that a paddle at the top does not drift further up"""
        paddle = self.make_paddle(y=0.0)
        paddle.move(-1.0, 5.0)
        assert paddle.position.y == 0.0

    def test_move_clamped_at_bottom(self) -> None:
        paddle = self.make_paddle(y=498.0)
        paddle.move(1.0, 1.0)
        assert paddle.position.y == 500.0

    def test_move_to_centers_paddle(self) -> None:
        paddle = self.make_paddle()
        paddle.move_to(120.0)
        assert paddle.position.y == 70.0

    def test_move_to_clamped(self) -> None:
        paddle = self.make_paddle()
        paddle.move_to(5.0)
        assert paddle.position.y == 0.0
        paddle.move_to(1000.0)
        assert paddle.position.y == 500.0

    def test_creation_out_of_bounds_is_clamped(self) -> None:
        assert self.make_paddle(y=-50.0).position.y == 0.0

    def test_get_rect(self) -> None:
        assert self.make_paddle().get_rect() == (10.0, 200.0, 12.0, 100.0)


class TestAction:
    def test_creation_valid_values(self) -> None:
        assert Action(-0.3).move_y == -0.3

    def test_clamp_too_large_values(self) -> None:
        assert Action(2.0).move_y == 1.0
        assert Action(-1.5).move_y == -1.0


class TestScoreState:
    def test_award(self) -> None:
        score = ScoreState()
        score.award(Side.CPU)
        score.award(Side.CPU)
        score.award(Side.PLAYER)
        assert score.to_tuple() == (1, 2)

    def test_reset(self) -> None:
        score = ScoreState(3, 4)
        score.reset()
        assert score.to_tuple() == (0, 0)
