"""
Collision detection system for Arcade Pong
"""

import math

from arcade_pong.core.entities import Ball, Field, Paddle, Side, Vector2D


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def circle_rect_collision_at_position(
    position: Vector2D, radius: float, rect: tuple[float, float, float, float]
) -> bool:
    """Checks if a circle at the given position overlaps a rectangle"""
    x, y, width, height = rect

    # Closest point on the rectangle to the circle center
    closest_x = clamp(position.x, x, x + width)
    closest_y = clamp(position.y, y, y + height)

    dx = position.x - closest_x
    dy = position.y - closest_y
    return dx * dx + dy * dy < radius * radius


def swept_circle_rect_contact(
    start_pos: Vector2D, end_pos: Vector2D, radius: float, rect: tuple[float, float, float, float]
) -> Vector2D | None:
    """
    Returns the first position along the segment start_pos -> end_pos where a circle
    overlaps the rectangle, or None if it never does.

    The segment is sampled at intervals no longer than the radius, so a fast ball
    cannot pass through a paddle between two frames.
    """
    distance = (end_pos - start_pos).magnitude()
    num_samples = max(1, math.ceil(distance / radius))

    for i in range(1, num_samples + 1):
        sample_pos = start_pos.lerp(end_pos, i / num_samples)
        if circle_rect_collision_at_position(sample_pos, radius, rect):
            return sample_pos

    return None


def get_bounce_angle(paddle: Paddle, contact_y: float, max_angle: float) -> float:
    """
    Maps where the ball struck the paddle to a launch angle in radians.

    Hitting the center sends the ball straight back, hitting an end sends it
    at max_angle. A positive angle means the ball leaves upward.
    """
    normalized = clamp((paddle.center_y - contact_y) / (paddle.height / 2), -1.0, 1.0)
    return normalized * max_angle


def apply_paddle_bounce(
    ball: Ball,
    paddle: Paddle,
    contact: Vector2D,
    speed_increase: float,
    max_angle: float,
    nudge: float,
) -> float:
    """Bounces the ball off a paddle, speeds it up and returns the bounce angle"""
    angle = get_bounce_angle(paddle, contact.y, max_angle)
    ball.speed *= speed_increase

    # Always send the ball toward the opposite side
    direction = -paddle.side.direction
    ball.velocity = Vector2D(
        direction * abs(ball.speed * math.cos(angle)), -ball.speed * math.sin(angle)
    )

    # Move the ball out of the paddle to avoid triggering again on the next step
    if paddle.side is Side.PLAYER:
        x = paddle.position.x + paddle.width + ball.radius + nudge
    else:
        x = paddle.position.x - ball.radius - nudge
    ball.position = Vector2D(x, contact.y)

    return angle


class CollisionDetector:
    """Main collision detector"""

    def check_ball_walls(self, ball: Ball, field: Field) -> str | None:
        """Returns "top" or "bottom" when the ball touches a horizontal wall"""
        if ball.position.y - ball.radius <= 0:
            return "top"
        if ball.position.y + ball.radius >= field.height:
            return "bottom"
        return None

    def resolve_wall_collision(self, ball: Ball, field: Field, wall: str) -> bool:
        """
        Clamps the ball against a wall and sends it back into the field.

        Returns True if the vertical velocity was inverted, a ball already moving
        away from the wall is only clamped.
        """
        if wall == "top":
            ball.position.y = ball.radius
            heading_in = ball.velocity.y < 0
        else:
            ball.position.y = field.height - ball.radius
            heading_in = ball.velocity.y > 0

        if heading_in:
            ball.bounce_vertical()
        return heading_in

    def check_ball_paddle(self, ball: Ball, paddle: Paddle) -> Vector2D | None:
        """
        Returns the contact position if the ball hit the paddle during the last step.

        A hit only counts while the ball is moving toward the paddle, so a ball
        still overlapping after a bounce is not caught twice.
        """
        if ball.velocity.x * paddle.side.direction <= 0:
            return None

        return swept_circle_rect_contact(
            ball.prev_position, ball.position, ball.radius, paddle.get_rect()
        )

    def check_goal(self, ball: Ball, field: Field) -> Side | None:
        """Returns the side that scored when the ball leaves the field horizontally"""
        if ball.position.x - ball.radius <= 0:
            return Side.CPU
        if ball.position.x + ball.radius >= field.width:
            return Side.PLAYER
        return None
