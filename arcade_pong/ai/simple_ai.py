"""
Simple AI controllers for Arcade Pong
"""

from arcade_pong.core.entities import Action, Ball, Paddle
from arcade_pong.utils.config import game_config


class DeadbandAI:
    """AI that follows the ball vertically, holding still while it is close to center"""

    def __init__(self, name: str = "DeadbandAI", deadband: float | None = None):
        self.name = name
        self.deadband = deadband if deadband is not None else game_config.CPU_DEADBAND

    def get_action(self, ball: Ball, paddle: Paddle) -> Action:
        """Moves at full speed toward the ball once it leaves the deadband"""
        center = paddle.center_y
        if ball.position.y < center - self.deadband:
            return Action(move_y=-1.0)
        if ball.position.y > center + self.deadband:
            return Action(move_y=1.0)
        return Action(move_y=0.0)


class DummyAI:
    """AI that never moves"""

    def __init__(self, name: str = "DummyAI"):
        self.name = name

    def get_action(self, ball: Ball, paddle: Paddle) -> Action:
        return Action(move_y=0.0)
