"""
Player protocol - defines interface for paddle controllers (human, AI, etc.)
"""

from typing import Protocol

from arcade_pong.core.entities import Action, Ball, Paddle


class PlayerProtocol(Protocol):
    """
    Protocol that paddle controllers must implement.

    The engine asks its controller for an action once per step, so it does not
    need to know how the decision is made.
    """

    name: str

    def get_action(self, ball: Ball, paddle: Paddle) -> Action:
        """
        Get the next action for the controlled paddle.

        Args:
            ball: The game ball, read-only
            paddle: The paddle being controlled, read-only

        Returns:
            Action with move_y in [-1, 1] (negative moves up)
        """
        ...
