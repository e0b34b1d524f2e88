"""
Presenter protocol - defines interface for the objects showing the game
"""

from typing import Protocol

from arcade_pong.core.entities import GameState, ScoreState


class PresenterProtocol(Protocol):
    """
    Protocol for presenter implementations.

    The engine only calls update_score; render is called by the host loop
    once per frame with a snapshot of the engine.
    """

    def update_score(self, score: ScoreState) -> None:
        """
        Called each time the score changes (point scored or restart).

        Args:
            score: Current score, must not be modified
        """
        ...

    def render(self, state: GameState) -> None:
        """
        Draw a single frame of the game.

        Args:
            state: Snapshot of the game
        """
        ...
