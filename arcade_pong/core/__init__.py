"""
Core module of the Arcade Pong game
"""

from arcade_pong.core.entities import Action
from arcade_pong.core.entities import Ball
from arcade_pong.core.entities import Field
from arcade_pong.core.entities import GameState
from arcade_pong.core.entities import Paddle
from arcade_pong.core.entities import RunState
from arcade_pong.core.entities import ScoreState
from arcade_pong.core.entities import Side
from arcade_pong.core.entities import Vector2D

__all__ = [
    "Ball",
    "Paddle",
    "Field",
    "Side",
    "RunState",
    "ScoreState",
    "GameState",
    "Action",
    "Vector2D",
]
