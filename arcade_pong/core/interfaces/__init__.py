"""
Interfaces between the simulation engine and its collaborators
"""

from arcade_pong.core.interfaces.player import PlayerProtocol
from arcade_pong.core.interfaces.presenter import PresenterProtocol

__all__ = ["PlayerProtocol", "PresenterProtocol"]
