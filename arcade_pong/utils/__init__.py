"""
Utility module of the Arcade Pong game
"""

from arcade_pong.utils.config import KEYBOARD_LAYOUTS
from arcade_pong.utils.config import GameConfig
from arcade_pong.utils.config import KeyboardLayout
from arcade_pong.utils.config import game_config

__all__ = ["game_config", "GameConfig", "KeyboardLayout", "KEYBOARD_LAYOUTS"]
