"""
AI module for Arcade Pong
"""

from arcade_pong.ai.simple_ai import DeadbandAI
from arcade_pong.ai.simple_ai import DummyAI

__all__ = ["DeadbandAI", "DummyAI"]
