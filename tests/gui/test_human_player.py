"""
Tests for the translation of PyGame events into engine intent
"""

import pygame
import pytest

from arcade_pong.core.entities import RunState, Side
from arcade_pong.gui.human_player import HumanInput
from arcade_pong.utils.config import KEYBOARD_LAYOUTS


@pytest.fixture
def human(engine) -> HumanInput:
    return HumanInput(engine, KEYBOARD_LAYOUTS["qwerty"])


def key_event(event_type: int, key: int) -> pygame.event.Event:
    return pygame.event.Event(event_type, key=key, mod=0, unicode="", scancode=0)


class TestKeyboard:
    def test_arrow_up(self, human, engine):
        assert human.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
        assert engine.up_held is True
        assert engine.down_held is False

        human.handle_event(key_event(pygame.KEYUP, pygame.K_UP))
        assert engine.up_held is False

    def test_two_keys_for_same_direction(self, human, engine):
        """Releasing one of two held up keys keeps the paddle moving up"""
        human.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
        human.handle_event(key_event(pygame.KEYDOWN, pygame.K_w))
        human.handle_event(key_event(pygame.KEYUP, pygame.K_UP))
        assert engine.up_held is True

    def test_down_keys(self, human, engine):
        human.handle_event(key_event(pygame.KEYDOWN, pygame.K_s))
        assert engine.down_held is True

    def test_layout_specific_keys(self, engine):
        human = HumanInput(engine, KEYBOARD_LAYOUTS["azerty"])
        human.handle_event(key_event(pygame.KEYDOWN, pygame.K_z))
        assert engine.up_held is True

    def test_unrelated_key_is_ignored(self, human, engine):
        assert not human.handle_event(key_event(pygame.KEYDOWN, pygame.K_x))
        assert engine.up_held is False
        assert engine.down_held is False

    def test_restart_key(self, human, engine, presenter):
        engine.score.award(Side.PLAYER)
        assert human.handle_event(key_event(pygame.KEYDOWN, pygame.K_SPACE))
        assert engine.score.to_tuple() == (0, 0)
        assert presenter.scores[-1] == (0, 0)

    def test_keys_move_paddle(self, human, engine):
        human.handle_event(key_event(pygame.KEYDOWN, pygame.K_DOWN))
        engine.advance(1.0)
        assert engine.player.position.y == 256.0


class TestMouse:
    def test_pointer_target(self, human, engine):
        event = pygame.event.Event(pygame.MOUSEMOTION, pos=(5, 120), rel=(0, 0), buttons=(0, 0, 0))
        assert human.handle_event(event)
        assert engine.pointer_target == 120.0

        engine.advance(1.0)
        assert engine.player.position.y == 70.0


class TestFocus:
    def test_focus_lost_pauses_and_releases_keys(self, human, engine):
        human.handle_event(key_event(pygame.KEYDOWN, pygame.K_UP))
        assert human.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))

        assert engine.run_state is RunState.PAUSED_UNFOCUSED
        assert engine.up_held is False
        assert not human.keys_pressed

    def test_focus_gained_resumes(self, human, engine):
        human.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST))
        human.handle_event(pygame.event.Event(pygame.WINDOWFOCUSGAINED))
        assert engine.run_state is RunState.RUNNING

    def test_control_info(self, human):
        assert human.get_control_info()["restart"] == "SPACE"
