"""
Human input handling for Arcade Pong
"""

import pygame

from arcade_pong.core.engine import SimulationEngine
from arcade_pong.utils.config import KeyboardLayout


class HumanInput:
    """Translates PyGame events into intent for the engine"""

    def __init__(self, engine: SimulationEngine, layout: KeyboardLayout):
        """
        Initialize the input source

        Args:
            engine: Engine receiving the player intent
            layout: Keyboard layout giving the up/down/restart keys
        """
        self.engine = engine
        self.layout = layout
        # Each key is tracked on its own so releasing W does not cancel a held arrow
        self.keys_pressed: set[int] = set()

    @property
    def up_held(self) -> bool:
        return any(key in self.keys_pressed for key in self.layout.up_keys)

    @property
    def down_held(self) -> bool:
        return any(key in self.keys_pressed for key in self.layout.down_keys)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """Forward an event to the engine, returns True if it was used"""
        if event.type == pygame.KEYDOWN:
            if event.key == self.layout.restart_key:
                self.engine.restart()
                return True
            return self._update_key(event.key, pressed=True)

        if event.type == pygame.KEYUP:
            return self._update_key(event.key, pressed=False)

        if event.type == pygame.MOUSEMOTION:
            # The window has the size of the field, so pixels are field units
            self.engine.set_player_intent(pointer_y=float(event.pos[1]))
            return True

        if event.type == pygame.WINDOWFOCUSLOST:
            self.keys_pressed.clear()
            self.engine.set_player_intent(up=False, down=False)
            self.engine.set_focus(False)
            return True

        if event.type == pygame.WINDOWFOCUSGAINED:
            self.engine.set_focus(True)
            return True

        return False

    def _update_key(self, key: int, pressed: bool) -> bool:
        if key not in self.layout.up_keys and key not in self.layout.down_keys:
            return False

        if pressed:
            self.keys_pressed.add(key)
        else:
            self.keys_pressed.discard(key)
        self.engine.set_player_intent(up=self.up_held, down=self.down_held)
        return True

    def get_control_info(self) -> dict[str, str]:
        """Get information about controls for display"""
        return self.layout.display_names.copy()
