"""
Main game application with PyGame GUI
"""

import argparse
import logging
import traceback

import numpy as np
import pygame

from arcade_pong.core.engine import SimulationEngine
from arcade_pong.core.timing import FrameTimer
from arcade_pong.gui.human_player import HumanInput
from arcade_pong.gui.pygame_renderer import PygameRenderer
from arcade_pong.utils.config import KEYBOARD_LAYOUTS, GameConfig, game_config
from arcade_pong.utils.config import load_config_from_file

logger = logging.getLogger(__name__)


class PongApp:
    """Host loop: samples time, advances the engine and renders it"""

    def __init__(self, config: GameConfig | None = None, seed: int | None = None) -> None:
        self.config = config if config is not None else game_config

        self.renderer = PygameRenderer(self.config)
        self.engine = SimulationEngine(
            self.config, rng=np.random.default_rng(seed), presenter=self.renderer
        )
        self.input = HumanInput(self.engine, self.config.get_keyboard_layout())
        self.frame_timer = FrameTimer(self.config.REFERENCE_FRAME_MS, self.config.MAX_FRAME_STEP)
        self.running = True

    def handle_event(self, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self.running = False
        else:
            self.input.handle_event(event)

    def step(self) -> None:
        """Runs a single frame"""
        for event in pygame.event.get():
            self.handle_event(event)

        dt = self.frame_timer.tick(pygame.time.get_ticks())
        self.engine.advance(dt)

        self.renderer.render(self.engine.get_game_state())
        self.renderer.present()
        self.renderer.update()

    def run(self) -> None:
        """Main application loop"""
        logger.info("Starting Arcade Pong")
        try:
            while self.running:
                self.step()
        finally:
            self.cleanup()

    def cleanup(self) -> None:
        self.renderer.cleanup()
        logger.info("Arcade Pong closed")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play Pong against the computer")
    parser.add_argument("--config", type=str, default=None, help="JSON configuration file")
    parser.add_argument("--seed", type=int, default=None, help="Seed for the serve angles")
    parser.add_argument("--fps", type=int, default=None, help="Target frames per second")
    parser.add_argument(
        "--layout",
        type=str,
        choices=sorted(KEYBOARD_LAYOUTS.keys()),
        default=None,
        help="Keyboard layout",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point"""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.config:
        load_config_from_file(args.config)
    if args.fps is not None:
        game_config.FPS = args.fps
    if args.layout is not None:
        game_config.KEYBOARD_LAYOUT = args.layout

    try:
        app = PongApp(game_config, seed=args.seed)
        app.run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception as e:
        print(f"Fatal error: {e}")
        traceback.print_exc()
