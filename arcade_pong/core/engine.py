"""
Simulation engine for Arcade Pong
"""

import logging
import math
import time
from collections.abc import Callable
from typing import Any

import numpy as np

from arcade_pong.ai.simple_ai import DeadbandAI
from arcade_pong.core.collision import CollisionDetector, apply_paddle_bounce
from arcade_pong.core.entities import Action, Ball, Field, GameState, Paddle, RunState
from arcade_pong.core.entities import ScoreState, Side
from arcade_pong.core.interfaces.player import PlayerProtocol
from arcade_pong.core.interfaces.presenter import PresenterProtocol
from arcade_pong.utils.config import GameConfig, game_config

logger = logging.getLogger(__name__)


class SimulationEngine:
    """Owns the whole game state and advances it one step at a time"""

    def __init__(
        self,
        config: GameConfig | None = None,
        rng: np.random.Generator | None = None,
        clock: Callable[[], float] = time.monotonic,
        presenter: PresenterProtocol | None = None,
        cpu_controller: PlayerProtocol | None = None,
    ):
        self.config = config if config is not None else game_config
        self.rng = rng if rng is not None else np.random.default_rng()
        self.clock = clock
        self.presenter = presenter
        self.cpu_controller = cpu_controller or DeadbandAI(deadband=self.config.CPU_DEADBAND)

        self.field = Field(self.config.FIELD_WIDTH, self.config.FIELD_HEIGHT)
        self.collision_detector = CollisionDetector()
        self.score = ScoreState()

        self._create_paddles()
        self.ball = Ball(
            self.field.width / 2, self.field.height / 2, radius=self.config.BALL_RADIUS
        )

        # Player intent
        self.up_held = False
        self.down_held = False
        self.pointer_target: float | None = None

        # Run state
        self.focused = True
        self.resume_at: float | None = None

        # The very first serve starts immediately
        self.serve_random()

    def _create_paddles(self) -> None:
        """Creates both paddles vertically centered"""
        cfg = self.config
        y = (self.field.height - cfg.PADDLE_HEIGHT) / 2

        self.player = Paddle(
            cfg.PADDLE_MARGIN,
            y,
            Side.PLAYER,
            width=cfg.PADDLE_WIDTH,
            height=cfg.PADDLE_HEIGHT,
            speed=cfg.PLAYER_PADDLE_SPEED,
            field_height=self.field.height,
        )
        self.cpu = Paddle(
            self.field.width - cfg.PADDLE_MARGIN - cfg.PADDLE_WIDTH,
            y,
            Side.CPU,
            width=cfg.PADDLE_WIDTH,
            height=cfg.PADDLE_HEIGHT,
            speed=cfg.CPU_PADDLE_SPEED,
            field_height=self.field.height,
        )

    @property
    def run_state(self) -> RunState:
        if not self.focused:
            return RunState.PAUSED_UNFOCUSED
        if self.resume_at is not None:
            return RunState.PAUSED_FOR_SERVE
        return RunState.RUNNING

    # Input

    def set_player_intent(
        self,
        up: bool | None = None,
        down: bool | None = None,
        pointer_y: float | None = None,
    ) -> None:
        """
        Records how the human wants the paddle to move.

        Held directions persist until changed. A pointer target is applied on the
        next step only and overrides the held directions for that step; a later
        direction update drops a pending pointer target.
        """
        if up is not None or down is not None:
            if up is not None:
                self.up_held = up
            if down is not None:
                self.down_held = down
            self.pointer_target = None
        if pointer_y is not None:
            self.pointer_target = pointer_y

    def set_focus(self, focused: bool) -> None:
        """Freezes the game while the host window does not have the focus"""
        if focused != self.focused:
            logger.info("Game %s", "resumed" if focused else "paused (focus lost)")
        self.focused = focused

    # Serving

    def serve(self, toward: Side) -> None:
        """Serves toward the side that just lost a point, after the serve delay"""
        spread = math.radians(self.config.SERVE_ANGLE_SPREAD)
        self._launch(toward.direction, spread)
        self._schedule_resume()
        logger.debug("Serving toward %s", toward.value)

    def serve_random(self) -> None:
        """Serves in a random direction with the wider initial arc, without delay"""
        direction = -1 if self.rng.random() < 0.5 else 1
        spread = math.radians(self.config.INITIAL_SERVE_ANGLE_SPREAD)
        self._launch(direction, spread)

    def _launch(self, direction: int, spread: float) -> None:
        self.ball.reset_to_center(self.field, self.config.BALL_SPEED)
        angle = float(self.rng.uniform(-spread, spread)) if spread > 0 else 0.0
        self.ball.launch(direction, angle)

    def _schedule_resume(self) -> None:
        # Replaces any pending resume so two serves never race
        self.resume_at = self.clock() + self.config.SERVE_DELAY

    def cancel_serve(self) -> None:
        """Drops a pending serve delay"""
        self.resume_at = None

    def restart(self) -> None:
        """Resets the score and serves a fresh ball in a random direction"""
        self.cancel_serve()
        self.score.reset()
        self._notify_score()
        self.serve_random()
        self._schedule_resume()
        logger.info("Game restarted")

    # Simulation

    def advance(self, dt: float) -> dict[str, Any]:
        """
        Advances the game by dt reference frames.

        Nothing moves while the window is unfocused or while a serve is pending.

        Returns:
            Dictionary with the events that occurred during the step:
            {
                "wall_bounces": ["top" | "bottom", ...],
                "paddle_hits": [{"side": Side, "angle": float, "speed": float}, ...],
                "goals": [{"scorer": Side, "score": (player, cpu)}, ...]
            }
        """
        events: dict[str, list] = {"wall_bounces": [], "paddle_hits": [], "goals": []}

        if not self.focused or dt <= 0:
            return events

        if self.resume_at is not None:
            if self.clock() < self.resume_at:
                return events
            self.resume_at = None

        self._move_player(dt)
        self._move_cpu(dt)
        self.ball.update(dt)
        self._check_collisions(events)

        return events

    def _move_player(self, dt: float) -> None:
        if self.pointer_target is not None:
            self.player.move_to(self.pointer_target)
            self.pointer_target = None
            return

        action = Action(move_y=float(self.down_held) - float(self.up_held))
        self.player.move(action.move_y, dt)

    def _move_cpu(self, dt: float) -> None:
        action = self.cpu_controller.get_action(self.ball, self.cpu)
        self.cpu.move(action.move_y, dt)

    def _check_collisions(self, events: dict[str, list]) -> None:
        """Checks all collisions and records events"""
        wall = self.collision_detector.check_ball_walls(self.ball, self.field)
        if wall is not None and self.collision_detector.resolve_wall_collision(
            self.ball, self.field, wall
        ):
            events["wall_bounces"].append(wall)

        for paddle in (self.player, self.cpu):
            contact = self.collision_detector.check_ball_paddle(self.ball, paddle)
            if contact is None:
                continue
            angle = apply_paddle_bounce(
                self.ball,
                paddle,
                contact,
                speed_increase=self.config.BALL_SPEED_INCREASE,
                max_angle=math.radians(self.config.MAX_BOUNCE_ANGLE),
                nudge=self.config.COLLISION_NUDGE,
            )
            events["paddle_hits"].append(
                {"side": paddle.side, "angle": angle, "speed": self.ball.speed}
            )

        scorer = self.collision_detector.check_goal(self.ball, self.field)
        if scorer is not None:
            self.score.award(scorer)
            events["goals"].append({"scorer": scorer, "score": self.score.to_tuple()})
            logger.debug("Point for %s, score is now %s", scorer.value, self.score.to_tuple())
            self._notify_score()
            self.serve(scorer.opponent)

    def _notify_score(self) -> None:
        if self.presenter is not None:
            self.presenter.update_score(self.score)

    def get_game_state(self) -> GameState:
        """Returns a read-only snapshot of the game"""
        return GameState(
            ball_position=self.ball.position.to_tuple(),
            ball_velocity=self.ball.velocity.to_tuple(),
            ball_radius=self.ball.radius,
            ball_speed=self.ball.speed,
            player_rect=self.player.get_rect(),
            cpu_rect=self.cpu.get_rect(),
            score=self.score.to_tuple(),
            run_state=self.run_state,
            field_bounds=(self.field.width, self.field.height),
        )
