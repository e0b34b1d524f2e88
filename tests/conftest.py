"""
Shared fixtures for the Arcade Pong tests
"""

import numpy as np
import pytest

from arcade_pong.ai.simple_ai import DummyAI
from arcade_pong.core.engine import SimulationEngine
from arcade_pong.core.entities import ScoreState
from arcade_pong.utils.config import GameConfig


class FakeClock:
    """Clock that only moves when told to"""

    def __init__(self) -> None:
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class RecordingPresenter:
    """Presenter keeping every score it was shown"""

    def __init__(self) -> None:
        self.scores: list[tuple[int, int]] = []
        self.frames = 0

    def update_score(self, score: ScoreState) -> None:
        self.scores.append(score.to_tuple())

    def render(self, state) -> None:
        self.frames += 1


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def config() -> GameConfig:
    return GameConfig()


@pytest.fixture
def engine(config, clock, presenter) -> SimulationEngine:
    """Engine with a still CPU paddle, so only the ball and the player move"""
    return SimulationEngine(
        config,
        rng=np.random.default_rng(0),
        clock=clock,
        presenter=presenter,
        cpu_controller=DummyAI(),
    )
