"""
Runs Arcade Pong without a window and prints what happens during a few seconds of play
"""

import numpy as np

from arcade_pong.core.engine import SimulationEngine


class SimulatedClock:
    """Clock advanced by hand, one reference frame per step"""

    def __init__(self, frame_seconds: float):
        self.now = 0.0
        self.frame_seconds = frame_seconds

    def __call__(self) -> float:
        return self.now

    def tick(self) -> None:
        self.now += self.frame_seconds


def run_rally(frames: int = 3600, seed: int = 7) -> None:
    """Let the CPU play against a human who never touches the controls"""
    clock = SimulatedClock(1 / 60)
    engine = SimulationEngine(rng=np.random.default_rng(seed), clock=clock)

    for frame in range(frames):
        events = engine.advance(1.0)
        clock.tick()

        for hit in events["paddle_hits"]:
            print(f"[{frame:5d}] {hit['side'].value} hit, speed {hit['speed']:.2f}")
        for goal in events["goals"]:
            print(f"[{frame:5d}] point for {goal['scorer'].value}, score {goal['score']}")

    print(f"Final score: {engine.score.to_tuple()}")


if __name__ == "__main__":
    run_rally()
