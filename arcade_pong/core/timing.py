"""
Frame timing helpers
"""

from arcade_pong.utils.config import game_config


class FrameTimer:
    """Converts frame timestamps into step multipliers (1.0 = one reference frame)"""

    def __init__(self, reference_frame_ms: float | None = None, max_step: float | None = None):
        self.reference_frame_ms = (
            reference_frame_ms if reference_frame_ms is not None else game_config.REFERENCE_FRAME_MS
        )
        self.max_step = max_step if max_step is not None else game_config.MAX_FRAME_STEP
        self.last_timestamp: float | None = None

    def tick(self, timestamp_ms: float) -> float:
        """Returns the step multiplier for a frame drawn at timestamp_ms"""
        last, self.last_timestamp = self.last_timestamp, timestamp_ms
        if last is None:
            return 1.0

        # A long stall (window dragged, debugger) must not teleport the ball
        step = (timestamp_ms - last) / self.reference_frame_ms
        return max(0.0, min(self.max_step, step))

    def reset(self) -> None:
        """Forgets the last timestamp, the next tick will return 1.0"""
        self.last_timestamp = None
