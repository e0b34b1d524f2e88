"""
Arcade Pong game configuration with Pydantic validation
"""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)


@dataclass
class KeyboardLayout:
    """Configuration for keyboard layouts"""

    name: str
    up_keys: tuple[int, ...]
    down_keys: tuple[int, ...]
    restart_key: int
    display_names: dict[str, str]


# Arrow keys are always bound, the letter keys depend on the layout
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        up_keys=(pygame.K_UP, pygame.K_w),
        down_keys=(pygame.K_DOWN, pygame.K_s),
        restart_key=pygame.K_SPACE,
        display_names={"up": "↑ / W", "down": "↓ / S", "restart": "SPACE"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        up_keys=(pygame.K_UP, pygame.K_z),  # Z instead of W
        down_keys=(pygame.K_DOWN, pygame.K_s),
        restart_key=pygame.K_SPACE,
        display_names={"up": "↑ / Z", "down": "↓ / S", "restart": "SPACE"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        up_keys=(pygame.K_UP, pygame.K_w),
        down_keys=(pygame.K_DOWN, pygame.K_s),
        restart_key=pygame.K_SPACE,
        display_names={"up": "↑ / W", "down": "↓ / S", "restart": "SPACE"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Field height in pixels")

    # Ball physics (speeds are in pixels per reference frame)
    BALL_RADIUS: float = Field(default=8.0, gt=0, description="Ball radius in pixels")
    BALL_SPEED: float = Field(default=6.0, gt=0, description="Serve speed")
    BALL_SPEED_INCREASE: float = Field(default=1.05, ge=1.0, description="Speed factor per hit")
    MAX_BOUNCE_ANGLE: float = Field(
        default=60.0, gt=0, lt=90, description="Maximum paddle bounce angle in degrees"
    )
    SERVE_ANGLE_SPREAD: float = Field(
        default=22.5, ge=0, lt=90, description="Serve arc after a point, in degrees"
    )
    INITIAL_SERVE_ANGLE_SPREAD: float = Field(
        default=30.0, ge=0, lt=90, description="Serve arc on start and restart, in degrees"
    )
    SERVE_DELAY: float = Field(default=0.7, ge=0, description="Pause before a serve in seconds")
    COLLISION_NUDGE: float = Field(
        default=0.5, ge=0, description="Gap left between ball and paddle after a hit"
    )

    # Paddles
    PADDLE_WIDTH: float = Field(default=12.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=100.0, gt=0, description="Paddle height in pixels")
    PADDLE_MARGIN: float = Field(default=10.0, ge=0, description="Paddle margin from edge")
    PLAYER_PADDLE_SPEED: float = Field(default=6.0, gt=0, description="Human paddle speed")
    CPU_PADDLE_SPEED: float = Field(default=4.0, gt=0, description="CPU paddle speed")
    CPU_DEADBAND: float = Field(
        default=10.0, ge=0, description="Distance from paddle center the CPU tolerates"
    )

    # Timing
    REFERENCE_FRAME_MS: float = Field(
        default=16.666, gt=0, description="Duration of one reference frame in milliseconds"
    )
    MAX_FRAME_STEP: float = Field(
        default=4.0, gt=0, description="Largest step multiplier applied in one frame"
    )

    # Keyboard layout
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    BACKGROUND_COLOR: tuple[int, int, int] = Field(default=(11, 16, 26), description="RGB color")
    BALL_COLOR: tuple[int, int, int] = Field(default=(0, 209, 255), description="RGB color")
    PADDLE_COLOR: tuple[int, int, int] = Field(default=(230, 238, 246), description="RGB color")
    NET_COLOR: tuple[int, int, int] = Field(default=(40, 46, 58), description="RGB color")
    TEXT_COLOR: tuple[int, int, int] = Field(default=(230, 238, 246), description="RGB color")

    @field_validator("KEYBOARD_LAYOUT")
    @classmethod
    def validate_keyboard_layout(cls, v: str) -> str:
        """Validate keyboard layout exists"""
        if v not in KEYBOARD_LAYOUTS:
            raise ValueError(
                f"Unknown keyboard layout '{v}'. Available: {list(KEYBOARD_LAYOUTS.keys())}"
            )
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate the field is large enough for the paddles and the ball"""
        if self.PADDLE_HEIGHT > self.FIELD_HEIGHT:
            raise ValueError(
                f"PADDLE_HEIGHT ({self.PADDLE_HEIGHT}) must not exceed "
                f"FIELD_HEIGHT ({self.FIELD_HEIGHT})"
            )

        max_radius = min(self.FIELD_WIDTH, self.FIELD_HEIGHT) / 2
        if self.BALL_RADIUS >= max_radius:
            raise ValueError(f"BALL_RADIUS must be smaller than {max_radius} pixels")

        min_width = 2 * (self.PADDLE_MARGIN + self.PADDLE_WIDTH + 2 * self.BALL_RADIUS)
        if self.FIELD_WIDTH <= min_width:
            raise ValueError(f"FIELD_WIDTH must be larger than {min_width} pixels")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "arcade_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        import json
        from pathlib import Path

        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "arcade_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        import json
        from pathlib import Path

        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "arcade_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.warning("Config file %s not found, keeping defaults", filepath)
        return False
    except ValueError as e:
        logger.warning("Error loading config from %s: %s", filepath, e)
        return False

    # Bypass per-field validation: the loaded config is already consistent as a whole
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, old_values: dict[str, Any], **kwargs: Any) -> None:
    """Helper to change config values temporarily, recording each previous value"""
    for name, new_value in kwargs.items():
        # Recorded before assignment since a failed validation may still leave the new value set
        old_values.setdefault(name, getattr(obj, name))
        setattr(obj, name, new_value)


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        _change_values(game_config, old_values, **kwargs)
        yield
    finally:
        # The previous values were consistent as a whole, per-field validation is bypassed
        for name, value in old_values.items():
            object.__setattr__(game_config, name, value)
