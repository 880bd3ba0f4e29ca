"""
Pixel Breakout configuration with Pydantic validation
"""

import json
import logging
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pygame
from pydantic import BaseModel
from pydantic import Field
from pydantic import ValidationInfo
from pydantic import field_validator
from pydantic import model_validator

logger = logging.getLogger(__name__)

MAX_COLOR = 0xFFFFFF


@dataclass
class KeyboardLayout:
    """Letter keys used to steer the paddle on a given keyboard layout"""

    name: str
    left: int
    right: int
    display_names: dict[str, str]


# Arrow keys are always bound, letters depend on the layout
KEYBOARD_LAYOUTS = {
    "qwerty": KeyboardLayout(
        name="QWERTY",
        left=pygame.K_a,
        right=pygame.K_d,
        display_names={"left": "A", "right": "D"},
    ),
    "azerty": KeyboardLayout(
        name="AZERTY",
        left=pygame.K_q,  # Q instead of A
        right=pygame.K_d,
        display_names={"left": "Q", "right": "D"},
    ),
    "qwertz": KeyboardLayout(
        name="QWERTZ",
        left=pygame.K_a,
        right=pygame.K_d,
        display_names={"left": "A", "right": "D"},
    ),
}


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with the global instance
    model_config = {"validate_assignment": True}

    # Display
    WIDTH: int = Field(default=400, gt=0, description="Canvas width in pixels")
    HEIGHT: int = Field(default=400, gt=0, description="Canvas height in pixels")
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    WINDOW_TITLE: str = Field(default="BREAKOUT - ESC to exit", description="Window caption")
    BACKGROUND_COLOR: int = Field(default=0x00FFFF, description="Packed 0xRRGGBB color")

    # Ball, in world units ([-1, 1] on both axes)
    BALL_DIAMETER: float = Field(default=0.04, gt=0, lt=2.0, description="Ball diameter")
    BALL_START: tuple[float, float] = Field(default=(0.0, 0.0), description="Ball start corner")
    BALL_VELOCITY: tuple[float, float] = Field(
        default=(0.0039, 0.0024), description="Initial displacement per tick"
    )
    BALL_COLOR: int = Field(default=0xFF00FF, description="Packed 0xRRGGBB color")

    # Paddle
    PADDLE_WIDTH: float = Field(default=0.2, gt=0, lt=2.0, description="Paddle width")
    PADDLE_HEIGHT: float = Field(default=0.03, gt=0, lt=2.0, description="Paddle height")
    PADDLE_Y: float = Field(default=-0.9, ge=-1.0, lt=1.0, description="Paddle bottom edge")
    PADDLE_START_X: float = Field(default=-0.1, description="Paddle start left edge")
    PADDLE_SPEED: float = Field(default=0.022, gt=0, description="Paddle displacement per tick")
    PADDLE_COLOR: int = Field(default=0x202020, description="Packed 0xRRGGBB color")

    # Bricks
    BRICK_COLUMNS: int = Field(default=8, ge=0, description="Number of bricks in the row")
    BRICK_WIDTH: float = Field(default=0.2, gt=0, description="Brick width")
    BRICK_HEIGHT: float = Field(default=0.06, gt=0, description="Brick height")
    BRICK_GAP: float = Field(default=0.025, ge=0, description="Space between bricks")
    BRICK_TOP: float = Field(default=0.9, le=1.0, description="Top edge of the brick row")
    BRICK_COLORS: list[int] = Field(
        default=[0xFF4040, 0xFFA040, 0xFFFF40, 0x40C040], description="Brick color cycle"
    )

    # Controls
    SPEED_UP_FACTOR: float = Field(default=1.05, gt=1.0, description="Ball speed-up factor")
    SLOW_DOWN_FACTOR: float = Field(default=0.95, gt=0, lt=1.0, description="Ball slow-down")
    KEYBOARD_LAYOUT: str = Field(default="qwerty", description="Keyboard layout name")

    # Debug overlay
    DEBUG_OVERLAY: bool = Field(default=False, description="Show the debug text overlay")
    FONT_SIZE: int = Field(default=14, gt=0, description="Overlay font size in points")
    OVERLAY_MARGIN: int = Field(default=4, ge=0, description="Overlay offset in pixels")

    @field_validator("BACKGROUND_COLOR", "BALL_COLOR", "PADDLE_COLOR")
    @classmethod
    def validate_color(cls, v: int, info: ValidationInfo) -> int:
        """Validate that a color fits in 0xRRGGBB"""
        if not 0 <= v <= MAX_COLOR:
            raise ValueError(f"{info.field_name} ({v:#x}) must be within 0x000000-0xFFFFFF")
        return v

    @field_validator("BRICK_COLORS")
    @classmethod
    def validate_brick_colors(cls, v: list[int]) -> list[int]:
        """Validate the brick palette"""
        if not v:
            raise ValueError("BRICK_COLORS must contain at least one color")
        for color in v:
            if not 0 <= color <= MAX_COLOR:
                raise ValueError(f"Brick color {color:#x} must be within 0x000000-0xFFFFFF")
        return v

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
    def validate_arena(self) -> "GameConfig":
        """Validate that the ball, paddle and bricks fit in the arena"""
        max_corner = 1.0 - self.BALL_DIAMETER
        for coord in self.BALL_START:
            if not -1.0 <= coord <= max_corner:
                raise ValueError(f"BALL_START must lie within [-1, {max_corner}]")

        if self.PADDLE_Y + self.PADDLE_HEIGHT > 1.0:
            raise ValueError("Paddle must fit below the top wall")

        row_width = self.BRICK_COLUMNS * self.BRICK_WIDTH
        row_width += max(self.BRICK_COLUMNS - 1, 0) * self.BRICK_GAP
        if row_width > 2.0:
            raise ValueError(f"Brick row ({row_width:.3f}) is wider than the arena (2.0)")

        return self

    def get_keyboard_layout(self) -> KeyboardLayout:
        """Get the current keyboard layout configuration"""
        return KEYBOARD_LAYOUTS.get(self.KEYBOARD_LAYOUT, KEYBOARD_LAYOUTS["qwerty"])

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "pixel_breakout_config.json") -> None:
        """Save configuration to a JSON file"""
        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "pixel_breakout_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            object.__setattr__(self, field_name, getattr(defaults, field_name))


# Global configuration instance
game_config = GameConfig()


def load_config_from_file(filepath: str = "pixel_breakout_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        logger.warning("No configuration file at %s, using defaults", filepath)
        return False
    except (OSError, ValueError) as e:
        logger.warning("Error loading config from %s: %s", filepath, e)
        return False

    # Values were validated as a whole, bypass per-field assignment checks
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    logger.info("Configuration loaded from %s", filepath)
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values: dict[str, Any] = {}
    try:
        old_values = _change_values(game_config, **kwargs)
        yield
    finally:
        _change_values(game_config, **old_values)
