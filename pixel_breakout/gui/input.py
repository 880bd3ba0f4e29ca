"""
Keyboard input for Pixel Breakout
"""

import pygame

from pixel_breakout.core.entities import PaddleDirection
from pixel_breakout.core.physics import Simulation
from pixel_breakout.utils.config import KeyboardLayout, game_config

SPEED_UP_KEYS = (pygame.K_PLUS, pygame.K_KP_PLUS)
SLOW_DOWN_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)


class InputManager:
    """Maps pygame key events to simulation controls"""

    def __init__(self, simulation: Simulation, layout: KeyboardLayout | None = None) -> None:
        self.simulation = simulation
        layout = layout or game_config.get_keyboard_layout()

        self.key_directions: dict[int, PaddleDirection] = {
            pygame.K_LEFT: PaddleDirection.LEFT,
            pygame.K_RIGHT: PaddleDirection.RIGHT,
            layout.left: PaddleDirection.LEFT,
            layout.right: PaddleDirection.RIGHT,
        }
        # Direction keys currently down, most recent last
        self.held_keys: list[int] = []

    @property
    def direction(self) -> PaddleDirection:
        if not self.held_keys:
            return PaddleDirection.NONE
        return self.key_directions[self.held_keys[-1]]

    def sync_direction(self) -> None:
        """Pushes the direction of the held keys to the simulation"""
        self.simulation.set_paddle_direction(self.direction)

    def release_all(self) -> None:
        self.held_keys.clear()
        self.sync_direction()

    def handle_event(self, event: pygame.event.Event) -> str | None:
        """
        Handle pygame events

        Returns:
            String indicating special actions (quit, reset, ...) or None
        """
        if event.type == pygame.KEYDOWN:
            key = event.key

            if key in self.key_directions:
                if key not in self.held_keys:
                    self.held_keys.append(key)
                self.sync_direction()
                return None

            shift = getattr(event, "mod", 0) & pygame.KMOD_SHIFT
            if key in SPEED_UP_KEYS or (key == pygame.K_EQUALS and shift):
                self.simulation.scale_ball_speed(game_config.SPEED_UP_FACTOR)
                return "speed_up"
            elif key in SLOW_DOWN_KEYS:
                self.simulation.scale_ball_speed(game_config.SLOW_DOWN_FACTOR)
                return "slow_down"
            elif key == pygame.K_ESCAPE:
                return "quit"
            elif key == pygame.K_F3:
                return "toggle_debug"
            elif key == pygame.K_r:
                return "reset"

        elif event.type == pygame.KEYUP:
            if event.key in self.held_keys:
                self.held_keys.remove(event.key)
                self.sync_direction()

        elif event.type == pygame.QUIT:
            return "quit"

        return None
