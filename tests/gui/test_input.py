"""
Tests for keyboard handling
"""

import pygame
import pytest

from pixel_breakout.core.entities import Ball, PaddleDirection
from pixel_breakout.core.physics import Simulation
from pixel_breakout.gui.input import InputManager
from pixel_breakout.utils.config import KEYBOARD_LAYOUTS, game_config


def key_down(key: int, mod: int = 0) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=mod)


def key_up(key: int) -> pygame.event.Event:
    return pygame.event.Event(pygame.KEYUP, key=key, mod=0)


@pytest.fixture
def simulation() -> Simulation:
    return Simulation(ball=Ball(0.0, 0.0, 0.03, 0.04))


@pytest.fixture
def manager(simulation) -> InputManager:
    return InputManager(simulation, KEYBOARD_LAYOUTS["qwerty"])


class TestPaddleKeys:
    """Test steering keys"""

    @pytest.mark.parametrize(
        "key,direction",
        [
            (pygame.K_LEFT, PaddleDirection.LEFT),
            (pygame.K_RIGHT, PaddleDirection.RIGHT),
            (pygame.K_a, PaddleDirection.LEFT),
            (pygame.K_d, PaddleDirection.RIGHT),
        ],
    )
    def test_key_down_sets_direction(self, manager, simulation, key, direction):
        assert manager.handle_event(key_down(key)) is None
        assert manager.direction == direction
        assert simulation.paddle.vel_x == pytest.approx(direction.value * simulation.paddle.movement_speed)

    def test_key_up_stops_paddle(self, manager, simulation):
        manager.handle_event(key_down(pygame.K_LEFT))
        manager.handle_event(key_up(pygame.K_LEFT))

        assert manager.direction == PaddleDirection.NONE
        assert simulation.paddle.vel_x == 0.0

    def test_latest_key_wins(self, manager):
        manager.handle_event(key_down(pygame.K_LEFT))
        manager.handle_event(key_down(pygame.K_RIGHT))
        assert manager.direction == PaddleDirection.RIGHT

        manager.handle_event(key_up(pygame.K_RIGHT))
        assert manager.direction == PaddleDirection.LEFT

    def test_release_all(self, manager, simulation):
        manager.handle_event(key_down(pygame.K_LEFT))
        manager.release_all()

        assert manager.held_keys == []
        assert simulation.paddle.vel_x == 0.0

    def test_azerty_layout(self, simulation):
        manager = InputManager(simulation, KEYBOARD_LAYOUTS["azerty"])

        manager.handle_event(key_down(pygame.K_q))

        assert manager.direction == PaddleDirection.LEFT

    def test_default_layout_from_config(self, simulation):
        manager = InputManager(simulation)
        layout = game_config.get_keyboard_layout()

        assert manager.key_directions[layout.left] == PaddleDirection.LEFT
        assert manager.key_directions[layout.right] == PaddleDirection.RIGHT


class TestActionKeys:
    """Test keys that trigger actions"""

    @pytest.mark.parametrize(
        "event",
        [
            key_down(pygame.K_PLUS),
            key_down(pygame.K_KP_PLUS),
            key_down(pygame.K_EQUALS, pygame.KMOD_LSHIFT),
        ],
    )
    def test_speed_up(self, manager, simulation, event):
        assert manager.handle_event(event) == "speed_up"
        assert simulation.ball.speed() == pytest.approx(0.05 * game_config.SPEED_UP_FACTOR)

    @pytest.mark.parametrize("key", [pygame.K_MINUS, pygame.K_KP_MINUS])
    def test_slow_down(self, manager, simulation, key):
        assert manager.handle_event(key_down(key)) == "slow_down"
        assert simulation.ball.speed() == pytest.approx(0.05 * game_config.SLOW_DOWN_FACTOR)

    def test_equals_without_shift_does_nothing(self, manager, simulation):
        assert manager.handle_event(key_down(pygame.K_EQUALS)) is None
        assert simulation.ball.speed() == pytest.approx(0.05)

    @pytest.mark.parametrize(
        "event,action",
        [
            (key_down(pygame.K_ESCAPE), "quit"),
            (pygame.event.Event(pygame.QUIT), "quit"),
            (key_down(pygame.K_F3), "toggle_debug"),
            (key_down(pygame.K_r), "reset"),
            (key_down(pygame.K_z), None),
            (key_up(pygame.K_ESCAPE), None),
        ],
    )
    def test_actions(self, manager, event, action):
        assert manager.handle_event(event) == action
