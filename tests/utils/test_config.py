"""
Unit tests for configuration validation

Tests the configuration system including:
- Field and arena validation
- Keyboard layouts
- Saving and loading JSON files
- Context manager for temporary config changes
"""

import json

import pygame
import pytest
from pydantic import ValidationError

from pixel_breakout.utils.config import (
    KEYBOARD_LAYOUTS,
    GameConfig,
    game_config,
    game_config_tmp,
    load_config_from_file,
)


@pytest.fixture
def restore_game_config():
    """Puts the global configuration back to defaults after the test"""
    yield game_config
    game_config.reset_to_defaults()


class TestGameConfigValidation:
    """Test game configuration validation"""

    def test_valid_default_config(self):
        """Test that default configuration is valid"""
        config = GameConfig()

        assert config.WIDTH == 400
        assert config.HEIGHT == 400
        assert config.BACKGROUND_COLOR == 0x00FFFF
        assert config.BALL_COLOR == 0xFF00FF

    @pytest.mark.parametrize(
        "field,value",
        [
            ("WIDTH", 0),
            ("HEIGHT", -400),
            ("FPS", 0),
            ("BALL_DIAMETER", 0.0),
            ("PADDLE_WIDTH", -0.2),
            ("SPEED_UP_FACTOR", 1.0),
            ("SLOW_DOWN_FACTOR", 1.2),
            ("SLOW_DOWN_FACTOR", 0.0),
        ],
    )
    def test_out_of_range_fields(self, field, value):
        with pytest.raises(ValidationError):
            GameConfig(**{field: value})

    @pytest.mark.parametrize("field", ["BACKGROUND_COLOR", "BALL_COLOR", "PADDLE_COLOR"])
    def test_color_range(self, field):
        with pytest.raises(ValidationError, match="0x000000-0xFFFFFF"):
            GameConfig(**{field: 0x1000000})
        with pytest.raises(ValidationError):
            GameConfig(**{field: -1})

    def test_brick_colors(self):
        with pytest.raises(ValidationError, match="at least one color"):
            GameConfig(BRICK_COLORS=[])
        with pytest.raises(ValidationError):
            GameConfig(BRICK_COLORS=[0xFF0000, 0x1000000])

    def test_unknown_keyboard_layout(self):
        with pytest.raises(ValidationError, match="Unknown keyboard layout"):
            GameConfig(KEYBOARD_LAYOUT="dvorak")

    def test_ball_start_outside_arena(self):
        with pytest.raises(ValidationError, match="BALL_START"):
            GameConfig(BALL_START=(0.99, 0.0))

    def test_paddle_above_top_wall(self):
        with pytest.raises(ValidationError, match="top wall"):
            GameConfig(PADDLE_Y=0.99, PADDLE_HEIGHT=0.05)

    def test_brick_row_too_wide(self):
        with pytest.raises(ValidationError, match="wider than the arena"):
            GameConfig(BRICK_COLUMNS=10, BRICK_WIDTH=0.2, BRICK_GAP=0.01)

    def test_assignment_is_validated(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.FPS = -1
        assert config.FPS == 60

    def test_assignment_checks_arena(self):
        config = GameConfig()
        with pytest.raises(ValidationError):
            config.BALL_DIAMETER = 1.5


class TestKeyboardLayouts:
    """Test keyboard layout selection"""

    def test_default_layout(self):
        layout = GameConfig().get_keyboard_layout()
        assert layout.name == "QWERTY"
        assert layout.left == pygame.K_a
        assert layout.right == pygame.K_d

    def test_azerty(self):
        layout = GameConfig(KEYBOARD_LAYOUT="azerty").get_keyboard_layout()
        assert layout.left == pygame.K_q
        assert layout.display_names == {"left": "Q", "right": "D"}

    def test_all_layouts_valid(self):
        for name in KEYBOARD_LAYOUTS:
            assert GameConfig(KEYBOARD_LAYOUT=name).get_keyboard_layout() is KEYBOARD_LAYOUTS[name]


class TestConfigFiles:
    """Test JSON persistence"""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        config = GameConfig(FPS=30, BALL_COLOR=0x123456, KEYBOARD_LAYOUT="azerty")

        config.save_to_file(str(path))
        loaded = GameConfig.load_from_file(str(path))

        assert loaded == config

    def test_saved_file_is_json(self, tmp_path):
        path = tmp_path / "config.json"
        GameConfig().save_to_file(str(path))

        data = json.loads(path.read_text())
        assert data["WIDTH"] == 400
        assert data["BRICK_COLORS"] == [0xFF4040, 0xFFA040, 0xFFFF40, 0x40C040]

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

    def test_load_into_global(self, tmp_path, restore_game_config):
        path = tmp_path / "config.json"
        GameConfig(FPS=25, DEBUG_OVERLAY=True).save_to_file(str(path))

        assert load_config_from_file(str(path)) is True
        assert game_config.FPS == 25
        assert game_config.DEBUG_OVERLAY is True

    def test_load_missing_into_global(self, tmp_path, restore_game_config, caplog):
        assert load_config_from_file(str(tmp_path / "missing.json")) is False
        assert game_config.FPS == 60
        assert "No configuration file" in caplog.text

    def test_load_invalid_into_global(self, tmp_path, restore_game_config, caplog):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"FPS": -5}))

        assert load_config_from_file(str(path)) is False
        assert game_config.FPS == 60
        assert "Error loading config" in caplog.text

    def test_load_malformed_json(self, tmp_path, restore_game_config):
        path = tmp_path / "config.json"
        path.write_text("{not json")

        assert load_config_from_file(str(path)) is False

    def test_reset_to_defaults(self):
        config = GameConfig(FPS=30, DEBUG_OVERLAY=True)
        config.reset_to_defaults()
        assert config == GameConfig()


class TestConfigContextManager:
    """Test temporary configuration changes"""

    def test_values_restored(self):
        original = game_config.FPS

        with game_config_tmp(FPS=10, BALL_COLOR=0x000001):
            assert game_config.FPS == 10
            assert game_config.BALL_COLOR == 0x000001

        assert game_config.FPS == original
        assert game_config.BALL_COLOR == 0xFF00FF

    def test_values_restored_on_error(self):
        original = game_config.FPS

        with pytest.raises(RuntimeError):
            with game_config_tmp(FPS=10):
                raise RuntimeError("boom")

        assert game_config.FPS == original

    def test_invalid_value_rejected(self):
        with pytest.raises(ValidationError):
            with game_config_tmp(FPS=-1):
                pass

        assert game_config.FPS == 60
