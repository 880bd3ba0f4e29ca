"""
Pixel Breakout utilities
"""

from pixel_breakout.utils.config import GameConfig
from pixel_breakout.utils.config import game_config
from pixel_breakout.utils.logging_config import setup_logging

__all__ = ["game_config", "GameConfig", "setup_logging"]
