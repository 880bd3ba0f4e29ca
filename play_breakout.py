#!/usr/bin/env python3
"""
Main script to launch Pixel Breakout with a PyGame window
"""

import argparse
import logging
import sys

from pixel_breakout.gui.game_app import BreakoutApp
from pixel_breakout.utils.config import game_config, load_config_from_file
from pixel_breakout.utils.logging_config import setup_logging

logger = logging.getLogger("pixel_breakout.launcher")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Pixel Breakout")
    parser.add_argument("--config", help="JSON configuration file to load")
    parser.add_argument("--fps", type=int, help="Override the target frame rate")
    parser.add_argument("--debug", action="store_true", help="Start with the debug overlay")
    parser.add_argument("--font", help="TrueType font for the debug overlay")
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser.parse_args(argv)


def print_controls() -> None:
    print("=== PIXEL BREAKOUT ===")
    print()
    layout = game_config.get_keyboard_layout()
    print("CONTROLS:")
    print(f"  Paddle: LEFT/RIGHT arrows or {layout.display_names['left']}/"
          f"{layout.display_names['right']} ({layout.name})")
    print("  + / -: Ball faster / slower")
    print("  F3: Debug overlay")
    print("  R: Reset")
    print("  ESC: Quit")
    print()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    try:
        if args.config:
            load_config_from_file(args.config)
        if args.fps is not None:
            game_config.FPS = args.fps
        if args.debug:
            game_config.DEBUG_OVERLAY = True

        print_controls()
        BreakoutApp(font_path=args.font).run()
    except KeyboardInterrupt:
        print("\nUser interruption")
    except Exception:
        logger.exception("Fatal error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
